from pathlib import Path

import pytest

from mediarename.rename.formatter import build_tag, generate_name, sanitize
from mediarename.rename.models import Episode, Show

SHOW = Show(id=1, name="Example Show")
PILOT = Episode(id=1, name="Pilot", season=1, number=1)
EVENTS = Episode(id=2, name="Events", season=1, number=2)


def test_sanitize_punctuation():
    assert sanitize("It's Always: Sunny & Rain") == "its_always_sunny_and_rain"


def test_sanitize_double_and_typographic_quotes():
    assert sanitize('The "Best" Day’s End') == "the_best_days_end"


def test_sanitize_plain():
    assert sanitize("Pilot") == "pilot"


def test_single_episode_path():
    new = generate_name(Path("/out"), "Example.Show.S01E01.mkv", SHOW, [PILOT])
    assert new == Path("/out/example_show/season_01/example_show-s01e01-pilot.mkv")


def test_multi_episode_tag():
    new = generate_name(Path("/out"), "show-s01e01-e02.mkv", SHOW, [EVENTS, PILOT])
    assert new.name == "example_show-s01e02-e01-events.mkv"
    assert build_tag([PILOT, EVENTS]) == "s01e01-e02"


def test_multi_episode_uses_primary_name():
    primary = Episode(id=2, name="Events", season=1, number=1)
    new = generate_name(Path("/out"), "x.mkv", SHOW, [primary, EVENTS])
    assert new == Path("/out/example_show/season_01/example_show-s01e01-e02-events.mkv")


def test_wide_episode_numbers_are_not_truncated():
    finale = Episode(id=3, name="Finale", season=1, number=123)
    assert build_tag([finale]) == "s01e123"
    assert build_tag([PILOT, finale]) == "s01e01-e123"


def test_season_directory_is_padded():
    episode = Episode(id=4, name="Return", season=12, number=5)
    new = generate_name(Path("/out"), "x.mp4", SHOW, [episode])
    assert new.parent == Path("/out/example_show/season_12")
    assert new.name == "example_show-s12e05-return.mp4"


def test_extension_is_kept_verbatim():
    new = generate_name(Path("/out"), "SHOW.S01E01.MKV", SHOW, [PILOT])
    assert new.suffix == ".MKV"


def test_build_tag_requires_episode():
    with pytest.raises(ValueError):
        build_tag([])


def test_slashes_in_names_stay_in_one_component():
    show = Show(id=2, name="20/20")
    episode = Episode(id=5, name="Part 1/2", season=1, number=1)
    new = generate_name(Path("/out"), "x.mkv", show, [episode])
    assert len(new.relative_to(Path("/out")).parts) == 3
    assert new == Path("/out/20_20/season_01/20_20-s01e01-part_1_2.mkv")


def test_parent_segments_cannot_escape_destination():
    episode = Episode(id=6, name="../../../etc/x", season=1, number=1)
    new = generate_name(Path("/out"), "x.mkv", Show(id=3, name=".."), [episode])
    assert len(new.relative_to(Path("/out")).parts) == 3
    assert ".." not in new.parts


def test_sanitize_backslash():
    assert sanitize("AC\\DC") == "ac_dc"
