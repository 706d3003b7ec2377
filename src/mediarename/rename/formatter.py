"""
Utilities to build canonical destination paths for TV episodes.

The layout produced here is::

    <dest>/<show>/season_<SS>/<show>-s<SS>e<NN>[-e<NN>]-<episode><ext>

where ``<show>`` and ``<episode>`` are sanitized display names (see
``sanitize``), ``<SS>`` is the season zero-padded to two digits and ``<NN>`` an
episode number zero-padded to at least two digits. Libraries already organized
this way depend on the exact format, so it is kept stable.

Notes:
- Only the primary episode's name is used in the filename. A second episode in
  the same file contributes a ``-eNN`` suffix to the tag and nothing else.
- The extension is copied verbatim from the source file, case included.
- Seasons of 100 or more are not specially handled; they simply render wider.

Example:
    generate_name(Path("/out"), "a.mkv", Show(1, "Example Show"), [pilot])
    -> Path("/out/example_show/season_01/example_show-s01e01-pilot.mkv")
"""
import os
from pathlib import Path
from typing import Sequence

from mediarename.rename.models import Episode, Show

# Quote-style punctuation dropped from names, straight and typographic.
_STRIP_CHARS = ":'\"‘’“”`"
_STRIP_TABLE = str.maketrans("", "", _STRIP_CHARS)

# Path separators would split a name into extra directories.
_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


def sanitize(value: str) -> str:
    """
    Turn a display name into a lowercase, underscore separated path component.

    Spaces become underscores, quotes and colons are removed and ``&`` becomes
    ``and``. Path separators become underscores and a bare ``.`` or ``..`` is
    never returned, so the result is always a single path component:

    >>> sanitize("It's Always: Sunny & Rain")
    'its_always_sunny_and_rain'
    """
    value = value.replace(" ", "_")
    value = value.translate(_STRIP_TABLE)
    value = value.replace("&", "and")
    for sep in _SEPARATORS:
        value = value.replace(sep, "_")
    if value in (".", ".."):
        value = value.replace(".", "_")
    return value.lower()


def season_dir(season: int) -> str:
    return f"season_{season:02d}"


def build_tag(episodes: Sequence[Episode]) -> str:
    """
    Build the ``sSSeNN`` tag for one or more episodes of the same season.

    Every episode after the first appends ``-eNN``; its season is not repeated.
    """
    if not episodes:
        raise ValueError("at least one episode is required to build a tag")

    first, rest = episodes[0], episodes[1:]
    tag = f"s{first.season:02d}e{first.number:02d}"
    for episode in rest:
        tag += f"-e{episode.number:02d}"
    return tag


def build_filename(show: Show, episodes: Sequence[Episode], extension: str) -> str:
    """Canonical filename: ``{show}-{tag}-{episode}{extension}``."""
    return f"{sanitize(show.name)}-{build_tag(episodes)}-{sanitize(episodes[0].name)}{extension}"


def generate_name(dest: Path, file: str | Path, show: Show, episodes: Sequence[Episode]) -> Path:
    """
    Build the destination path for ``file`` given the episode(s) it holds.

    Parameters:
    - dest (Path): Destination root for the library.
    - file (str | Path): Original file; only its extension is used.
    - show (Show): Show the episodes belong to.
    - episodes (Sequence[Episode]): Resolved episodes, primary first.

    Returns:
    - Path: ``dest / <show> / season_<SS> / <filename>``.
    """
    first = episodes[0]
    extension = Path(file).suffix
    return Path(dest) / sanitize(show.name) / season_dir(first.season) / build_filename(show, episodes, extension)
