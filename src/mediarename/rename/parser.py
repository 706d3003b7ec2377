"""
Season/episode tag parsing for episode filenames.

A tag is a season marker followed by an episode marker (``s01e01``), optionally
followed by a second episode marker for files that hold two episodes
(``s01e01-e02`` or ``s01e01e02``). Matching is case-insensitive and the parsed
numbers, not the matched text, are used for lookups.
"""
import os
import re

from mediarename.errors import BadMetadataError, UnknownEpisodeError
from mediarename.rename.lookup import EpisodeIndex
from mediarename.rename.models import Episode, ParsedTag
from mediarename.utils import SEASON_EPISODE_REGEX, LogLevel, logger


def _marker_value(marker: str) -> int:
    """Numeric part of a marker such as ``S01`` or ``e123``."""
    return int(marker[1:])


def parse_tag(filename: str, pattern: re.Pattern = SEASON_EPISODE_REGEX) -> ParsedTag:
    """
    Extract season and episode number(s) from a filename.

    The pattern must expose three groups: season marker, episode marker and an
    optional second episode marker. Only the base name is inspected.

    Raises:
        BadMetadataError: when no tag is present.
    """
    name = os.path.basename(filename)
    match = pattern.search(name)
    if not match:
        raise BadMetadataError(name)

    season_marker, episode_marker, second_marker = match.group(1, 2, 3)
    tag = ParsedTag(
        season=_marker_value(season_marker),
        episode=_marker_value(episode_marker),
        second_episode=_marker_value(second_marker) if second_marker else None,
    )
    logger.log("parse.tag", LogLevel.TRACE, file=name, tag=match.group(0).lower(), multi=tag.is_multi)
    return tag


def find_episodes(
        index: EpisodeIndex, filename: str, pattern: re.Pattern = SEASON_EPISODE_REGEX
) -> list[Episode]:
    """
    Resolve the episode(s) a filename refers to.

    Returns one episode for a single tag, two for a multi-episode tag, in tag
    order. Either all episodes resolve or the call fails; there is no partial
    result.

    Raises:
        BadMetadataError: when the filename has no recognizable tag.
        UnknownEpisodeError: when the tag names an episode missing from the index.
    """
    name = os.path.basename(filename)
    tag = parse_tag(name, pattern)

    found = []
    for season, number in tag.keys():
        episode = index.lookup(season, number)
        if episode is None:
            raise UnknownEpisodeError(name, season, number)
        found.append(episode)
    return found
