"""
Episode index keyed by (season, number).

The index is built once per run from the full episode list returned by the
catalog and is read-only afterwards, so it can be shared across worker threads
without locking. Keys are integer tuples, which makes ``e1`` and ``e01`` the
same episode regardless of how the filename spelled it.
"""
from typing import Iterable

from mediarename.rename.models import Episode
from mediarename.utils import LogLevel, logger


class EpisodeIndex:
    """Lookup from (season, number) to Episode."""

    def __init__(self, episodes: dict[tuple[int, int], Episode] | None = None):
        self._episodes = dict(episodes or {})

    @classmethod
    def build(cls, episodes: Iterable[Episode]) -> "EpisodeIndex":
        """
        Index an episode list.

        Duplicate (season, number) pairs are not rejected: the later entry
        replaces the earlier one. Episodes without a season or number (specials)
        cannot be addressed by a tag and are left out.
        """
        index: dict[tuple[int, int], Episode] = {}
        unnumbered = 0
        for episode in episodes:
            if episode.season is None or episode.number is None:
                unnumbered += 1
                continue
            key = (episode.season, episode.number)
            if key in index:
                logger.log(
                    "lookup.duplicate",
                    LogLevel.DEBUG,
                    season=episode.season,
                    number=episode.number,
                    replaced=index[key].name,
                    kept=episode.name,
                )
            index[key] = episode

        logger.log("lookup.build", LogLevel.DEBUG, episodes=len(index), unnumbered=unnumbered)
        return cls(index)

    def lookup(self, season: int, number: int) -> Episode | None:
        """Return the episode for (season, number), or None when the catalog has no such episode."""
        return self._episodes.get((int(season), int(number)))

    def __len__(self) -> int:
        return len(self._episodes)

    def __contains__(self, key) -> bool:
        return key in self._episodes
