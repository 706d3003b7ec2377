"""Data models for the rename package."""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from mediarename.errors import CatalogFetchError


@dataclass(frozen=True)
class Show:
    """A TV show as returned by the catalog."""
    id: int
    name: str
    url: str = ""
    imdb: str | None = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Show":
        """Build a Show from a TVMaze show payload."""
        try:
            externals = data.get("externals") or {}
            return cls(
                id=int(data["id"]),
                name=str(data["name"]),
                url=data.get("url") or "",
                imdb=externals.get("imdb"),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise CatalogFetchError(f"malformed show payload: {e!r}") from e


@dataclass(frozen=True)
class Episode:
    """One episode of a show. Specials may have no season or number."""
    id: int
    name: str
    season: int | None
    number: int | None
    url: str = ""
    type: str = "regular"

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Episode":
        """Build an Episode from one element of a TVMaze episode list."""
        try:
            season = data.get("season")
            number = data.get("number")
            return cls(
                id=int(data["id"]),
                name=str(data.get("name") or ""),
                season=int(season) if season is not None else None,
                number=int(number) if number is not None else None,
                url=data.get("url") or "",
                type=data.get("type") or "regular",
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise CatalogFetchError(f"malformed episode payload: {e!r}") from e


@dataclass(frozen=True)
class ParsedTag:
    """Season and episode number(s) extracted from a filename tag like ``s01e01-e02``."""
    season: int
    episode: int
    second_episode: int | None = None

    @property
    def is_multi(self) -> bool:
        return self.second_episode is not None

    def keys(self) -> list[tuple[int, int]]:
        """Index keys for this tag, primary first."""
        out = [(self.season, self.episode)]
        if self.second_episode is not None:
            out.append((self.season, self.second_episode))
        return out


@dataclass(frozen=True)
class Rename:
    """One plan entry: move ``old`` to ``new``."""
    old: Path
    new: Path
