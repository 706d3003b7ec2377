"""Protocol for the metadata catalog consumed by the rename planner."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mediarename.rename.models import Episode, Show


class MediaClient(Protocol):
    """Catalog lookups needed to plan renames for one show.

    ``TvMazeClient`` is the production implementation; tests use a fake with
    fixed data. Implementations raise ``CatalogFetchError`` on any failure.
    """

    def show_by_imdb(self, imdb_id: str) -> Show:
        """Look up a show by its IMDb identifier (e.g. ``tt0898266``)."""
        ...

    def episodes(self, show: Show) -> list[Episode]:
        """Fetch the full episode list of ``show``."""
        ...
