"""
TVMaze API client for show and episode metadata lookup.

``TvMazeClient`` implements ``mediarename.interfaces.MediaClient``; the renaming
core depends only on that protocol.
"""
from typing import Any

import requests

from mediarename.errors import CatalogFetchError
from mediarename.rename.models import Episode, Show
from . import constants
from . import logger
from .logger import LogLevel


def _error_detail(resp: requests.Response) -> str:
    """Pull the message out of a TVMaze error body, if there is one."""
    try:
        body = resp.json()
    except ValueError:
        return ""
    if isinstance(body, dict):
        name = body.get("name") or ""
        message = body.get("message") or ""
        return f"{name}: {message}".strip(": ")
    return ""


class TvMazeClient:
    """Client for the TVMaze REST API."""

    def __init__(
            self,
            base_url: str = constants.API_BASE_URL,
            session: requests.Session | None = None,
            timeout: float = constants.REQUEST_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": constants.USER_AGENT})

    def _get(self, path: str, params: dict | None = None) -> Any:
        """GET ``path`` and decode the JSON body, raising CatalogFetchError on any failure."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.log("catalog.request", LogLevel.DEBUG, url=url, params=params)

        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise CatalogFetchError(f"request to {url} failed: {e}") from e

        logger.log("catalog.response", LogLevel.DEBUG, url=url, status=resp.status_code)
        if resp.status_code != 200:
            detail = _error_detail(resp)
            msg = f"non-success status code {resp.status_code} from {url}"
            raise CatalogFetchError(f"{msg} ({detail})" if detail else msg)

        try:
            return resp.json()
        except ValueError as e:
            raise CatalogFetchError(f"unable to deserialize JSON from {url}: {e}") from e

    def show_by_imdb(self, imdb_id: str) -> Show:
        data = self._get("lookup/shows", {"imdb": imdb_id})
        if not isinstance(data, dict):
            raise CatalogFetchError(f"unexpected show payload for {imdb_id}")
        return Show.from_api(data)

    def episodes(self, show: Show) -> list[Episode]:
        data = self._get(f"shows/{show.id}/episodes")
        if not isinstance(data, list):
            raise CatalogFetchError(f"unexpected episode list payload for show {show.id}")
        return [Episode.from_api(item) for item in data]
