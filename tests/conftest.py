"""Shared fixtures: a fixed episode catalog and a fake catalog client."""

import pytest

from mediarename.errors import CatalogFetchError
from mediarename.rename.models import Episode, Show
from mediarename.utils import LogLevel, logger

SHOW = Show(id=1, name="Example Show", url="https://api.example.com/show/1", imdb="tt0000001")

EPISODES = [
    Episode(id=1, name="Pilot", season=1, number=1, url="https://api.example.com/show/1/episode/1"),
    Episode(id=2, name="Events", season=1, number=2, url="https://api.example.com/show/1/episode/2"),
    Episode(id=3, name="Finale", season=1, number=123, url="https://api.example.com/show/1/episode/3"),
]


class FakeClient:
    """MediaClient returning fixed data and counting calls."""

    def __init__(self, show=SHOW, episodes=None, show_error=None, episodes_error=None):
        self.show = show
        self._episodes = list(EPISODES if episodes is None else episodes)
        self.show_error = show_error
        self.episodes_error = episodes_error
        self.show_calls = 0
        self.episode_calls = 0

    def show_by_imdb(self, imdb_id):
        self.show_calls += 1
        if self.show_error:
            raise CatalogFetchError(self.show_error)
        return self.show

    def episodes(self, show):
        self.episode_calls += 1
        if self.episodes_error:
            raise CatalogFetchError(self.episodes_error)
        return list(self._episodes)


@pytest.fixture(autouse=True)
def quiet_logs():
    """Keep test output clean; tests that inspect logs lower the level themselves."""
    previous = logger.get_log_level()
    logger.set_log_level(LogLevel.ERROR)
    yield
    logger.set_log_level(previous)


@pytest.fixture
def episodes():
    return list(EPISODES)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def make_client():
    """Factory for FakeClient instances with custom data or failures."""
    return FakeClient
