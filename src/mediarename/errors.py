"""Exception hierarchy for mediarename."""


class MediaRenameError(Exception):
    """Base exception for all mediarename errors."""

    pass


class EpisodeMatchError(MediaRenameError):
    """A single file could not be matched to a catalog episode.

    These are per-file failures: the planner logs them and skips the file.
    """

    def __init__(self, filename: str, message: str):
        self.filename = filename
        super().__init__(message)


class BadMetadataError(EpisodeMatchError):
    """The filename does not contain a recognizable season/episode tag."""

    def __init__(self, filename: str):
        super().__init__(filename, f"could not find season and episode in {filename}")


class UnknownEpisodeError(EpisodeMatchError):
    """The tag is well formed but no catalog episode has that season and number."""

    def __init__(self, filename: str, season: int, number: int):
        self.season = season
        self.number = number
        super().__init__(filename, f"no episode s{season:02d}e{number:02d} for {filename}")


class CatalogFetchError(MediaRenameError):
    """The metadata catalog could not be queried (network, HTTP status or payload)."""

    pass
