"""
Episode matching and renaming.

This package turns free-form episode filenames into canonical library paths
using show and episode metadata from the catalog.

Package organization:
- models: Show, Episode, ParsedTag and Rename data classes.
- lookup: ``EpisodeIndex``, an immutable (season, number) -> Episode map.
- parser: Season/episode tag extraction and resolution against the index.
- formatter: Name sanitization and canonical path generation.
- core: Batch planning against a single catalog fetch.
- batch: Applying (or reporting) a plan on the filesystem.

Public API (top-level exports)
- Parsing:
  - `parse_tag`: Extract season and episode number(s) from a filename.
  - `find_episodes`: Resolve a filename to one or two catalog episodes.
- Formatting:
  - `sanitize`: Normalize a display name for use in a path.
  - `generate_name`: Build the destination path for a resolved file.
- Planning:
  - `generate_names`: Plan renames for a batch of files (returns list[Rename]).
- Applying:
  - `rename_files`: Move/copy files per a plan, or just report it.

Example:
    from mediarename.rename import generate_names, rename_files
    from mediarename.utils.tvmaze import TvMazeClient

    plan = generate_names(TvMazeClient(), files, "/library", "tt0898266")
    rename_files(plan, commit=True)
"""
from .models import Episode, ParsedTag, Rename, Show
from .lookup import EpisodeIndex

# Public parsing functions
from .parser import (
    parse_tag,
    find_episodes,
)

# Name generation
from .formatter import (
    sanitize,
    build_tag,
    generate_name,
)

# Planning
from .core import generate_names

# Applying plans
from .batch import rename_files

__all__ = [
    # Models
    "Show",
    "Episode",
    "ParsedTag",
    "Rename",
    "EpisodeIndex",
    # Parsing
    "parse_tag",
    "find_episodes",
    # Formatting
    "sanitize",
    "build_tag",
    "generate_name",
    # Planning
    "generate_names",
    # Applying
    "rename_files",
]
