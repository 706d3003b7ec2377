"""
A media renaming tool for TV episode files.

This package renames locally stored TV episodes to a canonical, sortable
naming scheme by correlating their filenames against show and episode metadata
fetched from the TVMaze catalog.

The package is organized into several categories:
- Parsing season/episode tags out of free-form filenames (including files that
  hold two episodes).
- Generating canonical destination paths of the form
  ``<dest>/<show>/season_XX/<show>-sXXeYY-<episode>.<ext>``.
- Planning a batch of renames against a single catalog fetch and applying the
  plan to the filesystem.
- Interfacing with TVMaze for metadata lookups.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
