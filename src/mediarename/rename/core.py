"""
Rename planning for a batch of episode files.

This module ties the pieces of the rename package together: it fetches the show
and its episode list once, indexes the episodes, resolves every candidate file
against the index and builds the canonical destination for each file that
resolves.

Failure handling:
- A catalog failure (``CatalogFetchError``) aborts planning; no plan is
  returned.
- A file that has no tag or names an unknown episode is logged and skipped.
  The rest of the batch is unaffected.

Functions:
- generate_names: Build the rename plan for a batch of files.
- resolve_file: Resolve a single file to its destination path.
"""
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Sequence

from mediarename.errors import CatalogFetchError, EpisodeMatchError
from mediarename.interfaces import MediaClient
from mediarename.rename import formatter, parser
from mediarename.rename.lookup import EpisodeIndex
from mediarename.rename.models import Rename, Show
from mediarename.utils import SEASON_EPISODE_REGEX, WORKERS, LogLevel, logger


def fetch_catalog(client: MediaClient, imdb_id: str) -> tuple[Show, EpisodeIndex]:
    """Fetch a show and index its episodes, adding show context to catalog errors."""
    try:
        show = client.show_by_imdb(imdb_id)
    except CatalogFetchError as e:
        raise CatalogFetchError(f"show lookup failed for {imdb_id}: {e}") from e

    try:
        episodes = client.episodes(show)
    except CatalogFetchError as e:
        raise CatalogFetchError(f"episode lookup failed for {show.name} ({show.id}): {e}") from e

    logger.log("catalog.fetched", LogLevel.DEBUG, show=show.name, show_id=show.id, episodes=len(episodes))
    return show, EpisodeIndex.build(episodes)


def resolve_file(
        file: str | Path, dest: Path, show: Show, index: EpisodeIndex, pattern=SEASON_EPISODE_REGEX
) -> Path | None:
    """
    Compute the destination for one file, or None when it cannot be matched.

    Match failures are logged here rather than raised so that a worker pool can
    map this function over a batch.
    """
    name = os.path.basename(str(file))
    try:
        episodes = parser.find_episodes(index, name, pattern)
    except EpisodeMatchError as e:
        logger.log("rename.skip", LogLevel.WARN, file=str(file), reason=type(e).__name__, err=str(e))
        return None
    return formatter.generate_name(dest, name, show, episodes)


def generate_names(
        client: MediaClient,
        files: Sequence[str | Path],
        dest: str | Path,
        imdb_id: str,
        workers: int | None = None,
        pattern=SEASON_EPISODE_REGEX,
) -> list[Rename]:
    """
    Plan renames for ``files`` against the catalog entry for ``imdb_id``.

    Parameters:
    - client (MediaClient): Catalog client; queried exactly once for the show and once for its episodes.
    - files (Sequence[str | Path]): Candidate files, already filtered to media extensions.
    - dest (str | Path): Destination library root.
    - imdb_id (str): External identifier of the show.
    - workers (int | None): Threads used to resolve files; defaults to WORKERS. Order is preserved.
    - pattern: Compiled season/episode pattern with three groups.

    Returns:
    - list[Rename]: Plan entries for files that resolved, in input order. Files
      already at their destination are left out, as are files whose
      destination was claimed by an earlier file.

    Raises:
    - CatalogFetchError: when the show or its episodes cannot be fetched.
    """
    show, index = fetch_catalog(client, imdb_id)
    dest = Path(dest)
    workers = workers or WORKERS

    if workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            targets = list(executor.map(lambda f: resolve_file(f, dest, show, index, pattern), files))
    else:
        targets = [resolve_file(f, dest, show, index, pattern) for f in files]

    plan: list[Rename] = []
    # Files already at their destination own it, wherever they sit in the batch.
    claimed: dict[Path, Path] = {
        target: Path(file) for file, target in zip(files, targets) if target is not None and Path(file) == target
    }
    for file, target in zip(files, targets):
        if target is None:
            continue

        old = Path(file)
        if old == target:
            logger.log("rename.unchanged", LogLevel.DEBUG, file=str(old))
            continue

        if target in claimed:
            logger.log(
                "rename.conflict",
                LogLevel.WARN,
                file=str(old),
                new=str(target),
                claimed_by=str(claimed[target]),
            )
            continue

        claimed[target] = old
        plan.append(Rename(old=old, new=target))
        logger.log("rename.propose", LogLevel.DEBUG, old=str(old), new=str(target))

    logger.log("rename.planned", LogLevel.INFO, show=show.name, files=len(files), planned=len(plan))
    return plan
