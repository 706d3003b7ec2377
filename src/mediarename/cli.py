"""
Command line entry point: rename TV episodes into a canonical library layout.

Example:
    mediarename rename tt0898266 ~/Downloads/show ~/Media/TV            # report the plan
    mediarename rename tt0898266 ~/Downloads/show ~/Media/TV --commit   # apply it
"""

import argparse
import os
import sys
import time
from pathlib import Path

import mediarename as mediarename_module
from mediarename.errors import CatalogFetchError
from mediarename.rename import generate_names, rename_files
from mediarename.utils import (
    LOG_LEVEL,
    STATUS_COPY,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_OK,
    STATUS_SKIP,
    VIDEO_EXTENSIONS,
    WORKERS,
    LogLevel,
    file_util,
    logger,
)
from mediarename.utils.tvmaze import TvMazeClient


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def _log_level(value: str) -> LogLevel:
    try:
        return logger.level_from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mediarename",
        description="Rename TV episode files to a canonical, sortable layout using TVMaze metadata.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {mediarename_module.__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rename = subparsers.add_parser(
        "rename",
        help="Rename episode files",
        description="Match episode files under SRC against a show and move them under DEST. "
                    "Without --commit the plan is only printed.",
        epilog="Example: mediarename rename tt0898266 ./downloads ./tv --commit",
    )
    rename.add_argument("id", help="IMDb ID of the show (e.g. tt0898266)")
    rename.add_argument("src", help="Directory containing files to rename")
    rename.add_argument("dest", help="Destination root of renamed files")
    rename.add_argument("--commit", action="store_true", help="Apply the renames (default: only print the plan)")
    rename.add_argument("--copy", action="store_true", help="Copy files instead of moving them")
    rename.add_argument("--overwrite", action="store_true", help="Replace files that already exist at a destination")
    rename.add_argument(
        "--ext",
        action="append",
        metavar="EXT",
        help=f"Media file extension to include; repeatable (default: {', '.join(sorted(VIDEO_EXTENSIONS))})",
    )
    rename.add_argument(
        "--workers",
        type=_positive_int,
        default=WORKERS,
        help=f"Threads used to match files (default: {WORKERS} or $MEDIARENAME_WORKERS)",
    )
    rename.add_argument("--debug", action="store_true", help="Enable debug output")
    rename.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        help=f"Log level: TRACE, DEBUG, INFO, WARN, ERROR (default: {LOG_LEVEL} or $MEDIARENAME_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def _configure_logging(args: argparse.Namespace) -> None:
    if args.log_level is not None:
        level = args.log_level
    elif args.debug:
        level = LogLevel.DEBUG
    else:
        try:
            level = logger.level_from_name(LOG_LEVEL)
        except ValueError:
            level = LogLevel.INFO
    logger.set_log_level(level)


def run_rename(args: argparse.Namespace, client=None) -> int:
    """Run the ``rename`` command and return a process exit code."""
    _configure_logging(args)

    src = Path(args.src).expanduser()
    dest = Path(args.dest).expanduser()
    if not src.is_dir():
        logger.log("startup.error", LogLevel.ERROR, msg="Source directory does not exist", src=str(src))
        return 2

    extensions = args.ext or VIDEO_EXTENSIONS
    files = file_util.find_files(src, extensions)
    if not files:
        logger.log("startup.error", LogLevel.ERROR, msg="No files found to rename", src=str(src))
        return 2

    start_time = time.time()
    logger.log(
        "mediarename.start",
        LogLevel.INFO,
        pid=os.getpid(),
        show_id=args.id,
        files_found=len(files),
        source=str(src),
        dest=str(dest),
        commit=args.commit,
        workers=args.workers,
    )

    client = client or TvMazeClient()
    try:
        plan = generate_names(client, files, dest, args.id, workers=args.workers)
    except CatalogFetchError as e:
        logger.log("catalog.error", LogLevel.ERROR, show_id=args.id, err=str(e))
        return 1

    if not plan:
        logger.echo("No matching files found to rename.")
        return 0

    logger.echo("Proposed renames:")
    for op in plan:
        logger.echo(f"{op.old} -> {op.new}")
    logger.echo(f"\nTotal files: {len(plan)} of {len(files)}")

    results = rename_files(plan, commit=args.commit, copy=args.copy, overwrite=args.overwrite)
    if not args.commit:
        logger.echo("\nDry-run mode: no changes were made. Pass --commit to apply.")

    ok = sum(1 for _, s in results if s in (STATUS_OK, STATUS_COPY))
    skip = sum(1 for _, s in results if s.startswith(STATUS_SKIP))
    fail = sum(1 for _, s in results if s.startswith(STATUS_FAIL))
    dry = sum(1 for _, s in results if s == STATUS_DRY_RUN)

    logger.log(
        "mediarename.end",
        LogLevel.INFO,
        runtime=f"{time.time() - start_time:.3f}s",
        unplanned=len(files) - len(plan),
        ok=ok,
        skip=skip,
        fail=fail,
        dry_run=dry,
    )
    return 1 if fail else 0


def main(argv=None) -> None:
    args = parse_args(argv)
    if args.command == "rename":
        sys.exit(run_rename(args))


if __name__ == "__main__":
    main()
