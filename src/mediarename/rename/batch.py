"""Apply a rename plan to the filesystem.

Without ``commit`` the plan is only reported. With ``commit`` each entry's
parent directories are created and the file is moved (or copied). A failure on
one entry is logged and reported with a FAIL status; the remaining entries are
still processed.
"""
import shutil
from typing import Sequence

from tqdm import tqdm

from mediarename.rename.models import Rename
from mediarename.utils import (
    STATUS_COPY,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_OK,
    STATUS_SKIP,
    LogLevel,
    logger,
)


def apply_rename(op: Rename, commit: bool = False, copy: bool = False, overwrite: bool = False) -> str:
    """Apply a single plan entry and return its status string."""
    logger.log("rename.apply", LogLevel.INFO, old=str(op.old), new=str(op.new), commit=commit)

    if not commit:
        return STATUS_DRY_RUN

    if op.new.exists() and not overwrite:
        logger.log("rename.fail", LogLevel.WARN, old=str(op.old), new=str(op.new), reason="destination exists")
        return f"{STATUS_SKIP} (already exists)"

    try:
        op.new.parent.mkdir(parents=True, exist_ok=True)
        if copy:
            shutil.copy2(str(op.old), str(op.new))
            return STATUS_COPY
        shutil.move(str(op.old), str(op.new))
        return STATUS_OK
    except (OSError, shutil.Error) as e:
        logger.log("rename.fail", LogLevel.ERROR, old=str(op.old), new=str(op.new), err=str(e))
        return f"{STATUS_FAIL} ({e})"


def rename_files(
        renames: Sequence[Rename], commit: bool = False, copy: bool = False, overwrite: bool = False
) -> list[tuple[Rename, str]]:
    """Apply (or, without ``commit``, only report) every entry of a plan.

    Args:
        renames: Plan entries, applied in order.
        commit: Actually touch the filesystem.
        copy: Copy instead of move.
        overwrite: Replace files already present at a destination.

    Returns:
        (entry, status) pairs in plan order.
    """
    results = []
    for op in tqdm(renames, desc="Renaming files", disable=not commit or not renames):
        results.append((op, apply_rename(op, commit=commit, copy=copy, overwrite=overwrite)))
    return results
