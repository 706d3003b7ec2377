"""
Filesystem helpers for discovering candidate media files.
"""
from pathlib import Path
from typing import Iterable, List

from mediarename.utils import VIDEO_EXTENSIONS


def normalize_extensions(extensions: Iterable[str]) -> set[str]:
    """Lowercase extensions and make sure each has a leading dot (``"MKV"`` -> ``".mkv"``)."""
    out = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if ext:
            out.add(ext if ext.startswith(".") else f".{ext}")
    return out


def find_files(root: Path, extensions: Iterable[str] = VIDEO_EXTENSIONS) -> List[Path]:
    """
    Recursively find files under ``root`` whose extension is in ``extensions``.

    Extension matching ignores case. Results are sorted so that plans are
    reproducible between runs.
    """
    wanted = normalize_extensions(extensions)
    return sorted(p for p in Path(root).rglob("*") if p.is_file() and p.suffix.lower() in wanted)
