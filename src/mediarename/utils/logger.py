"""
Structured key/value logging with log levels.

Every entry is a single logfmt-style line::

    ts=2024-01-01T12:00:00Z level=INFO event=rename.propose worker=main old="a.mkv" new="b.mkv"

Output goes through ``tqdm.write`` so that log lines interleave cleanly with
progress bars. Writes are serialized with a lock because planning may run on a
thread pool.
"""
import sys
import threading
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from tqdm import tqdm

_print_lock = threading.Lock()
_worker_id_map: Dict[int, str] = {}
_worker_counter = 0
_worker_lock = threading.Lock()


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_current_level = LogLevel.INFO

_LEVEL_ALIASES = {"WARNING": LogLevel.WARN}


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def get_log_level() -> LogLevel:
    """Get the current log level."""
    return _current_level


def level_from_name(name: str) -> LogLevel:
    """
    Resolve a level name such as ``"debug"`` or ``"WARNING"`` to a LogLevel.

    Raises:
        ValueError: if the name is not a known level.
    """
    key = name.strip().upper()
    if key in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[key]
    try:
        return LogLevel[key]
    except KeyError:
        raise ValueError(f"unknown log level: {name!r}") from None


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    # Everything else (strings, paths, exceptions) is quoted and kept on one line.
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    return f'"{text}"'


def format_fields(fields: Dict[str, Any]) -> str:
    """Format key-value pairs as space separated ``key=value`` tokens."""
    return " ".join(f"{key}={_format_value(value)}" for key, value in fields.items())


def _should_log(level: LogLevel) -> bool:
    return level.value >= _current_level.value


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'rename.propose', 'catalog.request')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    if not _should_log(level):
        return

    if "worker" not in kwargs:
        kwargs["worker"] = get_worker_id()

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    line = f"ts={timestamp} level={level.name} event={event}"
    if kwargs:
        line = f"{line} {format_fields(kwargs)}"

    with _print_lock:
        tqdm.write(line, file=sys.stderr)


def echo(text: str = "") -> None:
    """Thread-safe plain output for user-facing report lines (plans, summaries)."""
    with _print_lock:
        tqdm.write(text)


def get_worker_id() -> str:
    """Get current worker/thread identifier (numeric ID for worker threads)."""
    global _worker_counter
    thread = threading.current_thread()

    if thread is threading.main_thread():
        return "main"

    with _worker_lock:
        if thread.ident in _worker_id_map:
            return _worker_id_map[thread.ident]
        _worker_counter += 1
        worker_id = f"w{_worker_counter}"
        _worker_id_map[thread.ident] = worker_id
        return worker_id
