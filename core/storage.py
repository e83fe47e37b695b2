"""File helpers for the event log.

Creates the log directory on demand and appends lines with consistent
error handling.
"""

import os
import sys

from core import config


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


def ensure_directories(*extra: str) -> None:
    """Create the log directory (and any extra directories) if missing.

    On Unix systems, directories are created with mode 0700 (owner only).

    Raises:
        StorageError: If a directory cannot be created
    """
    for directory in (config.LOG_DIR, *extra):
        if not directory:
            continue
        try:
            if sys.platform != "win32":
                os.makedirs(directory, mode=0o700, exist_ok=True)
            else:
                os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create {directory}: {e}")


def append_line(filepath: str, line: str) -> None:
    """Append a line to a text file.

    Args:
        filepath: Path to text file
        line: Line to append (newline added automatically)

    Raises:
        StorageError: If the write fails
    """
    ensure_directories(os.path.dirname(filepath))
    try:
        with open(filepath, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as e:
        raise StorageError(f"Failed to append to {filepath}: {e}")


def read_lines(filepath: str) -> list[str]:
    """Read all lines of a text file, or [] if it does not exist."""
    if not os.path.exists(filepath):
        return []

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except OSError as e:
        raise StorageError(f"Failed to read {filepath}: {e}")


def file_exists(filepath: str) -> bool:
    """Check if file exists."""
    return os.path.exists(filepath)
