"""Structured event logging.

Writes one JSON object per line for generation and scoring events so the
log can be shipped to any log pipeline. Both the JSON lines and the
human-readable app log go through size-rotated ``logging`` handlers.

Events never contain the password itself, only its metadata.
"""

import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

from core import config
from core.storage import StorageError, ensure_directories, file_exists, read_lines


logger = logging.getLogger("passgen")

# JSON lines only; kept out of the app log and the root logger
event_logger = logging.getLogger("passgen.events")
event_logger.propagate = False

# Module-level state
_logging_configured = False

EVENT_SOURCE = "passgen"


def _rotating_handler(filepath: str, fmt: str) -> RotatingFileHandler:
    """Open a size-rotated log file.

    Raises:
        StorageError: If the directory or file cannot be opened
    """
    ensure_directories(os.path.dirname(filepath))
    try:
        handler = RotatingFileHandler(
            filepath,
            maxBytes=config.EVENT_LOG_MAX_BYTES,
            backupCount=config.EVENT_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        raise StorageError(f"Failed to open log file {filepath}: {e}")
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging() -> None:
    """Configure the app log and the JSON event log on first use.

    Both files rotate at EVENT_LOG_MAX_BYTES, keeping
    EVENT_LOG_BACKUP_COUNT backups.

    Raises:
        StorageError: If either log file cannot be opened
    """
    global _logging_configured
    if _logging_configured:
        return

    app_handler = _rotating_handler(config.APP_LOG_FILE, '%(asctime)s - %(message)s')
    try:
        event_handler = _rotating_handler(config.EVENT_LOG_FILE, '%(message)s')
    except StorageError:
        app_handler.close()
        raise

    logger.setLevel(config.LOG_LEVEL)
    logger.addHandler(app_handler)

    # Events are always recorded, whatever LOG_LEVEL says
    event_logger.setLevel(logging.INFO)
    event_logger.addHandler(event_handler)

    _logging_configured = True


def shutdown_logging() -> None:
    """Close and detach both handlers so the next use reconfigures."""
    global _logging_configured
    for log in (logger, event_logger):
        for handler in list(log.handlers):
            handler.close()
            log.removeHandler(handler)
    _logging_configured = False


def log_event(event_type: str, status: str, details: Optional[dict] = None) -> dict:
    """Record an event as a JSON line and mirror it to the app log.

    Args:
        event_type: Kind of event (e.g. 'password_generated', 'password_scored')
        status: Event status (e.g. 'SUCCESS', 'EMPTY')
        details: Optional metadata; must not contain secrets

    Returns:
        The event dictionary that was written

    Raises:
        StorageError: If the log files cannot be opened
    """
    configure_logging()

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": EVENT_SOURCE,
    }

    if details:
        event["details"] = details

    event_logger.info(json.dumps(event, ensure_ascii=False))
    logger.info(f"{event_type} - {status}")
    return event


def get_events(limit: int = 100) -> list[dict]:
    """Read and parse logged events from the current (unrotated) file.

    Args:
        limit: Maximum number of most recent events to return

    Returns:
        List of parsed event dictionaries, oldest first
    """
    if not file_exists(config.EVENT_LOG_FILE):
        return []

    events = []
    for line in read_lines(config.EVENT_LOG_FILE):
        try:
            events.append(json.loads(line))
        except json.JSONDecodeError:
            continue

    return events[-limit:]


def count_events_by_type() -> dict[str, int]:
    """Count logged events grouped by event type."""
    counts: dict[str, int] = {}
    for event in get_events(limit=10000):
        event_type = event.get("event_type", "unknown")
        counts[event_type] = counts.get(event_type, 0) + 1
    return counts
