"""SIEM-compatible security event logging.

Provides structured JSON logging for breach check outcomes, suitable for
integration with SIEM platforms like Splunk, ELK, or QRadar.

Events never contain the password, its hash, or the hash prefix sent to
the range API. Rotation is handled by RotatingFileHandler.

Writes are small synchronous appends made on the calling thread, including
from inside the event loop. A log path that cannot be opened is reported
through the module logger and the event is dropped.
"""

import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import (
    SIEM_LOG_FILE,
    SIEM_LOG_MAX_BYTES,
    SIEM_LOG_BACKUP_COUNT,
    SIEM_LOGGING_ENABLED,
)
from core.storage import ensure_directories, file_exists


logger = logging.getLogger(__name__)

_siem_logger = logging.getLogger("password_analyzer.siem")
_configured_file: Optional[str] = None
_configure_lock = Lock()


def configure_siem_logging(log_file: str = SIEM_LOG_FILE) -> None:
    """Attach a rotating JSON-lines handler to the SIEM logger.

    Calling again with the same file is a no-op; a different file
    replaces the previous handler once the new one is open.

    Args:
        log_file: Path of the JSON-lines event log

    Raises:
        OSError: If the log directory or file cannot be created
    """
    global _configured_file
    with _configure_lock:
        if _configured_file == log_file:
            return

        ensure_directories(os.path.dirname(log_file) or ".")

        handler = RotatingFileHandler(
            log_file,
            maxBytes=SIEM_LOG_MAX_BYTES,
            backupCount=SIEM_LOG_BACKUP_COUNT,
        )
        handler.setFormatter(logging.Formatter('%(message)s'))

        for old in list(_siem_logger.handlers):
            _siem_logger.removeHandler(old)
            old.close()

        _siem_logger.addHandler(handler)
        _siem_logger.setLevel(logging.INFO)
        _siem_logger.propagate = False

        _configured_file = log_file


def log_siem_event(
    event_type: str,
    status: str,
    details: Optional[dict] = None
) -> None:
    """Log event in JSON format suitable for SIEM tools.

    Args:
        event_type: Type of event (e.g., 'breach_check')
        status: Event status (e.g., 'FOUND', 'NOT_FOUND', 'ERROR')
        details: Optional additional event details
    """
    if not SIEM_LOGGING_ENABLED:
        return

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": "password_analyzer"
    }

    if details:
        event["details"] = details

    # Recording is best-effort; an unusable log path must not fail the caller
    try:
        configure_siem_logging(_configured_file or SIEM_LOG_FILE)
    except OSError as e:
        logger.warning("SIEM event not recorded: %s", type(e).__name__)
        return

    _siem_logger.info(json.dumps(event))


def get_siem_events(limit: int = 100) -> list[dict]:
    """Read and parse SIEM log events.

    Args:
        limit: Maximum number of events to return

    Returns:
        List of parsed event dictionaries, oldest first
    """
    log_file = _configured_file or SIEM_LOG_FILE
    if not file_exists(log_file):
        return []

    events = []
    with open(log_file, "r") as f:
        for line in f:
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                continue

    return events[-limit:]


def count_events_by_status(event_type: Optional[str] = None) -> dict[str, int]:
    """Count SIEM events grouped by status.

    Args:
        event_type: Optional filter by event type

    Returns:
        Dictionary mapping status to count
    """
    events = get_siem_events(limit=10000)
    counts = {}

    for event in events:
        if event_type and event.get("event_type") != event_type:
            continue

        status = event.get("status", "UNKNOWN")
        counts[status] = counts.get(status, 0) + 1

    return counts
