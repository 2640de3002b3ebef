"""Centralized file system helpers.

Only the security event log touches disk; passwords and their digests
never do.
"""

import os
import sys

from core.config import LOG_DIR


def ensure_directories(*directories: str) -> None:
    """Create required directories if they don't exist.

    Defaults to LOG_DIR. On Unix systems, directories are created with
    mode 0700 (owner only).
    """
    for directory in directories or (LOG_DIR,):
        if sys.platform != "win32":
            os.makedirs(directory, mode=0o700, exist_ok=True)
        else:
            os.makedirs(directory, exist_ok=True)


def file_exists(filepath: str) -> bool:
    """Check if a file exists."""
    return os.path.isfile(filepath)
