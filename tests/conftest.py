"""Shared pytest configuration.

Points LOG_DIR at a throwaway directory before any project module reads
its configuration, so tests never write into the working tree.
"""

import os
import sys
import tempfile

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="password-analyzer-logs-"))

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from breach_check import get_password_hash


class FakeRangeAPI:
    """In-memory stand-in for the range endpoint.

    Records every prefix requested; responds with a fixed body or raises.
    """

    def __init__(self, body: str = "", error: Exception = None):
        self.body = body
        self.error = error
        self.calls: list[str] = []

    async def __call__(self, prefix: str) -> str:
        self.calls.append(prefix)
        if self.error is not None:
            raise self.error
        return self.body


def range_line(password: str, count: int) -> str:
    """Build the "SUFFIX:COUNT" line the range API returns for a password."""
    _, suffix = get_password_hash(password)
    return f"{suffix}:{count}"
