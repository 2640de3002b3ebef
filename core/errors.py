"""Exceptions raised inside the breach check pipeline.

None of these reach a caller of BreachChecker.check(); they are collapsed
into BreachResult.error() there and only their class name is logged.
"""

from typing import Optional


class BreachCheckError(Exception):
    """Base exception for breach check failures."""
    pass


class BreachServiceError(BreachCheckError):
    """Range API answered with a non-success HTTP status."""

    def __init__(self, status: int, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f"Breach service returned HTTP {status}")


class MalformedResponseError(BreachCheckError):
    """Range API body could not be parsed."""
    pass
