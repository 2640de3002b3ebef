"""FastAPI dependencies.

Provides the breach checker used by the tools endpoints. Tests replace it
through app.dependency_overrides.
"""

from breach_check import BreachChecker


_breach_checker = BreachChecker()


def get_breach_checker() -> BreachChecker:
    """Shared, stateless breach checker."""
    return _breach_checker
