"""Password Analyzer Core Package.

Provides shared components for the strength evaluator and breach checker:
- config: Centralized configuration constants
- results: Immutable report and result types
- errors: Breach check exception hierarchy
- storage: File system helpers
- siem: Security event logging
- controller: Debounced, latest-wins analysis controller (import directly)
"""

# Configuration constants
from core.config import (
    LOG_DIR,
    SIEM_LOG_FILE,
    HIBP_API_URL,
    REQUEST_TIMEOUT,
    BREACH_CHECK_MIN_LENGTH,
    DEBOUNCE_SECONDS,
)

# Result types
from core.results import (
    BREACH_CHECK_ERROR_MESSAGE,
    StrengthLevel,
    StrengthReport,
    BreachStatus,
    BreachResult,
)

# Errors
from core.errors import (
    BreachCheckError,
    BreachServiceError,
    MalformedResponseError,
)

# SIEM logging
from core.siem import (
    configure_siem_logging,
    log_siem_event,
    get_siem_events,
    count_events_by_status,
)

# Storage utilities
from core.storage import ensure_directories

__all__ = [
    # Config
    "LOG_DIR",
    "SIEM_LOG_FILE",
    "HIBP_API_URL",
    "REQUEST_TIMEOUT",
    "BREACH_CHECK_MIN_LENGTH",
    "DEBOUNCE_SECONDS",
    # Results
    "BREACH_CHECK_ERROR_MESSAGE",
    "StrengthLevel",
    "StrengthReport",
    "BreachStatus",
    "BreachResult",
    # Errors
    "BreachCheckError",
    "BreachServiceError",
    "MalformedResponseError",
    # SIEM
    "configure_siem_logging",
    "log_siem_event",
    "get_siem_events",
    "count_events_by_status",
    # Storage
    "ensure_directories",
]
