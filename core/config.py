"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Settings can be overridden via environment variables.
"""

import os

# Directories
LOG_DIR = os.environ.get("LOG_DIR", "logs")
SIEM_LOG_FILE = os.path.join(LOG_DIR, "siem_events.jsonl")

# Security event log rotation
SIEM_LOG_MAX_BYTES = int(os.environ.get("SIEM_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
SIEM_LOG_BACKUP_COUNT = int(os.environ.get("SIEM_LOG_BACKUP_COUNT", 5))
SIEM_LOGGING_ENABLED = os.environ.get("SIEM_LOGGING_ENABLED", "true").lower() == "true"

# Pwned Passwords range API (k-Anonymity)
HIBP_API_URL = os.environ.get("HIBP_API_URL", "https://api.pwnedpasswords.com").rstrip("/")
HIBP_USER_AGENT = os.environ.get("HIBP_USER_AGENT", "PasswordAnalyzer-BreachCheck/1.0")
# Ask the range API to pad responses with zero-count decoy records
HIBP_ADD_PADDING = os.environ.get("HIBP_ADD_PADDING", "true").lower() == "true"
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "5"))  # seconds

# Hash prefix length sent to the range API
HASH_PREFIX_LENGTH = 5

# Passwords shorter than this are never sent for a breach check
BREACH_CHECK_MIN_LENGTH = int(os.environ.get("BREACH_CHECK_MIN_LENGTH", "4"))

# Quiet period after the last keystroke before a breach check starts
DEBOUNCE_SECONDS = float(os.environ.get("DEBOUNCE_SECONDS", "0.5"))

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"

# Default per-client rate limit for the REST API
API_RATE_LIMIT = os.environ.get("API_RATE_LIMIT", "100/minute")

# Browser origins allowed to call the REST API, comma separated
API_CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "API_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if origin.strip()
]
