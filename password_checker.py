"""Offline password strength scoring.

Scores a password against a fixed, ordered set of composition criteria.
No network access and no state: the same password always yields an
identical report.
"""

import re
from typing import Callable, Optional

from core.results import StrengthLevel, StrengthReport


# Literal tables. Matching must stay exact, so these are never generated.
SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")

COMMON_PASSWORDS = ("password", "12345678", "qwerty", "abc123")

SEQUENTIAL_PATTERNS = (
    "012", "123", "234", "345", "456", "567", "678", "789", "890",
    "abc", "bcd", "cde",
)

_REPEATED_CHARACTERS = re.compile(r"(.)\1{2,}")

MIN_STRONG_LENGTH = 12


def _has_length(password: str) -> bool:
    return len(password) >= MIN_STRONG_LENGTH


def _has_uppercase(password: str) -> bool:
    return any("A" <= ch <= "Z" for ch in password)


def _has_lowercase(password: str) -> bool:
    return any("a" <= ch <= "z" for ch in password)


def _has_number(password: str) -> bool:
    # str.isdigit() would also accept non-ASCII digits
    return any("0" <= ch <= "9" for ch in password)


def _has_special(password: str) -> bool:
    return any(ch in SPECIAL_CHARACTERS for ch in password)


def _is_not_common(password: str) -> bool:
    lowered = password.lower()
    return not any(common in lowered for common in COMMON_PASSWORDS)


def _is_not_sequential(password: str) -> bool:
    if _REPEATED_CHARACTERS.search(password):
        return False
    lowered = password.lower()
    return not any(pattern in lowered for pattern in SEQUENTIAL_PATTERNS)


# (name, predicate, label) in display order
CRITERIA: tuple[tuple[str, Callable[[str], bool], str], ...] = (
    ("length", _has_length, f"At least {MIN_STRONG_LENGTH} characters"),
    ("uppercase", _has_uppercase, "Contains uppercase letters (A-Z)"),
    ("lowercase", _has_lowercase, "Contains lowercase letters (a-z)"),
    ("numbers", _has_number, "Contains numbers (0-9)"),
    ("special", _has_special, "Contains special characters (!@#$...)"),
    ("noCommon", _is_not_common, "Not a common password"),
    ("noSequential", _is_not_sequential, "No repeated or sequential patterns"),
)

CRITERIA_LABELS = {name: label for name, _, label in CRITERIA}

_SUGGESTIONS = {
    "length": f"Use at least {MIN_STRONG_LENGTH} characters.",
    "uppercase": "Add uppercase letters.",
    "lowercase": "Add lowercase letters.",
    "numbers": "Add numbers.",
    "special": "Add special characters.",
    "noCommon": "Avoid common passwords like 'password' or 'qwerty'.",
    "noSequential": "Avoid repeated characters and sequences like '123' or 'abc'.",
}


def level_for_percentage(percentage: float) -> StrengthLevel:
    """Map a criteria percentage to its strength tier.

    Lower bounds are inclusive: 50 is moderate, 70 strong, 85 very strong.
    """
    if percentage >= 85:
        return StrengthLevel.VERY_STRONG
    if percentage >= 70:
        return StrengthLevel.STRONG
    if percentage >= 50:
        return StrengthLevel.MODERATE
    return StrengthLevel.WEAK


def evaluate_password_strength(password: str) -> Optional[StrengthReport]:
    """Score a password against every criterion.

    Args:
        password: Password text, any length

    Returns:
        StrengthReport, or None for an empty password (nothing to display)
    """
    if not password:
        return None

    criteria = {name: predicate(password) for name, predicate, _ in CRITERIA}
    score = sum(1 for passed in criteria.values() if passed)
    percentage = score / len(CRITERIA) * 100

    return StrengthReport(
        criteria=criteria,
        score=score,
        percentage=percentage,
        level=level_for_percentage(percentage),
    )


def get_feedback(report: Optional[StrengthReport]) -> list[str]:
    """Suggestions for every unmet criterion, in criteria order."""
    if report is None:
        return []
    return [_SUGGESTIONS[name] for name in report.unmet]


def check_password_strength(password: str) -> tuple[str, list[str]]:
    """Return (strength label, suggestions) for console display."""
    report = evaluate_password_strength(password)
    if report is None:
        return "", ["Enter a password to analyze."]
    return report.level.label, get_feedback(report)
