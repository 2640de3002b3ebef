"""Result types shared by the strength evaluator, breach checker and controllers.

Every value here is immutable once constructed. A fresh report or result is
built for each evaluation; nothing is cached or persisted.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


BREACH_CHECK_ERROR_MESSAGE = "Unable to check breach database"


class StrengthLevel(str, Enum):
    """Strength tier derived from the criteria percentage."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]

    @property
    def color(self) -> str:
        """Display colour hint for meters and badges."""
        return _LEVEL_COLORS[self]


_LEVEL_LABELS = {
    StrengthLevel.WEAK: "Weak",
    StrengthLevel.MODERATE: "Moderate",
    StrengthLevel.STRONG: "Strong",
    StrengthLevel.VERY_STRONG: "Very Strong",
}

_LEVEL_COLORS = {
    StrengthLevel.WEAK: "red",
    StrengthLevel.MODERATE: "yellow",
    StrengthLevel.STRONG: "blue",
    StrengthLevel.VERY_STRONG: "green",
}


@dataclass(frozen=True)
class StrengthReport:
    """Outcome of one strength evaluation.

    Attributes:
        criteria: Read-only mapping of criterion name to result, in
            declaration order
        score: Number of criteria met
        percentage: score / number of criteria * 100
        level: Tier derived from percentage
    """

    criteria: Mapping[str, bool]
    score: int
    percentage: float
    level: StrengthLevel

    def __post_init__(self) -> None:
        if not isinstance(self.criteria, MappingProxyType):
            object.__setattr__(self, "criteria", MappingProxyType(dict(self.criteria)))

    @property
    def met(self) -> list[str]:
        return [name for name, passed in self.criteria.items() if passed]

    @property
    def unmet(self) -> list[str]:
        return [name for name, passed in self.criteria.items() if not passed]

    @property
    def total(self) -> int:
        return len(self.criteria)

    def to_dict(self) -> dict[str, Any]:
        return {
            "criteria": dict(self.criteria),
            "score": self.score,
            "total": self.total,
            "percentage": self.percentage,
            "level": self.level.value,
        }


class BreachStatus(str, Enum):
    """Tag of a BreachResult."""

    NOT_CHECKED = "not_checked"
    CHECKING = "checking"
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class BreachResult:
    """Outcome of a breach lookup.

    Exactly one status holds. count is only set for FOUND and reason
    only for ERROR; use the classmethod constructors rather than building
    instances by hand.
    """

    status: BreachStatus
    count: Optional[int] = None
    reason: Optional[str] = None

    @classmethod
    def not_checked(cls) -> "BreachResult":
        return cls(BreachStatus.NOT_CHECKED)

    @classmethod
    def checking(cls) -> "BreachResult":
        return cls(BreachStatus.CHECKING)

    @classmethod
    def found(cls, count: int) -> "BreachResult":
        if count < 0:
            raise ValueError("Breach count cannot be negative")
        return cls(BreachStatus.FOUND, count=count)

    @classmethod
    def not_found(cls) -> "BreachResult":
        return cls(BreachStatus.NOT_FOUND)

    @classmethod
    def error(cls, reason: str = BREACH_CHECK_ERROR_MESSAGE) -> "BreachResult":
        return cls(BreachStatus.ERROR, reason=reason)

    @property
    def is_breached(self) -> bool:
        return self.status is BreachStatus.FOUND

    @property
    def is_final(self) -> bool:
        """True once the lookup has produced an answer (or failed)."""
        return self.status in (BreachStatus.FOUND, BreachStatus.NOT_FOUND, BreachStatus.ERROR)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "count": self.count,
            "reason": self.reason,
        }
