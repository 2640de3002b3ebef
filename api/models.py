"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field

from core.results import BreachResult, BreachStatus, StrengthLevel, StrengthReport
from breach_check import describe_breach_result


MAX_PASSWORD_INPUT_LENGTH = 1024


class PasswordRequest(BaseModel):
    """Request model carrying the password to analyze.

    An empty password is accepted and yields an empty analysis.
    """
    password: str = Field(..., max_length=MAX_PASSWORD_INPUT_LENGTH, description="Password to analyze")


class PasswordCheckRequest(PasswordRequest):
    """Request model for combined strength and breach check."""
    check_breach: bool = Field(default=True, description="Check against breach database")


class StrengthReportModel(BaseModel):
    """Strength report as returned by the API."""
    criteria: dict[str, bool]
    score: int
    total: int
    percentage: float
    level: StrengthLevel
    label: str
    color: str

    @classmethod
    def from_report(cls, report: Optional[StrengthReport]) -> Optional["StrengthReportModel"]:
        if report is None:
            return None
        return cls(
            **report.to_dict(),
            label=report.level.label,
            color=report.level.color,
        )


class BreachCheckResponse(BaseModel):
    """Response model for breach check."""
    status: BreachStatus
    count: Optional[int] = None
    is_breached: bool
    message: str

    @classmethod
    def from_result(cls, result: BreachResult) -> "BreachCheckResponse":
        return cls(
            status=result.status,
            count=result.count,
            is_breached=result.is_breached,
            message=describe_breach_result(result),
        )


class StrengthResponse(BaseModel):
    """Response model for strength-only check."""
    report: Optional[StrengthReportModel] = None
    feedback: list[str]


class PasswordCheckResponse(BaseModel):
    """Response model for combined password check."""
    strength: Optional[StrengthReportModel] = None
    feedback: list[str]
    breach: BreachCheckResponse
