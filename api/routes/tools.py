"""Password tools endpoints.

Public endpoints for strength scoring and breach checking.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_breach_checker
from api.models import (
    PasswordRequest,
    PasswordCheckRequest,
    PasswordCheckResponse,
    StrengthReportModel,
    StrengthResponse,
    BreachCheckResponse,
)
from core.results import BreachResult
from breach_check import BreachChecker
from password_checker import evaluate_password_strength, get_feedback


router = APIRouter(tags=["Password Tools"])


@router.post("/strength", response_model=StrengthResponse)
async def check_strength(request: PasswordRequest):
    """Score password strength offline."""
    report = evaluate_password_strength(request.password)
    return StrengthResponse(
        report=StrengthReportModel.from_report(report),
        feedback=get_feedback(report),
    )


@router.post("/breach-check", response_model=BreachCheckResponse)
async def check_breach_only(
    request: PasswordRequest,
    checker: BreachChecker = Depends(get_breach_checker),
):
    """Check if password appears in known data breaches."""
    result = await checker.check(request.password)
    return BreachCheckResponse.from_result(result)


@router.post("/check", response_model=PasswordCheckResponse)
async def check_password(
    request: PasswordCheckRequest,
    checker: BreachChecker = Depends(get_breach_checker),
):
    """Check password strength and breach status.

    A failed breach lookup is reported in the breach section; the strength
    report is returned either way.
    """
    report = evaluate_password_strength(request.password)

    if request.check_breach:
        breach = await checker.check(request.password)
    else:
        breach = BreachResult.not_checked()

    return PasswordCheckResponse(
        strength=StrengthReportModel.from_report(report),
        feedback=get_feedback(report),
        breach=BreachCheckResponse.from_result(breach),
    )
