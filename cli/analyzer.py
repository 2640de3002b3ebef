"""Password analysis CLI flows.

Renders strength reports and breach results to the console and runs a
single analysis through the AnalysisController.
"""

import asyncio
from typing import Optional

from core.controller import AnalysisController, AnalysisState
from core.results import BreachResult, BreachStatus, StrengthReport
from breach_check import describe_breach_result
from password_checker import CRITERIA_LABELS, get_feedback

from cli.prompts import prompt_for_password


METER_WIDTH = 28


def render_strength(report: Optional[StrengthReport]) -> list[str]:
    """Format a strength report as console lines."""
    if report is None:
        return ["Enter a password to analyze its strength and check for breaches."]

    filled = round(report.percentage / 100 * METER_WIDTH)
    lines = [
        f"Strength Score: {report.level.label}",
        f"[{'#' * filled}{'-' * (METER_WIDTH - filled)}] {report.score}/{report.total} criteria met",
        "",
        "Security Criteria:",
    ]
    for name, passed in report.criteria.items():
        mark = "x" if passed else " "
        lines.append(f"  [{mark}] {CRITERIA_LABELS[name]}")

    feedback = get_feedback(report)
    if feedback:
        lines.append("")
        lines.append("Suggestions:")
        lines.extend(f"  - {tip}" for tip in feedback)
    return lines


def render_breach(result: BreachResult) -> list[str]:
    """Format a breach result as console lines."""
    if result.status is BreachStatus.NOT_CHECKED:
        return []

    lines = ["Breach Database Check:"]
    if result.status is BreachStatus.FOUND:
        lines.append("  Password Compromised!")
        lines.append(f"  This password has appeared {result.count:,} times in data breaches.")
        lines.append("  Do not use this password. Choose a unique password instead.")
    elif result.status is BreachStatus.ERROR:
        lines.append(f"  Warning: {describe_breach_result(result)}")
    else:
        lines.append(f"  {describe_breach_result(result)}")
    return lines


def _print_state(state: AnalysisState) -> None:
    if state.breach.status is BreachStatus.CHECKING:
        print(describe_breach_result(state.breach))


async def analyze_password(password: str, debounce_seconds: float = 0.0) -> AnalysisState:
    """Run both evaluators for one password and return the settled state."""
    controller = AnalysisController(debounce_seconds=debounce_seconds, on_update=_print_state)
    try:
        controller.on_password_change(password)
        return await controller.wait_for_breach_check()
    finally:
        await controller.close()


def analyze_password_flow(show_password: bool = False) -> None:
    """Prompt for a password, then display its strength and breach status."""
    print("\n--- Analyze a Password ---")

    pwd = prompt_for_password(show_password)
    if pwd is None:
        print("No password entered.")
        return

    state = asyncio.run(analyze_password(pwd))

    print()
    for line in render_strength(state.strength):
        print(line)

    breach_lines = render_breach(state.breach)
    if breach_lines:
        print()
        for line in breach_lines:
            print(line)
