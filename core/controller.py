"""Password analysis controller.

Drives both evaluators for a front end that reports every password change:
strength is evaluated immediately, the breach lookup runs after a quiet
period. Each change bumps a generation counter; a breach result is applied
only if its generation is still current, so a slow answer for an older
password never replaces the state shown for a newer one.

Must be used from within a running asyncio event loop.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Awaitable, Callable, Optional

from core.config import BREACH_CHECK_MIN_LENGTH, DEBOUNCE_SECONDS
from core.results import BreachResult, StrengthReport
from breach_check import BreachChecker
from password_checker import evaluate_password_strength


logger = logging.getLogger(__name__)

BreachCheck = Callable[[str], Awaitable[BreachResult]]


@dataclass(frozen=True)
class AnalysisState:
    """Snapshot of what a front end should display."""

    generation: int = 0
    strength: Optional[StrengthReport] = None
    breach: BreachResult = BreachResult.not_checked()


class AnalysisController:
    """Debounced, latest-wins coordinator for the two evaluators."""

    def __init__(
        self,
        breach_check: Optional[BreachCheck] = None,
        debounce_seconds: float = DEBOUNCE_SECONDS,
        min_breach_length: int = BREACH_CHECK_MIN_LENGTH,
        on_update: Optional[Callable[[AnalysisState], None]] = None,
    ):
        """Initialize controller.

        Args:
            breach_check: Coroutine function returning a BreachResult;
                defaults to BreachChecker().check
            debounce_seconds: Quiet period before a breach check starts
            min_breach_length: Shorter passwords are never breach checked
            on_update: Called with the new state after every change
        """
        self._breach_check = breach_check or BreachChecker(min_length=min_breach_length).check
        self.debounce_seconds = debounce_seconds
        self.min_breach_length = min_breach_length
        self._on_update = on_update
        self._generation = 0
        self._pending: Optional[asyncio.Task] = None
        self.state = AnalysisState()

    @property
    def generation(self) -> int:
        return self._generation

    def on_password_change(self, password: str) -> AnalysisState:
        """Handle new password text.

        Supersedes any pending or in-flight breach check, publishes the
        new strength report right away and schedules a fresh breach check
        when the password is long enough.
        """
        self._generation += 1
        generation = self._generation
        self._cancel_pending()

        self._publish(AnalysisState(
            generation=generation,
            strength=evaluate_password_strength(password),
            breach=BreachResult.not_checked(),
        ))

        if password and len(password) >= self.min_breach_length:
            self._pending = asyncio.get_running_loop().create_task(
                self._debounced_check(password, generation)
            )

        return self.state

    def apply_breach_result(self, generation: int, result: BreachResult) -> bool:
        """Apply a breach result if it belongs to the current password.

        Returns:
            True if applied, False if the result was stale and discarded
        """
        if generation != self._generation:
            logger.debug("Discarding breach result for stale generation %d (current %d)",
                         generation, self._generation)
            return False
        self._publish(replace(self.state, breach=result))
        return True

    async def wait_for_breach_check(self) -> AnalysisState:
        """Wait until the latest breach check (if any) settles."""
        while self._pending is not None and not self._pending.done():
            task = self._pending
            try:
                await task
            except asyncio.CancelledError:
                # Superseded by a newer change; re-raise only if we were cancelled
                if not task.cancelled():
                    raise
        return self.state

    async def close(self) -> None:
        """Cancel any pending breach check."""
        task = self._pending
        self._cancel_pending()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                pass

    async def _debounced_check(self, password: str, generation: int) -> None:
        await asyncio.sleep(self.debounce_seconds)
        if not self.apply_breach_result(generation, BreachResult.checking()):
            return
        result = await self._breach_check(password)
        self.apply_breach_result(generation, result)

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    def _publish(self, state: AnalysisState) -> None:
        self.state = state
        if self._on_update is not None:
            self._on_update(state)
