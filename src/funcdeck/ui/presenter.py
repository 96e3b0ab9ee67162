"""Render invocation outcomes for display."""

from __future__ import annotations

from funcdeck.invocation.outcome import Cancelled, Failure, InvocationOutcome, Success


class ResultPresenter:
    """Turns any outcome into text; never inspects raw return values."""

    def render(self, outcome: InvocationOutcome | Cancelled) -> str:
        if isinstance(outcome, Success):
            return f"{outcome.function_name}: {outcome.text}"
        if isinstance(outcome, Failure):
            return outcome.summary
        return f"{outcome.function_name}: cancelled"
