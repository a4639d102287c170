"""
Progress lines for verbose runs.
"""

from __future__ import annotations

import logging
from typing import Any

from hillclimb.engine.provider import CandidateProvider
from hillclimb.foundation.observer import RunContext

REPORT_LOGGER_NAME = "hillclimb.report"


def format_elapsed(seconds: float) -> str:
    """Render a duration with the largest unit that keeps it above one."""
    seconds = max(float(seconds), 0.0)
    if seconds == 0.0:
        return "0ns"
    if seconds < 1e-6:
        return f"{seconds * 1e9:.0f}ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


def format_report(text: str, score: float, elapsed: float) -> str:
    """
    One tab-separated progress line: candidate, score to 4 decimals, elapsed time.

    Parameters
    ----------
    text : str
        Textual form of the candidate.
    score : float
        Fitness of the candidate.
    elapsed : float
        Seconds since the run started.
    """
    return f"{text}\t{score:.4f}\t{format_elapsed(elapsed)}"


class ReportingObserver:
    """Log a progress line for the initial candidate and every accepted improvement."""

    def __init__(
        self,
        provider: CandidateProvider[Any],
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        self.provider = provider
        self.logger = logger or logging.getLogger(REPORT_LOGGER_NAME)
        self.level = level

    def on_start(self, ctx: RunContext) -> None:
        return None

    def on_improvement(self, step: int, member: Any, score: float, elapsed: float) -> None:
        self.logger.log(self.level, "%s", format_report(self.provider.display(member), score, elapsed))

    def on_end(self, result: Any) -> None:
        return None


__all__ = ["REPORT_LOGGER_NAME", "format_elapsed", "format_report", "ReportingObserver"]
