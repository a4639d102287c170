"""
hillclimb exception hierarchy.

Every error carries a human-readable message, an optional suggestion and a
details dict. All library-specific exceptions inherit from HillClimbError.

Example:
    try:
        best, score = HillClimber(provider).evolve()
    except HillClimbError as e:
        log.error("Search failed: %s", e.message)
"""

from __future__ import annotations

from typing import Any


class HillClimbError(Exception):
    """
    Base exception for all hillclimb errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(HillClimbError):
    """Raised when a search configuration value is invalid."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        message = f"Invalid value for '{field}': {value!r} ({reason})."
        super().__init__(message, f"Fix '{field}' in SearchConfig", {"field": field, "value": value})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(HillClimbError):
    """Base class for problem-related errors."""

    pass


class InvalidProblemError(ProblemError):
    """Raised when an unknown problem name is requested."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        if available:
            suggestion = f"Available problems: {', '.join(available)}"
        else:
            suggestion = "Use available_problem_names() to see registered problems."
        super().__init__(message, suggestion, {"problem": problem, "available": available or []})


class ProblemDefinitionError(ProblemError):
    """Raised when a provider describes an empty or malformed search space."""

    def __init__(self, message: str, **details: Any) -> None:
        suggestion = "Targets, alphabets and sizes must be non-empty"
        super().__init__(message, suggestion, dict(details))


# =============================================================================
# Runtime Errors
# =============================================================================


class SearchError(HillClimbError):
    """Raised when a search fails during execution."""

    pass


class InvalidScoreError(SearchError):
    """Raised when a provider returns a score outside [0, MAX_FITNESS]."""

    def __init__(self, score: float, max_fitness: float, member: Any = None) -> None:
        message = f"Fitness returned {score!r}, expected a finite value in [0, {max_fitness}]."
        suggestion = "Check your provider's fitness() function or raise its MAX_FITNESS"
        super().__init__(message, suggestion, {"score": score, "max_fitness": max_fitness, "member": member})


__all__ = [
    # Base
    "HillClimbError",
    # Configuration
    "ConfigurationError",
    # Problem
    "ProblemError",
    "InvalidProblemError",
    "ProblemDefinitionError",
    # Runtime
    "SearchError",
    "InvalidScoreError",
]
