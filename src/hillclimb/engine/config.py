from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from hillclimb.foundation.exceptions import ConfigurationError
from hillclimb.foundation.observer import Observer


@dataclass(frozen=True)
class SearchConfig:
    """
    Options for a single hill-climbing run.

    ``max_iterations`` is ``None`` by default: the search keeps mutating until
    the provider's ``MAX_FITNESS`` is reached, however long that takes.
    """

    verbose: bool = False
    max_iterations: int | None = None
    validate_scores: bool = True
    observers: tuple[Observer, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.max_iterations is not None:
            if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int):
                raise ConfigurationError("max_iterations", self.max_iterations, "expected an integer or None")
            if self.max_iterations < 0:
                raise ConfigurationError("max_iterations", self.max_iterations, "must be non-negative")
        for obs in self.observers:
            if not isinstance(obs, Observer):
                raise ConfigurationError("observers", obs, "expected on_start/on_improvement/on_end callbacks")
        # lists are accepted
        object.__setattr__(self, "observers", tuple(self.observers))

    def with_options(self, **overrides: Any) -> SearchConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return {
            "verbose": self.verbose,
            "max_iterations": self.max_iterations,
            "validate_scores": self.validate_scores,
            "observers": [type(obs).__name__ for obs in self.observers],
        }


__all__ = ["SearchConfig"]
