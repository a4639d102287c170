from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hillclimb.engine.result import SearchResult


@dataclass
class RunContext:
    """
    Static context of a search run.
    Passed to on_start events.
    """

    provider: Any  # CandidateProvider instance
    config: Any  # SearchConfig
    provider_name: str = "unknown"


@runtime_checkable
class Observer(Protocol):
    """
    Lifecycle callbacks of a hill-climbing run.

    Observers are notified only at the initial candidate and at accepted
    improvements; rejected challengers are never reported.
    """

    def on_start(self, ctx: RunContext) -> None:
        """Called once, before the initial candidate is generated."""
        ...

    def on_improvement(self, step: int, member: Any, score: float, elapsed: float) -> None:
        """Called for the initial candidate (step 0) and every accepted challenger."""
        ...

    def on_end(self, result: SearchResult) -> None:
        """Called once when the loop terminates."""
        ...


class NoOpObserver:
    """Default observer that ignores every event."""

    def on_start(self, ctx: RunContext) -> None:
        return None

    def on_improvement(self, step: int, member: Any, score: float, elapsed: float) -> None:
        return None

    def on_end(self, result: SearchResult) -> None:
        return None


class CompositeObserver:
    """Fan-out lifecycle events to multiple observers."""

    def __init__(self, observers: Iterable[Observer | None]) -> None:
        self._observers = [obs for obs in observers if obs is not None]

    def __len__(self) -> int:
        return len(self._observers)

    def on_start(self, ctx: RunContext) -> None:
        for obs in self._observers:
            obs.on_start(ctx)

    def on_improvement(self, step: int, member: Any, score: float, elapsed: float) -> None:
        for obs in self._observers:
            obs.on_improvement(step, member, score, elapsed)

    def on_end(self, result: SearchResult) -> None:
        for obs in self._observers:
            obs.on_end(result)


__all__ = ["RunContext", "Observer", "NoOpObserver", "CompositeObserver"]
