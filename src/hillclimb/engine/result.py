from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

Member = TypeVar("Member")


@dataclass
class SearchResult(Generic[Member]):
    """Container returned by a hill-climbing run.

    Unpacks as the ``(best, score)`` pair::

        best, score = climber.run()
    """

    best: Member
    score: float
    iterations: int
    improvements: int
    elapsed: float
    converged: bool

    @property
    def pair(self) -> tuple[Member, float]:
        return self.best, self.score

    def __iter__(self) -> Iterator[Any]:
        return iter(self.pair)

    def summary(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "iterations": self.iterations,
            "improvements": self.improvements,
            "elapsed": self.elapsed,
            "converged": self.converged,
        }


__all__ = ["SearchResult"]
