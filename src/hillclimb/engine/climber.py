"""
Single-lineage hill climbing.

The climber keeps exactly one incumbent candidate. Each iteration asks the
provider for a mutated challenger and keeps it only when it scores strictly
higher; ties leave the incumbent in place. The run ends once the incumbent
reaches the provider's ``MAX_FITNESS``.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Any, Generic, TypeVar

from hillclimb.engine.config import SearchConfig
from hillclimb.engine.provider import DEFAULT_MAX_FITNESS, CandidateProvider
from hillclimb.engine.reporting import ReportingObserver
from hillclimb.engine.result import SearchResult
from hillclimb.foundation.exceptions import InvalidScoreError
from hillclimb.foundation.logging import configure_hillclimb_logging
from hillclimb.foundation.observer import CompositeObserver, RunContext

Member = TypeVar("Member")


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def max_fitness_of(provider: CandidateProvider[Any]) -> float:
    return float(getattr(provider, "MAX_FITNESS", DEFAULT_MAX_FITNESS))


class HillClimber(Generic[Member]):
    """
    Drive a candidate provider toward its maximum score.

    Parameters
    ----------
    provider : CandidateProvider
        Supplies ``generate``, ``fitness``, ``mutate`` and ``display``.
    config : SearchConfig | None
        Options used by :meth:`run` when no config is passed. :meth:`evolve`
        ignores it and always runs with ``SearchConfig()``.
    """

    def __init__(self, provider: CandidateProvider[Member], config: SearchConfig | None = None) -> None:
        self.provider = provider
        self.config = config or SearchConfig()

    def evolve(self) -> tuple[Member, float]:
        """Run with the default ``SearchConfig()`` and return ``(best, score)``."""
        return self.run(SearchConfig()).pair

    def evolve_with_config(self, config: SearchConfig) -> tuple[Member, float]:
        """Run with ``config`` and return ``(best, score)``."""
        return self.run(config).pair

    def run(self, config: SearchConfig | None = None) -> SearchResult[Member]:
        cfg = config or self.config
        if cfg.verbose:
            configure_hillclimb_logging(level=logging.INFO)
        provider = self.provider
        max_fitness = max_fitness_of(provider)
        observers = CompositeObserver(
            [ReportingObserver(provider) if cfg.verbose else None, *cfg.observers],
        )
        ctx = RunContext(provider=provider, config=cfg, provider_name=type(provider).__name__)

        start = time.perf_counter()
        observers.on_start(ctx)

        best = provider.generate()
        best_score = self._score(best, max_fitness, cfg)
        observers.on_improvement(0, best, best_score, 0.0)
        _logger().debug("%s: initial score %.4f", ctx.provider_name, best_score)

        iterations = 0
        improvements = 0
        while best_score < max_fitness:
            if cfg.max_iterations is not None and iterations >= cfg.max_iterations:
                _logger().warning(
                    "%s: stopped after %d iterations at score %.4f (max %.4f)",
                    ctx.provider_name,
                    iterations,
                    best_score,
                    max_fitness,
                )
                break
            iterations += 1
            challenger = provider.mutate(best)
            challenger_score = self._score(challenger, max_fitness, cfg)
            if challenger_score <= best_score:
                continue
            best, best_score = challenger, challenger_score
            improvements += 1
            observers.on_improvement(improvements, best, best_score, time.perf_counter() - start)

        result = SearchResult(
            best=best,
            score=best_score,
            iterations=iterations,
            improvements=improvements,
            elapsed=time.perf_counter() - start,
            converged=best_score >= max_fitness,
        )
        observers.on_end(result)
        _logger().debug(
            "%s: score %.4f after %d iterations (%d improvements)",
            ctx.provider_name,
            result.score,
            result.iterations,
            result.improvements,
        )
        return result

    def _score(self, member: Member, max_fitness: float, cfg: SearchConfig) -> float:
        score = float(self.provider.fitness(member))
        if cfg.validate_scores and not (math.isfinite(score) and 0.0 <= score <= max_fitness):
            raise InvalidScoreError(score, max_fitness, member)
        return score


def climb(provider: CandidateProvider[Member], config: SearchConfig | None = None) -> SearchResult[Member]:
    """
    Run a single hill-climbing search.

    Parameters
    ----------
    provider : CandidateProvider
        Search space to explore.
    config : SearchConfig | None
        Run options; defaults to ``SearchConfig()``.

    Returns
    -------
    SearchResult
        Best candidate, its score and run statistics.
    """
    return HillClimber(provider, config).run()


__all__ = ["HillClimber", "climb", "max_fitness_of"]
