"""
Candidate provider contract.

A provider defines the search space a hill climber walks through: how to draw
a random candidate, how to score one and how to derive a neighbour from it.
The engine treats candidates as opaque values and only ever hands them back to
the provider that produced them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Protocol, TypeVar, runtime_checkable

Member = TypeVar("Member")
Gene = TypeVar("Gene")

DEFAULT_MAX_FITNESS = 1.0


@runtime_checkable
class CandidateProvider(Protocol[Member]):
    MAX_FITNESS: float

    def generate(self) -> Member: ...

    def fitness(self, member: Member) -> float: ...

    def mutate(self, member: Member) -> Member: ...

    def display(self, member: Member) -> str: ...


class Provider(ABC, Generic[Member, Gene]):
    """Base class for candidate providers.

    Subclass this and implement ``generate``, ``fitness`` and ``mutate``.
    ``Gene`` names the alphabet candidates are built from; the engine never
    looks at it.

    **Contract:**

    - ``fitness`` is deterministic and returns a value in ``[0, MAX_FITNESS]``.
    - ``mutate`` returns a new candidate and leaves its argument untouched.
    - ``generate`` and ``mutate`` draw randomness only from the provider's own
      generator.

    Example::

        import numpy as np
        from hillclimb import HillClimber, Provider

        class AllZeros(Provider[np.ndarray, int]):
            def __init__(self, n: int, rng: np.random.Generator):
                self.n = n
                self.rng = rng

            def generate(self):
                return self.rng.integers(0, 2, size=self.n)

            def fitness(self, member):
                return float(np.count_nonzero(member == 0)) / self.n

            def mutate(self, member):
                child = member.copy()
                i = self.rng.integers(self.n)
                child[i] = 1 - child[i]
                return child

        best, score = HillClimber(AllZeros(16, np.random.default_rng(0))).evolve()
    """

    MAX_FITNESS: float = DEFAULT_MAX_FITNESS
    """Score at which the search space counts as solved.  Default: ``1.0``."""

    @abstractmethod
    def generate(self) -> Member:
        """Draw one random candidate from the search space."""

    @abstractmethod
    def fitness(self, member: Member) -> float:
        """Score ``member``; higher is better."""

    @abstractmethod
    def mutate(self, member: Member) -> Member:
        """Return a new candidate one small perturbation away from ``member``."""

    def display(self, member: Member) -> str:
        return str(member)


__all__ = ["CandidateProvider", "Provider", "Member", "Gene", "DEFAULT_MAX_FITNESS"]
