"""
Recover a target string one character at a time.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from hillclimb.engine.provider import Provider
from hillclimb.foundation.exceptions import ProblemDefinitionError

DEFAULT_GENES = (
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
    "!@#$%^&*()-_=+[{]};:'\",<.>/?|\\`~ "
)


class StringGuesser(Provider[str, str]):
    """
    Guess a fixed string.

    Candidates are strings of ``len(target)`` characters drawn from ``genes``.
    Fitness is the fraction of positions that match the target.
    """

    def __init__(
        self,
        target: str,
        genes: Sequence[str] | str = DEFAULT_GENES,
        rng: np.random.Generator | int | None = None,
    ) -> None:
        self.target = str(target)
        self.genes: tuple[str, ...] = tuple(genes)
        self.rng = np.random.default_rng(rng)
        if not self.target:
            raise ProblemDefinitionError("StringGuesser target must not be empty.", target=self.target)
        if not self.genes:
            raise ProblemDefinitionError("StringGuesser needs at least one gene.", genes=self.genes)
        if any(len(gene) != 1 for gene in self.genes):
            raise ProblemDefinitionError("StringGuesser genes must be single characters.", genes=self.genes)
        missing = sorted(set(self.target) - set(self.genes))
        if missing:
            raise ProblemDefinitionError(
                f"Target contains characters outside the gene set: {''.join(missing)!r}.",
                target=self.target,
                missing=missing,
            )

    def with_genes(self, genes: Sequence[str] | str) -> StringGuesser:
        return StringGuesser(self.target, genes, rng=self.rng)

    def with_target(self, target: str) -> StringGuesser:
        return StringGuesser(target, self.genes, rng=self.rng)

    def _random_gene(self) -> str:
        return self.genes[int(self.rng.integers(len(self.genes)))]

    def generate(self) -> str:
        idx = self.rng.integers(len(self.genes), size=len(self.target))
        return "".join(self.genes[i] for i in idx)

    def fitness(self, member: str) -> float:
        matches = sum(1 for expected, got in zip(self.target, member) if expected == got)
        return matches / len(self.target)

    def mutate(self, member: str) -> str:
        idx = int(self.rng.integers(len(member)))
        new_gene = self._random_gene()
        alternate = self._random_gene()
        # a redraw equal to the current character falls back to the alternate
        gene = alternate if member[idx] == new_gene else new_gene
        return member[:idx] + gene + member[idx + 1 :]

    def describe(self) -> dict[str, int | str]:
        return {"target": self.target, "length": len(self.target), "n_genes": len(self.genes)}


__all__ = ["DEFAULT_GENES", "StringGuesser"]
