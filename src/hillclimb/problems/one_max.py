from __future__ import annotations

import numbers

import numpy as np

from hillclimb.engine.provider import Provider
from hillclimb.foundation.exceptions import ProblemDefinitionError


def bits_to_str(bits: np.ndarray) -> str:
    """Render a bit vector as '0'/'1' characters in index order."""
    return "".join("1" if b else "0" for b in np.asarray(bits).tolist())


class OneMaximizer(Provider[np.ndarray, int]):
    """
    Maximize the number of set bits in a vector of ``target`` bits.
    Fitness is the popcount divided by ``target``.
    """

    genes = (1, 0)

    def __init__(self, target: int = 100, rng: np.random.Generator | int | None = None) -> None:
        if isinstance(target, bool) or not isinstance(target, numbers.Integral) or target <= 0:
            raise ProblemDefinitionError("OneMaximizer target must be a positive integer.", target=target)
        self.target = int(target)
        self.rng = np.random.default_rng(rng)

    def generate(self) -> np.ndarray:
        return self.rng.integers(0, 2, size=self.target, dtype=np.int8)

    def fitness(self, member: np.ndarray) -> float:
        return float(np.count_nonzero(member)) / self.target

    def mutate(self, member: np.ndarray) -> np.ndarray:
        child = np.array(member, dtype=np.int8, copy=True)
        idx = int(self.rng.integers(self.target))
        child[idx] = 1 - child[idx]
        return child

    def display(self, member: np.ndarray) -> str:
        return bits_to_str(member)

    def describe(self) -> dict[str, int]:
        return {"target": self.target}


__all__ = ["OneMaximizer", "bits_to_str"]
