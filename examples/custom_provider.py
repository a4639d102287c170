"""
Plug a custom search space into the hill climber.

Candidates are integer vectors; the score counts positions equal to a hidden
target. MAX_FITNESS is overridden because the score is not normalized.
"""

from __future__ import annotations

import numpy as np

from hillclimb import HillClimber, Provider, SearchConfig


class VectorMatch(Provider[np.ndarray, int]):
    def __init__(self, target: np.ndarray, high: int, rng: np.random.Generator) -> None:
        self.target = np.asarray(target, dtype=int)
        self.high = int(high)
        self.rng = rng
        self.MAX_FITNESS = float(self.target.size)

    def generate(self) -> np.ndarray:
        return self.rng.integers(0, self.high, size=self.target.size)

    def fitness(self, member: np.ndarray) -> float:
        return float(np.count_nonzero(member == self.target))

    def mutate(self, member: np.ndarray) -> np.ndarray:
        child = member.copy()
        child[self.rng.integers(child.size)] = self.rng.integers(0, self.high)
        return child

    def display(self, member: np.ndarray) -> str:
        return " ".join(str(v) for v in member.tolist())


def main():
    rng = np.random.default_rng(7)
    provider = VectorMatch(rng.integers(0, 10, size=12), high=10, rng=rng)
    result = HillClimber(provider, SearchConfig(max_iterations=100_000)).run()
    print(provider.display(result.best), result.score, result.converged)


if __name__ == "__main__":
    main()
