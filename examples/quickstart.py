"""
Recover a string and fill a bit vector with the hill climber.
"""

from __future__ import annotations

from hillclimb import HillClimber, OneMaximizer, SearchConfig, StringGuesser, configure_hillclimb_logging


def main():
    configure_hillclimb_logging()

    guesser = StringGuesser("Hello, world!", rng=1)
    best, score = HillClimber(guesser).evolve_with_config(SearchConfig(verbose=True))
    print(f"string: {best!r} ({score})")

    result = HillClimber(OneMaximizer(200, rng=1)).run()
    print(f"onemax: {result.score} after {result.iterations} mutations, {result.improvements} improvements")


if __name__ == "__main__":
    main()
