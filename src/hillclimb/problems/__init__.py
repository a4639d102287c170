"""Example search spaces for the hill climber.

``StringGuesser`` recovers a target string, ``OneMaximizer`` sets every bit of
a fixed-length vector.
"""

from .one_max import OneMaximizer, bits_to_str
from .registry import ProblemEntry, available_problem_names, make_problem, register_problem
from .string_guess import DEFAULT_GENES, StringGuesser

__all__ = [
    "OneMaximizer",
    "bits_to_str",
    "available_problem_names",
    "make_problem",
    "ProblemEntry",
    "register_problem",
    "DEFAULT_GENES",
    "StringGuesser",
]
