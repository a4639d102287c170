import pytest

from hillclimb.foundation.exceptions import InvalidProblemError
from hillclimb.problems import (
    OneMaximizer,
    ProblemEntry,
    StringGuesser,
    available_problem_names,
    make_problem,
    register_problem,
)
from hillclimb.problems.registry import problem_entry


def test_available_problem_names():
    assert available_problem_names() == ("onemax", "string")


def test_make_problem_builds_providers():
    assert isinstance(make_problem("onemax", target=12), OneMaximizer)
    guesser = make_problem(" String ", target="abc")
    assert isinstance(guesser, StringGuesser)
    assert guesser.target == "abc"


def test_unknown_problem_lists_alternatives():
    with pytest.raises(InvalidProblemError) as excinfo:
        make_problem("knapsack")
    assert "knapsack" in str(excinfo.value)
    assert "onemax" in str(excinfo.value)
    assert excinfo.value.details["available"] == ["onemax", "string"]


def test_register_problem_adds_cli_entry(monkeypatch):
    from hillclimb.cli import build_parser
    from hillclimb.problems import registry

    monkeypatch.setattr(registry, "PROBLEMS", dict(registry.PROBLEMS))
    entry = ProblemEntry(
        name="tiny",
        factory=OneMaximizer,
        summary="Four bits.",
        add_arguments=lambda parser: None,
        kwargs_from_args=lambda args: {"target": 4, "rng": args.seed},
    )
    register_problem(entry)

    assert "tiny" in available_problem_names()
    assert make_problem("tiny", target=4).target == 4
    args = build_parser().parse_args(["tiny", "--seed", "1"])
    assert entry.kwargs_from_args(args) == {"target": 4, "rng": 1}


def test_register_problem_rejects_duplicates():
    entry = problem_entry("onemax")
    with pytest.raises(ValueError):
        register_problem(entry)


def test_entries_map_cli_arguments_to_factory_kwargs():
    from hillclimb.cli import build_parser

    args = build_parser().parse_args(["string", "--target", "abc", "--seed", "2"])
    kwargs = problem_entry("string").kwargs_from_args(args)
    assert kwargs["target"] == "abc"
    assert kwargs["rng"] == 2

    args = build_parser().parse_args(["onemax", "--size", "7"])
    assert problem_entry("onemax").kwargs_from_args(args) == {"target": 7, "rng": None}
