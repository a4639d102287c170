from .engine import (
    CandidateProvider,
    HillClimber,
    Provider,
    ReportingObserver,
    SearchConfig,
    SearchResult,
    climb,
    format_report,
)
from .foundation.exceptions import (
    ConfigurationError,
    HillClimbError,
    InvalidProblemError,
    InvalidScoreError,
    ProblemDefinitionError,
    ProblemError,
    SearchError,
)
from .foundation.logging import configure_hillclimb_logging
from .foundation.observer import CompositeObserver, NoOpObserver, Observer, RunContext
from .problems import (
    OneMaximizer,
    ProblemEntry,
    StringGuesser,
    available_problem_names,
    make_problem,
    register_problem,
)

__all__ = [
    "CandidateProvider",
    "HillClimber",
    "Provider",
    "ReportingObserver",
    "SearchConfig",
    "SearchResult",
    "climb",
    "format_report",
    "ConfigurationError",
    "HillClimbError",
    "InvalidProblemError",
    "InvalidScoreError",
    "ProblemDefinitionError",
    "ProblemError",
    "SearchError",
    "configure_hillclimb_logging",
    "CompositeObserver",
    "NoOpObserver",
    "Observer",
    "RunContext",
    "OneMaximizer",
    "ProblemEntry",
    "StringGuesser",
    "available_problem_names",
    "make_problem",
    "register_problem",
]
