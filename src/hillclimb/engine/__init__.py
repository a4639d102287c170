from .climber import HillClimber, climb
from .config import SearchConfig
from .provider import CandidateProvider, Provider
from .reporting import ReportingObserver, format_report
from .result import SearchResult

__all__ = [
    "HillClimber",
    "climb",
    "SearchConfig",
    "CandidateProvider",
    "Provider",
    "ReportingObserver",
    "format_report",
    "SearchResult",
]
