"""scalaropt - one-dimensional minimization with step-by-step traces."""

__version__ = "0.1.0"

from .catalog import Custom, Objective, build_function, derivatives_for, resolve_objective
from .config import SearchConfig
from .differentiate import build_derivatives, central_first, central_second
from .errors import InvalidExpression, PreconditionViolation, ScalarOptError
from .logging import configure_logging, get_logger, set_log_level
from .sampling import sample, sample_around
from .search import (
    SearchResult,
    Status,
    bisection_search,
    dichotomous_search,
    fibonacci_search,
    fibonacci_sequence,
    golden_section_search,
    newton_search,
    run_config,
    run_search,
    sequential_search,
)

__all__ = [
    "Custom",
    "InvalidExpression",
    "Objective",
    "PreconditionViolation",
    "ScalarOptError",
    "SearchConfig",
    "SearchResult",
    "Status",
    "bisection_search",
    "build_derivatives",
    "build_function",
    "central_first",
    "central_second",
    "configure_logging",
    "derivatives_for",
    "dichotomous_search",
    "fibonacci_search",
    "fibonacci_sequence",
    "get_logger",
    "golden_section_search",
    "newton_search",
    "resolve_objective",
    "run_config",
    "run_search",
    "sample",
    "sample_around",
    "sequential_search",
    "set_log_level",
]
