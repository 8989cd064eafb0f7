"""One-dimensional minimization methods and the name-based dispatcher.

Example
-------
>>> from scalaropt.search import run_search
>>> res = run_search("golden", lambda x: (x - 2) ** 2 + 1, bounds=(-2, 5))
>>> round(res.x, 2)
2.0
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from ..config import SearchConfig
from ..differentiate import build_derivatives
from ..errors import PreconditionViolation
from .bisection import bisection_search
from .core import (
    BisectionStep,
    DichotomousStep,
    FibonacciStep,
    GoldenStep,
    IterationRecord,
    NewtonStep,
    ScalarFunction,
    SearchResult,
    SequentialStep,
    Status,
)
from .fibonacci import fibonacci_search, fibonacci_sequence
from .golden import PHI, golden_section_search
from .newton import newton_search
from .sequential import dichotomous_search, sequential_search

Derivatives = Sequence[Optional[ScalarFunction]]


def _bounds(bounds: Optional[Sequence[float]]) -> tuple[float, float]:
    if bounds is None or len(bounds) != 2:
        raise PreconditionViolation("Bracket methods need bounds=(a, b).")
    return bounds[0], bounds[1]


def _derivs(
    objective: ScalarFunction, derivatives: Optional[Derivatives]
) -> tuple[ScalarFunction, ScalarFunction]:
    numeric = build_derivatives(objective)
    if derivatives is None:
        return numeric
    first = derivatives[0] if len(derivatives) > 0 else None
    second = derivatives[1] if len(derivatives) > 1 else None
    return first or numeric[0], second or numeric[1]


def _run_golden(objective, derivatives, bounds, x0, config):
    a, b = _bounds(bounds)
    return golden_section_search(objective, a, b, config.tol, config.max_iter)


def _run_fibonacci(objective, derivatives, bounds, x0, config):
    a, b = _bounds(bounds)
    return fibonacci_search(objective, a, b, config.n)


def _run_bisection(objective, derivatives, bounds, x0, config):
    a, b = _bounds(bounds)
    first, _ = _derivs(objective, derivatives)
    return bisection_search(objective, first, a, b, config.tol, config.max_iter)


def _run_newton(objective, derivatives, bounds, x0, config):
    if x0 is None:
        raise PreconditionViolation("Newton's method needs a starting point x0.")
    first, second = _derivs(objective, derivatives)
    return newton_search(objective, first, second, x0, config.tol, config.max_iter)


def _run_sequential(objective, derivatives, bounds, x0, config):
    a, b = _bounds(bounds)
    return sequential_search(
        objective, a, b, config.tol, config.max_iter, config.points
    )


def _run_dichotomous(objective, derivatives, bounds, x0, config):
    a, b = _bounds(bounds)
    return dichotomous_search(
        objective, a, b, config.tol, config.max_iter, config.delta
    )


_RUNNERS: dict[str, Callable[..., SearchResult]] = {
    "golden": _run_golden,
    "fibonacci": _run_fibonacci,
    "bisection": _run_bisection,
    "newton": _run_newton,
    "sequential": _run_sequential,
    "dichotomous": _run_dichotomous,
}


def run_config(
    config: SearchConfig,
    objective: ScalarFunction,
    derivatives: Optional[Derivatives] = None,
    *,
    bounds: Optional[Sequence[float]] = None,
    x0: Optional[float] = None,
) -> SearchResult:
    """Run the method described by ``config``.

    Unset configuration fields take the method defaults. Derivative-based
    methods fall back to central differences for any missing derivative.
    """
    config = config.with_defaults()
    return _RUNNERS[config.method](objective, derivatives, bounds, x0, config)


def run_search(
    method: str,
    objective: ScalarFunction,
    derivatives: Optional[Derivatives] = None,
    *,
    bounds: Optional[Sequence[float]] = None,
    x0: Optional[float] = None,
    tol: Optional[float] = None,
    max_iter: Optional[int] = None,
    **options: Any,
) -> SearchResult:
    """Run a search method by name.

    Parameters
    ----------
    method:
        One of ``"golden"``, ``"fibonacci"``, ``"bisection"``, ``"newton"``,
        ``"sequential"`` or ``"dichotomous"``.
    objective:
        Function to minimize.
    derivatives:
        Optional ``(first, second)`` derivative callables; either entry may be
        ``None``.
    bounds:
        Bracket ``(a, b)`` for bracket methods.
    x0:
        Starting point for Newton's method.
    tol, max_iter:
        Convergence tolerance and iteration budget.
    **options:
        Method-specific settings: ``n`` (Fibonacci), ``delta`` (dichotomous),
        ``points`` (sequential).

    Raises
    ------
    ValueError
        If the method name or a parameter is invalid.
    PreconditionViolation
        If the inputs violate the method's preconditions.
    """
    config = SearchConfig(
        method=method.lower(), tol=tol, max_iter=max_iter, **options
    )
    return run_config(config, objective, derivatives, bounds=bounds, x0=x0)


__all__ = [
    "BisectionStep",
    "DichotomousStep",
    "FibonacciStep",
    "GoldenStep",
    "IterationRecord",
    "NewtonStep",
    "PHI",
    "SearchResult",
    "SequentialStep",
    "Status",
    "bisection_search",
    "dichotomous_search",
    "fibonacci_search",
    "fibonacci_sequence",
    "golden_section_search",
    "newton_search",
    "run_config",
    "run_search",
    "sequential_search",
]
