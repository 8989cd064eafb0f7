"""Core result and trace types shared across the search methods."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Tuple, Union

from ..errors import PreconditionViolation

ScalarFunction = Callable[[float], float]


class Status(Enum):
    """Terminal state of a search."""

    CONVERGED = "converged"
    MAX_ITER = "max_iter"
    NUMERICAL_STALL = "numerical_stall"


class _Record:
    def as_dict(self) -> dict[str, Any]:
        """Flat mapping suitable for a table row."""
        return asdict(self)


@dataclass(frozen=True)
class GoldenStep(_Record):
    iteration: int
    a: float
    b: float
    c: float
    d: float
    fc: float
    fd: float
    midpoint: float


@dataclass(frozen=True)
class FibonacciStep(_Record):
    iteration: int
    a: float
    b: float
    x1: float
    x2: float
    f1: float
    f2: float
    fib_k: int
    midpoint: float


@dataclass(frozen=True)
class BisectionStep(_Record):
    iteration: int
    a: float
    b: float
    c: float
    fc: float
    dfc: float
    error: float


@dataclass(frozen=True)
class NewtonStep(_Record):
    iteration: int
    x: float
    fx: float
    dfx: float
    d2fx: float
    step: float


@dataclass(frozen=True)
class DichotomousStep(_Record):
    iteration: int
    a: float
    b: float
    x1: float
    x2: float
    f1: float
    f2: float
    delta: float
    midpoint: float


@dataclass(frozen=True)
class SequentialStep(_Record):
    iteration: int
    a: float
    b: float
    x_best: float
    f_best: float
    h: float
    evaluations: int


IterationRecord = Union[
    GoldenStep,
    FibonacciStep,
    BisectionStep,
    NewtonStep,
    DichotomousStep,
    SequentialStep,
]


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of one search invocation.

    Attributes:
        x: Estimated minimizer (bracket midpoint for bracket methods, last
            iterate for Newton).
        fun: Objective value at ``x``.
        status: Why the loop ended.
        message: Human-readable explanation of ``status``.
        nit: Number of iteration records.
        nfev: Number of objective evaluations, including the final one at ``x``.
        history: Iteration records in order.
    """

    x: float
    fun: float
    status: Status
    message: str
    nit: int
    nfev: int
    history: Tuple[IterationRecord, ...] = ()

    @property
    def success(self) -> bool:
        return self.status is Status.CONVERGED

    def table(self) -> list[dict[str, Any]]:
        """History as a list of row mappings."""
        return [record.as_dict() for record in self.history]


class CountingFunction:
    """Wrap an objective and count its evaluations."""

    def __init__(self, fun: ScalarFunction) -> None:
        self.fun = fun
        self.calls = 0

    def __call__(self, x: float) -> float:
        self.calls += 1
        return self.fun(x)


def check_bracket(a: float, b: float) -> tuple[float, float]:
    """Validate a search bracket and return it as floats."""
    a = float(a)
    b = float(b)
    if not (math.isfinite(a) and math.isfinite(b)):
        raise PreconditionViolation("Bracket bounds must be finite numbers.")
    if not a < b:
        raise PreconditionViolation(
            f"Left bound a must be smaller than right bound b (got a={a}, b={b})."
        )
    return a, b


def check_max_iter(max_iter: int) -> int:
    if max_iter < 0:
        raise PreconditionViolation("max_iter must be non-negative.")
    return int(max_iter)


def check_tol(tol: float) -> float:
    if not tol > 0.0:
        raise PreconditionViolation("tol must be positive.")
    return float(tol)


__all__ = [
    "BisectionStep",
    "CountingFunction",
    "DichotomousStep",
    "FibonacciStep",
    "GoldenStep",
    "IterationRecord",
    "NewtonStep",
    "ScalarFunction",
    "SearchResult",
    "SequentialStep",
    "Status",
    "check_bracket",
    "check_max_iter",
    "check_tol",
]
