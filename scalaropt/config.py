"""Search configuration and package-wide numeric defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .errors import PreconditionViolation

FD_STEP = 1e-6
STALL_THRESHOLD = 1e-12

DEFAULT_MAX_ITER = 60
DEFAULT_FIBONACCI_N = 20
DEFAULT_SEQUENTIAL_POINTS = 10
DEFAULT_SAMPLES = 300

DEFAULT_TOLERANCES: dict[str, float] = {
    "golden": 1e-3,
    "fibonacci": 1e-3,
    "bisection": 1e-6,
    "newton": 1e-6,
    "sequential": 1e-3,
    "dichotomous": 1e-3,
}

METHODS = tuple(DEFAULT_TOLERANCES)


@dataclass(frozen=True)
class SearchConfig:
    """
    Parameters for one invocation of a search method.

    Fields left as ``None`` are filled from the method defaults by
    :meth:`with_defaults`. Fields a method does not use are ignored.

    Args:
        method: Method name, one of :data:`METHODS`.
        tol: Convergence tolerance. Must be positive.
        max_iter: Iteration budget. Must be non-negative.
        n: Number of Fibonacci steps. Must be at least 2.
        delta: Half-distance between the dichotomous trial points.
        points: Number of grid intervals per sequential pass. At least 3.
    """

    method: str
    tol: Optional[float] = None
    max_iter: Optional[int] = None
    n: Optional[int] = None
    delta: Optional[float] = None
    points: Optional[int] = None

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(
                f"Unsupported search method {self.method!r}; expected one of {METHODS}."
            )
        if self.tol is not None and not self.tol > 0.0:
            raise PreconditionViolation("tol must be positive.")
        if self.max_iter is not None and self.max_iter < 0:
            raise PreconditionViolation("max_iter must be non-negative.")
        if self.n is not None and self.n < 2:
            raise PreconditionViolation("n must be at least 2.")
        if self.delta is not None and not self.delta > 0.0:
            raise PreconditionViolation("delta must be positive.")
        if self.points is not None and self.points < 3:
            raise PreconditionViolation("points must be at least 3.")

    def with_defaults(self) -> "SearchConfig":
        """Return a copy with every unset field replaced by its default."""
        tol = self.tol if self.tol is not None else DEFAULT_TOLERANCES[self.method]
        return replace(
            self,
            tol=tol,
            max_iter=self.max_iter if self.max_iter is not None else DEFAULT_MAX_ITER,
            n=self.n if self.n is not None else DEFAULT_FIBONACCI_N,
            delta=self.delta if self.delta is not None else 0.25 * tol,
            points=self.points if self.points is not None else DEFAULT_SEQUENTIAL_POINTS,
        )


__all__ = [
    "DEFAULT_FIBONACCI_N",
    "DEFAULT_MAX_ITER",
    "DEFAULT_SAMPLES",
    "DEFAULT_SEQUENTIAL_POINTS",
    "DEFAULT_TOLERANCES",
    "FD_STEP",
    "METHODS",
    "STALL_THRESHOLD",
    "SearchConfig",
]
