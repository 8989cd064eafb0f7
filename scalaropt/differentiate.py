"""Central-difference derivative estimators.

These are the fallback when an objective has no closed-form derivative, as
is the case for every custom formula. The step is fixed; there is no
adaptive refinement.
"""

from __future__ import annotations

from typing import Callable

from .config import FD_STEP

ScalarFunction = Callable[[float], float]


def _check_step(h: float) -> None:
    if h <= 0:
        raise ValueError("h must be positive")


def central_first(fun: ScalarFunction, h: float = FD_STEP) -> ScalarFunction:
    """Return ``x -> (f(x+h) - f(x-h)) / (2h)``."""
    _check_step(h)

    def first(x: float) -> float:
        return (fun(x + h) - fun(x - h)) / (2.0 * h)

    return first


def central_second(fun: ScalarFunction, h: float = FD_STEP) -> ScalarFunction:
    """Return ``x -> (f(x+h) - 2 f(x) + f(x-h)) / h**2``."""
    _check_step(h)

    def second(x: float) -> float:
        return (fun(x + h) - 2.0 * fun(x) + fun(x - h)) / (h**2)

    return second


def build_derivatives(
    fun: ScalarFunction, h: float = FD_STEP
) -> tuple[ScalarFunction, ScalarFunction]:
    """Numerically approximate the first and second derivative of ``fun``.

    Parameters
    ----------
    fun:
        Scalar objective.
    h:
        Perturbation size for both central differences.

    Returns
    -------
    tuple
        ``(first, second)`` derivative callables.
    """
    return central_first(fun, h), central_second(fun, h)


__all__ = ["ScalarFunction", "build_derivatives", "central_first", "central_second"]
