"""Sampling-based bracket searches: uniform sequential search and dichotomous search.

Sequential search evaluates an evenly spaced grid on the current bracket and
shrinks the bracket to the two grid neighbours of the best sample.
Dichotomous search evaluates a pair of points straddling the midpoint and
discards the half that cannot hold the minimum.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..errors import PreconditionViolation
from ..logging import get_logger
from .core import (
    CountingFunction,
    DichotomousStep,
    ScalarFunction,
    SearchResult,
    SequentialStep,
    Status,
    check_bracket,
    check_max_iter,
    check_tol,
)

logger = get_logger(__name__)


def sequential_search(
    fun: ScalarFunction,
    a: float,
    b: float,
    tol: float = 1e-3,
    max_iter: int = 100,
    points: int = 10,
) -> SearchResult:
    """Minimize by repeated uniform grid sampling.

    Each pass evaluates ``points + 1`` samples on ``[a, b]``. The first
    sample with the smallest value wins and the next bracket spans its two
    neighbours, so the bracket shrinks by a factor ``2 / points`` per pass.
    """
    a, b = check_bracket(a, b)
    tol = check_tol(tol)
    max_iter = check_max_iter(max_iter)
    if points < 3:
        raise PreconditionViolation("Sequential search needs at least 3 grid intervals.")
    f = CountingFunction(fun)
    history: list[SequentialStep] = []
    status = Status.MAX_ITER
    message = "Maximum iterations reached."

    for iteration in range(1, max_iter + 1):
        xs = np.linspace(a, b, points + 1)
        values = [f(float(x)) for x in xs]
        # undefined samples rank last
        ranked = [math.inf if math.isnan(v) else v for v in values]
        best = 0
        for i in range(1, len(ranked)):
            if ranked[i] < ranked[best]:
                best = i
        h = (b - a) / points
        history.append(
            SequentialStep(iteration, a, b, float(xs[best]), values[best], h, f.calls)
        )
        logger.debug("sequential %d: [%g, %g] best x=%g", iteration, a, b, xs[best])
        if abs(b - a) < tol:
            status = Status.CONVERGED
            message = "Bracket width below tolerance."
            break
        a, b = float(xs[max(best - 1, 0)]), float(xs[min(best + 1, points)])

    x_opt = (a + b) / 2
    f_opt = f(x_opt)
    logger.info("sequential finished: %s after %d iterations, x=%g", status.value, len(history), x_opt)
    return SearchResult(
        x=x_opt,
        fun=f_opt,
        status=status,
        message=message,
        nit=len(history),
        nfev=f.calls,
        history=tuple(history),
    )


def dichotomous_search(
    fun: ScalarFunction,
    a: float,
    b: float,
    tol: float = 1e-3,
    max_iter: int = 100,
    delta: Optional[float] = None,
) -> SearchResult:
    """Minimize by probing ``mid - delta`` and ``mid + delta`` each pass.

    ``delta`` defaults to ``tol / 4`` and is capped at a quarter of the
    current bracket so that every pass shrinks the bracket.
    """
    a, b = check_bracket(a, b)
    tol = check_tol(tol)
    max_iter = check_max_iter(max_iter)
    if delta is None:
        delta = 0.25 * tol
    if not delta > 0.0:
        raise PreconditionViolation("delta must be positive.")
    f = CountingFunction(fun)
    history: list[DichotomousStep] = []
    status = Status.MAX_ITER
    message = "Maximum iterations reached."

    for iteration in range(1, max_iter + 1):
        mid = (a + b) / 2
        d = min(delta, 0.25 * (b - a))
        x1 = mid - d
        x2 = mid + d
        f1 = f(x1)
        f2 = f(x2)
        history.append(DichotomousStep(iteration, a, b, x1, x2, f1, f2, d, mid))
        logger.debug("dichotomous %d: [%g, %g] f1=%g f2=%g", iteration, a, b, f1, f2)
        if abs(b - a) < tol:
            status = Status.CONVERGED
            message = "Bracket width below tolerance."
            break
        if f1 < f2:
            b = x2
        else:
            a = x1

    x_opt = (a + b) / 2
    f_opt = f(x_opt)
    logger.info("dichotomous finished: %s after %d iterations, x=%g", status.value, len(history), x_opt)
    return SearchResult(
        x=x_opt,
        fun=f_opt,
        status=status,
        message=message,
        nit=len(history),
        nfev=f.calls,
        history=tuple(history),
    )


__all__ = ["dichotomous_search", "sequential_search"]
