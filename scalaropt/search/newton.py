"""Newton's method for one-dimensional minimization."""

from __future__ import annotations

import math

from ..config import STALL_THRESHOLD
from ..logging import get_logger
from .core import (
    CountingFunction,
    NewtonStep,
    ScalarFunction,
    SearchResult,
    Status,
    check_max_iter,
    check_tol,
)

logger = get_logger(__name__)


def newton_search(
    fun: ScalarFunction,
    dfun: ScalarFunction,
    d2fun: ScalarFunction,
    x0: float,
    tol: float = 1e-6,
    max_iter: int = 100,
) -> SearchResult:
    """Newton iteration ``x <- x - f'(x) / f''(x)`` towards a stationary point.

    The iteration stops with :attr:`Status.NUMERICAL_STALL` when
    ``|f''(x)| < 1e-12``; the result then carries the last computed ``x``
    and the trace up to that point.
    """
    tol = check_tol(tol)
    max_iter = check_max_iter(max_iter)
    f = CountingFunction(fun)
    x = float(x0)
    history: list[NewtonStep] = []
    status = Status.MAX_ITER
    message = "Maximum iterations reached."

    for iteration in range(1, max_iter + 1):
        fx = f(x)
        dfx = dfun(x)
        d2fx = d2fun(x)
        step = dfx / d2fx if d2fx != 0 else math.nan
        history.append(NewtonStep(iteration, x, fx, dfx, d2fx, step))
        logger.debug("newton %d: x=%g f'=%g f''=%g", iteration, x, dfx, d2fx)
        if abs(dfx) < tol:
            status = Status.CONVERGED
            message = "Derivative below tolerance."
            break
        if abs(d2fx) < STALL_THRESHOLD:
            status = Status.NUMERICAL_STALL
            message = "Second derivative vanished; Newton's method cannot continue."
            logger.warning("newton stalled at x=%g (f''=%g)", x, d2fx)
            break
        x = x - step

    f_opt = f(x)
    logger.info("newton finished: %s after %d iterations, x=%g", status.value, len(history), x)
    return SearchResult(
        x=x,
        fun=f_opt,
        status=status,
        message=message,
        nit=len(history),
        nfev=f.calls,
        history=tuple(history),
    )


__all__ = ["newton_search"]
