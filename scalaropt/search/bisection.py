"""Bisection on the derivative sign."""

from __future__ import annotations

from ..errors import PreconditionViolation
from ..logging import get_logger
from .core import (
    BisectionStep,
    CountingFunction,
    ScalarFunction,
    SearchResult,
    Status,
    check_bracket,
    check_max_iter,
    check_tol,
)

logger = get_logger(__name__)


def bisection_search(
    fun: ScalarFunction,
    dfun: ScalarFunction,
    a: float,
    b: float,
    tol: float = 1e-6,
    max_iter: int = 100,
) -> SearchResult:
    """Locate a stationary point of ``fun`` by bisecting on ``dfun``.

    Requires ``dfun(a) * dfun(b) <= 0``. The loop stops once
    ``|dfun(c)| < tol`` or ``|b - a| < tol``.
    """
    a, b = check_bracket(a, b)
    tol = check_tol(tol)
    max_iter = check_max_iter(max_iter)
    if dfun(a) * dfun(b) > 0:
        raise PreconditionViolation(
            "The derivative must change sign on [a, b] for bisection."
        )
    f = CountingFunction(fun)
    history: list[BisectionStep] = []
    status = Status.MAX_ITER
    message = "Maximum iterations reached."

    for iteration in range(1, max_iter + 1):
        c = (a + b) / 2
        fc = f(c)
        dfc = dfun(c)
        history.append(BisectionStep(iteration, a, b, c, fc, dfc, abs(b - a)))
        logger.debug("bisection %d: [%g, %g] c=%g dfc=%g", iteration, a, b, c, dfc)
        if abs(dfc) < tol or abs(b - a) < tol:
            status = Status.CONVERGED
            message = (
                "Derivative below tolerance."
                if abs(dfc) < tol
                else "Bracket width below tolerance."
            )
            break
        if dfc > 0:
            b = c
        else:
            a = c

    x_opt = (a + b) / 2
    f_opt = f(x_opt)
    logger.info("bisection finished: %s after %d iterations, x=%g", status.value, len(history), x_opt)
    return SearchResult(
        x=x_opt,
        fun=f_opt,
        status=status,
        message=message,
        nit=len(history),
        nfev=f.calls,
        history=tuple(history),
    )


__all__ = ["bisection_search"]
