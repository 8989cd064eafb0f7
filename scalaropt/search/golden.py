"""Golden-section search on a bracket."""

from __future__ import annotations

import math

from ..logging import get_logger
from .core import (
    CountingFunction,
    GoldenStep,
    ScalarFunction,
    SearchResult,
    Status,
    check_bracket,
    check_max_iter,
    check_tol,
)

logger = get_logger(__name__)

PHI = (1 + math.sqrt(5)) / 2


def golden_section_search(
    fun: ScalarFunction,
    a: float,
    b: float,
    tol: float = 1e-3,
    max_iter: int = 100,
) -> SearchResult:
    """Minimize a unimodal function on ``[a, b]`` by golden-section search.

    Each pass keeps the sub-bracket whose interior point has the smaller
    value and reuses the surviving interior evaluation, so only one new
    evaluation is needed per pass. On ties the left part is discarded.

    Parameters
    ----------
    fun:
        Objective function.
    a, b:
        Bracket with ``a < b``.
    tol:
        Stop once ``|b - a| < tol``.
    max_iter:
        Maximum number of passes.

    Returns
    -------
    SearchResult
        ``x`` is the midpoint of the final bracket.
    """
    a, b = check_bracket(a, b)
    tol = check_tol(tol)
    max_iter = check_max_iter(max_iter)
    f = CountingFunction(fun)

    c = b - (b - a) / PHI
    d = a + (b - a) / PHI
    fc = f(c)
    fd = f(d)
    history: list[GoldenStep] = []
    status = Status.MAX_ITER
    message = "Maximum iterations reached."

    for iteration in range(1, max_iter + 1):
        history.append(GoldenStep(iteration, a, b, c, d, fc, fd, (a + b) / 2))
        logger.debug("golden %d: [%g, %g] fc=%g fd=%g", iteration, a, b, fc, fd)
        if abs(b - a) < tol:
            status = Status.CONVERGED
            message = "Bracket width below tolerance."
            break
        if fc < fd:
            b = d
            d = c
            fd = fc
            c = b - (b - a) / PHI
            fc = f(c)
        else:
            a = c
            c = d
            fc = fd
            d = a + (b - a) / PHI
            fd = f(d)

    x_opt = (a + b) / 2
    f_opt = f(x_opt)
    logger.info("golden finished: %s after %d iterations, x=%g", status.value, len(history), x_opt)
    return SearchResult(
        x=x_opt,
        fun=f_opt,
        status=status,
        message=message,
        nit=len(history),
        nfev=f.calls,
        history=tuple(history),
    )


__all__ = ["PHI", "golden_section_search"]
