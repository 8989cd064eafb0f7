"""Fibonacci search with a fixed number of passes."""

from __future__ import annotations

from ..errors import PreconditionViolation
from ..logging import get_logger
from .core import (
    CountingFunction,
    FibonacciStep,
    ScalarFunction,
    SearchResult,
    Status,
    check_bracket,
)

logger = get_logger(__name__)


def fibonacci_sequence(n: int) -> list[int]:
    """Return ``fib[0..n]`` with ``fib[0] = fib[1] = 1``."""
    if n < 1:
        raise ValueError("n must be at least 1.")
    fib = [1, 1]
    for i in range(2, n + 1):
        fib.append(fib[i - 1] + fib[i - 2])
    return fib


def fibonacci_search(
    fun: ScalarFunction,
    a: float,
    b: float,
    n: int = 20,
) -> SearchResult:
    """Minimize a unimodal function on ``[a, b]`` by Fibonacci search.

    The trial points sit at ``a + fib[k-2]/fib[k] (b-a)`` and
    ``a + fib[k-1]/fib[k] (b-a)`` with ``k`` counting down from ``n``. The
    search always performs ``n - 1`` passes; there is no tolerance test.
    """
    a, b = check_bracket(a, b)
    if n < 2:
        raise PreconditionViolation("Fibonacci search needs n >= 2.")
    f = CountingFunction(fun)
    fib = fibonacci_sequence(n)

    k = n
    x1 = a + (fib[k - 2] / fib[k]) * (b - a)
    x2 = a + (fib[k - 1] / fib[k]) * (b - a)
    f1 = f(x1)
    f2 = f(x2)
    history: list[FibonacciStep] = []
    passes = n - 1

    for iteration in range(1, passes + 1):
        history.append(FibonacciStep(iteration, a, b, x1, x2, f1, f2, fib[k], (a + b) / 2))
        logger.debug("fibonacci %d: [%g, %g] fib_k=%d", iteration, a, b, fib[k])
        last = iteration == passes
        if f1 < f2:
            b = x2
            x2 = x1
            f2 = f1
            k -= 1
            if not last:
                x1 = a + (fib[k - 2] / fib[k]) * (b - a)
                f1 = f(x1)
        else:
            a = x1
            x1 = x2
            f1 = f2
            k -= 1
            if not last:
                x2 = a + (fib[k - 1] / fib[k]) * (b - a)
                f2 = f(x2)

    x_opt = (a + b) / 2
    f_opt = f(x_opt)
    logger.info("fibonacci finished after %d passes, x=%g", len(history), x_opt)
    return SearchResult(
        x=x_opt,
        fun=f_opt,
        status=Status.CONVERGED,
        message=f"Completed {passes} Fibonacci passes.",
        nit=len(history),
        nfev=f.calls,
        history=tuple(history),
    )


__all__ = ["fibonacci_search", "fibonacci_sequence"]
