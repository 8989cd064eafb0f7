"""Dense evenly spaced samples of an objective for plotting."""

from __future__ import annotations

import math
from typing import Callable, Sequence

import numpy as np

from .config import DEFAULT_SAMPLES
from .errors import PreconditionViolation

ScalarFunction = Callable[[float], float]


def sample(
    fun: ScalarFunction,
    bounds: Sequence[float],
    count: int = DEFAULT_SAMPLES,
) -> list[tuple[float, float]]:
    """
    Sample ``fun`` at ``count + 1`` evenly spaced points, endpoints included.

    Points where ``x`` or ``fun(x)`` is not finite are skipped, as are points
    where ``fun`` raises an arithmetic or domain error. An empty, inverted or
    non-finite interval yields no points.

    Parameters
    ----------
    fun:
        Objective to sample.
    bounds:
        Display interval ``(a, b)``.
    count:
        Number of intervals (>= 1).

    Returns
    -------
    list of tuple
        ``(x, y)`` pairs ordered by increasing ``x``.
    """
    a, b = float(bounds[0]), float(bounds[1])
    if count < 1:
        raise PreconditionViolation("count must be at least 1.")
    if not (math.isfinite(a) and math.isfinite(b)) or not a < b:
        return []
    points: list[tuple[float, float]] = []
    for x in np.linspace(a, b, count + 1):
        x = float(x)
        try:
            y = float(fun(x))
        except (ArithmeticError, ValueError):
            continue
        if math.isfinite(x) and math.isfinite(y):
            points.append((x, y))
    return points


def sample_around(
    fun: ScalarFunction,
    x0: float,
    width: float = 6.0,
    count: int = DEFAULT_SAMPLES,
) -> list[tuple[float, float]]:
    """Sample a window of ``width`` centred on a starting point."""
    half = width / 2
    return sample(fun, (x0 - half, x0 + half), count)


__all__ = ["sample", "sample_around"]
