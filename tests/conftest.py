"""Shared objective fixtures for scalaropt tests."""

from typing import Callable

import pytest


@pytest.fixture
def parabola() -> Callable[[float], float]:
    """``(x - 2)^2 + 1`` with minimum 1 at x = 2."""
    return lambda x: (x - 2) ** 2 + 1


@pytest.fixture
def quadratic() -> tuple[Callable[[float], float], Callable[[float], float]]:
    """``x^2 - 4x + 3`` and its derivative ``2x - 4``."""
    return (lambda x: x * x - 4 * x + 3), (lambda x: 2 * x - 4)
