"""Predefined objectives and the custom-formula variant.

The catalog is a read-only enum: every member carries its objective and the
closed-form first and second derivative. A :class:`Custom` objective wraps a
parsed formula and differentiates it numerically.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .differentiate import ScalarFunction, build_derivatives
from .expression import Expression, build_function as parse_formula


def _parabola(x: float) -> float:
    return (x - 2) * (x - 2) + 1


def _parabola_d1(x: float) -> float:
    return 2 * (x - 2)


def _parabola_d2(x: float) -> float:
    return 2.0


def _multimodal(x: float) -> float:
    return (x - 2) * (x - 2) + math.sin(5 * x)


def _multimodal_d1(x: float) -> float:
    return 2 * (x - 2) + 5 * math.cos(5 * x)


def _multimodal_d2(x: float) -> float:
    return 2 - 25 * math.sin(5 * x)


def _rastrigin_like(x: float) -> float:
    return x * x + 5 * math.cos(2 * x)


def _rastrigin_like_d1(x: float) -> float:
    return 2 * x - 10 * math.sin(2 * x)


def _rastrigin_like_d2(x: float) -> float:
    return 2 - 20 * math.cos(2 * x)


class Objective(Enum):
    """Closed-form objectives with analytic derivatives."""

    PARABOLA = ("Parabola (x-2)^2 + 1", _parabola, _parabola_d1, _parabola_d2)
    MULTIMODAL = (
        "Multi-modal: (x-2)^2 + sin(5x)",
        _multimodal,
        _multimodal_d1,
        _multimodal_d2,
    )
    RASTRIGIN_LIKE = (
        "Rastrigin-like: x^2 + 5*cos(2x)",
        _rastrigin_like,
        _rastrigin_like_d1,
        _rastrigin_like_d2,
    )

    def __init__(
        self,
        label: str,
        fun: ScalarFunction,
        first: ScalarFunction,
        second: ScalarFunction,
    ) -> None:
        self.label = label
        self.fun = fun
        self.first = first
        self.second = second

    def __call__(self, x: float) -> float:
        return self.fun(x)

    @property
    def derivatives(self) -> tuple[ScalarFunction, ScalarFunction]:
        return self.first, self.second


@dataclass(frozen=True)
class Custom:
    """User formula; derivatives come from central differences."""

    formula: str
    fun: Expression = field(init=False, repr=False, compare=False)
    first: ScalarFunction = field(init=False, repr=False, compare=False)
    second: ScalarFunction = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        fun = parse_formula(self.formula)
        first, second = build_derivatives(fun)
        object.__setattr__(self, "fun", fun)
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "second", second)

    @property
    def label(self) -> str:
        return self.fun.source

    def __call__(self, x: float) -> float:
        return self.fun(x)

    @property
    def derivatives(self) -> tuple[ScalarFunction, ScalarFunction]:
        return self.first, self.second


ObjectiveLike = Union[Objective, Custom]


def resolve_objective(key: Union[str, Objective, Custom]) -> ObjectiveLike:
    """Resolve a catalog member, its name or label, or a formula string.

    Raises
    ------
    InvalidExpression
        If ``key`` is neither a catalog entry nor a valid formula.
    """
    if isinstance(key, (Objective, Custom)):
        return key
    text = key.strip()
    for member in Objective:
        if text in (member.name, member.label):
            return member
    return Custom(text)


def build_function(formula_or_key: Union[str, Objective, Custom]) -> ScalarFunction:
    """Return the objective callable for a catalog key or a custom formula."""
    return resolve_objective(formula_or_key).fun


def derivatives_for(
    formula_or_key: Union[str, Objective, Custom],
) -> tuple[ScalarFunction, ScalarFunction]:
    """Closed-form derivatives for catalog entries, numeric ones otherwise."""
    return resolve_objective(formula_or_key).derivatives


__all__ = [
    "Custom",
    "Objective",
    "ObjectiveLike",
    "build_function",
    "derivatives_for",
    "resolve_objective",
]
