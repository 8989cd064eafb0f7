"""Restricted arithmetic expressions in one variable.

Custom objectives are written as formulas in ``x`` such as ``x^2 - 4*x + 3``
or ``(x-2)^2 + sin(5*x)``. The text is tokenized and parsed by a small
recursive-descent parser into an immutable tree which is evaluated directly;
no host code is ever compiled from user input.

Grammar::

    expr   := term (("+" | "-") term)*
    term   := unary (("*" | "/") unary)*
    unary  := ("+" | "-") unary | power
    power  := atom ("^" unary)?
    atom   := NUMBER | "x" | NAME "(" expr ("," expr)* ")" | "(" expr ")"

``^`` is right-associative and binds tighter than a leading sign, so
``-x^2`` reads as ``-(x^2)``.

Example
-------
>>> from scalaropt.expression import build_function
>>> f = build_function("x^2 - 4*x + 3")
>>> f(1.0)
0.0
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Union

from .errors import InvalidExpression

# Deepest expression tree accepted; evaluation recurses once per level.
MAX_DEPTH = 200


def _ieee(func: Callable[..., float]) -> Callable[..., float]:
    """Map math-module errors to the IEEE results a float pipeline expects."""

    def wrapped(*args: float) -> float:
        try:
            return func(*args)
        except OverflowError:
            return math.inf
        except (ValueError, ZeroDivisionError):
            return math.nan

    return wrapped


_natural_log = _ieee(math.log)


def _log(value: float) -> float:
    if value == 0:
        return -math.inf
    return _natural_log(value)


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        odd = exponent.is_integer() and exponent % 2 == 1
        return -math.inf if base < 0 and odd else math.inf
    except ValueError:
        # zero to a negative power; negative base to a fractional power
        return math.inf if base == 0 else math.nan


def _divide(lhs: float, rhs: float) -> float:
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


# name -> (callable, min arity, max arity or None for variadic)
FUNCTIONS: dict[str, tuple[Callable[..., float], int, int | None]] = {
    "sin": (_ieee(math.sin), 1, 1),
    "cos": (_ieee(math.cos), 1, 1),
    "tan": (_ieee(math.tan), 1, 1),
    "log": (_log, 1, 1),
    "exp": (_ieee(math.exp), 1, 1),
    "sqrt": (_ieee(math.sqrt), 1, 1),
    "abs": (abs, 1, 1),
    "pow": (_pow, 2, 2),
    "min": (lambda *args: min(args), 1, None),
    "max": (lambda *args: max(args), 1, None),
}

_FUNCTION_NAMES = re.compile("|".join(sorted(FUNCTIONS, key=len, reverse=True)))
_ALLOWED = re.compile(r"^[x0-9+\-*/().,^\s]*$")
_TOKEN = re.compile(r"\s*(?:(\d+\.?\d*|\.\d+)|([a-z]+)|(.))")


@dataclass(frozen=True)
class Number:
    value: float

    def evaluate(self, x: float) -> float:
        return self.value


@dataclass(frozen=True)
class Variable:
    def evaluate(self, x: float) -> float:
        return x


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: "Node"

    def evaluate(self, x: float) -> float:
        value = self.operand.evaluate(x)
        return -value if self.op == "-" else value


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "Node"
    right: "Node"

    def evaluate(self, x: float) -> float:
        lhs = self.left.evaluate(x)
        rhs = self.right.evaluate(x)
        if self.op == "+":
            return lhs + rhs
        if self.op == "-":
            return lhs - rhs
        if self.op == "*":
            return lhs * rhs
        if self.op == "/":
            return _divide(lhs, rhs)
        return _pow(lhs, rhs)


@dataclass(frozen=True)
class Call:
    name: str
    args: tuple["Node", ...]

    def evaluate(self, x: float) -> float:
        func = FUNCTIONS[self.name][0]
        return float(func(*(arg.evaluate(x) for arg in self.args)))


Node = Union[Number, Variable, UnaryOp, BinaryOp, Call]


def validate(formula: str) -> str:
    """Coarse character-class filter applied before parsing.

    Returns the stripped formula. Anything other than ``x``, digits,
    operators, parentheses, commas, whitespace and the known function
    names raises :class:`InvalidExpression`.
    """
    text = formula.strip()
    if not _ALLOWED.match(_FUNCTION_NAMES.sub("", text)):
        raise InvalidExpression("Formula contains characters that are not allowed.")
    return text


def tokenize(text: str) -> list[tuple[str, str]]:
    """Split a validated formula into ``(kind, value)`` tokens."""
    tokens: list[tuple[str, str]] = []
    pos = 0
    text = text.rstrip()
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if match is None:
            raise InvalidExpression(f"Unexpected input at position {pos}.")
        number, name, symbol = match.groups()
        if number is not None:
            tokens.append(("num", number))
        elif name is not None:
            tokens.append(("name", name))
        else:
            tokens.append(("sym", symbol))
        pos = match.end()
    return tokens


class _Parser:
    def __init__(self, tokens: list[tuple[str, str]]) -> None:
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> tuple[str, str] | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def accept(self, *symbols: str) -> str | None:
        token = self.peek()
        if token is not None and token[0] == "sym" and token[1] in symbols:
            self.pos += 1
            return token[1]
        return None

    def expect(self, symbol: str) -> None:
        if self.accept(symbol) is None:
            found = self.peek()
            where = repr(found[1]) if found else "end of input"
            raise InvalidExpression(f"Expected {symbol!r} but found {where}.")

    def parse(self) -> Node:
        if not self.tokens:
            raise InvalidExpression("Formula is empty.")
        node = self.expr()
        if self.peek() is not None:
            raise InvalidExpression(f"Unexpected token {self.peek()[1]!r}.")
        return node

    def expr(self) -> Node:
        node = self.term()
        while True:
            op = self.accept("+", "-")
            if op is None:
                return node
            node = BinaryOp(op, node, self.term())

    def term(self) -> Node:
        node = self.unary()
        while True:
            op = self.accept("*", "/")
            if op is None:
                return node
            node = BinaryOp(op, node, self.unary())

    def unary(self) -> Node:
        signs = []
        while True:
            op = self.accept("+", "-")
            if op is None:
                break
            signs.append(op)
        if len(signs) > MAX_DEPTH:
            raise InvalidExpression("Formula is nested too deeply.")
        node = self.power()
        for op in reversed(signs):
            node = UnaryOp(op, node)
        return node

    def power(self) -> Node:
        base = self.atom()
        if self.accept("^") is not None:
            return BinaryOp("^", base, self.unary())
        return base

    def atom(self) -> Node:
        token = self.peek()
        if token is None:
            raise InvalidExpression("Unexpected end of formula.")
        kind, value = token
        if kind == "num":
            self.pos += 1
            return Number(float(value))
        if kind == "name":
            self.pos += 1
            if value == "x":
                return Variable()
            if value not in FUNCTIONS:
                raise InvalidExpression(f"Unknown name {value!r}.")
            return self.call(value)
        if self.accept("(") is not None:
            node = self.expr()
            self.expect(")")
            return node
        raise InvalidExpression(f"Unexpected token {value!r}.")

    def call(self, name: str) -> Call:
        self.expect("(")
        args = [self.expr()]
        while self.accept(",") is not None:
            args.append(self.expr())
        self.expect(")")
        _, lo, hi = FUNCTIONS[name]
        if len(args) < lo or (hi is not None and len(args) > hi):
            raise InvalidExpression(
                f"{name}() takes {lo if lo == hi else f'at least {lo}'} "
                f"argument(s), got {len(args)}."
            )
        return Call(name, tuple(args))


def tree_depth(node: Node) -> int:
    """Number of levels in an expression tree."""
    deepest = 0
    stack = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(current, UnaryOp):
            children: tuple[Node, ...] = (current.operand,)
        elif isinstance(current, BinaryOp):
            children = (current.left, current.right)
        elif isinstance(current, Call):
            children = current.args
        else:
            children = ()
        stack.extend((child, depth + 1) for child in children)
    return deepest


def parse(formula: str) -> Node:
    """Validate and parse ``formula`` into an expression tree.

    Trees deeper than :data:`MAX_DEPTH` are rejected so that evaluation
    stays within the interpreter's recursion limit.
    """
    tokens = tokenize(validate(formula))
    try:
        tree = _Parser(tokens).parse()
    except RecursionError as exc:
        raise InvalidExpression("Formula is nested too deeply.") from exc
    if tree_depth(tree) > MAX_DEPTH:
        raise InvalidExpression("Formula is nested too deeply.")
    return tree


class Expression:
    """Callable wrapper around a parsed formula."""

    def __init__(self, source: str, tree: Node) -> None:
        self.source = source
        self.tree = tree

    def __call__(self, x: float) -> float:
        return self.tree.evaluate(float(x))

    def __repr__(self) -> str:
        return f"Expression({self.source!r})"


def build_function(formula: str) -> Expression:
    """Build a callable objective from a formula in ``x``.

    The result is evaluated once at ``x = 1`` as a smoke test. Domain
    errors, division by zero and overflow do not raise; they evaluate to
    ``nan`` or an infinity the way IEEE floats do, so a formula that is
    undefined on part of a bracket still yields comparable values there.

    Raises
    ------
    InvalidExpression
        If the formula fails validation, parsing or the smoke test.
    """
    expression = Expression(formula.strip(), parse(formula))
    try:
        expression(1.0)
    except (ArithmeticError, ValueError, RecursionError) as exc:
        raise InvalidExpression(f"Error in formula: {exc}") from exc
    return expression


__all__ = [
    "BinaryOp",
    "Call",
    "Expression",
    "FUNCTIONS",
    "MAX_DEPTH",
    "Node",
    "Number",
    "UnaryOp",
    "Variable",
    "build_function",
    "parse",
    "tokenize",
    "tree_depth",
    "validate",
]
