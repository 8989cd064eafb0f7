import math

import pytest

from scalaropt.errors import InvalidExpression
from scalaropt.expression import (
    MAX_DEPTH,
    BinaryOp,
    Call,
    Number,
    UnaryOp,
    Variable,
    build_function,
    parse,
    tokenize,
    tree_depth,
)


def test_quadratic_formula_evaluates_to_zero_at_one():
    f = build_function("x^2 - 4*x + 3")
    assert f(1) == 0
    assert f(2) == pytest.approx(-1.0)


def test_disallowed_characters_rejected():
    with pytest.raises(InvalidExpression):
        build_function("bad$chars")
    with pytest.raises(InvalidExpression):
        build_function("__import__('os')")


def test_invalid_expression_is_value_error():
    with pytest.raises(ValueError):
        build_function("x;1")


def test_precedence_and_associativity():
    assert build_function("1 + 2*3")(0) == 7
    assert build_function("2^3^2")(0) == 512
    assert build_function("-x^2")(3) == -9
    assert build_function("(1 - x)/2")(5) == -2
    assert build_function("10 - 4 - 3")(0) == 3


def test_functions_and_arity():
    assert build_function("pow(x, 3)")(2) == 8
    assert build_function("max(x, 1, 4)")(2) == 4
    assert build_function("min(x)")(2) == 2
    assert build_function("sqrt(abs(x))")(-9) == 3
    f = build_function("sin(5*x) + cos(x) + exp(x) + log(x) + tan(x)")
    x = 0.7
    expected = math.sin(5 * x) + math.cos(x) + math.exp(x) + math.log(x) + math.tan(x)
    assert f(x) == pytest.approx(expected)


def test_parse_builds_tree():
    tree = parse("-x + 2.5")
    assert tree == BinaryOp("+", UnaryOp("-", Variable()), Number(2.5))
    assert parse("max(x, 1)") == Call("max", (Variable(), Number(1.0)))


def test_tokenize_splits_numbers_names_and_symbols():
    assert tokenize("sin(x)*.5") == [
        ("name", "sin"),
        ("sym", "("),
        ("name", "x"),
        ("sym", ")"),
        ("sym", "*"),
        ("num", ".5"),
    ]


@pytest.mark.parametrize(
    "formula",
    ["", "   ", "x +", "(x", "x)", "sin x", "pow(x)", "sin(x, 1)", "xx", "2 3", "x,1"],
)
def test_syntax_errors_raise_invalid_expression(formula):
    with pytest.raises(InvalidExpression):
        build_function(formula)


def test_undefined_points_evaluate_like_ieee_floats():
    assert build_function("1/(x-1)")(1) == math.inf
    assert build_function("-1/(x-1)")(1) == -math.inf
    assert math.isnan(build_function("0/(x-1)")(1))
    assert build_function("log(x - 1)")(1) == -math.inf
    assert math.isnan(build_function("log(x - 2)")(1))
    assert build_function("exp(1000*x)")(1) == math.inf
    assert build_function("x^(0-1)")(0) == math.inf
    assert build_function("(0-x)^1001")(10) == -math.inf


def test_domain_errors_do_not_raise_after_construction():
    f = build_function("sqrt(x)")
    assert f(4) == 2
    assert math.isnan(f(-1))
    assert math.isnan(build_function("x^0.5")(-1))


def test_deeply_nested_formula_is_rejected():
    with pytest.raises(InvalidExpression, match="nested too deeply"):
        build_function("(" * 400 + "x" + ")" * 400)
    with pytest.raises(InvalidExpression, match="nested too deeply"):
        build_function("-" * 2000 + "x")
    with pytest.raises(InvalidExpression, match="nested too deeply"):
        build_function("+".join(["x"] * (MAX_DEPTH + 2)))


def test_moderate_nesting_is_accepted():
    f = build_function("(" * 50 + "x" + ")" * 50 + " + " + "-" * 10 + "1")
    assert f(3) == 4
    assert tree_depth(parse("x + 1")) == 2
    assert tree_depth(parse("--x")) == 3


def test_expression_keeps_source():
    f = build_function("  x^2 ")
    assert f.source == "x^2"
    assert "x^2" in repr(f)
