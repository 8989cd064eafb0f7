import pytest

from scalaropt import (
    Objective,
    PreconditionViolation,
    SearchConfig,
    Status,
    build_function,
    derivatives_for,
    run_config,
    run_search,
)
from scalaropt.search import golden_section_search

BRACKET_METHODS = ["golden", "fibonacci", "sequential", "dichotomous"]


@pytest.mark.parametrize("method", BRACKET_METHODS)
def test_bracket_methods_on_parabola(method):
    res = run_search(method, Objective.PARABOLA.fun, bounds=(-2, 5), tol=1e-3, max_iter=60)
    assert res.x == pytest.approx(2.0, abs=1e-3)
    assert res.fun == pytest.approx(1.0, abs=1e-3)
    assert res.nit <= 60


def test_run_search_matches_direct_call(parabola):
    via_dispatch = run_search("golden", parabola, bounds=(-2, 5), tol=1e-3, max_iter=60)
    direct = golden_section_search(parabola, -2, 5, tol=1e-3, max_iter=60)
    assert via_dispatch == direct


def test_default_max_iter_is_sixty(parabola):
    res = run_search("golden", parabola, bounds=(-2, 5), tol=1e-15)
    assert res.status is Status.MAX_ITER
    assert res.nit == 60


def test_fibonacci_uses_n_option(parabola):
    assert run_search("fibonacci", parabola, bounds=(-2, 5)).nit == 19
    assert run_search("fibonacci", parabola, bounds=(-2, 5), n=8).nit == 7


def test_bisection_on_custom_formula_uses_numeric_derivative():
    f = build_function("x^2 - 4*x + 3")
    res = run_search("bisection", f, bounds=(-2, 5))
    assert res.x == pytest.approx(2.0, abs=1e-5)


@pytest.mark.parametrize("method", BRACKET_METHODS + ["bisection"])
@pytest.mark.parametrize("formula", ["sqrt(x)", "x^0.5 + x", "log(x)"])
def test_search_completes_when_formula_is_undefined_on_part_of_bracket(method, formula):
    res = run_search(method, build_function(formula), bounds=(-2, 5), tol=1e-3)
    assert isinstance(res.status, Status)
    assert -2 <= res.x <= 5
    assert res.nit == len(res.history) > 0


@pytest.mark.parametrize("method", ["golden", "dichotomous", "bisection"])
def test_search_finds_minimum_beside_undefined_region(method):
    f = build_function("sqrt(x) + (x - 3)^2")
    res = run_search(method, f, bounds=(-2, 5), tol=1e-4, max_iter=100)
    assert res.success
    assert res.x == pytest.approx(2.852, abs=1e-2)


def test_bisection_with_closed_form_derivative(quadratic):
    f, df = quadratic
    res = run_search("bisection", f, (df, None), bounds=(-2, 5), tol=1e-6)
    assert res.status is Status.CONVERGED
    assert res.x == pytest.approx(2.0, abs=1e-6)


def test_newton_with_catalog_derivatives():
    objective = Objective.PARABOLA
    res = run_search("newton", objective.fun, derivatives_for(objective), x0=0.0)
    assert res.nit <= 2
    assert res.x == pytest.approx(2.0)


def test_newton_requires_start_point(parabola):
    with pytest.raises(PreconditionViolation):
        run_search("newton", parabola)


def test_bracket_method_requires_bounds(parabola):
    with pytest.raises(PreconditionViolation):
        run_search("golden", parabola, x0=1.0)


def test_unknown_method_rejected(parabola):
    with pytest.raises(ValueError, match="Unsupported search method"):
        run_search("simplex", parabola, bounds=(0, 1))


def test_precondition_errors_surface_before_search(parabola):
    with pytest.raises(PreconditionViolation):
        run_search("golden", parabola, bounds=(5, -2))
    with pytest.raises(PreconditionViolation):
        run_search("fibonacci", parabola, bounds=(-2, 5), n=1)
    with pytest.raises(PreconditionViolation):
        run_search("bisection", parabola, (lambda x: 1.0, None), bounds=(-2, 5))


def test_run_config(parabola):
    config = SearchConfig(method="dichotomous", tol=1e-4, delta=1e-5)
    res = run_config(config, parabola, bounds=(-2, 5))
    assert res.status is Status.CONVERGED
    assert res.history[0].delta == 1e-5


def test_method_name_is_case_insensitive(parabola):
    assert run_search("Golden", parabola, bounds=(-2, 5)).success
