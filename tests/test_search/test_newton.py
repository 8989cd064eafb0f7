import math

import pytest

from scalaropt import Objective, Status, build_derivatives
from scalaropt.search import NewtonStep, newton_search


def test_newton_parabola_converges_quadratically():
    p = Objective.PARABOLA
    res = newton_search(p.fun, p.first, p.second, 0.0)
    assert res.status is Status.CONVERGED
    assert 1 <= res.nit <= 2
    assert res.x == pytest.approx(2.0)
    assert res.fun == pytest.approx(1.0)


def test_newton_history_records_step():
    p = Objective.PARABOLA
    res = newton_search(p.fun, p.first, p.second, 0.0)
    first = res.history[0]
    assert isinstance(first, NewtonStep)
    assert first.x == 0.0
    assert first.fx == 5.0
    assert first.dfx == -4.0
    assert first.d2fx == 2.0
    assert first.step == -2.0
    assert res.history[1].x == 2.0


def test_newton_with_numeric_derivatives(parabola):
    first, second = build_derivatives(parabola)
    res = newton_search(parabola, first, second, 0.0, tol=1e-4, max_iter=20)
    assert res.status is Status.CONVERGED
    assert res.x == pytest.approx(2.0, abs=1e-3)


def test_newton_stall_returns_last_point():
    res = newton_search(lambda x: x, lambda x: 1.0, lambda x: 0.0, 3.0)
    assert res.status is Status.NUMERICAL_STALL
    assert not res.success
    assert res.x == 3.0
    assert res.nit == 1
    assert math.isnan(res.history[0].step)


def test_newton_stall_after_progress():
    # f'' vanishes at the second iterate
    res = newton_search(
        lambda x: 0.0,
        lambda x: 1.0,
        lambda x: 1.0 if x == 0.0 else 1e-13,
        0.0,
    )
    assert res.status is Status.NUMERICAL_STALL
    assert res.x == -1.0
    assert [step.x for step in res.history] == [0.0, -1.0]


def test_newton_max_iter():
    rastrigin = Objective.RASTRIGIN_LIKE
    res = newton_search(lambda x: math.cosh(x), math.sinh, math.cosh, 5.0, tol=1e-14, max_iter=2)
    assert res.status is Status.MAX_ITER
    assert res.nit == 2
    res = newton_search(rastrigin.fun, rastrigin.first, rastrigin.second, 0.5, max_iter=0)
    assert res.x == 0.5
    assert res.history == ()


def test_newton_is_deterministic():
    m = Objective.MULTIMODAL
    assert newton_search(m.fun, m.first, m.second, 1.0) == newton_search(
        m.fun, m.first, m.second, 1.0
    )
