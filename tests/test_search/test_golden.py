import pytest

from scalaropt import Objective, PreconditionViolation, Status
from scalaropt.search import GoldenStep, golden_section_search
from scalaropt.search.golden import PHI


def test_golden_converges_on_parabola(parabola):
    res = golden_section_search(parabola, -2, 5, tol=1e-3, max_iter=60)
    assert res.status is Status.CONVERGED
    assert res.success
    assert res.x == pytest.approx(2.0, abs=1e-3)
    assert res.fun == pytest.approx(1.0, abs=1e-3)
    assert res.nit <= 60
    assert res.nit == len(res.history)


def test_golden_history_records_each_pass(parabola):
    res = golden_section_search(parabola, -2, 5, tol=1e-3, max_iter=60)
    first = res.history[0]
    assert isinstance(first, GoldenStep)
    assert first.iteration == 1
    assert (first.a, first.b) == (-2.0, 5.0)
    assert first.c == pytest.approx(5 - 7 / PHI)
    assert first.d == pytest.approx(-2 + 7 / PHI)
    assert [step.iteration for step in res.history] == list(range(1, res.nit + 1))
    widths = [step.b - step.a for step in res.history]
    assert all(later < earlier for earlier, later in zip(widths, widths[1:]))
    assert abs(res.history[-1].b - res.history[-1].a) < 1e-3


def test_golden_ratio_preserved(parabola):
    res = golden_section_search(parabola, -2, 5, tol=1e-3, max_iter=10)
    for step in res.history:
        width = step.b - step.a
        assert step.d - step.a == pytest.approx(width / PHI, rel=1e-9)
        assert step.b - step.c == pytest.approx(width / PHI, rel=1e-9)


def test_golden_reuses_one_evaluation_per_pass(parabola):
    res = golden_section_search(parabola, -2, 5, tol=1e-3, max_iter=5)
    # two initial interior points, one per update, one at the midpoint
    assert res.nfev == 2 + 5 + 1


def test_golden_max_iter_returns_bracket_midpoint(parabola):
    res = golden_section_search(parabola, -2, 5, tol=1e-12, max_iter=3)
    assert res.status is Status.MAX_ITER
    assert not res.success
    assert res.nit == 3
    last = res.history[-1]
    assert res.history[-1].iteration == 3
    # the bracket after the third update is not recorded, but x stays inside it
    assert last.a <= res.x <= last.b


def test_golden_zero_iterations_returns_initial_midpoint(parabola):
    res = golden_section_search(parabola, -2, 5, max_iter=0)
    assert res.history == ()
    assert res.x == 1.5
    assert res.status is Status.MAX_ITER


def test_golden_tie_discards_left_part():
    res = golden_section_search(lambda x: x * x, -1, 1, tol=1e-3, max_iter=2)
    first, second = res.history
    assert first.fc == pytest.approx(first.fd)
    assert second.a == pytest.approx(first.c)
    assert second.b == first.b


def test_golden_multimodal_stays_in_bracket():
    res = golden_section_search(Objective.MULTIMODAL.fun, -2, 5, tol=1e-3, max_iter=60)
    assert -2 <= res.x <= 5
    assert res.status is Status.CONVERGED


@pytest.mark.parametrize("a, b", [(5, -2), (1, 1), (float("nan"), 1.0)])
def test_golden_rejects_bad_bracket(parabola, a, b):
    with pytest.raises(PreconditionViolation):
        golden_section_search(parabola, a, b)


def test_golden_is_deterministic(parabola):
    assert golden_section_search(parabola, -2, 5) == golden_section_search(parabola, -2, 5)
