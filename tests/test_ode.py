import math

import pytest

from numstep.ode import OdeSolver, Step
from numstep.vector import Vector


def exponential(y, x):
    return Vector([y[0]])


def constant_slope(y, x):
    return Vector([3.0, -1.0])


def test_system_derivatives_delegate_to_rhs():
    solver = OdeSolver.system(constant_slope)
    assert solver.derivatives(Vector([5.0, 5.0]), 0.0) == Vector([3.0, -1.0])
    assert solver.is_higher_order is False


def test_higher_order_derivatives_shift_state():
    solver = OdeSolver.higher_order(lambda y, x: 7.0)
    assert solver.is_higher_order is True
    assert solver.derivatives(Vector([1.0, 2.0, 3.0]), 0.0) == Vector([2.0, 3.0, 7.0])


def test_euler_exact_for_constant_slope():
    solver = OdeSolver.system(constant_slope)
    result = solver.euler(0.0, 2.0, 10, Vector([1.0, 1.0]))
    assert result[0] == pytest.approx(1.0 + 3.0 * 2.0)
    assert result[1] == pytest.approx(1.0 - 2.0)


def test_heun_exact_for_constant_slope():
    solver = OdeSolver.system(constant_slope)
    result = solver.heun(0.0, 2.0, 7, Vector([1.0, 1.0]))
    assert result[0] == pytest.approx(7.0)
    assert result[1] == pytest.approx(-1.0)


def test_methods_approach_exponential():
    solver = OdeSolver.system(exponential)
    euler = solver.euler(0.0, 1.0, 1000, Vector([1.0]))[0]
    heun = solver.heun(0.0, 1.0, 1000, Vector([1.0]))[0]
    assert euler == pytest.approx(math.e, rel=1e-2)
    assert heun == pytest.approx(math.e, rel=1e-5)
    assert abs(heun - math.e) < abs(euler - math.e)
    assert euler < math.e


def test_start_vector_is_not_modified():
    start = Vector([1.0])
    OdeSolver.system(exponential).heun(0.0, 1.0, 5, start)
    assert start == Vector([1.0])


@pytest.mark.parametrize("method", ["euler", "heun"])
def test_steps_end_matches_final_result(method):
    solver = OdeSolver.system(exponential)
    steps = list(getattr(solver, f"{method}_steps")(0.0, 2.0, 20, Vector([1.0])))
    assert len(steps) == 20
    assert [s.index for s in steps] == list(range(1, 21))
    assert steps[-1].x == pytest.approx(2.0)
    assert steps[0].x == pytest.approx(0.1)
    assert isinstance(steps[-1], Step)
    assert steps[-1].y == getattr(solver, method)(0.0, 2.0, 20, Vector([1.0]))


@pytest.mark.parametrize("steps", [0, -3])
def test_non_positive_steps_rejected(steps):
    solver = OdeSolver.system(exponential)
    with pytest.raises(ValueError):
        solver.euler(0.0, 1.0, steps, Vector([1.0]))
    with pytest.raises(ValueError):
        solver.heun(0.0, 1.0, steps, Vector([1.0]))


def test_deviations_step_counts_and_convergence():
    solver = OdeSolver.system(exponential)
    rows = solver.deviations(0.0, 1.0, Vector([1.0]), math.e)
    assert [n for n, _, _ in rows] == [10, 100, 1000, 10000]
    euler_errors = [abs(e) for _, e, _ in rows]
    heun_errors = [abs(h) for _, _, h in rows]
    assert euler_errors == sorted(euler_errors, reverse=True)
    assert heun_errors == sorted(heun_errors, reverse=True)
    assert all(h < e for h, e in zip(heun_errors, euler_errors))


def test_higher_order_reciprocal_solution():
    # y = 1/x solves y''' = -6 / x^4 with y(1)=1, y'(1)=-1, y''(1)=2
    solver = OdeSolver.higher_order(lambda y, x: -6.0 / x**4)
    result = solver.heun(1.0, 2.0, 2000, Vector([1.0, -1.0, 2.0]))
    assert result[0] == pytest.approx(0.5, abs=1e-5)
    assert result[1] == pytest.approx(-0.25, abs=1e-4)