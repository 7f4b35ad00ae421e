import math
from functools import partial

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.integrate import solve_ivp

from pynumerics.exception import InvalidArgument, RuntimeFailure
from pynumerics.ode import (Trajectory, euler_method, heun_method,
                            midpoint_method, rk4_method)

_methods = [euler_method, heun_method, midpoint_method, rk4_method]


# ======================================================================

def _growth(t, y):
    return y  # Exact solution y = y0·e^t.


def _gaussian(t, y):
    return -2.0 * t * y  # Exact solution y = y0·e^(-t^2).


# ----------------------------------------------------------------------

@pytest.mark.parametrize("method, tol", [
    (euler_method, 2e-2),
    (heun_method, 1e-4),
    (midpoint_method, 1e-4),
    (rk4_method, 1e-9)])
def test_exponential_growth(method, tol: float):
    traj = method(_growth, 1.0, 0.0, 1.0, 0.01)
    assert len(traj) == 101
    assert traj.t_final == 1.0
    assert traj.y_final == pytest.approx(math.e, abs=tol)
    assert_allclose(traj.y, np.exp(traj.t), atol=tol)


@pytest.mark.parametrize("method, order", [
    (euler_method, 1),
    (heun_method, 2),
    (midpoint_method, 2),
    (rk4_method, 4)])
def test_convergence_order(method, order: int):
    # Halving the step should reduce the final error by about 2^order.
    errors = []
    for h in (0.1, 0.05):
        traj = method(_gaussian, 1.0, 0.0, 1.0, h)
        errors.append(abs(traj.y_final - math.exp(-1.0)))

    assert math.log2(errors[0] / errors[1]) == pytest.approx(order, abs=0.4)


def test_rk4_against_scipy():
    traj = rk4_method(_gaussian, 2.0, -1.0, 2.0, 0.05)
    ref = solve_ivp(_gaussian, (-1.0, 2.0), [2.0], t_eval=traj.t,
                    rtol=1e-10, atol=1e-12)
    assert_allclose(traj.y, ref.y[0], atol=1e-5)


# ----------------------------------------------------------------------

@pytest.mark.parametrize("method", _methods)
def test_trajectory_times(method):
    # Starts at initial condition.
    traj = method(_growth, 3.0, 2.0, 3.0, 0.25)
    assert traj[0] == (2.0, 3.0)
    assert_allclose(traj.t, [2.0, 2.25, 2.5, 2.75, 3.0])

    # Slight overshoot of t_max is recorded as t_max exactly.
    traj = method(_growth, 1.0, 0.0, 0.3, 0.1)
    assert len(traj) == 4
    assert traj.t_final == 0.3

    # Step does not divide the range; stop before t_max.
    traj = method(_growth, 1.0, 0.0, 1.0, 0.3)
    assert len(traj) == 4
    assert traj.t_final == pytest.approx(0.9)

    # Zero length range gives the initial condition only.
    traj = method(_growth, 5.0, 1.0, 1.0, 0.1)
    assert list(traj) == [(1.0, 5.0)]


@pytest.mark.parametrize("method", _methods)
def test_no_evaluation_past_end(method):
    # Function is undefined beyond t_max but is never evaluated there.
    def f(t, y):
        return math.nan if t > 1.0 else 1.0

    traj = method(f, 0.0, 0.0, 1.0, 0.125)
    assert traj.y_final == pytest.approx(1.0)


@pytest.mark.parametrize("method", _methods)
def test_repeatable(method):
    run = partial(method, _gaussian, 1.0, 0.0, 2.0, 0.1)
    assert np.array_equal(run().y, run().y)


# ----------------------------------------------------------------------

@pytest.mark.parametrize("method", _methods)
def test_invalid_arguments(method):
    for h in (0.0, -0.1):
        with pytest.raises(InvalidArgument):
            method(_growth, 1.0, 0.0, 1.0, h)

    with pytest.raises(InvalidArgument):
        method(_growth, 1.0, 1.0, 0.0, 0.1)  # t_max < t0.


@pytest.mark.parametrize("method, t_nan, stage", [
    (euler_method, 0.42, 'k1'),
    (heun_method, 0.42, 'k2'),
    (midpoint_method, 0.42, 'k2'),
    (rk4_method, 0.42, 'k2'),
    (rk4_method, 0.47, 'k4')])
def test_nan_stage(method, t_nan: float, stage: str):
    def f(t, y):
        return math.nan if t > t_nan else 1.0

    with pytest.raises(RuntimeFailure) as exc_info:
        method(f, 0.0, 0.0, 1.0, 0.1)

    assert exc_info.value.stage == stage
    assert exc_info.value.t > t_nan
    assert stage in str(exc_info.value)


# ----------------------------------------------------------------------

def test_trajectory_sequence():
    traj = Trajectory(np.array([0.0, 0.5, 1.0]), np.array([1.0, 2.0, 4.0]))
    assert len(traj) == 3
    assert traj[1] == (0.5, 2.0)
    assert traj[-1] == (1.0, 4.0)
    assert traj[1:] == [(0.5, 2.0), (1.0, 4.0)]
    assert [t for t, _ in traj] == [0.0, 0.5, 1.0]
    assert traj.y_final == 4.0

    with pytest.raises(ValueError):
        Trajectory(np.array([0.0, 1.0]), np.array([1.0]))
