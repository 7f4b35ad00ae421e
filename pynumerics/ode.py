"""
ODE Stepping (:mod:`pynumerics.ode`)
====================================

.. currentmodule:: pynumerics.ode

Fixed step explicit methods for the scalar initial value problem
``y' = f(t, y)``, ``y(t0) = y0``.

.. autosummary::
    :toctree:

    euler_method
    heun_method
    midpoint_method
    rk4_method
    Trajectory
"""
from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from pynumerics.exception import InvalidArgument, RuntimeFailure

# Written by the PyNumerics developers.

ODEFunc = Callable[[float, float], float]


# ======================================================================

class Trajectory(Sequence):
    """
    Discrete solution of an initial value problem, returned from the
    stepping functions (`euler_method`, etc).  It behaves as a sequence
    of `(t, y)` pairs and also gives array access to `t` and `y`.

    Notes
    -----
    Objects of this class are not expected to be created by the user.
    """

    def __init__(self, t: NDArray[float], y: NDArray[float]):
        self._t = np.asarray(t, dtype=float)
        self._y = np.asarray(y, dtype=float)

        if self._t.ndim != 1 or self._t.shape != self._y.shape:
            raise ValueError(f"Require t.shape == y.shape == (npts,), "
                             f"got {self._t.shape} and {self._y.shape}.")

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return [(float(t), float(y))
                    for t, y in zip(self._t[idx], self._y[idx])]
        return float(self._t[idx]), float(self._y[idx])

    def __len__(self) -> int:
        return self._t.size

    def __repr__(self):
        return (f"Trajectory(npts={len(self)}, "
                f"t=[{self.t[0]}, {self.t_final}])")

    @property
    def t(self) -> NDArray[float]:
        """Return the discrete `t` values."""
        return self._t

    @property
    def t_final(self) -> float:
        """Return the last `t` value."""
        return float(self._t[-1])

    @property
    def y(self) -> NDArray[float]:
        """Return the discrete `y` values for each `t`."""
        return self._y

    @property
    def y_final(self) -> float:
        """Return the last `y` value."""
        return float(self._y[-1])


# ----------------------------------------------------------------------

def euler_method(f: ODEFunc, y0: float, t0: float, t_max: float,
                 h: float) -> Trajectory:
    """
    Solve ``y' = f(t, y)`` from `t0` to `t_max` using the explicit
    (forward) Euler method ``y += h·k1``.

    Parameters
    ----------
    f : Callable[[float, float], float]
        Derivative function `f(t, y)`.
    y0 : float
        Initial value `y(t0)`.
    t0, t_max : float
        Start and end times, with `t_max` >= `t0`.
    h : float
        Step size, must be > 0.

    Returns
    -------
    Trajectory
        Solution points starting at `(t0, y0)`.  Times are `t0 + i·h`
        up to and including `t_max` (to within rounding).  If the last
        time slightly overshoots `t_max` it is recorded as exactly
        `t_max`.

    Raises
    ------
    InvalidArgument
        If `h` <= 0 or `t_max` < `t0`.
    RuntimeFailure
        If `f` returns NaN.  Attribute `stage` gives the failed
        evaluation ('k1', etc) and `t`, `y` the point where it was
        evaluated.
    """
    def step(t, y):
        k1 = _stage(f, t, y, 'k1', 'Euler')
        return y + h * k1

    return _integrate('Euler', step, y0, t0, t_max, h)


def heun_method(f: ODEFunc, y0: float, t0: float, t_max: float,
                h: float) -> Trajectory:
    """
    Solve ``y' = f(t, y)`` using Heun's method (improved Euler).  This
    averages the slope at the start of the step with the slope at the
    Euler predicted end point, ``y += h/2·(k1 + k2)``.

    Parameters, returns and exceptions are the same as `euler_method`.
    """
    def step(t, y):
        k1 = _stage(f, t, y, 'k1', 'Heun')
        k2 = _stage(f, t + h, y + h * k1, 'k2', 'Heun')
        return y + 0.5 * h * (k1 + k2)

    return _integrate('Heun', step, y0, t0, t_max, h)


def midpoint_method(f: ODEFunc, y0: float, t0: float, t_max: float,
                    h: float) -> Trajectory:
    """
    Solve ``y' = f(t, y)`` using the explicit midpoint method, taking
    the slope at the half step, ``y += h·k2``.

    Parameters, returns and exceptions are the same as `euler_method`.
    """
    def step(t, y):
        k1 = _stage(f, t, y, 'k1', 'Midpoint')
        k2 = _stage(f, t + 0.5 * h, y + 0.5 * h * k1, 'k2', 'Midpoint')
        return y + h * k2

    return _integrate('Midpoint', step, y0, t0, t_max, h)


def rk4_method(f: ODEFunc, y0: float, t0: float, t_max: float,
               h: float) -> Trajectory:
    """
    Solve ``y' = f(t, y)`` using the classical fourth order Runge-Kutta
    method, ``y += h/6·(k1 + 2·k2 + 2·k3 + k4)``.

    Parameters, returns and exceptions are the same as `euler_method`.

    Examples
    --------
    >>> traj = rk4_method(lambda t, y: y, 1.0, 0.0, 1.0, 0.1)
    >>> len(traj), traj.t_final
    (11, 1.0)
    >>> abs(traj.y_final - np.e) < 1e-5
    True
    """
    def step(t, y):
        k1 = _stage(f, t, y, 'k1', 'RK4')
        k2 = _stage(f, t + 0.5 * h, y + 0.5 * h * k1, 'k2', 'RK4')
        k3 = _stage(f, t + 0.5 * h, y + 0.5 * h * k2, 'k3', 'RK4')
        k4 = _stage(f, t + h, y + h * k3, 'k4', 'RK4')
        return y + h / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)

    return _integrate('RK4', step, y0, t0, t_max, h)


# ----------------------------------------------------------------------

def _integrate(name: str, step: Callable[[float, float], float],
               y0: float, t0: float, t_max: float,
               h: float) -> Trajectory:
    # Common stepping loop.  `step(t, y)` returns y at t + h.
    if h <= 0.0:
        raise InvalidArgument(f"{name} method: Step size 'h' must be "
                              f"positive, got {h}.")
    if t_max < t0:
        raise InvalidArgument(f"{name} method: End time 't_max' = {t_max} "
                              f"cannot be less than start time "
                              f"'t0' = {t0}.")

    t_limit = t_max + np.finfo(float).eps * abs(t_max)
    t_pts, y_pts = [], []
    y, i = float(y0), 0
    while True:
        t = t0 + i * h
        t_pts.append(min(t, t_max))
        y_pts.append(y)

        if t0 + (i + 1) * h > t_limit:
            break

        y = step(t, y)
        i += 1

    return Trajectory(np.array(t_pts), np.array(y_pts))


def _stage(f: ODEFunc, t: float, y: float, stage: str,
           name: str) -> float:
    k = f(t, y)
    if np.isnan(k):
        raise RuntimeFailure(f"{name} method: ODE function returned NaN "
                             f"for {stage}.", stage=stage, t=t, y=y)
    return k
