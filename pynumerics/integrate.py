"""
Quadrature (:mod:`pynumerics.integrate`)
========================================

.. currentmodule:: pynumerics.integrate

Composite rules for the definite integral of a scalar function over a
fixed interval.  All rules use equal subintervals; there is no adaptive
refinement.

.. autosummary::
    :toctree:

    rectangle_rule
    trapezoid_rule
    simpson_rule
    gauss_legendre_quadrature
    gauss_legendre_rule
"""
from __future__ import annotations

from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from pynumerics.exception import InvalidArgument, RuntimeFailure


# Written by the PyNumerics developers.

# Gauss-Legendre points and weights on [-1, 1], keyed by number of nodes.
_GL_TABLE = {
    2: (np.array([-1.0 / np.sqrt(3.0), 1.0 / np.sqrt(3.0)]),
        np.array([1.0, 1.0])),
    3: (np.array([-np.sqrt(3.0 / 5.0), 0.0, np.sqrt(3.0 / 5.0)]),
        np.array([5.0 / 9.0, 8.0 / 9.0, 5.0 / 9.0])),
    4: (np.array([-np.sqrt((3.0 + 2.0 * np.sqrt(6.0 / 5.0)) / 7.0),
                  -np.sqrt((3.0 - 2.0 * np.sqrt(6.0 / 5.0)) / 7.0),
                  +np.sqrt((3.0 - 2.0 * np.sqrt(6.0 / 5.0)) / 7.0),
                  +np.sqrt((3.0 + 2.0 * np.sqrt(6.0 / 5.0)) / 7.0)]),
        np.array([(18.0 - np.sqrt(30.0)) / 36.0,
                  (18.0 + np.sqrt(30.0)) / 36.0,
                  (18.0 + np.sqrt(30.0)) / 36.0,
                  (18.0 - np.sqrt(30.0)) / 36.0]))
}


# ======================================================================

def rectangle_rule(func: Callable[[float], float], a: float, b: float,
                   intervals: int) -> float:
    """
    Integrate `func` from `a` to `b` using the composite rectangle
    (left endpoint Riemann sum) rule.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar function to integrate.
    a, b : float
        Lower and upper limits of integration.
    intervals : int
        Number of equal subintervals, must be > 0.

    Returns
    -------
    float
        Approximate value of the integral.

    Raises
    ------
    InvalidArgument
        If `intervals` <= 0.
    RuntimeFailure
        If `func` returns a non-finite value at any sample point.

    Examples
    --------
    >>> rectangle_rule(lambda x: 2 * x, 0.0, 1.0, 4)
    0.75
    """
    _check_intervals(intervals)
    h = (b - a) / intervals
    x = a + h * np.arange(intervals)
    return float(h * np.sum(_sample(func, x)))


def trapezoid_rule(func: Callable[[float], float], a: float, b: float,
                   intervals: int) -> float:
    """
    Integrate `func` from `a` to `b` using the composite trapezoid
    rule.  Endpoints have weight 1/2 and interior points weight 1.

    Parameters and exceptions are the same as `rectangle_rule`.

    Examples
    --------
    >>> trapezoid_rule(lambda x: 2 * x, 0.0, 1.0, 4)
    1.0
    """
    _check_intervals(intervals)
    h = (b - a) / intervals
    x = a + h * np.arange(intervals + 1)
    w = np.ones(intervals + 1)
    w[0] = w[-1] = 0.5
    return float(h * np.dot(w, _sample(func, x)))


def simpson_rule(func: Callable[[float], float], a: float, b: float,
                 intervals: int) -> float:
    """
    Integrate `func` from `a` to `b` using composite Simpson's rule.

    Parameters and exceptions are the same as `rectangle_rule`.

    Notes
    -----
    Simpson's rule requires an even number of subintervals.  If
    `intervals` is odd it is increased by one.

    The rule is exact for polynomials up to cubic order.

    Examples
    --------
    >>> simpson_rule(lambda x: x ** 3, 0.0, 1.0, 1)
    0.25
    """
    _check_intervals(intervals)
    if intervals % 2:
        intervals += 1

    h = (b - a) / intervals
    x = a + h * np.arange(intervals + 1)
    w = np.ones(intervals + 1)
    w[1:-1:2] = 4.0
    w[2:-1:2] = 2.0
    return float(h * np.dot(w, _sample(func, x)) / 3.0)


def gauss_legendre_quadrature(func: Callable[[float], float], a: float,
                              b: float, nodes: int,
                              subintervals: int) -> float:
    """
    Integrate `func` from `a` to `b` using composite Gauss-Legendre
    quadrature.  The interval is split into `subintervals` equal pieces
    and the `nodes`-point rule is mapped onto each piece.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar function to integrate.
    a, b : float
        Lower and upper limits of integration.
    nodes : int
        Number of Gauss points per piece, one of 2, 3 or 4.
    subintervals : int
        Number of equal pieces, must be > 0.

    Returns
    -------
    float
        Approximate value of the integral.

    Raises
    ------
    InvalidArgument
        If `subintervals` <= 0 or `nodes` is not supported.
    RuntimeFailure
        If `func` returns a non-finite value at any Gauss point.

    Notes
    -----
    An `n`-point rule is exact for polynomials of degree `2n - 1` on
    each piece.
    """
    if subintervals <= 0:
        raise InvalidArgument(f"Number of subintervals must be positive, "
                              f"got {subintervals}.")

    t, w = gauss_legendre_rule(nodes)
    h = (b - a) / subintervals
    x_mid = a + h * (np.arange(subintervals) + 0.5)  # Piece centres.

    # Rows are pieces, columns are Gauss points within each piece.
    x = x_mid[:, np.newaxis] + 0.5 * h * t[np.newaxis, :]
    fx = _sample(func, x.ravel()).reshape(x.shape)
    return float(0.5 * h * np.sum(fx @ w))


def gauss_legendre_rule(nodes: int) -> tuple[npt.NDArray[float],
                                             npt.NDArray[float]]:
    """
    Return `(points, weights)` of the `nodes`-point Gauss-Legendre rule
    on [-1, 1].  Copies are returned so the table is never modified.

    Raises
    ------
    InvalidArgument
        If `nodes` is not 2, 3 or 4.

    Examples
    --------
    >>> t, w = gauss_legendre_rule(3)
    >>> t.shape, w.shape
    ((3,), (3,))
    """
    try:
        t, w = _GL_TABLE[nodes]
    except (KeyError, TypeError):
        raise InvalidArgument(f"Gauss-Legendre quadrature is only "
                              f"supported for {sorted(_GL_TABLE)} nodes, "
                              f"got {nodes}.") from None
    return t.copy(), w.copy()


# ----------------------------------------------------------------------

def _check_intervals(intervals: int):
    if intervals <= 0:
        raise InvalidArgument(f"Number of intervals must be positive, "
                              f"got {intervals}.")


def _sample(func: Callable[[float], float],
            x: npt.NDArray[float]) -> npt.NDArray[float]:
    # Evaluate one point at a time so that plain scalar functions
    # (e.g. using `math`) can be integrated.
    fx = np.empty(len(x))
    for i, x_i in enumerate(x):
        try:
            fx[i] = func(float(x_i))
        except OverflowError as e:
            raise RuntimeFailure("Integrand overflowed.",
                                 x=float(x_i)) from e

    bad = ~np.isfinite(fx)
    if np.any(bad):
        i = int(np.argmax(bad))
        raise RuntimeFailure("Integrand returned a non-finite value.",
                             x=float(x[i]), fx=float(fx[i]))
    return fx
