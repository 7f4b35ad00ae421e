"""
Polynomial Approximation (:mod:`pynumerics.approximate`)
========================================================

.. currentmodule:: pynumerics.approximate

Continuous least-squares approximation of a function by a polynomial in
the monomial basis.

.. autosummary::
    :toctree:

    polynomial_approximation
    poly_eval
"""
from __future__ import annotations

import operator
from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from pynumerics.exception import InvalidArgument
from pynumerics.integrate import simpson_rule
from pynumerics.linalg import solve_gauss

# Written by the PyNumerics developers.

APPROX_INTERVALS = 1000  # Default Simpson subintervals per integral.


# ======================================================================

def polynomial_approximation(func: Callable[[float], float], degree: int,
                             a: float, b: float, *,
                             intervals: int = APPROX_INTERVALS
                             ) -> npt.NDArray[float]:
    r"""
    Find the coefficients of the polynomial of given `degree` that best
    approximates `func` on `[a, b]` in the least-squares sense, i.e.
    minimising:

    .. math:: \int_a^b \left(f(x) - \sum_{i=0}^{n} c_i x^i\right)^2 dx

    This is done by solving the normal equations ``A·c = B`` where the
    Gram matrix is :math:`A_{ij} = \int_a^b x^{i+j} dx` and
    :math:`B_i = \int_a^b f(x) x^i dx`.

    Parameters
    ----------
    func : Callable[[float], float]
        Function to approximate.
    degree : int
        Degree of the approximating polynomial, must be >= 0.
    a, b : float
        Interval of approximation.
    intervals : int, default = APPROX_INTERVALS
        Number of Simpson subintervals used for each integral.

    Returns
    -------
    np.ndarray of float, shape (degree + 1,)
        Coefficients `[c0, c1, ..., c_degree]` in increasing powers of
        `x`.

    Raises
    ------
    InvalidArgument
        If `degree` < 0 or is not an integer, or `intervals` <= 0.
    RuntimeFailure
        If `func` returns a non-finite value at a quadrature point.
    SingularMatrix
        If the Gram matrix is numerically singular.  This occurs for
        degenerate intervals (``a == b``) and for high degree fits where
        the monomial basis is ill-conditioned.

    Notes
    -----
    - All integrals use `simpson_rule`.  Because the Gram matrix only
      depends on ``i + j``, the `2 * degree + 1` moments
      :math:`\int_a^b x^k dx` are each computed once.

    - Errors from the quadrature and solver layers are not caught here.

    Examples
    --------
    The best straight line through :math:`y = 2 + 3x` is itself:
    >>> c = polynomial_approximation(lambda x: 2 + 3 * x, 1, -1.0, 2.0)
    >>> [round(float(c_i), 9) for c_i in c]
    [2.0, 3.0]
    """
    try:
        degree = operator.index(degree)
    except TypeError:
        raise InvalidArgument(f"Degree of polynomial must be an integer, "
                              f"got {degree!r}.") from None
    if degree < 0:
        raise InvalidArgument(f"Degree of polynomial must be "
                              f"non-negative, got {degree}.")

    n = degree + 1
    moments = np.array([simpson_rule(_monomial(k), a, b, intervals)
                        for k in range(2 * n - 1)])
    gram = np.array([moments[i:i + n] for i in range(n)])
    rhs = np.array([simpson_rule(_weighted(func, i), a, b, intervals)
                    for i in range(n)])

    return solve_gauss(gram, rhs)


def poly_eval(coeffs: npt.ArrayLike,
              x: npt.ArrayLike) -> float | npt.NDArray[float]:
    """
    Evaluate the polynomial ``c0 + c1·x + ... + cn·x^n`` at `x` using
    Horner's scheme.

    Parameters
    ----------
    coeffs : array_like of float, shape (n + 1,)
        Coefficients in increasing powers of `x`, as returned by
        `polynomial_approximation`.
    x : float or array_like of float
        Point/s at which to evaluate the polynomial.

    Returns
    -------
    float or np.ndarray
        Polynomial value/s, a `float` if `x` is scalar.

    Examples
    --------
    >>> poly_eval([1, 2, 3], 2.0)
    17.0
    """
    coeffs = np.asarray(coeffs, dtype=float)
    if coeffs.ndim != 1 or coeffs.size == 0:
        raise InvalidArgument("Coefficients must be a non-empty 1D "
                              "array.")

    x = np.asarray(x, dtype=float)
    p = np.full_like(x, coeffs[-1])
    for c in coeffs[-2::-1]:
        p = c + x * p

    return float(p) if np.ndim(p) == 0 else p


# ----------------------------------------------------------------------

def _monomial(k: int) -> Callable[[float], float]:
    return lambda x: x ** k


def _weighted(func: Callable[[float], float],
              i: int) -> Callable[[float], float]:
    return lambda x: func(x) * x ** i
