"""
Interpolation (:mod:`pynumerics.interpolate`)
=============================================

.. currentmodule:: pynumerics.interpolate

Evaluation of the unique polynomial passing through a set of `(x, y)`
nodes, in either Lagrange or Newton form.

.. autosummary::
    :toctree:

    lagrange_interpolation
    newton_interpolation
    newton_poly_coeff
"""
from __future__ import annotations

import numpy as np
import numpy.typing as npt

from pynumerics.exception import InvalidArgument


# Written by the PyNumerics developers.


# ======================================================================

def lagrange_interpolation(nodes: npt.ArrayLike,
                           x: npt.ArrayLike) -> float | npt.NDArray[float]:
    r"""
    Evaluate the Lagrange interpolating polynomial through `nodes` at
    `x`:

    .. math:: P(x) = \sum_i y_i \prod_{j \neq i} \frac{x - x_j}{x_i - x_j}

    Parameters
    ----------
    nodes : array_like of float, shape (n, 2)
        Sequence of `(x, y)` points.  `x` values must be distinct but
        need not be sorted.
    x : float or array_like of float
        Point/s at which to evaluate the polynomial.

    Returns
    -------
    float or np.ndarray
        Interpolated value/s, a `float` if `x` is scalar.

    Raises
    ------
    InvalidArgument
        If `nodes` is empty or malformed, or two nodes share an `x`
        value.

    Examples
    --------
    >>> lagrange_interpolation([(0, 1), (1, 3), (2, 7)], 1.5)
    4.75
    """
    x_pts, y_pts = _split_nodes(nodes)
    x = np.asarray(x, dtype=float)
    n = len(x_pts)

    result = np.zeros_like(x)
    for i in range(n):
        basis = np.ones_like(x)
        for j in range(n):
            if i == j:
                continue
            if x_pts[i] == x_pts[j]:
                raise InvalidArgument(f"Interpolation nodes must have "
                                      f"unique x values, got "
                                      f"x = {x_pts[i]} repeated.")
            basis *= (x - x_pts[j]) / (x_pts[i] - x_pts[j])

        result += y_pts[i] * basis

    return _return_scalar(result)


def newton_interpolation(nodes: npt.ArrayLike,
                         x: npt.ArrayLike) -> float | npt.NDArray[float]:
    """
    Evaluate the Newton form of the interpolating polynomial through
    `nodes` at `x`.

    The Newton polynomial of degree `n - 1` is given by::

        P(x) = [y_0] + [y_0, y_1](x - x_0) + ... +
               [y_0, ..., y_n-1](x - x_0)(x - x_1)...(x - x_n-2)

    where `[...]` are the divided differences computed by
    `newton_poly_coeff`.  This is evaluated using Horner's scheme.

    Parameters, returns and exceptions are the same as
    `lagrange_interpolation`, except that duplicate `x` values are
    detected before any computation starts.  Both functions give the
    same result for the same nodes (to within rounding).

    Examples
    --------
    >>> newton_interpolation([(0, 1), (1, 3), (2, 7)], 1.5)
    4.75
    """
    x_pts, y_pts = _split_nodes(nodes)
    if len(np.unique(x_pts)) != len(x_pts):
        raise InvalidArgument("Interpolation nodes must have unique x "
                              "values.")

    x = np.asarray(x, dtype=float)
    a = newton_poly_coeff(x_pts, y_pts)
    n = len(x_pts) - 1  # Degree of interpolating polynomial.
    p = np.full_like(x, a[n])

    for k in range(1, n + 1):
        p = a[n - k] + (x - x_pts[n - k]) * p

    return _return_scalar(p)


# ----------------------------------------------------------------------

def newton_poly_coeff(x: npt.ArrayLike,
                      y: npt.ArrayLike) -> npt.NDArray[float]:
    """
    Generate an array of increasing divided differences for multiple
    points `(x, y)`. These are the coefficients of the interpolating
    polynomial in Newton form.

    The array contains the divided differences arranged as follows::

        `[[y0], [y0, y1], [y0, y1, y2], ...]`

    Where `[y_i, ..., y_j]` is the divided difference operator that also
    depends on the `x` values.  This can also be written `f[x_i, ...,
    x_j]`.

    Parameters
    ----------
    x, y : array_like of float, shape (n,)
        Arrays of `x` and `y` values.  `x` values must be distinct.

    Returns
    -------
    np.ndarray of float, shape (n,)
        Array of divided differences `[f[x0], f[x1, x0], f[x2, x1, x0],
        ...]`.

    Notes
    -----
    - Each pass `j` updates the working array from the bottom up, i.e.
      ``c[i] = (c[i] - c[i-1]) / (x[i] - x[i-j])`` for ``i = n-1, ...,
      j``.  Slicing evaluates the right-hand side before assignment,
      giving the same result.

    - Inputs are cast to `float` as purely integer parameters may result
      in integer division giving incorrect results.

    References
    ----------
    .. [1] Divided differences (matrix form):
           https://en.wikipedia.org/wiki/Divided_differences#Matrix_form

    Examples
    --------
    Points on the parabola :math:`y = x^2 + x + 1`:
    >>> newton_poly_coeff([0, 1, 2], [1, 3, 7])
    array([1., 2., 1.])
    """
    x = np.asarray(x, dtype=float)
    c = np.array(y, dtype=float, copy=True)
    if (np.ndim(x) != 1) or (x.shape != c.shape):
        raise InvalidArgument("'x' and 'y' must have the same shape (n,).")

    n = len(x)
    for j in range(1, n):
        c[j:] = (c[j:] - c[j - 1:-1]) / (x[j:] - x[:n - j])

    return c


# ----------------------------------------------------------------------

def _return_scalar(x: npt.NDArray[float]) -> float | npt.NDArray[float]:
    return float(x) if x.ndim == 0 else x


def _split_nodes(nodes: npt.ArrayLike) -> tuple[npt.NDArray[float],
                                                npt.NDArray[float]]:
    try:
        pts = np.asarray(nodes, dtype=float)
    except (ValueError, TypeError) as e:
        raise InvalidArgument("Nodes must be a sequence of (x, y) "
                              "pairs.") from e

    if pts.size == 0:
        raise InvalidArgument("Node list cannot be empty.")
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidArgument(f"Nodes must be a sequence of (x, y) pairs, "
                              f"got shape {pts.shape}.")

    return pts[:, 0], pts[:, 1]
