"""
Dense Linear Systems (:mod:`pynumerics.linalg`)
===============================================

.. currentmodule:: pynumerics.linalg

Direct solution of square systems ``A·x = b`` by elimination with
partial pivoting.

.. autosummary::
    :toctree:

    solve_gauss
    solve_lu
    lu_decompose

Notes
-----
All functions work on private copies of `A` and `b`; the caller's
arrays / lists are never modified.
"""
from __future__ import annotations

import numpy as np
import numpy.typing as npt

from pynumerics.exception import InvalidArgument, SingularMatrix

# Written by the PyNumerics developers.

PIVOT_TOL = 1e-12  # Pivots smaller than this are taken as singular.


# ======================================================================

def solve_gauss(A: npt.ArrayLike, b: npt.ArrayLike) -> npt.NDArray[float]:
    """
    Solve ``A·x = b`` using Gauss elimination with partial pivoting
    followed by back substitution.

    Parameters
    ----------
    A : array_like of float, shape (n, n)
        Square coefficient matrix.
    b : array_like of float, shape (n,)
        Right-hand side vector.

    Returns
    -------
    x : np.ndarray of float, shape (n,)
        Solution vector.

    Raises
    ------
    InvalidArgument
        If `A` is empty or not square, or `b` does not match `A`.
    SingularMatrix
        If the magnitude of a pivot is less than `PIVOT_TOL`.

    Examples
    --------
    >>> solve_gauss([[2, 1], [1, 3]], [3, 5])
    array([0.8, 1.4])
    """
    A, b = _as_system(A, b)
    n = len(b)

    for i in range(n):
        _pivot_rows(A, i, b)

        # Eliminate below the pivot.
        factors = A[i + 1:, i] / A[i, i]
        A[i + 1:, i:] -= np.outer(factors, A[i, i:])
        b[i + 1:] -= factors * b[i]

    return _back_substitute(A, b)


def solve_lu(A: npt.ArrayLike, b: npt.ArrayLike) -> npt.NDArray[float]:
    """
    Solve ``A·x = b`` using LU decomposition with partial pivoting.

    The row interchanges found by `lu_decompose` are applied to `b`,
    then ``L·z = b'`` is solved by forward substitution and ``U·x = z``
    by back substitution.

    Parameters, returns and exceptions are the same as `solve_gauss`.
    For the same well-conditioned system both functions agree to within
    rounding.
    """
    A, b = _as_system(A, b)
    perm, L, U = lu_decompose(A)
    z = _forward_substitute(L, b[perm])
    return _back_substitute(U, z)


def lu_decompose(A: npt.ArrayLike) -> tuple[npt.NDArray[int],
                                            npt.NDArray[float],
                                            npt.NDArray[float]]:
    """
    Factorise a square matrix as ``A[perm] = L·U`` using partial
    pivoting.

    Parameters
    ----------
    A : array_like of float, shape (n, n)
        Square matrix.

    Returns
    -------
    perm : np.ndarray of int, shape (n,)
        Row permutation applied to `A` by pivoting.
    L : np.ndarray of float, shape (n, n)
        Unit lower triangular factor.
    U : np.ndarray of float, shape (n, n)
        Upper triangular factor.

    Raises
    ------
    InvalidArgument
        If `A` is empty or not square.
    SingularMatrix
        If the magnitude of a pivot is less than `PIVOT_TOL`.
    """
    U = _as_square(A)
    n = U.shape[0]
    L = np.eye(n)
    perm = np.arange(n)

    for k in range(n):
        p = _pivot_rows(U, k, perm)
        if p != k:
            # Multipliers already stored for earlier columns move with
            # their rows.
            L[[k, p], :k] = L[[p, k], :k]

        factors = U[k + 1:, k] / U[k, k]
        L[k + 1:, k] = factors
        U[k + 1:, k:] -= np.outer(factors, U[k, k:])

    return perm, L, U


# ----------------------------------------------------------------------

def _as_square(A: npt.ArrayLike) -> npt.NDArray[float]:
    # Returns a private float copy of a non-empty square matrix.
    try:
        A = np.array(A, dtype=float, copy=True)
    except (ValueError, TypeError) as e:
        raise InvalidArgument("Matrix must be a rectangular array of "
                              "numbers.") from e

    if A.ndim != 2 or A.shape[0] == 0 or A.shape[0] != A.shape[1]:
        raise InvalidArgument(f"Matrix must be square with n >= 1, got "
                              f"shape {A.shape}.")
    return A


def _as_system(A: npt.ArrayLike, b: npt.ArrayLike
               ) -> tuple[npt.NDArray[float], npt.NDArray[float]]:
    A = _as_square(A)
    try:
        b = np.array(b, dtype=float, copy=True)
    except (ValueError, TypeError) as e:
        raise InvalidArgument("Vector must be a 1D array of "
                              "numbers.") from e

    if b.shape != (A.shape[0],):
        raise InvalidArgument(f"Vector shape {b.shape} does not match "
                              f"matrix shape {A.shape}.")
    return A, b


def _pivot_rows(A: npt.NDArray[float], i: int,
                follow: npt.NDArray) -> int:
    # Swap the row with the largest |A[:, i]| at or below `i` into
    # position `i`, applying the same swap to `follow`.  Returns the
    # original index of the pivot row.
    p = i + int(np.argmax(np.abs(A[i:, i])))
    if p != i:
        A[[i, p]] = A[[p, i]]
        follow[[i, p]] = follow[[p, i]]

    if abs(A[i, i]) < PIVOT_TOL:
        raise SingularMatrix("Matrix is singular or nearly singular.",
                             row=i, pivot=float(A[i, i]))
    return p


def _forward_substitute(L: npt.NDArray[float],
                        b: npt.NDArray[float]) -> npt.NDArray[float]:
    # L is unit lower triangular.
    n = len(b)
    z = np.zeros(n)
    for i in range(n):
        z[i] = b[i] - np.dot(L[i, :i], z[:i])
    return z


def _back_substitute(U: npt.NDArray[float],
                     b: npt.NDArray[float]) -> npt.NDArray[float]:
    n = len(b)
    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        x[i] = (b[i] - np.dot(U[i, i + 1:], x[i + 1:])) / U[i, i]
    return x
