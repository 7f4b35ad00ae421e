from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from pynumerics.exception import ConvergenceFailure, RuntimeFailure
from pynumerics.solve._common import (SMALL, check_bracket, check_finite,
                                      check_interval, check_iteration_args)


# Written by the PyNumerics developers.


# ======================================================================

class IterationRecord(NamedTuple):
    """Progress of a single `regula_falsi` iteration."""
    its: int  #: Iteration number, starting from zero.
    x: float  #: Root estimate.
    fx: float  #: Function value at `x`.
    error: float  #: Distance from the previous estimate.


# ----------------------------------------------------------------------

def regula_falsi(func: Callable[[float], float], a: float, b: float,
                 tol_fx: float = 1e-7, tol_dx: float = 1e-7,
                 maxits: int = 100, *,
                 history: list[IterationRecord] | None = None,
                 verbose: bool = False) -> float:
    r"""
    Find a zero of `func` on `[a, b]` using the method of false position
    (regula falsi).  This is similar to bisection except that the new
    point is where the chord between the bracket ends crosses zero:

    .. math:: x = \frac{a f(b) - b f(a)}{f(b) - f(a)}

    The end of the bracket having the same sign as `f(x)` is then
    replaced by `x`, so the root always remains bracketed.

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    a, b : float
        Ends of the search interval, with `a` < `b`.  `func(a)` and
        `func(b)` must have opposite signs.
    tol_fx : float, default = 1e-7
        Stop when :math:`|f(x)| < tol_{fx}`.
    tol_dx : float, default = 1e-7
        Stop when successive estimates differ by less than `tol_dx`.
    maxits : int, default = 100
        Maximum number of iterations.
    history : list[IterationRecord], optional
        If provided, this list is cleared and one `IterationRecord` is
        appended for each iteration.  The list is still filled if an
        exception occurs part way through.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    float
        Estimate of the root.

    Raises
    ------
    InvalidArgument
        If `tol_fx` <= 0, `tol_dx` <= 0, `maxits` <= 0, `a` >= `b` or
        `func(a)` and `func(b)` do not have opposite signs.
    RuntimeFailure
        If `func` returns NaN, or ``|f(b) - f(a)| < SMALL``.
    ConvergenceFailure
        If `maxits` is reached before a solution is found.

    Notes
    -----
    The `error` of the first `IterationRecord` is measured from `a`.

    Examples
    --------
    >>> log = []
    >>> x = regula_falsi(lambda x: x ** 2 - 2, 1.0, 2.0, history=log)
    >>> abs(x - 2 ** 0.5) < 1e-6, log[0].x == 4 / 3
    (True, True)
    """
    method = "Regula Falsi"
    maxits = check_iteration_args(method, maxits, tol_fx=tol_fx,
                                  tol_dx=tol_dx)
    check_interval(method, a, b)
    if history is not None:
        history.clear()
    if verbose:
        print(f"Regula Falsi Root:")

    fa, fb = func(a), func(b)
    check_bracket(method, a, b, fa, fb)

    x = a
    for it in range(maxits):
        if abs(fb - fa) < SMALL:
            raise RuntimeFailure(f"{method}: Difference f(b) - f(a) is too "
                                 f"small, cannot proceed.", a=a, b=b,
                                 fa=fa, fb=fb, its=it)

        x_prev = x
        x = (a * fb - b * fa) / (fb - fa)
        fx = func(x)
        check_finite(method, "iterate", x=x, fx=fx)

        error = abs(x - x_prev)
        if history is not None:
            history.append(IterationRecord(it, x, fx, error))
        if verbose:
            print(f"... Iteration {it}: x = [{a}, {x}, {b}], "
                  f"f = [{fa}, {fx}, {fb}]")

        if abs(fx) < tol_fx or error < tol_dx:
            return x

        if fa * fx < 0:
            b, fb = x, fx
        else:
            a, fa = x, fx

    raise ConvergenceFailure(f"{method} did not converge within {maxits} "
                             f"iterations.", x=x, a=a, b=b, its=maxits)
