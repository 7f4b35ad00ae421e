from collections.abc import Callable

from pynumerics.exception import ConvergenceFailure
from pynumerics.solve._common import (check_bracket, check_finite,
                                      check_interval, check_iteration_args)


# Written by the PyNumerics developers.


# ----------------------------------------------------------------------------

def bisection_method(func: Callable[[float], float], a: float, b: float,
                     tol: float = 1e-7, maxits: int = 100,
                     verbose: bool = False) -> float:
    # noinspection PyUnresolvedReferences
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in [a,
    b]` by the bisection method. For bisection to work :math:`f(x)` must
    change sign across the interval, i.e. ``func(a)`` and ``func(b)`` must
    return values of opposite sign.

    Examples
    --------
    >>> f = lambda x: x**2 - x - 1
    >>> bisection_method(f, 1, 2, tol=1e-5)  # This will take 17 iterations.
    1.6180343627929688
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> bisection_method(f, 0, 1)  # Only 1 it. (soln was in centre).
    0.5

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    a, b : float
        Each end of the search interval, with `a` < `b`.
    tol : float, default = 1e-7
        End search when :math:`|f(x_m)| < tol` or the interval width is
        less than `tol`.
    maxits : int, default = 100
        Maximum number of iterations.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    x_m : float
        Best estimate of root found i.e. :math:`f(x_m) \approx 0`.

    Raises
    ------
    InvalidArgument
        If `tol` <= 0, `maxits` <= 0, `a` >= `b` or `func(a)` and
        `func(b)` do not have opposite signs.
    RuntimeFailure
        If `func` returns NaN.
    ConvergenceFailure
        If `maxits` is reached before a solution is found.
    """
    method = "Bisection method"
    maxits = check_iteration_args(method, maxits, tol=tol)
    check_interval(method, a, b)

    if verbose:
        print(f"Bisecting Root:")

    fa, fb = func(a), func(b)
    check_bracket(method, a, b, fa, fb)

    x_m = a
    for it in range(1, maxits + 1):
        # Compute midpoint.
        x_m = 0.5 * (a + b)
        f_m = func(x_m)
        check_finite(method, "midpoint", x=x_m, fx=f_m)

        if verbose:
            print(f"... Iteration {it}: x = [{a}, {x_m}, {b}], "
                  f"f = [{fa}, {f_m}, {fb}]")

        # Check stopping criteria.
        if abs(f_m) < tol or abs(b - a) < tol:
            return x_m

        # Check which side root is on, narrow interval.
        if fa * f_m < 0:
            b, fb = x_m, f_m
        else:
            a, fa = x_m, f_m

    raise ConvergenceFailure(f"{method} did not converge within {maxits} "
                             f"iterations.", x=x_m, a=a, b=b, its=maxits)
