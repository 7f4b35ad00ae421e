"""
Open (non-bracketing) root finders: Newton-Raphson using a numerical
derivative, and the secant method.  Neither method is guaranteed to
converge; a failure to do so is always reported by an exception rather
than by returning the last estimate.
"""
from collections.abc import Callable

from pynumerics.exception import (ConvergenceFailure, InvalidArgument,
                                  RuntimeFailure)
from pynumerics.solve._common import (SMALL, check_finite,
                                      check_iteration_args)

# Written by the PyNumerics developers.

DERIV_STEP = 1e-7  # Central difference step used by `newton_method`.


# ---------------------------------------------------------------------------

def numeric_derivative(func: Callable[[float], float], x: float,
                       h: float = DERIV_STEP) -> float:
    """
    Estimate `f'(x)` using the central difference ``(f(x + h) - f(x -
    h)) / 2h``.

    Raises
    ------
    InvalidArgument
        If `h` <= 0.
    RuntimeFailure
        If either `f(x + h)` or `f(x - h)` is NaN.

    Examples
    --------
    >>> round(numeric_derivative(lambda x: x ** 2, 3.0), 6)
    6.0
    """
    if not h > 0.0:
        raise InvalidArgument(f"Derivative step 'h' must be positive, "
                              f"got {h}.")
    f_plus, f_minus = func(x + h), func(x - h)
    check_finite("Numeric derivative", "x ± h", x=x, f_plus=f_plus,
                 f_minus=f_minus)
    return (f_plus - f_minus) / (2 * h)


# ---------------------------------------------------------------------------

def newton_method(func: Callable[[float], float], x0: float,
                  tol: float = 1e-7, maxits: int = 100,
                  verbose: bool = False) -> float:
    """
    Find a zero of `func` using the Newton-Raphson method, starting from
    `x0`.  The derivative is estimated at each step by
    `numeric_derivative` with step `DERIV_STEP`.

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x0 : float
        Starting point.
    tol : float, default = 1e-7
        Stop when successive estimates differ by less than `tol`.
    maxits : int, default = 100
        Maximum number of iterations.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    float
        Estimate of the root.

    Raises
    ------
    InvalidArgument
        If `tol` <= 0 or `maxits` <= 0.
    RuntimeFailure
        If `func` or its derivative is NaN, or the magnitude of the
        derivative is less than `SMALL` (i.e. a level state was reached).
    ConvergenceFailure
        If `maxits` is reached before a solution is found.

    Examples
    --------
    >>> x = newton_method(lambda x: x ** 2 - 2, 1.0)
    >>> round(x, 10)
    1.4142135624
    """
    method = "Newton's method"
    maxits = check_iteration_args(method, maxits, tol=tol)
    if verbose:
        print(f"Newton-Raphson Root:")

    x = x0
    for it in range(1, maxits + 1):
        fx = func(x)
        check_finite(method, "iterate", x=x, fx=fx)
        dfx = numeric_derivative(func, x)
        check_finite(method, "derivative", x=x, dfx=dfx)

        if abs(dfx) < SMALL:
            raise RuntimeFailure(f"{method}: Derivative is too close to "
                                 f"zero, cannot proceed.", x=x, fx=fx,
                                 dfx=dfx, its=it)

        x_next = x - fx / dfx
        if verbose:
            print(f"... Iteration {it}: x = {x_next}, f = {fx}, "
                  f"f' = {dfx}")

        if abs(x_next - x) < tol:
            return x_next
        x = x_next

    raise ConvergenceFailure(f"{method} did not converge within {maxits} "
                             f"iterations.", x=x, its=maxits)


def secant_method(func: Callable[[float], float], x0: float, x1: float,
                  tol: float = 1e-7, maxits: int = 100,
                  verbose: bool = False) -> float:
    """
    Find a zero of `func` using the secant method, starting from the
    two points `x0` and `x1`.  These do not need to bracket the root.

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x0, x1 : float
        Starting points, which must not be too close together.
    tol : float, default = 1e-7
        Stop when successive estimates differ by less than `tol`.
    maxits : int, default = 100
        Maximum number of iterations.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    float
        Estimate of the root.

    Raises
    ------
    InvalidArgument
        If `tol` <= 0, `maxits` <= 0 or ``|x1 - x0| < SMALL``.
    RuntimeFailure
        If `func` returns NaN, or ``|f(x1) - f(x0)| < SMALL`` (i.e. a
        level state was reached).
    ConvergenceFailure
        If `maxits` is reached before a solution is found.

    Examples
    --------
    >>> x = secant_method(lambda x: x ** 2 - 2, 1.0, 2.0)
    >>> round(x, 10)
    1.4142135624
    """
    method = "Secant method"
    maxits = check_iteration_args(method, maxits, tol=tol)
    if abs(x1 - x0) < SMALL:
        raise InvalidArgument(f"{method}: Initial points x0 = {x0} and "
                              f"x1 = {x1} are too close.")
    if verbose:
        print(f"Secant Root:")

    f0, f1 = func(x0), func(x1)
    check_finite(method, "initial points", x0=x0, f0=f0, x1=x1, f1=f1)

    for it in range(1, maxits + 1):
        if abs(f1 - f0) < SMALL:
            raise RuntimeFailure(f"{method}: Difference f(x1) - f(x0) is "
                                 f"too small, cannot proceed.", x0=x0,
                                 x1=x1, f0=f0, f1=f1, its=it)

        x2 = x1 - f1 * (x1 - x0) / (f1 - f0)
        f2 = func(x2)
        check_finite(method, "iterate", x=x2, fx=f2)
        if verbose:
            print(f"... Iteration {it}: x = {x2}, f = {f2}")

        if abs(x2 - x1) < tol:
            return x2

        x0, f0 = x1, f1
        x1, f1 = x2, f2

    raise ConvergenceFailure(f"{method} did not converge within {maxits} "
                             f"iterations.", x=x1, its=maxits)
