"""
Argument checks and constants shared by the scalar root finders.
"""
import operator

import numpy as np

from pynumerics.exception import InvalidArgument, RuntimeFailure

# Written by the PyNumerics developers.

SMALL = 100 * np.finfo(float).eps  # Near-zero guard for denominators.


# ======================================================================

def check_iteration_args(method: str, maxits: int, **tols: float) -> int:
    """
    Check that all tolerances given as keyword arguments are > 0 and
    `maxits` is a positive integer.  Returns `maxits` as an `int`.
    """
    for name, tol in tols.items():
        if not tol > 0.0:
            raise InvalidArgument(f"{method}: '{name}' must be positive, "
                                  f"got {tol}.")

    try:
        maxits = operator.index(maxits)
    except TypeError:
        raise InvalidArgument(f"{method}: 'maxits' must be an integer, "
                              f"got {maxits!r}.") from None
    if maxits <= 0:
        raise InvalidArgument(f"{method}: 'maxits' must be positive, got "
                              f"{maxits}.")
    return maxits


def check_bracket(method: str, a: float, b: float, fa: float, fb: float):
    """
    Check that `a` < `b` has already been established and that `fa`,
    `fb` are valid and of opposite sign.
    """
    check_finite(method, "endpoint", a=a, fa=fa, b=b, fb=fb)
    if fa * fb >= 0:
        raise InvalidArgument(f"{method}: f(a) and f(b) must have "
                              f"opposite signs, got f({a}) = {fa} and "
                              f"f({b}) = {fb}.")


def check_finite(method: str, where: str, **values: float):
    """
    Raise `RuntimeFailure` if any of the keyword values is NaN.  The
    values are attached to the exception.
    """
    if any(np.isnan(v) for v in values.values()):
        raise RuntimeFailure(f"{method}: Function returned NaN at "
                             f"{where}.", **values)


def check_interval(method: str, a: float, b: float):
    if a >= b:
        raise InvalidArgument(f"{method}: Interval [a, b] must have "
                              f"a < b, got [{a}, {b}].")
