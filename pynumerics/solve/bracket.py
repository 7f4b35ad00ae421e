import warnings
from collections.abc import Callable

import numpy as np

from pynumerics.solve._common import check_interval
from pynumerics.exception import InvalidArgument


# Written by the PyNumerics developers.


# ======================================================================

def find_root_intervals(func: Callable[[float], float], a: float,
                        b: float, step: float = 0.1
                        ) -> list[tuple[float, float]]:
    """
    Scan `[a, b]` in steps of `step` and return every sub-bracket
    `(x1, x2)` over which `func` changes sign.  The brackets are
    suitable starting intervals for `bisection_method` or
    `regula_falsi`.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar function to scan.
    a, b : float
        Interval to scan, with `a` < `b`.
    step : float, default = 0.1
        Width of each sub-bracket, must be > 0.  The last sub-bracket is
        shortened to finish exactly at `b`.

    Returns
    -------
    list[tuple[float, float]]
        Sub-brackets in increasing order of `x`.  May be empty.

    Raises
    ------
    InvalidArgument
        If `step` <= 0, `a` >= `b`, or `step` is below the floating point
        resolution of the scan (`x + step == x`).

    Warns
    -----
    RuntimeWarning
        If any sub-bracket was skipped because `func` returned NaN at
        one of its ends.

    Notes
    -----
    - A sub-bracket is reported when `func` has opposite signs at each
      end.  If a sample point gives exactly zero, the root is reported
      once only, as the right end of a sub-bracket (or the left end of
      the first sub-bracket if it is at `a`).
    - Roots of even multiplicity (e.g. `x**2`) and pairs of roots
      closer together than `step` do not change sign and are not found.

    Examples
    --------
    Equation :math:`y = x^2 -3x + 2` has roots at `x` = 1 and `x` = 2.
    >>> def example_fn(x):
    ...     return x ** 2 - 3 * x + 2
    >>> find_root_intervals(example_fn, 0.0, 3.0, step=0.75)
    [(0.75, 1.5), (1.5, 2.25)]
    """
    if not step > 0.0:
        raise InvalidArgument(f"Step size must be positive, got {step}.")
    check_interval("find_root_intervals", a, b)

    intervals, skipped = [], 0
    x1, y1 = a, func(a)
    while x1 < b:
        x2 = min(x1 + step, b)
        if x2 <= x1:
            raise InvalidArgument(f"Step size {step} is too small to advance "
                                  f"from x = {x1}.")
        y2 = func(x2)

        if np.isnan(y1) or np.isnan(y2):
            skipped += 1
        elif (y1 * y2 < 0 or y2 == 0 or
              (y1 == 0 and x1 == a)):
            intervals.append((x1, x2))

        x1, y1 = x2, y2

    if skipped:
        warnings.warn(f"find_root_intervals skipped {skipped} "
                      f"sub-bracket/s where the function returned NaN.",
                      RuntimeWarning)

    return intervals
