"""
Exceptions (:mod:`pynumerics.exception`)
========================================

.. currentmodule:: pynumerics.exception

Exceptions raised by the numerical routines in PyNumerics:

- `InvalidArgument`: Malformed input detected before any computation
  starts.  Derived from `ValueError`.
- `SolverError`: Base class for failures that occur *during* a
  computation.  Derived from `RuntimeError`.
    - `SingularMatrix`: A pivot fell below the singularity threshold.
    - `RuntimeFailure`: A function value or derived quantity became
      non-finite or numerically degenerate.
    - `ConvergenceFailure`: An iterative method reached its iteration
      limit.
"""


# Written by the PyNumerics developers.


# ======================================================================

class InvalidArgument(ValueError):
    """
    Raised for illegal arguments (non-positive steps or tolerances,
    dimension mismatches, reversed intervals, unsupported rule sizes,
    brackets without a sign change, etc).
    """
    pass


# ----------------------------------------------------------------------

class SolverError(RuntimeError):
    """
    This exception is raised when an algorithm / solver / etc fails
    part way through.  Additional information (optional) is included
    to allow the reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result. Typically `flag` != 0 as many error code systems
            assume that `flag` == 0 implies that the solution was
            successful.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


class SingularMatrix(SolverError):
    """
    Raised when the magnitude of a pivot falls below the singularity
    threshold during elimination.  Attributes `row` and `pivot` give
    the elimination step and the offending value.
    """
    pass


class RuntimeFailure(SolverError):
    """
    Raised when a function evaluation, derivative or denominator becomes
    non-finite or too close to zero to continue.
    """
    pass


class ConvergenceFailure(SolverError):
    """
    Raised when an iterative method exhausts its iteration limit.
    Attributes normally include the last estimate `x` and the number of
    iterations `its`.
    """
    pass
