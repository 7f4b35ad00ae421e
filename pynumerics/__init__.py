"""
.. This module acts as the top-level API documentation.

.. module: pynumerics

Numerical methods for quadrature, dense linear systems, interpolation,
root finding, ODE stepping and least-squares polynomial approximation.

.. autosummary::
    :toctree: generated/

    approximate
    exception
    integrate
    interpolate
    linalg
    ode
    solve
"""

__version__ = "0.1.0"

import sys

# Written by the PyNumerics developers.

# ======================================================================

assert sys.version_info >= (3, 10)

from pynumerics.approximate import (APPROX_INTERVALS, poly_eval,
                                    polynomial_approximation)
from pynumerics.exception import (ConvergenceFailure, InvalidArgument,
                                  RuntimeFailure, SingularMatrix,
                                  SolverError)
from pynumerics.integrate import (gauss_legendre_quadrature,
                                  gauss_legendre_rule, rectangle_rule,
                                  simpson_rule, trapezoid_rule)
from pynumerics.interpolate import (lagrange_interpolation,
                                    newton_interpolation, newton_poly_coeff)
from pynumerics.linalg import lu_decompose, solve_gauss, solve_lu
from pynumerics.ode import (Trajectory, euler_method, heun_method,
                            midpoint_method, rk4_method)
from pynumerics.solve import (IterationRecord, bisection_method,
                              find_root_intervals, newton_method,
                              numeric_derivative, regula_falsi,
                              secant_method)
