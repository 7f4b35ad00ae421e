"""
==========================================
Root Finding (:mod:`pynumerics.solve`)
==========================================

.. currentmodule:: pynumerics.solve

Functions for finding the zeros of scalar functions.  Bracketing
methods (`bisection_method`, `regula_falsi`) always converge once a
sign change is known; `find_root_intervals` can be used to locate
suitable brackets.  Open methods (`newton_method`, `secant_method`)
converge faster but may fail.

Functions
---------

.. autosummary::
    :toctree:

    bisection_method
    find_root_intervals
    newton_method
    numeric_derivative
    regula_falsi
    secant_method

Types
-----

.. autosummary::
    :toctree:

    IterationRecord
"""

from .bisect_root import bisection_method
from .bracket import find_root_intervals
from .newton import newton_method, numeric_derivative, secant_method
from .regula_falsi import IterationRecord, regula_falsi
