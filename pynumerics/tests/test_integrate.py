import math
from functools import partial

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.integrate import quad

from pynumerics.exception import InvalidArgument, RuntimeFailure
from pynumerics.integrate import (gauss_legendre_quadrature,
                                  gauss_legendre_rule, rectangle_rule,
                                  simpson_rule, trapezoid_rule)


# ======================================================================

_rules = [rectangle_rule, trapezoid_rule, simpson_rule,
          partial(gauss_legendre_quadrature, nodes=3)]


def _call(rule, func, a, b, n):
    # Gauss-Legendre takes `subintervals` in place of `intervals`.
    if isinstance(rule, partial):
        return rule(func, a, b, subintervals=n)
    return rule(func, a, b, n)


# ----------------------------------------------------------------------

@pytest.mark.parametrize("intervals", [1, 2, 3, 4, 7, 10, 1000])
def test_simpson_exact_cubic(intervals: int):
    assert simpson_rule(lambda x: x ** 3, 0.0, 1.0, intervals) == (
        pytest.approx(0.25, abs=1e-12))


def test_simpson_odd_intervals():
    # Odd interval counts are rounded up to the next even number.
    def f(x):
        return math.exp(x) * math.sin(3 * x)

    assert simpson_rule(f, -1.0, 2.0, 5) == simpson_rule(f, -1.0, 2.0, 6)
    assert simpson_rule(f, -1.0, 2.0, 5) != simpson_rule(f, -1.0, 2.0, 4)


@pytest.mark.parametrize("rule, rel", [
    (rectangle_rule, 1e-3),
    (trapezoid_rule, 1e-6),
    (simpson_rule, 1e-12),
    (partial(gauss_legendre_quadrature, nodes=2), 1e-9),
    (partial(gauss_legendre_quadrature, nodes=3), 1e-12),
    (partial(gauss_legendre_quadrature, nodes=4), 1e-12)])
def test_rules_against_scipy(rule, rel: float):
    a, b = 0.0, 1.0
    exact, _ = quad(math.exp, a, b)
    assert _call(rule, math.exp, a, b, 1000) == pytest.approx(exact, rel=rel)


def test_rectangle_trapezoid_small():
    # Left rectangle and trapezoid of a straight line over 4 intervals.
    assert rectangle_rule(lambda x: 2 * x, 0.0, 1.0, 4) == 0.75
    assert trapezoid_rule(lambda x: 2 * x, 0.0, 1.0, 4) == 1.0


@pytest.mark.parametrize("rule", _rules)
def test_reversed_limits(rule):
    fwd = _call(rule, math.cos, 0.0, 1.0, 10)
    rev = _call(rule, math.cos, 1.0, 0.0, 10)
    if rule is rectangle_rule:
        # Left endpoints differ when reversed, only check sign / size.
        assert rev == pytest.approx(-fwd, rel=0.1)
    else:
        assert rev == pytest.approx(-fwd, rel=1e-12)


@pytest.mark.parametrize("rule", _rules)
def test_repeatable(rule):
    f = partial(math.pow, 2.0)
    assert _call(rule, f, -1.0, 3.0, 17) == _call(rule, f, -1.0, 3.0, 17)


# ----------------------------------------------------------------------

@pytest.mark.parametrize("nodes", [2, 3, 4])
def test_gauss_legendre_exact(nodes: int):
    # An n-point rule is exact for polynomials of degree 2n - 1.
    deg = 2 * nodes - 1
    coeffs = np.arange(1.0, deg + 2.0)  # c0 = 1, c1 = 2, ...
    f = partial(np.polynomial.polynomial.polyval, c=coeffs)
    a, b = -1.0, 2.0
    P = np.polynomial.Polynomial(coeffs).integ()
    exact = P(b) - P(a)

    assert gauss_legendre_quadrature(f, a, b, nodes, 1) == (
        pytest.approx(exact, rel=1e-12))
    assert gauss_legendre_quadrature(f, a, b, nodes, 7) == (
        pytest.approx(exact, rel=1e-12))


@pytest.mark.parametrize("nodes", [2, 3, 4])
def test_gauss_legendre_rule(nodes: int):
    t, w = gauss_legendre_rule(nodes)
    t_ref, w_ref = np.polynomial.legendre.leggauss(nodes)
    assert_allclose(t, t_ref, atol=1e-14)
    assert_allclose(w, w_ref, atol=1e-14)

    # Copies are returned.
    t[:] = 0.0
    assert_allclose(gauss_legendre_rule(nodes)[0], t_ref, atol=1e-14)


@pytest.mark.parametrize("nodes", [-1, 0, 1, 5, 2.5, None])
def test_gauss_legendre_bad_nodes(nodes):
    with pytest.raises(InvalidArgument):
        gauss_legendre_quadrature(math.sin, 0.0, 1.0, nodes, 10)


@pytest.mark.parametrize("subintervals", [0, -2])
def test_gauss_legendre_bad_subintervals(subintervals: int):
    with pytest.raises(InvalidArgument):
        gauss_legendre_quadrature(math.sin, 0.0, 1.0, 3, subintervals)


# ----------------------------------------------------------------------

@pytest.mark.parametrize("rule", [rectangle_rule, trapezoid_rule,
                                  simpson_rule])
@pytest.mark.parametrize("intervals", [0, -1])
def test_bad_intervals(rule, intervals: int):
    with pytest.raises(InvalidArgument):
        rule(math.sin, 1.0, 4.764798248, intervals)


@pytest.mark.parametrize("rule", _rules)
def test_non_finite_sample(rule):
    def f(x):
        return math.nan if x > 0.5 else 1.0

    with pytest.raises(RuntimeFailure) as exc_info:
        _call(rule, f, 0.0, 1.0, 10)
    assert exc_info.value.x > 0.5

    with pytest.raises(RuntimeFailure):
        _call(rule, lambda x: math.inf, 0.0, 1.0, 10)


@pytest.mark.parametrize("rule", _rules)
def test_overflow_sample(rule):
    with pytest.raises(RuntimeFailure) as exc_info:
        _call(rule, lambda x: x ** 400, 0.0, 10.0, 4)
    assert exc_info.value.x > 1.0
