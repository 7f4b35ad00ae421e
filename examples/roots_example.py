#!usr/bin/env python3

# Examples of locating and refining the roots of a scalar function.
# Written by the PyNumerics developers.

import math

from pynumerics.solve import (IterationRecord, bisection_method,
                              find_root_intervals, newton_method,
                              regula_falsi, secant_method)


def example_fn(x):
    return math.sin(x) - 0.2 * x


# Scan for brackets first, then refine each one using the different
# methods.
brackets = find_root_intervals(example_fn, -5.0, 5.0, step=0.25)
print(f"Brackets found: {brackets}\n")

for x1, x2 in brackets:
    x_bisect = bisection_method(example_fn, x1, x2, tol=1e-10)
    x_newton = newton_method(example_fn, 0.5 * (x1 + x2))
    x_secant = secant_method(example_fn, x1, x2)

    history: list[IterationRecord] = []
    x_rf = regula_falsi(example_fn, x1, x2, history=history)

    print(f"[{x1:+.2f}, {x2:+.2f}]: Bisection = {x_bisect:+.10f}, "
          f"Newton = {x_newton:+.10f}, Secant = {x_secant:+.10f}, "
          f"Regula Falsi = {x_rf:+.10f} ({len(history)} its)")

# Show detail for a single refinement.
print()
newton_method(example_fn, 2.0, tol=1e-12, verbose=True)
