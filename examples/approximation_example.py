#!usr/bin/env python3

# Example of least-squares polynomial approximation.
# Written by the PyNumerics developers.

import math

import matplotlib.pyplot as plt
import numpy as np

from pynumerics import SingularMatrix, poly_eval, polynomial_approximation


def example_fn(x):
    return math.exp(x) * math.cos(5 * x)


a, b = -1.0, 2.0
x_plt = np.linspace(a, b, 200)
y_plt = [example_fn(x) for x in x_plt]

# ----------------------------------------------------------------------
# Fit increasing degrees and show the RMS error of each.  Very high
# degrees are not possible as the monomial Gram matrix quickly becomes
# singular.

plt.figure()
plt.plot(x_plt, y_plt, 'k-', linewidth=2, label='f(x)')

for degree in (1, 3, 5, 7, 12):
    try:
        c = polynomial_approximation(example_fn, degree, a, b)
    except SingularMatrix as e:
        print(f"Degree {degree}: Failed - {e}")
        continue

    p_plt = poly_eval(c, x_plt)
    rms = np.sqrt(np.mean((p_plt - y_plt) ** 2))
    print(f"Degree {degree}: RMS error = {rms:.6f}")
    plt.plot(x_plt, p_plt, '--', label=f"Degree {degree}")

plt.xlabel('x')
plt.ylabel('y')
plt.title('Least-Squares Polynomial Approximation')
plt.legend()
plt.grid()
plt.show()
