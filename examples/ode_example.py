#!usr/bin/env python3

# Comparison of fixed step ODE methods on y' = -2ty, y(0) = 1.
# Written by the PyNumerics developers.

import matplotlib.pyplot as plt
import numpy as np

from pynumerics import euler_method, heun_method, midpoint_method, rk4_method


def f(t, y):
    return -2.0 * t * y


t0, t_max, y0 = 0.0, 2.0, 1.0
methods = {'Euler': euler_method, 'Heun': heun_method,
           'Midpoint': midpoint_method, 'RK4': rk4_method}

plt.figure()
for h in (0.2, 0.1, 0.05, 0.025):
    for name, method in methods.items():
        traj = method(f, y0, t0, t_max, h)
        err = np.max(np.abs(traj.y - np.exp(-traj.t ** 2)))
        print(f"h = {h:.3f}, {name:>8s}: Max error = {err:.3e}")
    print()

for name, method in methods.items():
    traj = method(f, y0, t0, t_max, 0.2)
    plt.plot(traj.t, traj.y, 'o--', label=name)

t_plt = np.linspace(t0, t_max, 100)
plt.plot(t_plt, np.exp(-t_plt ** 2), 'k-', label='Exact')
plt.xlabel('t')
plt.ylabel('y')
plt.legend()
plt.grid()
plt.show()
