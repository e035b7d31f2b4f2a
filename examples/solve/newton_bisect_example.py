#!/usr/bin/env python3

# Example of finding a root with Newton-Raphson / bisection, showing when
# each type of step is used.

import math

from safenewton.solve import bracket_root, newton_bisect


def kepler(E, M, e):
    """Kepler's equation E - e.sin(E) = M, with derivative."""
    return E - e * math.sin(E) - M, 1 - e * math.cos(E)


M, e = 0.3, 0.95  # Mean anomaly, eccentricity (nearly parabolic).

# A poor guess right at the top of the bracket forces early bisection.
E, fevals = newton_bisect(kepler, 0.0, math.pi, math.pi, args=(M, e),
                          xtol=1e-12, verbose=True)
print(f"\nEccentric anomaly E = {E:.12f} ({fevals} evaluations)")

# Without a known bracket, search for one first.
E1, E2 = bracket_root(kepler, 0.1, 0.2, f_args=(M, e), pair=True)
E, r = newton_bisect(kepler, E1, E2, args=(M, e), xtol=1e-12,
                     full_output=True)
print(f"\nBracket [{E1}, {E2}] -> E = {E:.12f}")
print(r)
