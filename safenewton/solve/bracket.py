import warnings
from collections.abc import Callable

import numpy as np

from .exception import SolverError


# Written by Eric J. Whitney, April 2023.


# ======================================================================

def bracket_root(f: Callable, x1: float, x2: float, *, f_args=(),
                 pair: bool = False,
                 x_limits: tuple[float, float] = (-np.inf, np.inf),
                 grow_factor: float = 0.5, dx_max: float = np.inf,
                 max_steps: int = 50) -> tuple[float, float]:
    """
    Given an initial guessed range `x1` to `x2`, the range is expanded
    geometrically until a root of the function `f(x)` is bracketed or
    until the stopping criteria are met.  The result is suitable for
    passing to `newton_bisect()`.

    Parameters
    ----------
    f : Callable[[float, ...], float]
        Scalar function taking a float as the first argument. May accept
        additional arguments (see parameter `f_args`).
    x1, x2 : float
        Starting points for bracket, with `x1` < `x2`.
    f_args : optional
        Extra arguments passed to `f()`.
    pair : bool, default = False
        If ``True``, `f` returns the pair `(f, df/dx)` as used by
        `newton_bisect()` and only the first value is used.
    x_limits : tuple[float, float], default = (-∞, +∞)
        The range is not expanded beyond these values.
    grow_factor : float, default = 0.5
        Size factor that determines the amount `x1` or `x2` are moved in
        each step to expand the range (`dx`), with
        ``dx = grow_factor * (x2 - x1)`` (unless `dx_max` is reached).
    dx_max : float, default = ∞
        Maximum magnitude of movement permitted for `x1` or `x2` in one
        step.
    max_steps : int, default = 50
        Stops once this number of steps has been completed.

    Returns
    -------
    x1, x2 : float, float
        `x`-values bracketing the root.

    Raises
    ------
    ValueError
        Illegal starting conditions.
    SolverError
        Failure to find a bracket raises a `SolverError` exception
        including the following attributes:

        - `x1`, `x2`: Most recent bracket values used.
        - `f1`, `f2`: Function values corresponding to `x1`, `x2`.
        - `flag` and `details`:
            - 1: Reached max_steps.
            - 2: Reached x_limits.
        - `steps`: Number of steps taken.
        - `fevals`: Number of function evaluations.

    Notes
    -----
    - A bracket is found when `f(x1)` and `f(x2)` have opposite signs,
      or if either `f(x1)` or `f(x2)` become exactly zero.
    - On each step the end with the smaller magnitude of `f` is moved,
      as that is more likely to be near a root.
    - Stepping can fail for functions that have extrema near the area
      of interest.  A `RuntimeWarning` is given if a step is shortened
      to stop at `x_limits`.

    References
    ----------
    .. [1] Press, W. H.; Flannery, B. P.; Teukolsky, S. A.; and
       Vetterling, W. T. *Numerical Recipes: The Art of Scientific
       Computing*, 3rd ed. Cambridge, England: Cambridge University
       Press, pp. 447, 2007. Section 9.1: "Bracketing and Bisection".

    Examples
    --------
    Equation :math:`y = x^2 -3x + 2` has roots at `x` = 1 and `x` = 2.
    >>> def example_fn(x):
    ...     return x**2 - 3 * x + 2

    Find bracket starting from left side:
    >>> bracket_root(example_fn, -2, -1)
    (-2, 1.375)
    """
    if x1 >= x2:
        raise ValueError("Requires x1 < x2.")

    if not (x_limits[0] <= x1 and x2 <= x_limits[1]):
        raise ValueError("Requires x1, x2 within x_limits.")

    if grow_factor <= 0 or dx_max <= 0:
        raise ValueError("Requires grow_factor > 0 and dx_max > 0.")

    def value(x):
        return f(x, *f_args)[0] if pair else f(x, *f_args)

    f1, f2 = value(x1), value(x2)
    steps, fevals = 0, 2

    while np.sign(f1) == np.sign(f2):  # False if f1 or f2 == 0.
        if steps >= max_steps:
            raise SolverError("bracket_root() failed to converge:",
                              flag=1, details="Reached max_steps.",
                              x1=x1, x2=x2, f1=f1, f2=f2, steps=steps,
                              fevals=fevals)

        # Advance the end with smaller |f|, unless it is already at the
        # limit.
        grow_left = np.abs(f1) < np.abs(f2)
        if grow_left and x1 <= x_limits[0]:
            grow_left = False
        elif not grow_left and x2 >= x_limits[1]:
            grow_left = True

        if (grow_left and x1 <= x_limits[0]) or (
                not grow_left and x2 >= x_limits[1]):
            raise SolverError("bracket_root() failed to converge:",
                              flag=2, details="Reached x_limits.",
                              x1=x1, x2=x2, f1=f1, f2=f2, steps=steps,
                              fevals=fevals)

        dx = min(grow_factor * (x2 - x1), dx_max)
        if grow_left:
            x1 = x1 - dx
            if x1 < x_limits[0]:
                warnings.warn(f"Step clipped at lower limit "
                              f"{x_limits[0]}.", RuntimeWarning)
                x1 = x_limits[0]
            f1 = value(x1)  # <- Grow left
        else:
            x2 = x2 + dx
            if x2 > x_limits[1]:
                warnings.warn(f"Step clipped at upper limit "
                              f"{x_limits[1]}.", RuntimeWarning)
                x2 = x_limits[1]
            f2 = value(x2)  # Grow right ->

        steps += 1
        fevals += 1

    return x1, x2
