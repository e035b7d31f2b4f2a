"""
Find a zero of a real scalar function inside a bracketing interval using
the Newton-Raphson method, safeguarded by bisection:

    - The bracket [`x_lower`, `x_upper`] is shrunk on every iteration so
      that it always contains a sign change of the function.
    - A bisection step is taken instead of a Newton step whenever the
      Newton step would leave the bracket, or when Newton's method is
      converging slowly (or the derivative is zero).

The result is quadratic convergence close to a simple root while never
doing worse than plain bisection.  See Press et al., *Numerical Recipes*,
3rd ed., Section 9.4 (``rtsafe``).
"""

# Written by Eric J. Whitney, October 2026.

import operator
from collections import namedtuple
from collections.abc import Callable
from typing import Union

import numpy as np
from scipy.optimize import RootResults

from .exception import BracketError, SolverError

# SciPy status code for a converged result in `RootResults`.
_ECONVERGED = 0

NewtonBisectStep = namedtuple(
    'NewtonBisectStep',
    ('k', 'method', 'x', 'x_lower', 'x_upper', 'dx', 'f', 'df'))
NewtonBisectStep.__doc__ = """
Record of a single `newton_bisect()` iteration, passed to `callback`.

- `k`: Iteration counter (starts at 3; see `newton_bisect()`).
- `method`: ``'newton'`` or ``'bisect'``.
- `x`: New iterate.
- `x_lower`, `x_upper`: Bracket in use when the step was taken.
- `dx`: Step taken, i.e. `x` minus the previous iterate (for bisection,
  relative to `x_lower`).
- `f`, `df`: Function value and derivative that determined the step.
"""


# ======================================================================

def newton_bisect(func: Callable, x_lower: float, x_upper: float,
                  x_guess: float = None, *,
                  fprime: Union[bool, Callable] = True, args=(),
                  xtol: float = 1.48e-8, maxiter: int = 50,
                  full_output: bool = False,
                  callback: Callable[[NewtonBisectStep], None] = None,
                  verbose: bool = False):
    r"""
    Find a root of `func` in the bracket [`x_lower`, `x_upper`] using
    Newton-Raphson iteration with a bisection fallback.  Iteration stops
    when the change between successive iterates is below `xtol`, i.e.
    :math:`|x_{k+1} - x_k| < x_{tol}`.

    ``func(x_lower)`` and ``func(x_upper)`` must have opposite signs
    (unless one of them is exactly zero).  For a continuous function
    this ensures a root exists in the bracket, and the method is then
    guaranteed to find a root (which might not be unique) to within
    `xtol`, provided `maxiter` is large enough.

    Examples
    --------
    >>> def f(x):
    ...     return x ** 2 - 2, 2 * x
    >>> x, fevals = newton_bisect(f, 0.0, 2.0, 1.0, xtol=1e-10)
    >>> round(x, 10), fevals
    (1.4142135624, 7)

    Parameters
    ----------
    func : Callable[[float, ...], tuple] or Callable[[float, ...], float]
        Function to solve.  If `fprime` is ``True`` (default),
        ``func(x, *args)`` returns the pair `(f, df/dx)`.  If `fprime` is
        callable, ``func(x, *args)`` returns `f` only.  `func` must be a
        pure function of `x`; evaluators that remember earlier calls
        give undefined results.
    x_lower, x_upper : float
        Bracket containing the root, with ``x_lower <= x_upper``.
    x_guess : float, optional
        Starting point, with ``x_lower <= x_guess <= x_upper``.  If
        ``None`` the midpoint of the bracket is used.
    fprime : bool or Callable[[float, ...], float], default = True
        ``True`` if `func` returns both the value and the derivative,
        otherwise a function returning the derivative.  Calling `func`
        and `fprime` at the same point counts as one evaluation.
    args : tuple, optional
        Extra arguments passed to `func` (and `fprime`).
    xtol : float, default = 1.48e-8
        Absolute tolerance on the step size.  Must be > 0.
    maxiter : int, default = 50
        Limit on the evaluation counter (see Notes).  Must be > 0.
    full_output : bool, default = False
        If ``True`` return a `RootResults` object in place of the number
        of evaluations.
    callback : Callable[[NewtonBisectStep], None], optional
        Called once per iteration with a record of the step taken.  It
        has no influence on the iteration.
    verbose : bool, default = False
        If ``True``, print progress statements.

    Returns
    -------
    x, fevals : float, int
        Root and value of the evaluation counter when
        ``full_output == False``.
    x, r : float, RootResults
        Root and convergence information when ``full_output == True``.
        ``r.function_calls`` is the evaluation counter and
        ``r.iterations`` the number of Newton / bisection steps.

    Raises
    ------
    ValueError
        Illegal starting conditions: ``x_guess`` outside the bracket,
        ``xtol <= 0`` or ``maxiter <= 0``.  No function evaluations are
        made in this case.
    BracketError
        ``func(x_lower)`` and ``func(x_upper)`` are nonzero with the same
        sign.  Raised after exactly two evaluations.
    SolverError
        Failure to converge within `maxiter`.  The exception includes
        the following attributes:

        - `flag`, `details`: 1, "Reached maxiter."
        - `dx`: Magnitude of the last step.
        - `bracket_width`: ``x_upper - x_lower`` of the last bracket.
        - `x`, `x_lower`, `x_upper`: Last iterate and bracket.
        - `fevals`: Number of calls actually made to `func`.

    Notes
    -----
    - Evaluations are counted as follows: `x_lower` is the 1st,
      `x_upper` the 2nd and `x_guess` the 3rd; an exact zero at any of
      these returns immediately with that count.  The counter then
      starts at 3 and is incremented once per iteration, so an iteration
      that terminates on tolerance (or on an exact zero at the new
      iterate) returns the counter value for that iteration.
    - Newton's method is considered slow when
      :math:`2|f| > |\Delta x_{prev} \cdot f'|`, where
      :math:`\Delta x_{prev}` is the last step (initially the full width
      of the bracket).  This always holds for :math:`f' = 0`, so there
      is never a division by zero.
    - A bisection step computes the midpoint as ``x_lower - 0.5 *
      (x_lower - x_upper)``.  Once the bracket is exhausted at machine
      precision this lands on `x_lower` and the step becomes
      negligible, which terminates the iteration.
    """
    if x_guess is None:
        x_guess = 0.5 * (x_lower + x_upper)

    # Pre-conditions on the bracket.
    if not (x_lower <= x_guess <= x_upper):
        raise ValueError(f"Requires x_lower <= x_guess <= x_upper, got "
                         f"{x_lower}, {x_guess}, {x_upper}.")

    # Pre-conditions on the algorithm parameters.
    if not (xtol > 0):
        raise ValueError(f"xtol too small ({xtol} <= 0).")

    maxiter = operator.index(maxiter)
    if maxiter < 1:
        raise ValueError("maxiter must be greater than 0.")

    if fprime is not True and not callable(fprime):
        raise ValueError("fprime must be True or a callable.")

    fevals = 0  # Actual calls made.

    def evaluate(x: float) -> (float, float):
        nonlocal fevals
        fevals += 1
        if fprime is True:
            f_x, df_x = func(x, *args)
        else:
            f_x, df_x = func(x, *args), fprime(x, *args)
        return f_x, df_x

    def converged(x: float, count: int, its: int):
        if verbose:
            print(f"... Converged: x = {x}.")

        if full_output:
            return x, RootResults(root=x, iterations=its,
                                  function_calls=count, flag=_ECONVERGED,
                                  method='newton_bisect')
        return x, count

    x_lower, x_upper = 1.0 * x_lower, 1.0 * x_upper
    if verbose:
        print(f"Newton-Raphson With Bisection Fallback:")

    # Check there is a sign change across the bracket.  This costs two
    # evaluations but either end may turn out to be the root.
    f_lower, _ = evaluate(x_lower)
    if f_lower == 0:
        return converged(x_lower, 1, 0)

    f_upper, _ = evaluate(x_upper)
    if f_upper == 0:
        return converged(x_upper, 2, 0)

    if not (np.sign(f_lower) * np.sign(f_upper) < 0):
        raise BracketError(f"f(x_lower) and f(x_upper) must have opposite "
                           f"sign, got f({x_lower}) = {f_lower}, "
                           f"f({x_upper}) = {f_upper}.",
                           x_lower=x_lower, x_upper=x_upper,
                           f_lower=f_lower, f_upper=f_upper, fevals=2)

    root = 1.0 * x_guess
    minus_dx = x_lower - x_upper  # First comparison uses full width.
    f, df = evaluate(root)
    if f == 0:
        return converged(root, 3, 0)

    for k in range(3, maxiter + 1):
        # N.B. Always true for df == 0 (f != 0 here), so the Newton step
        # is only taken when the search direction is well defined.
        newton_is_slow = 2.0 * abs(f) > abs(minus_dx * df)

        if newton_is_slow:
            method = 'bisect'
            root, minus_dx = bisect_step(x_lower, x_upper)
        else:
            method = 'newton'
            root, minus_dx = newton_step(root, f, df)
            if root < x_lower or root > x_upper:
                method = 'bisect'
                root, minus_dx = bisect_step(x_lower, x_upper)

        if callback is not None:
            callback(NewtonBisectStep(k, method, root, x_lower, x_upper,
                                      -minus_dx, f, df))
        if verbose:
            print(f"... Iteration {k}: {method:6s} x = {root:10.4g}, "
                  f"[x_lower, x_upper] = [{x_lower:10.4g}, "
                  f"{x_upper:10.4g}], dx = {-minus_dx:10.4g}, "
                  f"f = {f:10.4g}, df/dx = {df:10.4g}")

        if abs(minus_dx) < xtol:
            return converged(root, k, k - 2)

        f, df = evaluate(root)
        if f == 0:
            return converged(root, k, k - 2)

        x_lower, f_lower, x_upper, f_upper = update_bracket(
            root, f, x_lower, f_lower, x_upper, f_upper)

    raise SolverError("newton_bisect() failed to converge:",
                      flag=1, details="Reached maxiter.",
                      dx=abs(minus_dx), bracket_width=abs(x_upper - x_lower),
                      x=root, x_lower=x_lower, x_upper=x_upper,
                      fevals=fevals)


# ----------------------------------------------------------------------

def bisect_step(x_lower: float, x_upper: float) -> (float, float):
    """
    Bisection step across the bracket.

    Returns
    -------
    x, minus_dx : float, float
        Midpoint and negated step, taking `x_lower` as the previous
        point.  `x` is computed as ``x_lower - minus_dx`` so that it
        collapses onto `x_lower` when the step is insignificant at
        machine precision.
    """
    minus_dx = 0.5 * (x_lower - x_upper)
    return x_lower - minus_dx, minus_dx


def newton_step(x: float, f: float, df: float) -> (float, float):
    """
    Newton-Raphson step from `x`.  Returns the new point and negated
    step ``f / df``.  Requires ``df != 0``.
    """
    minus_dx = f / df
    return x - minus_dx, minus_dx


def update_bracket(x: float, f: float, x_lower: float, f_lower: float,
                   x_upper: float, f_upper: float
                   ) -> (float, float, float, float):
    """
    Replace one end of the bracket with the new point `x` (where `f` is
    nonzero) so that the ends still have opposite signs.  Returns the
    new `x_lower, f_lower, x_upper, f_upper`.
    """
    # Compare signs directly; f * f_upper can underflow to zero.
    if np.sign(f) * np.sign(f_upper) < 0:
        return x, f, x_upper, f_upper  # Root is in [x, x_upper].

    return x_lower, f_lower, x, f  # Root is in [x_lower, x].
