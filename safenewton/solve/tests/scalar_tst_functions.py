import math


# ======================================================================

# Define test functions, along with first derivatives.  Functions named
# `*_pair` return `(f, df/dx)` together as used by `newton_bisect()`.

def f(x):
    return x ** 2 - x - 1


def df_dx(x):
    return 2 * x - 1


def f_pair(x):
    return f(x), df_dx(x)


F_ROOT = 1.618033988749895  # Golden ratio.


def sqrt2_pair(x):
    return x ** 2 - 2, 2 * x


def sin_pair(x):
    return math.sin(x), math.cos(x)


def cubic_pair(x):
    return x ** 3 - 1, 3 * x ** 2


def shifted_pair(x, a):
    return x - a, 1.0


# ----------------------------------------------------------------------

class CountCalls:
    """Wraps a function and counts the number of times it is called."""

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, x, *args):
        self.calls += 1
        return self.func(x, *args)
