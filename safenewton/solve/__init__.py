"""
=======================================
Solvers (:mod:`safenewton.solve`)
=======================================

.. currentmodule:: safenewton.solve

Functions for finding a root of a scalar function within a bracketing
interval.  Newton-Raphson steps are used where they are safe and
converging quickly, with bisection used otherwise.

Functions
---------

.. autosummary::
    :toctree:

    newton_bisect
    bracket_root
    bisect_step
    newton_step
    update_bracket

Classes
-------

.. autosummary::
    :toctree:

    NewtonBisectStep

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    BracketError

"""

from .exception import BracketError, SolverError
from .newton_bisect import (newton_bisect, bisect_step, newton_step,
                            update_bracket, NewtonBisectStep)
from .bracket import bracket_root
