# Written by Eric J. Whitney, April 2023.
# BracketError added October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a solver fails to converge within the
    allowed number of iterations / function evaluations.  Additional
    information is included to allow the caller to judge whether the
    root was effectively found (e.g. the bracket is already tiny) or
    whether the search genuinely failed.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.  For `newton_bisect()`
    these are `dx`, `bracket_width`, `x`, `x_lower`, `x_upper` and
    `fevals`.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result. Typically `flag` != 0 as many error code systems
            assume that `flag` == 0 implies that the solution was
            successful.
        details : str, default = None
            Additional text relating to the specific type of failure.
        kwargs :
            Additional attributes added to the object using keyword
            arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class BracketError(ValueError):
    """
    Raised when the interval supplied to a bracketing solver does not
    contain a sign change, i.e. ``f(x_lower)`` and ``f(x_upper)`` are
    nonzero and have the same sign.  This is a problem with the caller's
    inputs, not a failure of the solver, and so it derives from
    `ValueError` instead of `SolverError`.

    The endpoints and function values are available as attributes
    `x_lower`, `x_upper`, `f_lower`, `f_upper`, along with the number
    of function evaluations used `fevals`.
    """

    def __init__(self, *args, x_lower: float = None, x_upper: float = None,
                 f_lower: float = None, f_upper: float = None,
                 fevals: int = None):
        super().__init__(*args)
        self.x_lower, self.x_upper = x_lower, x_upper
        self.f_lower, self.f_upper = f_lower, f_upper
        self.fevals = fevals
