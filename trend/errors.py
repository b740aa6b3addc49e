"""Failure kinds raised by the statistics and fitting routines.

Every expected domain failure is one of two kinds:

    NeedMoreValues:
        The input series is shorter than the operation requires. The
        ``minimum`` attribute holds the required size (1 for ``mean`` and
        ``stddev``, 2 for ``correlation``, ``quick`` and ``robust``). Size
        checks always run before any arithmetic.

    AllZeros:
        The computation would otherwise produce NaN, for example a
        correlation over an axis with zero variance or a robust fit where
        every pair of points shares the same x.

Both derive from :class:`TrendError`, itself a :class:`ValueError`, so
callers can catch the exact kind or the whole family.
"""

from __future__ import annotations


class TrendError(ValueError):
    """Base class for trend fitting failures."""

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class NeedMoreValues(TrendError):
    def __init__(self, minimum: int):
        self.minimum = int(minimum)
        super().__init__(self.minimum)

    def __str__(self) -> str:
        return f"Need at least {self.minimum} value(s) for this calculation."

    def __repr__(self) -> str:
        return f"NeedMoreValues({self.minimum})"


class AllZeros(TrendError):
    def __str__(self) -> str:
        return "Result is undefined: the input has no variance to work with."

    def __repr__(self) -> str:
        return "AllZeros()"
