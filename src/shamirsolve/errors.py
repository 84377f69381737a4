"""Failure kinds raised by the decoder, the rational layer and the solver.

Each one also derives from the builtin a caller would catch without
knowing about this package (ValueError, ZeroDivisionError, ...).
"""


class ShamirSolveError(Exception):
    """Common base for every error raised by shamirsolve."""


class InvalidDigit(ShamirSolveError, ValueError):
    """A character is not a legal digit for the stated base."""


class InsufficientPoints(ShamirSolveError, ValueError):
    """Fewer shares than the reconstruction threshold."""


class NotAnInteger(ShamirSolveError, ArithmeticError):
    """An exact rational result has a remainder."""


class DivisionByZero(ShamirSolveError, ZeroDivisionError):
    """Zero denominator, e.g. two selected shares with the same x."""


class MalformedTestCase(ShamirSolveError, ValueError):
    """Input text is missing a required field or has an unusable base."""
