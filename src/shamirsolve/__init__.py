"""shamirsolve: exact recovery of a Shamir secret from integer shares.

Shares are points on an integer polynomial; the secret is its value at
x = 0, recovered by Lagrange interpolation over exact rationals.
"""

from shamirsolve.errors import (
    ShamirSolveError, InvalidDigit, InsufficientPoints, NotAnInteger,
    DivisionByZero, MalformedTestCase,
)
from shamirsolve.radix import decode
from shamirsolve.solver import Point, find_secret

__all__ = [
    'ShamirSolveError', 'InvalidDigit', 'InsufficientPoints', 'NotAnInteger',
    'DivisionByZero', 'MalformedTestCase',
    'decode', 'Point', 'find_secret',
]
