"""Secret recovery by exact Lagrange interpolation at x = 0.

Shares are integer points on an integer polynomial of degree k-1 whose
constant term is the secret. Interpolation runs over exact rationals, so
large coefficients cannot lose precision and an inconsistent share set
is reported as NotAnInteger instead of being rounded.
"""

from functools import reduce
from typing import NamedTuple

from shamirsolve import rational
from shamirsolve.errors import InsufficientPoints
from shamirsolve.rational import Rational


class Point(NamedTuple):
    x: int
    y: int


def lagrange_basis_at(xs: list, i: int, target: int) -> Rational:
    """Lagrange basis coefficient L_i(target).

    xs = list of x-coordinates.
    Returns prod_{j!=i} (target - x_j) / (x_i - x_j). A repeated x makes
    one denominator zero and raises DivisionByZero.
    """
    xi = xs[i]
    weight = rational.ONE
    for j, xj in enumerate(xs):
        if j == i:
            continue
        weight = rational.mul(weight, rational.make(target - xj, xi - xj))
    return weight


def lagrange_basis_at_zero(xs: list, i: int) -> Rational:
    """Lagrange basis coefficient L_i(0) = prod_{j!=i} (0 - x_j) / (x_i - x_j)."""
    return lagrange_basis_at(xs, i, 0)


def lagrange_interpolate(points: list, x: int) -> Rational:
    """Exact value at x of the polynomial through all of `points`."""
    xs = [p[0] for p in points]
    terms = (rational.mul(rational.of(yi), lagrange_basis_at(xs, i, x))
             for i, (_, yi) in enumerate(points))
    return reduce(rational.add, terms, rational.ZERO)


def _select(points: list, k: int) -> list:
    if k < 1:
        raise ValueError(f"Threshold k must be >= 1, got {k}")
    if len(points) < k:
        raise InsufficientPoints(
            f"Not enough points: need {k}, got {len(points)}")
    return list(points[:k])


def find_secret(points: list, k: int) -> int:
    """Recover f(0) from the first k points, in the order supplied.

    Args:
        points: Sequence of (x, y) integer pairs. Only the first k are used;
            x-values are not checked for distinctness.
        k: Reconstruction threshold.

    Returns:
        The secret as an exact int.

    Raises:
        InsufficientPoints: len(points) < k.
        DivisionByZero: two of the first k points share an x.
        NotAnInteger: the interpolated f(0) is a proper fraction.
    """
    selected = _select(points, k)
    return rational.to_int(lagrange_interpolate(selected, 0))


def reconstruct_at(points: list, k: int, target: int) -> int:
    """Exact integer value at `target` of the polynomial through the first k points."""
    return rational.to_int(lagrange_interpolate(_select(points, k), target))


def inconsistent_shares(points: list, k: int) -> list:
    """Indices of the points after the first k that miss their interpolant.

    The first k points define the polynomial and are trusted; each later
    point is compared exactly against its value there. With exactly k
    points there is nothing to compare and the result is empty.
    """
    selected = _select(points, k)
    bad = []
    for idx in range(k, len(points)):
        x, y = points[idx]
        if lagrange_interpolate(selected, x) != rational.of(y):
            bad.append(idx)
    return bad
