"""Exact rational arithmetic over Python ints.

Every value is kept in lowest terms with a positive denominator, so
equal rationals compare and hash equal and coefficient growth stays
bounded across chained operations. Values are read-only; each operation
returns a fresh Rational.
"""

from math import gcd

from shamirsolve.errors import DivisionByZero, NotAnInteger


class Rational:
    """num/den with gcd(|num|, den) == 1 and den > 0.

    The constructor normalizes, so Rational(4, -8) == Rational(-1, 2).
    Attributes cannot be assigned after construction.
    """

    __slots__ = ('_num', '_den')

    def __init__(self, num: int, den: int = 1):
        if den == 0:
            raise DivisionByZero(f"Zero denominator: {num}/0")
        if den < 0:
            num, den = -num, -den
        g = gcd(num, den)
        if g != 1:
            num //= g
            den //= g
        object.__setattr__(self, '_num', num)
        object.__setattr__(self, '_den', den)

    @property
    def num(self) -> int:
        return self._num

    @property
    def den(self) -> int:
        return self._den

    def __setattr__(self, name, value):
        raise AttributeError(f"Rational is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Rational is immutable, cannot delete {name!r}")

    def __eq__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.num == other.num and self.den == other.den

    def __hash__(self):
        return hash((self.num, self.den))

    def __repr__(self):
        return f"Rational({self.num}, {self.den})"

    def __str__(self):
        if self.den == 1:
            return str(self.num)
        return f"{self.num}/{self.den}"


def make(num: int, den: int) -> Rational:
    """Normalizing constructor: sign on the numerator, lowest terms."""
    return Rational(num, den)


def of(n: int) -> Rational:
    """Lift an integer."""
    return Rational(n, 1)


ZERO = of(0)
ONE = of(1)


def add(a: Rational, b: Rational) -> Rational:
    """a + b by cross-multiplication."""
    return make(a.num * b.den + b.num * a.den, a.den * b.den)


def neg(a: Rational) -> Rational:
    """-a."""
    return Rational(-a.num, a.den)


def sub(a: Rational, b: Rational) -> Rational:
    """a - b."""
    return add(a, neg(b))


def mul(a: Rational, b: Rational) -> Rational:
    """a * b, cross-reducing before multiplying.

    Dividing out gcd(a.num, b.den) and gcd(b.num, a.den) first keeps the
    intermediate products small when many factors are chained.
    """
    g1 = gcd(a.num, b.den)
    g2 = gcd(b.num, a.den)
    num = (a.num // g1) * (b.num // g2)
    den = (a.den // g2) * (b.den // g1)
    return make(num, den)


def reciprocal(a: Rational) -> Rational:
    """1 / a. Raises DivisionByZero for a == 0."""
    return make(a.den, a.num)


def div(a: Rational, b: Rational) -> Rational:
    """a / b."""
    return mul(a, reciprocal(b))


def to_int(r: Rational) -> int:
    """Exact integer value of r, or NotAnInteger if there is a remainder."""
    if r.num % r.den != 0:
        raise NotAnInteger(f"Result is not an integer: {r.num}/{r.den}")
    return r.num // r.den
