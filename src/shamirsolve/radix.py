"""Positional base-2..36 digit strings to and from Python ints.

Digits are 0-9 then a-z; letters are case-insensitive on input and
lowercase on output. Python int is unbounded, so values of any length
decode exactly.
"""

from shamirsolve.errors import InvalidDigit

MIN_BASE = 2
MAX_BASE = 36
DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def digit_value(ch: str) -> int:
    """Map one character to its digit value 0..35."""
    if '0' <= ch <= '9':
        return ord(ch) - ord('0')
    if 'a' <= ch <= 'z':
        return ord(ch) - ord('a') + 10
    if 'A' <= ch <= 'Z':
        return ord(ch) - ord('A') + 10
    raise InvalidDigit(f"Invalid digit: {ch!r}")


def decode(value: str, base: int) -> int:
    """Decode `value`, most significant digit first, in `base`.

    Raises InvalidDigit for a character outside the alphabet or a digit
    that is >= base (e.g. 'b' in base 10).
    """
    result = 0
    for ch in value:
        d = digit_value(ch)
        if d >= base:
            raise InvalidDigit(f"Digit {ch!r} is invalid for base {base}")
        result = result * base + d
    return result


def encode(value: int, base: int) -> str:
    """Inverse of decode for non-negative ints (lowercase digits)."""
    if not (MIN_BASE <= base <= MAX_BASE):
        raise ValueError(f"Base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")
    if value == 0:
        return '0'
    out = []
    while value:
        value, d = divmod(value, base)
        out.append(DIGITS[d])
    return ''.join(reversed(out))
