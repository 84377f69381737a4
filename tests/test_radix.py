"""Tests for base-2..36 digit decoding."""

import pytest
from shamirsolve.errors import InvalidDigit
from shamirsolve.radix import decode, encode, digit_value, MIN_BASE, MAX_BASE


class TestDecode:
    """Known values."""

    def test_hex(self):
        assert decode("2c", 16) == 44

    def test_binary(self):
        assert decode("111", 2) == 7

    def test_base4(self):
        assert decode("213", 4) == 39

    def test_case_insensitive(self):
        assert decode("A", 16) == decode("a", 16) == 10
        assert decode("DeadBeef", 16) == 0xdeadbeef

    def test_base36(self):
        assert decode("zz", 36) == 35 * 36 + 35

    def test_leading_zeros(self):
        assert decode("0007", 8) == 7

    def test_no_fixed_width_limit(self):
        assert decode("1" + "0" * 100, 10) == 10 ** 100
        assert decode("f" * 64, 16) == 2 ** 256 - 1

    def test_matches_positional_value(self, rng):
        """Encoded random values decode back in every base, either case."""
        for base in range(MIN_BASE, MAX_BASE + 1):
            v = rng.getrandbits(200)
            s = encode(v, base)
            assert decode(s, base) == v
            assert decode(s.upper(), base) == v
            assert int(s, base) == v


class TestInvalidDigit:
    """Digits outside the alphabet or >= base are rejected."""

    def test_letter_past_hex(self):
        with pytest.raises(InvalidDigit):
            decode("g", 16)

    def test_digit_too_large_for_binary(self):
        with pytest.raises(InvalidDigit):
            decode("9", 2)

    def test_letter_in_decimal(self):
        with pytest.raises(InvalidDigit):
            decode("1b", 10)

    def test_punctuation(self):
        for bad in ("-1", "1.5", "1 2", "+"):
            with pytest.raises(InvalidDigit):
                decode(bad, 10)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            decode("z", 35)

    def test_digit_value_rejects_outside_alphabet(self):
        with pytest.raises(InvalidDigit):
            digit_value("_")


class TestEncode:

    def test_zero(self):
        assert encode(0, 7) == "0"

    def test_lowercase(self):
        assert encode(255, 16) == "ff"

    def test_invalid_base(self):
        with pytest.raises(ValueError):
            encode(5, 1)
        with pytest.raises(ValueError):
            encode(5, 37)

    def test_negative(self):
        with pytest.raises(ValueError):
            encode(-1, 10)
