# Tests for rational.py - Exact coefficients

import pytest
from fractions import Fraction

from symcanon.exceptions import Undefined


class TestToFraction:
    """Tests for to_fraction()."""

    def test_integer_conversion(self):
        from symcanon.rational import to_fraction

        assert to_fraction(0) == Fraction(0)
        assert to_fraction(-5) == Fraction(-5)
        assert to_fraction(42) == Fraction(42)

    def test_fraction_passthrough(self):
        from symcanon.rational import to_fraction

        f = Fraction(1, 3)
        assert to_fraction(f) is f  # Should return same object

    def test_pair_is_reduced(self):
        from symcanon.rational import to_fraction

        assert to_fraction(6, 4) == Fraction(3, 2)
        assert to_fraction(2, -4) == Fraction(-1, 2)
        assert to_fraction(Fraction(1, 2), Fraction(1, 4)) == 2

    def test_zero_denominator_is_undefined(self):
        from symcanon.rational import to_fraction

        with pytest.raises(Undefined):
            to_fraction(1, 0)
        with pytest.raises(Undefined):
            to_fraction(0, 0)

    def test_floats_rejected(self):
        """No floating-point approximation."""
        from symcanon.rational import to_fraction

        with pytest.raises(TypeError):
            to_fraction(0.5)
        with pytest.raises(TypeError):
            to_fraction(1, 2.0)

    def test_bool_rejected(self):
        from symcanon.rational import to_fraction

        with pytest.raises(TypeError):
            to_fraction(True)


class TestQueries:
    """Tests for integer, sign, zero and one queries."""

    def test_is_integer(self):
        from symcanon.rational import is_integer

        assert is_integer(Fraction(4, 2))
        assert not is_integer(Fraction(1, 2))

    def test_as_integer(self):
        from symcanon.rational import as_integer

        assert as_integer(Fraction(-6, 3)) == -2
        assert as_integer(Fraction(1, 3)) is None

    def test_sign(self):
        from symcanon.rational import sign

        assert sign(Fraction(-1, 7)) == -1
        assert sign(Fraction(0)) == 0
        assert sign(Fraction(3, 2)) == 1

    def test_zero_one(self):
        from symcanon.rational import is_zero, is_one

        assert is_zero(Fraction(0))
        assert not is_zero(Fraction(1, 100))
        assert is_one(Fraction(3, 3))
        assert not is_one(Fraction(-1))


class TestArithmetic:
    """Tests for checked division and exact powers."""

    def test_checked_div(self):
        from symcanon.rational import checked_div

        assert checked_div(Fraction(1), Fraction(3)) == Fraction(1, 3)
        with pytest.raises(Undefined):
            checked_div(Fraction(1), Fraction(0))

    def test_positive_power(self):
        from symcanon.rational import rational_pow

        assert rational_pow(Fraction(2), 10) == 1024
        assert rational_pow(Fraction(-2, 3), 3) == Fraction(-8, 27)

    def test_negative_power_takes_reciprocal(self):
        from symcanon.rational import rational_pow

        assert rational_pow(Fraction(2, 3), -2) == Fraction(9, 4)
        assert rational_pow(Fraction(-2), -1) == Fraction(-1, 2)

    def test_zero_to_negative_power(self):
        from symcanon.rational import rational_pow

        with pytest.raises(Undefined):
            rational_pow(Fraction(0), -3)

    def test_zero_power(self):
        from symcanon.rational import rational_pow

        assert rational_pow(Fraction(7, 5), 0) == 1
