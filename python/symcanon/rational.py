# SymCanon - Exact Rational Coefficients
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""
Exact rational coefficients.

Coefficients are plain ``fractions.Fraction`` values: arbitrary precision,
always in lowest terms, denominator strictly positive. A zero denominator
stands for "undefined" and is rejected here, at the boundary, as
:class:`~symcanon.exceptions.Undefined`.

Example:
    >>> from symcanon.rational import to_fraction, rational_pow
    >>> to_fraction(6, 4)
    Fraction(3, 2)
    >>> rational_pow(Fraction(2, 3), -2)
    Fraction(9, 4)
"""

from __future__ import annotations
from fractions import Fraction
from typing import Optional, Union

from .exceptions import Undefined


# Things that can be converted to an exact coefficient
RationalLike = Union[int, Fraction]


def to_fraction(value: RationalLike, denominator: RationalLike = 1) -> Fraction:
    """
    Convert a numerator (and optional denominator) to an exact Fraction.

    Args:
        value: An int or Fraction.
        denominator: An int or Fraction to divide by.

    Returns:
        The reduced Fraction ``value / denominator``.

    Raises:
        Undefined: If the denominator is zero.
        TypeError: For floats, bools and anything else that is not exact.

    Examples:
        >>> to_fraction(3)
        Fraction(3, 1)
        >>> to_fraction(2, -4)
        Fraction(-1, 2)
    """
    num = _check_exact(value)
    den = _check_exact(denominator)
    if den == 1 and isinstance(num, Fraction):
        return num
    if den == 0:
        raise Undefined(f"zero denominator in {value}/{denominator}")
    return Fraction(num) / Fraction(den)


def _check_exact(x: object) -> RationalLike:
    # bool is an int subclass; 1 == True is not a coefficient
    if isinstance(x, bool) or not isinstance(x, (int, Fraction)):
        raise TypeError(f"Cannot convert {type(x).__name__} to an exact rational")
    return x


def is_integer(q: Fraction) -> bool:
    """Check whether a coefficient is an integer."""
    return q.denominator == 1


def as_integer(q: Fraction) -> Optional[int]:
    """Return the coefficient as an int, or None if it is not integral."""
    if q.denominator == 1:
        return q.numerator
    return None


def sign(q: Fraction) -> int:
    """Sign of a coefficient: -1, 0 or 1."""
    return (q > 0) - (q < 0)


def is_zero(q: Fraction) -> bool:
    return q == 0


def is_one(q: Fraction) -> bool:
    return q == 1


def checked_div(a: Fraction, b: Fraction) -> Fraction:
    """Exact division; dividing by zero is undefined."""
    if b == 0:
        raise Undefined(f"division of {a} by zero")
    return Fraction(a) / b


def rational_pow(base: Fraction, n: int) -> Fraction:
    """
    Raise a coefficient to an integer power exactly.

    Negative exponents take the reciprocal first, so ``0`` to a negative
    power is undefined. ``0 ** 0`` is left to the caller (the power
    evaluator rejects it before getting here) and returns 1.

    Raises:
        Undefined: If ``base`` is zero and ``n`` is negative.
    """
    base = Fraction(base)
    if n < 0:
        if base == 0:
            raise Undefined(f"0 raised to negative power {n}")
        return (1 / base) ** -n
    return base ** n
