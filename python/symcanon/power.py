# SymCanon - Power and Factorial Evaluation
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""
Evaluation rules for powers and factorials.

Both evaluators take operands that are already canonical and return a
canonical result. The power rules, first match wins:

1. ``0 ** e``: ``0`` for a positive number ``e``, undefined for any other
   number (``0 ** 0`` included), left alone for a symbolic ``e``.
2. ``1 ** e`` is ``1``, whatever ``e`` is.
3. For an integer ``n``:
   ``e ** 0 = 1``, ``e ** 1 = e``, numbers are raised exactly,
   ``(b ** e) ** n = b ** (e*n)``, ``(a*b) ** n = a**n * b**n``;
   anything else stays ``e ** n``.
4. Any other exponent leaves the power unevaluated.

Rule 3 distributes an integer power over a product without looking at signs
or branches. That is the accepted behaviour of this kernel.

Factorials are evaluated for integer literals ``0 <= n <= limit`` and left
unevaluated otherwise (negative, fractional, symbolic or too large).
"""

from __future__ import annotations
import logging
import math

from .canonical import Simplified
from .exceptions import Undefined
from .expr import Expr, Numeric, Product, Pow, Factorial
from .rational import as_integer, rational_pow

logger = logging.getLogger(__name__)


DEFAULT_FACTORIAL_LIMIT = 10000


def simplify_power(base: Simplified, exponent: Simplified) -> Simplified:
    """
    Evaluate ``base ** exponent`` for canonical operands.

    Raises:
        Undefined: For ``0 ** 0`` and ``0`` raised to a negative number.
    """
    return Simplified.assume_simplified(evaluate_power(base.expr, exponent.expr))


def simplify_factorial(operand: Simplified,
                       limit: int = DEFAULT_FACTORIAL_LIMIT) -> Simplified:
    """Evaluate ``operand!`` for a canonical operand."""
    return Simplified.assume_simplified(evaluate_factorial(operand.expr, limit))


def evaluate_power(base: Expr, exponent: Expr) -> Expr:
    """Power rules on canonical Expr values; see the module docstring."""
    if base.is_zero():
        if isinstance(exponent, Numeric):
            if exponent.value > 0:
                return Numeric(0)
            logger.debug("0 ** %s is undefined", exponent.value)
            raise Undefined(f"0 raised to {exponent.value}")
        return Pow(base, exponent)

    if base.is_one():
        return Numeric(1)

    if isinstance(exponent, Numeric):
        n = as_integer(exponent.value)
        if n is not None:
            return _integer_power(base, n)

    return Pow(base, exponent)


def _integer_power(base: Expr, n: int) -> Expr:
    # avoid circular import
    from .ops import PRODUCT

    if n == 0:
        return Numeric(1)
    if n == 1:
        return base

    if isinstance(base, Numeric):
        return Numeric(rational_pow(base.value, n))

    if isinstance(base, Pow):
        exponent = PRODUCT.simplify_exprs([base.exponent, Numeric(n)])
        logger.debug("(%r) ** %d -> exponent %r", base, n, exponent)
        if isinstance(exponent, Numeric) and as_integer(exponent.value) is not None:
            return evaluate_power(base.base, exponent)
        return Pow(base.base, exponent)

    if isinstance(base, Product):
        return PRODUCT.simplify_exprs(
            [_integer_power(factor, n) for factor in base.operands]
        )

    return Pow(base, Numeric(n))


def evaluate_factorial(operand: Expr, limit: int = DEFAULT_FACTORIAL_LIMIT) -> Expr:
    """Factorial rule on a canonical Expr value."""
    if isinstance(operand, Numeric):
        n = as_integer(operand.value)
        if n is not None and 0 <= n <= limit:
            return Numeric(math.factorial(n))
        logger.debug("leaving %s! unevaluated", operand.value)
    return Factorial(operand)
