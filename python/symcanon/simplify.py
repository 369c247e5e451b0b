# SymCanon - Automatic Simplification
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""
Automatic simplification: raw expression tree in, canonical form out.

The tree is simplified bottom-up, one rule set per node shape:

- numbers and symbols are already canonical;
- sums and products go through :data:`~symcanon.ops.SUM` and
  :data:`~symcanon.ops.PRODUCT` (sorting, flattening, collecting like
  terms and like bases, identity and zero rules);
- powers and factorials have their operands simplified and are then
  evaluated by :mod:`symcanon.power`;
- function calls have their arguments simplified and nothing else.

The canonical form is unique, so two expressions are considered equal when
their simplified forms are.

Example:
    >>> x = var('x')
    >>> simplify(x + 2*x + 3*x) == simplify(6*x)
    True
    >>> simplify(x**2 * x**3).expr
    (var('x') ** const(5))
"""

from __future__ import annotations
import logging
from typing import Optional, Union

from .canonical import Simplified
from .config import Config
from .exceptions import Undefined
from .expr import (
    Expr, ExprLike, Numeric, Symbol, Sum, Product, Pow, Factorial, Function,
    _to_expr,
)
from .ops import SUM, PRODUCT
from .power import evaluate_power, evaluate_factorial

logger = logging.getLogger(__name__)


def simplify(expr: Union[ExprLike, Simplified],
             config: Optional[Config] = None) -> Simplified:
    """
    Simplify an expression to its canonical form.

    Args:
        expr: Raw expression (ints and Fractions are accepted as numbers).
              A Simplified value is simplified again, which gives it back
              unchanged.
        config: Optional configuration; defaults to ``Config()``.

    Returns:
        The canonical form, wrapped as Simplified.

    Raises:
        Undefined: If any part of the expression is undefined, e.g. ``0**0``.
                   Nothing partial is returned.
        TypeError: If the tree contains something that is not an Expr.
    """
    if config is None:
        config = Config()
    if isinstance(expr, Simplified):
        expr = expr.expr
    expr = _to_expr(expr)

    logger.debug("simplify %r with %r", expr, config)
    try:
        result = _simplify(expr, config)
    except Undefined as e:
        logger.debug("%r is undefined: %s", expr, e)
        raise
    return Simplified.assume_simplified(result)


def _simplify(expr: Expr, config: Config) -> Expr:
    """Recursively simplify an expression."""
    if isinstance(expr, (Numeric, Symbol)):
        return expr

    if isinstance(expr, Sum):
        return SUM.simplify_exprs([_simplify(e, config) for e in expr.operands])

    if isinstance(expr, Product):
        # every factor is simplified before the zero rule gets a say
        return PRODUCT.simplify_exprs([_simplify(e, config) for e in expr.operands])

    if isinstance(expr, Pow):
        base = _simplify(expr.base, config)
        exponent = _simplify(expr.exponent, config)
        return evaluate_power(base, exponent)

    if isinstance(expr, Factorial):
        operand = _simplify(expr.operand, config)
        return evaluate_factorial(operand, config.factorial_limit)

    if isinstance(expr, Function):
        return Function(expr.name, tuple(_simplify(e, config) for e in expr.args))

    raise TypeError(f"Cannot simplify {type(expr).__name__}")
