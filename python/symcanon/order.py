# SymCanon - Canonical Ordering
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""
The canonical total order on expressions.

Sums and products keep their operands sorted by this order, which is what
makes the simplified form unique. The order has a few asymmetric special
cases, so it is one recursive comparator rather than a structural ordering:

- numbers come before everything else;
- a product or sum is compared as a list, from its *last* operand backwards,
  and a lone expression counts as a one-element list;
- a power compares as the pair (base, exponent), and anything else as
  ``x ** 1``;
- ``x!`` sorts right after ``x``;
- a function sorts right after a symbol of the same name, and its arguments
  compare front to back.

Printers and other collaborators use the same order, e.g. to find the
leading term of a sum.
"""

from __future__ import annotations
from functools import cmp_to_key
from typing import Sequence

from .expr import Expr, Numeric, Symbol, Product, Sum, Pow, Factorial, Function


_ONE = Numeric(1)


def compare(a: Expr, b: Expr) -> int:
    """
    Compare two expressions in canonical order.

    Returns:
        -1 if ``a`` sorts first, 1 if ``b`` does, 0 if they are equal.
    """
    if a == b:
        return 0

    if isinstance(a, Numeric) and isinstance(b, Numeric):
        return _cmp(a.value, b.value)
    if isinstance(a, Numeric):
        return -1
    if isinstance(b, Numeric):
        return 1

    if isinstance(a, Product) and isinstance(b, Product):
        return _compare_lists(a.operands, b.operands)
    if isinstance(a, Product):
        return _compare_lists(a.operands, (b,))
    if isinstance(b, Product):
        return _compare_lists((a,), b.operands)

    if isinstance(a, Pow) and isinstance(b, Pow):
        return _compare_pairs(a.base, a.exponent, b.base, b.exponent)
    if isinstance(a, Pow):
        return _compare_pairs(a.base, a.exponent, b, _ONE)
    if isinstance(b, Pow):
        return _compare_pairs(a, _ONE, b.base, b.exponent)

    if isinstance(a, Sum) and isinstance(b, Sum):
        return _compare_lists(a.operands, b.operands)
    if isinstance(a, Sum):
        return _compare_lists(a.operands, (b,))
    if isinstance(b, Sum):
        return _compare_lists((a,), b.operands)

    if isinstance(a, Factorial) and isinstance(b, Factorial):
        return compare(a.operand, b.operand)
    if isinstance(a, Factorial):
        if a.operand == b:
            return 1
        return compare(a.operand, b)
    if isinstance(b, Factorial):
        if b.operand == a:
            return -1
        return compare(a, b.operand)

    # Only functions and symbols are left
    if isinstance(a, Function) and isinstance(b, Function):
        if a.name == b.name:
            return _compare_args(a.args, b.args)
        return _cmp(a.name, b.name)
    if isinstance(a, Function) and isinstance(b, Symbol):
        if a.name == b.name:
            return 1
        return _cmp(a.name, b.name)
    if isinstance(a, Symbol) and isinstance(b, Function):
        if a.name == b.name:
            return -1
        return _cmp(a.name, b.name)
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return _cmp(a.name, b.name)

    raise TypeError(
        f"Cannot order {type(a).__name__} against {type(b).__name__}"
    )


# Key function for list.sort() / sorted()
sort_key = cmp_to_key(compare)


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def _compare_lists(a: Sequence[Expr], b: Sequence[Expr]) -> int:
    """Compare operand lists from the last element backwards."""
    for x, y in zip(reversed(a), reversed(b)):
        c = compare(x, y)
        if c != 0:
            return c
    return _cmp(len(a), len(b))


def _compare_pairs(base1: Expr, exp1: Expr, base2: Expr, exp2: Expr) -> int:
    c = compare(base1, base2)
    if c != 0:
        return c
    return compare(exp1, exp2)


def _compare_args(a: Sequence[Expr], b: Sequence[Expr]) -> int:
    """Compare function arguments front to back."""
    for x, y in zip(a, b):
        c = compare(x, y)
        if c != 0:
            return c
    return _cmp(len(a), len(b))
