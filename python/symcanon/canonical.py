# SymCanon - Canonical Expressions
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""
The ``Simplified`` wrapper: an expression known to be in canonical form.

A ``Simplified`` holds a plain :class:`~symcanon.expr.Expr` and promises that
it satisfies the canonical invariants: sorted, fully collected sums and
products of at least two operands, no nested same-kind lists, no identity
or absorbing numbers inside them. There are two ways to get one:

- :func:`symcanon.simplify`, the normal entry point;
- :meth:`Simplified.assume_simplified`, for collaborators (a differentiation
  engine, for instance) that assembled a result from canonical pieces
  through the operation primitives and so already know the invariant holds.

The wrapper never re-validates. Handing ``assume_simplified`` a raw tree is a
contract violation, not something that gets checked at runtime.
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple

from .expr import Expr, Numeric, Product, Pow, Symbol
from .order import compare


_ONE = Numeric(1)


@dataclass(frozen=True, eq=False)
class Simplified:
    """An expression in canonical form."""
    expr: Expr

    @classmethod
    def assume_simplified(cls, expr: Expr) -> Simplified:
        """
        Wrap an expression without checking it.

        Only for expressions built from already-canonical parts through
        ``SUM``/``PRODUCT``/``simplify_power``; anything else breaks the
        uniqueness of the canonical form.
        """
        return cls(expr)

    @classmethod
    def constant(cls, value) -> Simplified:
        """A canonical number (numbers are always canonical)."""
        return cls(Numeric(value))

    @classmethod
    def symbol(cls, name: str) -> Simplified:
        """A canonical symbol."""
        return cls(Symbol(name))

    def is_constant(self) -> bool:
        return self.expr.is_constant()

    def is_zero(self) -> bool:
        return self.expr.is_zero()

    def is_one(self) -> bool:
        return self.expr.is_one()

    def split_product(self) -> Optional[Tuple[Fraction, Simplified]]:
        """
        Split into (numeric coefficient, symbolic part).

        ``3*x*y`` gives ``(3, x*y)``, ``x`` gives ``(1, x)``. Numbers have no
        symbolic part and give None.
        """
        split = split_coefficient(self.expr)
        if split is None:
            return None
        coefficient, rest = split
        return coefficient, Simplified(rest)

    def base(self) -> Optional[Simplified]:
        """Base of a power; ``x`` counts as ``x ** 1``. None for numbers."""
        b = base_of(self.expr)
        return None if b is None else Simplified(b)

    def exponent(self) -> Optional[Simplified]:
        """Exponent of a power; ``x`` counts as ``x ** 1``. None for numbers."""
        e = exponent_of(self.expr)
        return None if e is None else Simplified(e)

    def free_vars(self):
        return self.expr.free_vars()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Simplified):
            return self.expr == other.expr
        if isinstance(other, (int, Fraction)) and not isinstance(other, bool):
            return isinstance(self.expr, Numeric) and self.expr.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.expr)

    def __lt__(self, other: Simplified) -> bool:
        if not isinstance(other, Simplified):
            return NotImplemented
        return compare(self.expr, other.expr) < 0

    def __le__(self, other: Simplified) -> bool:
        if not isinstance(other, Simplified):
            return NotImplemented
        return compare(self.expr, other.expr) <= 0

    def __gt__(self, other: Simplified) -> bool:
        if not isinstance(other, Simplified):
            return NotImplemented
        return compare(self.expr, other.expr) > 0

    def __ge__(self, other: Simplified) -> bool:
        if not isinstance(other, Simplified):
            return NotImplemented
        return compare(self.expr, other.expr) >= 0

    def __repr__(self) -> str:
        return f"Simplified({self.expr!r})"


# Helpers on canonical Expr values, shared with the operations

def split_coefficient(expr: Expr) -> Optional[Tuple[Fraction, Expr]]:
    """Split a canonical term into its numeric coefficient and symbolic part."""
    if isinstance(expr, Numeric):
        return None
    if isinstance(expr, Product) and isinstance(expr.operands[0], Numeric):
        # a canonical product holds at most one number, sorted first
        rest = expr.operands[1:]
        if len(rest) == 1:
            return expr.operands[0].value, rest[0]
        return expr.operands[0].value, Product(rest)
    return Fraction(1), expr


def base_of(expr: Expr) -> Optional[Expr]:
    if isinstance(expr, Numeric):
        return None
    if isinstance(expr, Pow):
        return expr.base
    return expr


def exponent_of(expr: Expr) -> Optional[Expr]:
    if isinstance(expr, Numeric):
        return None
    if isinstance(expr, Pow):
        return expr.exponent
    return _ONE
