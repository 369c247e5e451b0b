# SymCanon - Expression Trees
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""
Expression tree for SymCanon.

Seven node shapes make up every expression: exact numbers, symbols, sums,
products, powers, factorials and named function calls. Nodes are immutable
and compare structurally; children are owned by their parent, so a tree never
shares or cycles.

The Python operators build *raw* trees. Nothing is simplified until the tree
goes through :func:`symcanon.simplify`:

Example:
    >>> x = var('x')
    >>> expr = x + 2 * x
    >>> expr
    (var('x') + (const(2) * var('x')))
    >>> expr.free_vars()
    frozenset({'x'})
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from typing import Union, FrozenSet, Tuple

from .rational import to_fraction, RationalLike


# Type alias for things that can be converted to expressions
ExprLike = Union['Expr', int, Fraction]


class Expr(ABC):
    """
    Base class for expression nodes.

    Expressions are immutable and can be composed using Python operators.
    Rich comparisons (``<``, ``>``...) follow the canonical order, the same
    order simplification sorts operands by.
    """

    @abstractmethod
    def free_vars(self) -> FrozenSet[str]:
        """Return all symbol names used in this expression."""
        ...

    def references(self, name: str) -> bool:
        """Check whether the symbol ``name`` occurs anywhere in the tree."""
        return name in self.free_vars()

    def is_constant(self) -> bool:
        return False

    def is_zero(self) -> bool:
        return False

    def is_one(self) -> bool:
        return False

    # Operator overloading builds raw, unsimplified trees
    def __neg__(self) -> Expr:
        return Product((Numeric(-1), self))

    def __add__(self, other: ExprLike) -> Expr:
        return Sum((self, _to_expr(other)))

    def __radd__(self, other: ExprLike) -> Expr:
        return Sum((_to_expr(other), self))

    def __sub__(self, other: ExprLike) -> Expr:
        return Sum((self, -_to_expr(other)))

    def __rsub__(self, other: ExprLike) -> Expr:
        return Sum((_to_expr(other), -self))

    def __mul__(self, other: ExprLike) -> Expr:
        return Product((self, _to_expr(other)))

    def __rmul__(self, other: ExprLike) -> Expr:
        return Product((_to_expr(other), self))

    def __truediv__(self, other: ExprLike) -> Expr:
        return Product((self, Pow(_to_expr(other), Numeric(-1))))

    def __rtruediv__(self, other: ExprLike) -> Expr:
        return Product((_to_expr(other), Pow(self, Numeric(-1))))

    def __pow__(self, other: ExprLike) -> Expr:
        return Pow(self, _to_expr(other))

    def __rpow__(self, other: ExprLike) -> Expr:
        return Pow(_to_expr(other), self)

    # Canonical order
    def __lt__(self, other: Expr) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        from .order import compare
        return compare(self, other) < 0

    def __le__(self, other: Expr) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        from .order import compare
        return compare(self, other) <= 0

    def __gt__(self, other: Expr) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        from .order import compare
        return compare(self, other) > 0

    def __ge__(self, other: Expr) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        from .order import compare
        return compare(self, other) >= 0


def _to_expr(x: ExprLike) -> Expr:
    """Convert a value to an Expr."""
    if isinstance(x, Expr):
        return x
    elif isinstance(x, (int, Fraction)) and not isinstance(x, bool):
        return Numeric(x)
    else:
        raise TypeError(f"Cannot convert {type(x).__name__} to Expr")


def _to_operands(items) -> Tuple[Expr, ...]:
    return tuple(_to_expr(e) for e in items)


@dataclass(frozen=True)
class Numeric(Expr):
    """An exact rational number."""
    value: Fraction

    def __post_init__(self):
        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'value', to_fraction(self.value))

    def free_vars(self) -> FrozenSet[str]:
        return frozenset()

    def is_constant(self) -> bool:
        return True

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def __repr__(self) -> str:
        v = self.value
        if v.denominator == 1:
            return f"const({v.numerator})"
        return f"const({v.numerator}, {v.denominator})"


@dataclass(frozen=True)
class Symbol(Expr):
    """A symbolic variable with a name."""
    name: str

    def free_vars(self) -> FrozenSet[str]:
        return frozenset({self.name})

    def __repr__(self) -> str:
        return f"var('{self.name}')"


@dataclass(frozen=True)
class Product(Expr):
    """Product of any number of factors."""
    operands: Tuple[Expr, ...]

    def __post_init__(self):
        object.__setattr__(self, 'operands', _to_operands(self.operands))

    def free_vars(self) -> FrozenSet[str]:
        return frozenset().union(*(e.free_vars() for e in self.operands))

    def __repr__(self) -> str:
        if not self.operands:
            return "Product(())"
        return "(" + " * ".join(repr(e) for e in self.operands) + ")"


@dataclass(frozen=True)
class Sum(Expr):
    """Sum of any number of terms."""
    operands: Tuple[Expr, ...]

    def __post_init__(self):
        object.__setattr__(self, 'operands', _to_operands(self.operands))

    def free_vars(self) -> FrozenSet[str]:
        return frozenset().union(*(e.free_vars() for e in self.operands))

    def __repr__(self) -> str:
        if not self.operands:
            return "Sum(())"
        return "(" + " + ".join(repr(e) for e in self.operands) + ")"


@dataclass(frozen=True)
class Pow(Expr):
    """Power: base ** exponent. The exponent is any expression."""
    base: Expr
    exponent: Expr

    def __post_init__(self):
        object.__setattr__(self, 'base', _to_expr(self.base))
        object.__setattr__(self, 'exponent', _to_expr(self.exponent))

    def free_vars(self) -> FrozenSet[str]:
        return self.base.free_vars() | self.exponent.free_vars()

    def __repr__(self) -> str:
        return f"({self.base} ** {self.exponent})"


@dataclass(frozen=True)
class Factorial(Expr):
    """Factorial: operand!"""
    operand: Expr

    def __post_init__(self):
        object.__setattr__(self, 'operand', _to_expr(self.operand))

    def free_vars(self) -> FrozenSet[str]:
        return self.operand.free_vars()

    def __repr__(self) -> str:
        return f"factorial({self.operand})"


@dataclass(frozen=True)
class Function(Expr):
    """
    Call of a named function, e.g. sin(x) or f(x, y).

    Functions are opaque to the kernel: only their arguments get simplified.
    The function name is not a variable and does not show up in free_vars().
    """
    name: str
    args: Tuple[Expr, ...]

    def __post_init__(self):
        object.__setattr__(self, 'args', _to_operands(self.args))

    def free_vars(self) -> FrozenSet[str]:
        return frozenset().union(*(e.free_vars() for e in self.args))

    def __repr__(self) -> str:
        return f"{self.name}(" + ", ".join(repr(e) for e in self.args) + ")"


# Convenience constructors

def var(name: str) -> Symbol:
    """Create a symbolic variable."""
    return Symbol(name)


def const(value: RationalLike, denominator: RationalLike = 1) -> Numeric:
    """
    Create an exact rational constant.

    Raises:
        Undefined: If the denominator is zero.
    """
    return Numeric(to_fraction(value, denominator))


def func(name: str, *args: ExprLike) -> Function:
    """Apply a named function to arguments: func('sin', x)."""
    return Function(name, args)


def factorial(x: ExprLike) -> Factorial:
    """Factorial of an expression."""
    return Factorial(_to_expr(x))
