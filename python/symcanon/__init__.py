# SymCanon
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""
SymCanon - a canonical-form computer-algebra kernel.

SymCanon takes a tree of sums, products, powers, factorials, function calls,
symbols and exact rational numbers and turns it into a unique canonical
form: operands sorted, like terms and like bases collected, powers and
factorials of numbers evaluated. The canonical form is what printers,
equality tests and differentiation engines work from.

Example:
    >>> import symcanon as sc
    >>> x = sc.var('x')
    >>> sc.simplify(x + 2*x + 3*x) == sc.simplify(6*x)
    True
    >>> sc.simplify(sc.const(0) ** 0)
    Traceback (most recent call last):
        ...
    symcanon.exceptions.Undefined: 0 raised to 0

Key Features:
    - Exact rational arithmetic, no floating point
    - One canonical order shared with collaborators
    - Sum/Product as one merge algorithm with two strategy records
    - A single domain error, Undefined
"""

__version__ = "0.1.0"

# Expression types and constructors
from .expr import (
    Expr,
    Numeric,
    Symbol,
    Sum,
    Product,
    Pow,
    Factorial,
    Function,
    var,
    const,
    func,
    factorial,
)

# Rational utilities
from .rational import to_fraction

# Canonical order
from .order import compare, sort_key

# Canonical wrapper
from .canonical import Simplified

# Operations and evaluators
from .ops import Operation, SUM, PRODUCT
from .power import simplify_power, simplify_factorial

# Configuration
from .config import Config

# Simplification
from .simplify import simplify

# Exceptions
from .exceptions import SymCanonError, Undefined

__all__ = [
    # Version
    "__version__",
    # Expression types
    "Expr",
    "Numeric",
    "Symbol",
    "Sum",
    "Product",
    "Pow",
    "Factorial",
    "Function",
    # Expression constructors
    "var",
    "const",
    "func",
    "factorial",
    # Rational utilities
    "to_fraction",
    # Canonical order
    "compare",
    "sort_key",
    # Canonical wrapper
    "Simplified",
    # Operations
    "Operation",
    "SUM",
    "PRODUCT",
    "simplify_power",
    "simplify_factorial",
    # Configuration
    "Config",
    # Simplification
    "simplify",
    # Exceptions
    "SymCanonError",
    "Undefined",
]
