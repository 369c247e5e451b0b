# SymCanon - Exceptions
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""Exception hierarchy for SymCanon."""

from __future__ import annotations


class SymCanonError(Exception):
    """Base class for all SymCanon exceptions."""
    pass


class Undefined(SymCanonError):
    """
    Raised when an expression has no value in the exact rational system.

    This is the only domain error of the kernel: ``0^0``, ``0`` raised to a
    negative power and any zero denominator all end up here. The first one
    detected aborts the whole simplification; there are no partial results.
    """

    def __init__(self, message: str = "expression is undefined"):
        super().__init__(message)
