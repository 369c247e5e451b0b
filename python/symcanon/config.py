# SymCanon - Configuration
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""Configuration settings for SymCanon."""

from __future__ import annotations
from dataclasses import dataclass

from .power import DEFAULT_FACTORIAL_LIMIT


@dataclass
class Config:
    """
    Configuration for simplification.

    Attributes:
        factorial_limit: Largest integer literal ``n`` for which ``n!`` is
                         evaluated. Larger literals stay unevaluated.
    """
    factorial_limit: int = DEFAULT_FACTORIAL_LIMIT

    def __post_init__(self):
        if isinstance(self.factorial_limit, bool) or not isinstance(self.factorial_limit, int):
            raise ValueError(
                f"factorial_limit must be an int, got {type(self.factorial_limit).__name__}"
            )
        if self.factorial_limit < 0:
            raise ValueError(f"factorial_limit must be >= 0, got {self.factorial_limit}")

    def to_dict(self) -> dict:
        """Convert to a plain dict (for logging and serialisation)."""
        return {'factorialLimit': self.factorial_limit}

    def __repr__(self) -> str:
        return f"Config(factorial_limit={self.factorial_limit})"
