# SymCanon - Sum and Product Operations
# Copyright (c) 2024 SymCanon Contributors. All rights reserved.

"""
The two associative-commutative operations, Sum and Product.

Both share one algorithm: simplify the operands, drop identities, sort them
canonically and fold them together with a merge that collects like operands
as it goes. What differs between them is a small strategy record:

    ========  ========  =========  ========  ==============================
    op        identity  absorbing  constants like operands
    ========  ========  =========  ========  ==============================
    SUM       0         -          a + b     ``2*x + 3*x -> 5*x``
    PRODUCT   1         0          a * b     ``x**2 * x**3 -> x**5``
    ========  ========  =========  ========  ==============================

The merge takes two sorted operand sequences and walks their heads. Heads
that collect are replaced by the collected operand, which then has to be
compared against what is still pending on both sides; heads that don't are
emitted in canonical order. A nested sum inside a sum (or product inside a
product) is merged in as its own sorted run, which flattens it.

Example:
    >>> x = Simplified.symbol('x')
    >>> SUM.simplify([x, x])
    Simplified((const(2) * var('x')))
"""

from __future__ import annotations
import logging
import operator
from collections import deque
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, Iterable, List, Optional

from .canonical import Simplified, split_coefficient, base_of, exponent_of
from .expr import Expr, Numeric, Sum, Product
from .order import compare, sort_key
from .power import evaluate_power

logger = logging.getLogger(__name__)


# A pairwise-collect rule: None when the operands don't collect, otherwise
# the zero or one operands that replace them.
Collector = Callable[[Expr, Expr], Optional[List[Expr]]]


class _Absorbed(Exception):
    """A collected operand turned out to be the absorbing element."""
    pass


@dataclass(frozen=True)
class Operation:
    """
    Strategy record for an associative-commutative operation.

    Attributes:
        name: Name used in log records.
        kind: Node class of the operation's lists (Sum or Product).
        identity: Identity element (0 for Sum, 1 for Product).
        absorbing: Absorbing element, if any (0 for Product).
        combine: Combines two numeric operands.
        collect: Pairwise-collect rule for two non-numeric operands.
    """
    name: str
    kind: type
    identity: Fraction
    absorbing: Optional[Fraction]
    combine: Callable[[Fraction, Fraction], Fraction]
    collect: Collector

    def simplify(self, operands: Iterable[Simplified]) -> Simplified:
        """
        Combine canonical operands into one canonical expression.

        This is the primitive collaborators compose with, e.g. a product rule
        summing ``SUM.simplify([...])`` over canonical derivatives.

        Raises:
            Undefined: If collecting two operands is undefined (``0**y * 0**-y``).
        """
        return Simplified.assume_simplified(
            self.simplify_exprs([s.expr for s in operands])
        )

    def simplify_exprs(self, exprs: List[Expr]) -> Expr:
        """Same as simplify(), on Expr values that are already canonical."""
        if self.absorbing is not None:
            for e in exprs:
                if isinstance(e, Numeric) and e.value == self.absorbing:
                    return Numeric(self.absorbing)

        exprs = [e for e in exprs if not self._is_identity(e)]
        if not exprs:
            return Numeric(self.identity)
        if len(exprs) == 1:
            return exprs[0]

        exprs.sort(key=sort_key)

        merged: List[Expr] = []
        try:
            for e in exprs:
                merged = self._merge(merged, self.operands(e))
        except _Absorbed:
            return Numeric(self.absorbing)

        if not merged:
            return Numeric(self.identity)
        if len(merged) == 1:
            return merged[0]
        return self.kind(tuple(merged))

    def _merge(self, left: List[Expr], right: List[Expr]) -> List[Expr]:
        """
        Merge two sorted, fully collected operand sequences.

        Returns a sorted, fully collected sequence. It may be shorter than
        the inputs combined, or empty when everything cancels.
        """
        pending_left = deque(left)
        pending_right = deque(right)
        out: List[Expr] = []

        while pending_left and pending_right:
            a = pending_left[0]
            b = pending_right[0]
            collected = self._collect_pair(a, b)

            if collected is None:
                if compare(b, a) < 0:
                    out.append(pending_right.popleft())
                else:
                    out.append(pending_left.popleft())
                continue

            pending_left.popleft()
            pending_right.popleft()
            if not collected:
                continue

            c = collected[0]
            if self.absorbing is not None and isinstance(c, Numeric) and c.value == self.absorbing:
                raise _Absorbed()

            if self._fits(c, out, pending_left):
                # re-compare against the other side's head
                pending_left.appendleft(c)
                continue

            # c sorts before output already emitted, or is a list of our own
            # kind; merge it back in with the rest
            logger.debug("%s: re-merging collected operand %r", self.name, c)
            rest = self._merge(list(pending_left), list(pending_right))
            return self._merge(self._merge(out, self.operands(c)), rest)

        out.extend(pending_left)
        out.extend(pending_right)
        return out

    def operands(self, x: Expr) -> List[Expr]:
        """The operands of one of our lists, or ``[x]`` for anything else."""
        if isinstance(x, self.kind):
            return list(x.operands)
        return [x]

    def _is_identity(self, x: Expr) -> bool:
        return isinstance(x, Numeric) and x.value == self.identity

    def _fits(self, c: Expr, out: List[Expr], pending: deque) -> bool:
        if isinstance(c, self.kind):
            return False
        if out and compare(out[-1], c) >= 0:
            return False
        if pending and compare(c, pending[0]) >= 0:
            return False
        return True

    def _collect_pair(self, a: Expr, b: Expr) -> Optional[List[Expr]]:
        if isinstance(a, Numeric) and isinstance(b, Numeric):
            value = self.combine(a.value, b.value)
            if value == self.identity:
                return []
            return [Numeric(value)]
        return self.collect(a, b)


def _collect_terms(a: Expr, b: Expr) -> Optional[List[Expr]]:
    """Like terms: ``c1*t + c2*t -> (c1 + c2)*t``."""
    split_a = split_coefficient(a)
    split_b = split_coefficient(b)
    if split_a is None or split_b is None:
        return None

    coeff_a, term_a = split_a
    coeff_b, term_b = split_b
    if term_a != term_b:
        return None

    coefficient = coeff_a + coeff_b
    logger.debug("collect terms %r + %r -> coefficient %s", a, b, coefficient)
    if coefficient == 0:
        return []
    return [PRODUCT.simplify_exprs([Numeric(coefficient), term_a])]


def _collect_powers(a: Expr, b: Expr) -> Optional[List[Expr]]:
    """Like bases: ``x**e1 * x**e2 -> x**(e1 + e2)``."""
    base = base_of(a)
    if base is None or base != base_of(b):
        return None

    exponent = SUM.simplify_exprs([exponent_of(a), exponent_of(b)])
    logger.debug("collect powers %r * %r -> exponent %r", a, b, exponent)
    result = evaluate_power(base, exponent)
    if result.is_one():
        return []
    return [result]


SUM = Operation(
    name="sum",
    kind=Sum,
    identity=Fraction(0),
    absorbing=None,
    combine=operator.add,
    collect=_collect_terms,
)

PRODUCT = Operation(
    name="product",
    kind=Product,
    identity=Fraction(1),
    absorbing=Fraction(0),
    combine=operator.mul,
    collect=_collect_powers,
)
