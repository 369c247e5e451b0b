# Tests for order.py - The canonical order

import pytest

from symcanon.expr import (
    var, const, func, factorial, Sum, Product, Pow, Function,
)
from symcanon.order import compare, sort_key


x, y, z = var('x'), var('y'), var('z')


class TestNumbers:
    """Numbers sort first, by value."""

    def test_numbers_by_value(self):
        assert compare(const(1), const(2)) == -1
        assert compare(const(-1, 2), const(0)) == -1
        assert compare(const(3), const(3)) == 0

    def test_numbers_before_everything(self):
        for other in [x, Product((x, y)), Pow(x, 2), Sum((x, y)), factorial(x), func('f', x)]:
            assert compare(const(1000), other) == -1
            assert compare(other, const(-1000)) == 1


class TestProducts:
    """Products compare as lists, from the last operand backwards."""

    def test_product_vs_product(self):
        assert compare(Product((2, x)), Product((3, x))) == -1
        assert compare(Product((x, y)), Product((x, z))) == -1

    def test_last_operand_decides_first(self):
        # y < z decides before x vs y is looked at
        assert compare(Product((y, y)), Product((x, z))) == -1

    def test_shorter_suffix_is_smaller(self):
        assert compare(Product((y, z)), Product((x, y, z))) == -1
        assert compare(Product((x, y, z)), Product((y, z))) == 1

    def test_product_vs_single_expression(self):
        # x is compared as the list [x]
        assert compare(x, Product((2, x))) == -1
        assert compare(Product((2, x)), x) == 1
        assert compare(Product((2, x)), y) == -1

    def test_like_terms_are_adjacent(self):
        terms = [Product((x, y)), y, Product((3, x)), x, Product((2, y))]
        assert sorted(terms, key=sort_key) == [
            x, Product((3, x)), y, Product((2, y)), Product((x, y)),
        ]


class TestPowers:
    """Powers compare as (base, exponent); anything else as x ** 1."""

    def test_pow_vs_pow(self):
        assert compare(Pow(x, 2), Pow(x, 3)) == -1
        assert compare(Pow(x, 5), Pow(y, 1)) == -1

    def test_pow_vs_non_pow(self):
        assert compare(Pow(x, 2), x) == 1
        assert compare(x, Pow(x, 2)) == -1
        assert compare(x, Pow(x, const(1, 2))) == 1
        assert compare(Pow(y, 2), x) == 1

    def test_symbolic_exponent_after_numeric(self):
        assert compare(Pow(x, 2), Pow(x, y)) == -1


class TestSums:
    """Sums follow the same list rule as products."""

    def test_sum_vs_sum(self):
        assert compare(Sum((x, y)), Sum((x, z))) == -1

    def test_sum_vs_single_expression(self):
        assert compare(Sum((x, y)), y) == 1
        assert compare(Sum((x, y)), z) == -1
        assert compare(z, Sum((x, y))) == 1


class TestFactorials:
    """x! sorts right after x."""

    def test_factorial_vs_factorial(self):
        assert compare(factorial(x), factorial(y)) == -1

    def test_factorial_after_own_argument(self):
        assert compare(factorial(x), x) == 1
        assert compare(x, factorial(x)) == -1

    def test_factorial_vs_other(self):
        # compared through the argument, not as a list
        assert compare(factorial(x), y) == -1
        assert compare(factorial(y), x) == 1
        assert compare(y, factorial(x)) == 1


class TestFunctionsAndSymbols:
    """Functions and symbols order by name; a function follows its namesake."""

    def test_symbols_by_name(self):
        assert compare(x, y) == -1
        assert compare(y, x) == 1
        assert compare(x, x) == 0

    def test_function_names(self):
        assert compare(func('f', x), func('g', x)) == -1

    def test_function_args_front_to_back(self):
        # lexicographic from the front, unlike sums and products
        assert compare(func('f', x, y), func('f', y, x)) == -1
        assert compare(func('f', x), func('f', x, y)) == -1

    def test_function_after_symbol_of_same_name(self):
        assert compare(Function('x', (y,)), x) == 1
        assert compare(x, Function('x', (y,))) == -1

    def test_function_vs_symbol_by_name(self):
        assert compare(func('a', x), var('b')) == -1
        assert compare(var('b'), func('a', x)) == 1


class TestOrderProperties:
    """General properties of the comparator."""

    SAMPLE = [
        const(2), const(-1, 3), x, y, Product((2, x)), Product((x, y)),
        Pow(x, 2), Pow(y, x), Sum((x, y)), Sum((2, z)), factorial(x),
        func('f', x), Function('x', (y,)),
    ]

    def test_reflexive(self):
        for a in self.SAMPLE:
            assert compare(a, a) == 0

    def test_antisymmetric(self):
        for a in self.SAMPLE:
            for b in self.SAMPLE:
                assert compare(a, b) == -compare(b, a), (a, b)

    def test_mixed_sort(self):
        exprs = [Sum((x, y)), factorial(x), const(2), Pow(x, 2), x, y, Product((2, x))]
        expected = [const(2), x, Product((2, x)), Pow(x, 2), factorial(x), y, Sum((x, y))]
        assert sorted(exprs, key=sort_key) == expected
        assert sorted(reversed(exprs), key=sort_key) == expected

    def test_rich_comparisons(self):
        assert x < y
        assert y > x
        assert x <= x
        assert const(1) < x
        assert Pow(x, 2) >= x
