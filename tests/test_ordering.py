"""Tests for Ordering and comparator helpers."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tagged_adt.ordering import Ordering, key, natural


class TestOrdering:
    """Tests for the Ordering enum."""

    def test_values(self):
        """Orderings are -1, 0 and 1."""
        assert Ordering.LESS == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER == 1

    @pytest.mark.parametrize(
        ('n', 'expected'),
        [(-5, Ordering.LESS), (0, Ordering.EQUAL), (7, Ordering.GREATER), (-0.5, Ordering.LESS)],
    )
    def test_of_normalizes_sign(self, n, expected):
        """Ordering.of() keeps only the sign."""
        assert Ordering.of(n) is expected

    def test_reverse(self):
        """reverse() flips LESS and GREATER and keeps EQUAL."""
        assert Ordering.LESS.reverse() is Ordering.GREATER
        assert Ordering.GREATER.reverse() is Ordering.LESS
        assert Ordering.EQUAL.reverse() is Ordering.EQUAL

    def test_predicates(self):
        """is_lt/is_eq/is_gt match their member."""
        assert Ordering.LESS.is_lt()
        assert Ordering.EQUAL.is_eq()
        assert Ordering.GREATER.is_gt()
        assert not Ordering.LESS.is_gt()


class TestNatural:
    """Tests for the natural comparator."""

    def test_numbers(self):
        """natural() orders numbers."""
        assert natural(1, 2) is Ordering.LESS
        assert natural(2, 2) is Ordering.EQUAL
        assert natural(3, 2) is Ordering.GREATER

    def test_strings(self):
        """natural() orders strings lexicographically."""
        assert natural('a', 'b') is Ordering.LESS

    @given(st.integers(), st.integers())
    def test_antisymmetric(self, a, b):
        """natural(a, b) is the reverse of natural(b, a)."""
        assert natural(a, b) is natural(b, a).reverse()


class TestKey:
    """Tests for key()."""

    def test_sorts_with_comparator(self):
        """key() lets sorted() use a three-way comparator."""
        descending = key(lambda a, b: b - a)
        assert sorted([3, 1, 2], key=descending) == [3, 2, 1]
