"""Three-way comparison results and comparator helpers."""

from __future__ import annotations

import functools
from collections.abc import Callable
from enum import IntEnum
from typing import Any, Protocol

__all__ = ['Ordering', 'key', 'natural']


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, n: int) -> Ordering:
        """Normalize any signed number to an Ordering by its sign.

        Comparators may return plain ints (``lambda a, b: a - b``); only the
        sign is significant.
        """
        if n < 0:
            return cls.LESS
        if n > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> Ordering:
        """Return the opposite ordering."""
        return Ordering(-self.value)

    def is_lt(self) -> bool:
        return self is Ordering.LESS

    def is_eq(self) -> bool:
        return self is Ordering.EQUAL

    def is_gt(self) -> bool:
        return self is Ordering.GREATER


class _SupportsOrder(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...


def natural(a: _SupportsOrder, b: _SupportsOrder) -> Ordering:
    """Compare two values using their own ``<`` and ``>``."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def key[T](cmp: Callable[[T, T], int]) -> Callable[[T], Any]:
    """Turn a three-way comparator into a ``sorted()`` key function.

    Example:
        ```python
        from functools import partial
        from tagged_adt import option
        from tagged_adt.ordering import key

        sorted(values, key=key(partial(option.compare, cmp=natural)))
        ```
    """
    return functools.cmp_to_key(cmp)
