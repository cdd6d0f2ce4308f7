"""Option type: ``Some(v)`` or ``Nothing`` for optional values.

Both variants are :class:`~tagged_adt.tag.Nominal` values distinguished by the
module-level tags ``SOME`` and ``NONE``. ``Nothing`` is the single canonical
empty option; ``none()`` always returns it.

Python's own ``None`` is an ordinary payload here: ``Some(None)`` is a present
value. Only :func:`from_` treats ``None`` as absence.

Example:
    ```python
    from tagged_adt.option import Nothing, Some, from_

    Some(4).map(lambda x: x + 1)  # Some(5)
    Nothing.bind(lambda x: Some(x * 2))  # Nothing
    from_(None).unwrap_or(99)  # 99
    ```
"""

from __future__ import annotations

import copy
import operator
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from tagged_adt.errors import _fail_unwrap
from tagged_adt.ordering import Ordering, natural
from tagged_adt.tag import Nominal, Tag

if TYPE_CHECKING:
    from tagged_adt.result import Result

__all__ = [
    'NONE',
    'SOME',
    'Nothing',
    'Option',
    'Some',
    'compare',
    'equal',
    'from_',
    'is_option',
    'none',
    'some',
]

SOME = Tag('SOME', __name__)
NONE = Tag('NONE', __name__)


class Option[T](Nominal[T], frozen=True, gc=False):
    """The presence (``Some``) or absence (``Nothing``) of a value of type T.

    Build options with :func:`some`, :func:`none` or :func:`from_`; the
    constructor is not part of the public surface. Branch on the variant with
    :meth:`is_some` / :meth:`is_none`, or consume both cases at once with
    :meth:`fold`.

    Examples:
        >>> Some(42).get()
        42
        >>> Some(5).bind(lambda x: Some(x * 2))
        Some(10)
        >>> Nothing.fold(none=lambda: 'empty', some=str)
        'empty'
    """

    def __post_init__(self) -> None:
        if self.tag is NONE:
            if self.value is not None:
                msg = 'Nothing carries no payload'
                raise TypeError(msg)
        elif self.tag is not SOME:
            msg = f'{self.tag!r} is not an Option variant'
            raise TypeError(msg)

    def __repr__(self) -> str:
        if self.is_some():
            return f'Some({self.value!r})'
        return 'Nothing'

    def __copy__(self) -> Option[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Option[T]:
        if self.is_none():
            return self
        return Option(copy.deepcopy(self.value, memo), SOME)

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuild through the constructors so Nothing unpickles to the singleton.
        if self.is_none():
            return (none, ())
        return (some, (self.value,))

    def __iter__(self) -> Iterator[T]:
        """Yield the value once if Some, never if Nothing."""
        if self.is_some():
            yield self.value

    def is_some(self) -> bool:
        """Return True if the option holds a value."""
        return self.tag is SOME

    def is_none(self) -> bool:
        """Return True if the option is Nothing."""
        return self.tag is NONE

    def get(self) -> T:
        """Return the contained value.

        Raises:
            UnwrapError: If the option is Nothing.
        """
        if self.is_none():
            _fail_unwrap('get', 'Called get on Nothing', variant=self.tag, expected=SOME)
        return self.value

    def expect(self, msg: str) -> T:
        """Return the contained value, raising UnwrapError with ``msg`` if Nothing."""
        if self.is_none():
            _fail_unwrap('expect', msg, variant=self.tag, expected=SOME)
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the contained value, or ``default`` if Nothing."""
        return self.value if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return the contained value, or compute one with ``f`` if Nothing."""
        return self.value if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Apply ``f`` to the contained value.

        The result of ``f`` is always wrapped, even when it is ``None``.
        """
        if self.is_none():
            return Nothing
        return Some(f(self.value))

    def bind[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning function, short-circuiting on Nothing.

        Also known as flatmap or and_then.
        """
        if self.is_none():
            return Nothing
        return f(self.value)

    def join(self) -> Option[Any]:
        """Flatten one level of nesting.

        ``Some(Some(v))`` becomes ``Some(v)``; every other shape becomes Nothing.
        """
        if self.is_some() and is_option(self.value):
            return self.value
        return Nothing

    def fold[U](self, *, none: Callable[[], U], some: Callable[[T], U]) -> U:
        """Eliminate the option by calling exactly one of the two handlers."""
        if self.is_none():
            return none()
        return some(self.value)

    def iter(self, f: Callable[[T], object]) -> None:
        """Call ``f`` with the contained value for its side effect, if Some."""
        if self.is_some():
            f(self.value)

    def to_list(self) -> list[T]:
        """Return ``[]`` for Nothing and ``[v]`` for ``Some(v)``."""
        return [self.value] if self.is_some() else []

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` accepts it."""
        if self.is_some() and predicate(self.value):
            return self
        return Nothing

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return self if Some, otherwise the option produced by ``f``."""
        return self if self.is_some() else f()

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair two values if both options are Some."""
        if self.is_some() and other.is_some():
            return Some((self.value, other.value))
        return Nothing

    def ok_or[E](self, error: E) -> Result[T, E]:
        """Convert to a Result: ``Ok(v)`` for ``Some(v)``, ``Err(error)`` for Nothing."""
        from tagged_adt.result import Err, Ok

        return Ok(self.value) if self.is_some() else Err(error)

    def ok_or_else[E](self, f: Callable[[], E]) -> Result[T, E]:
        """Like :meth:`ok_or`, computing the error only when needed."""
        from tagged_adt.result import Err, Ok

        return Ok(self.value) if self.is_some() else Err(f())


Nothing: Option[Any] = Option(None, NONE)
"""Singleton instance representing the absence of a value."""


def some[T](value: T) -> Option[T]:
    """Return ``Some(value)``."""
    return Option(value, SOME)


Some = some


def none[T]() -> Option[T]:
    """Return ``Nothing``."""
    return Nothing


def from_[T](value: T | None) -> Option[T]:
    """Normalize a nullable value: ``None`` becomes Nothing, anything else ``Some``.

    Examples:
        >>> from_(3)
        Some(3)
        >>> from_(None)
        Nothing
    """
    return Nothing if value is None else Option(value, SOME)


def is_option(x: object) -> bool:
    """Return True if ``x`` is a Some or Nothing value."""
    return isinstance(x, Option)


def equal[T](
    o0: Option[T],
    o1: Option[T],
    eq: Callable[[T, T], bool] = operator.eq,
) -> bool:
    """Test two options for equality, comparing payloads with ``eq``.

    Two options are equal when both are Nothing, or both are Some and ``eq``
    agrees on their values.
    """
    if o0.is_none():
        return o1.is_none()
    return o1.is_some() and bool(eq(o0.value, o1.value))


def compare[T](
    o0: Option[T],
    o1: Option[T],
    cmp: Callable[[T, T], int] = natural,
) -> Ordering:
    """Totally order two options, comparing payloads with ``cmp``.

    Nothing is smaller than every Some; two Some values are ordered by ``cmp``,
    whose result only matters by its sign.

    Examples:
        >>> compare(Nothing, Some(3), lambda a, b: a - b)
        <Ordering.LESS: -1>
    """
    if o0.is_none():
        return Ordering.EQUAL if o1.is_none() else Ordering.LESS
    if o1.is_none():
        return Ordering.GREATER
    return Ordering.of(cmp(o0.value, o1.value))
