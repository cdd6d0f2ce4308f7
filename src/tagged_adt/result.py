"""Result type: ``Ok(v)`` or ``Err(e)`` for explicit error handling.

Result values carry either a successful value of type T or a failure value of
type E. Both variants are :class:`~tagged_adt.tag.Nominal` values
distinguished by the module-level tags ``OK`` and ``ERR``, so ``Ok(1)`` and
``Err(1)`` never compare equal even though they wrap the same payload.

Example:
    ```python
    from tagged_adt.result import Err, Ok

    def parse(text: str) -> Result[int, str]:
        return Ok(int(text)) if text.isdigit() else Err(f'not a number: {text!r}')

    parse('41').map(lambda n: n + 1)  # Ok(42)
    parse('x').bind(lambda n: Ok(n * 2))  # Err("not a number: 'x'")
    ```
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from tagged_adt.errors import _fail_unwrap
from tagged_adt.ordering import Ordering, natural
from tagged_adt.tag import Nominal, Tag

if TYPE_CHECKING:
    from tagged_adt.option import Option

__all__ = [
    'ERR',
    'OK',
    'Err',
    'Ok',
    'Result',
    'collect',
    'compare',
    'equal',
    'err',
    'is_result',
    'ok',
]

OK = Tag('OK', __name__)
ERR = Tag('ERR', __name__)


class Result[T, E](Nominal[Any], frozen=True, gc=False):
    """Either a success ``Ok(v)`` or a failure ``Err(e)``.

    Build results with :func:`ok` and :func:`err`. The error type stays fixed
    through :meth:`bind`; translate it with :meth:`map_err` first when a chain
    needs a different one.

    Examples:
        >>> Ok(42).get_ok()
        42
        >>> Err('boom').map(lambda x: x + 1)
        Err('boom')
        >>> Ok(5).fold(ok=str, err=lambda e: 'failed')
        '5'
    """

    def __post_init__(self) -> None:
        if self.tag is not OK and self.tag is not ERR:
            msg = f'{self.tag!r} is not a Result variant'
            raise TypeError(msg)

    def __repr__(self) -> str:
        if self.is_ok():
            return f'Ok({self.value!r})'
        return f'Err({self.value!r})'

    def is_ok(self) -> bool:
        """Return True if the result is Ok."""
        return self.tag is OK

    def is_err(self) -> bool:
        """Return True if the result is Err."""
        return self.tag is ERR

    def get_ok(self) -> T:
        """Return the Ok value.

        Raises:
            UnwrapError: If the result is Err.
        """
        if self.is_err():
            _fail_unwrap('get_ok', f'Called get_ok on Err: {self.value!r}', variant=self.tag, expected=OK)
        return self.value

    def get_err(self) -> E:
        """Return the Err value.

        Raises:
            UnwrapError: If the result is Ok.
        """
        if self.is_ok():
            _fail_unwrap('get_err', f'Called get_err on Ok: {self.value!r}', variant=self.tag, expected=ERR)
        return self.value

    def expect(self, msg: str) -> T:
        """Return the Ok value, raising UnwrapError with ``msg`` if Err."""
        if self.is_err():
            _fail_unwrap('expect', f'{msg}: {self.value!r}', variant=self.tag, expected=OK)
        return self.value

    def unwrap_or(self, fallback: T) -> T:
        """Return the Ok value, or ``fallback`` if Err."""
        return self.value if self.is_ok() else fallback

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Return the Ok value, or compute one from the error with ``f``."""
        return self.value if self.is_ok() else f(self.value)

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the Ok value; an Err passes through unchanged."""
        if self.is_err():
            return self  # type: ignore[return-value]
        return Ok(f(self.value))

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the Err value; an Ok passes through unchanged."""
        if self.is_ok():
            return self  # type: ignore[return-value]
        return Err(f(self.value))

    def bind[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a Result-returning function, short-circuiting on the first Err.

        Also known as flatmap or and_then.
        """
        if self.is_err():
            return self  # type: ignore[return-value]
        return f(self.value)

    def join(self) -> Result[Any, E]:
        """Flatten one level of nesting.

        ``Ok(Ok(v))`` becomes ``Ok(v)`` and ``Ok(Err(e))`` becomes ``Err(e)``.
        An Err, or an Ok whose value is not a Result, is returned unchanged.
        """
        if self.is_ok() and is_result(self.value):
            return self.value
        return self

    def fold[C](self, *, ok: Callable[[T], C], err: Callable[[E], C]) -> C:
        """Eliminate the result by calling exactly one of the two handlers."""
        if self.is_ok():
            return ok(self.value)
        return err(self.value)

    def iter(self, f: Callable[[T], object]) -> None:
        """Call ``f`` with the Ok value for its side effect, if Ok."""
        if self.is_ok():
            f(self.value)

    def iter_err(self, f: Callable[[E], object]) -> None:
        """Call ``f`` with the Err value for its side effect, if Err."""
        if self.is_err():
            f(self.value)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from an Err with ``f``; an Ok is returned unchanged."""
        if self.is_ok():
            return self  # type: ignore[return-value]
        return f(self.value)

    def ok(self) -> Option[T]:
        """Convert to Option: ``Some(v)`` for Ok, Nothing for Err."""
        from tagged_adt.option import Nothing, Some

        return Some(self.value) if self.is_ok() else Nothing

    def err(self) -> Option[E]:
        """Convert to Option: ``Some(e)`` for Err, Nothing for Ok."""
        from tagged_adt.option import Nothing, Some

        return Some(self.value) if self.is_err() else Nothing


def ok[T](value: T) -> Result[T, Any]:
    """Return ``Ok(value)``."""
    return Result(value, OK)


def err[E](error: E) -> Result[Any, E]:
    """Return ``Err(error)``."""
    return Result(error, ERR)


Ok = ok
Err = err


def is_result(x: object) -> bool:
    """Return True if ``x`` is an Ok or Err value."""
    return isinstance(x, Result)


def equal[T, E](
    r0: Result[T, E],
    r1: Result[T, E],
    *,
    ok: Callable[[T, T], bool] = operator.eq,
    err: Callable[[E, E], bool] = operator.eq,
) -> bool:
    """Test two results for equality.

    Results of different variants are never equal; otherwise the payloads are
    compared with ``ok`` or ``err`` respectively.
    """
    if r0.is_ok() != r1.is_ok():
        return False
    if r0.is_ok():
        return bool(ok(r0.value, r1.value))
    return bool(err(r0.value, r1.value))


def compare[T, E](
    r0: Result[T, E],
    r1: Result[T, E],
    *,
    ok: Callable[[T, T], int] = natural,
    err: Callable[[E, E], int] = natural,
) -> Ordering:
    """Totally order two results.

    Every Ok is smaller than every Err. Within a variant, payloads are ordered
    by ``ok`` or ``err``, whose results only matter by their sign.
    """
    if r0.is_ok() and r1.is_ok():
        return Ordering.of(ok(r0.value, r1.value))
    if r0.is_err() and r1.is_err():
        return Ordering.of(err(r0.value, r1.value))
    return Ordering.LESS if r0.is_ok() else Ordering.GREATER


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err('fail')
    """
    values: list[T] = []
    for r in results:
        if r.is_err():
            return r  # type: ignore[return-value]
        values.append(r.value)
    return Ok(values)
