"""@safe: run a function and capture selected exceptions as Err."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from tagged_adt.result import Err, Ok, Result

__all__ = ['safe']


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T](func: None = None) -> Callable[[Callable[P, T]], Callable[P, Result[T, Exception]]]: ...


@overload
def safe[**P, T, X: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[X], ...],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, X]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> Any:
    """Make ``func`` return ``Ok(value)``, or ``Err(exc)`` for a caught exception.

    Only instances of ``exceptions`` are captured; anything else propagates.
    Use bare (``@safe``) or with arguments (``@safe(exceptions=(KeyError,))``).

    Example:
        ```python
        @safe(exceptions=(ZeroDivisionError,))
        def ratio(a: int, b: int) -> float:
            return a / b

        ratio(1, 4)  # Ok(0.25)
        ratio(1, 0)  # Err(ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    def capture(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Result:
        try:
            return Ok(wrapped(*args, **kwargs))
        except exceptions as e:
            return Err(e)

    return capture if func is None else capture(func)
