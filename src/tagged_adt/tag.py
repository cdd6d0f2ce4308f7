"""Nominal values: a payload paired with an identity-only discriminator.

Two nominal values belong to the same variant family only when their tags are
the same object. Tags are never compared structurally, so two variants that
wrap the same payload (``Some(1)`` and ``Ok(1)``) stay distinct at runtime.

Example:
    ```python
    from tagged_adt.tag import Tag, nominal, type_of, value_of

    RED = Tag('RED', __name__)
    n = nominal(255, RED)
    type_of(n) is RED  # True
    value_of(n)  # 255
    ```
"""

from __future__ import annotations

import importlib
from typing import Any, Self

import msgspec

__all__ = ['Nominal', 'Tag', 'is_nominal', 'nominal', 'type_of', 'value_of']


class Tag:
    """Opaque discriminator token compared by identity only.

    A tag created with ``module`` is expected to be bound as ``module.name``;
    such tags pickle by reference and unpickle to the same instance.
    """

    __slots__ = ('_module', '_name')

    def __init__(self, name: str, module: str | None = None) -> None:
        self._name = name
        self._module = module

    @property
    def name(self) -> str:
        """Human readable label, used only for display."""
        return self._name

    def __repr__(self) -> str:
        return f'<tag {self._name}>'

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, _memo: dict[int, Any]) -> Self:
        return self

    def __reduce__(self) -> tuple[Any, tuple[str, str]]:
        if self._module is None:
            msg = f'{self!r} is not bound to a module and cannot be pickled'
            raise TypeError(msg)
        return _resolve_tag, (self._module, self._name)


def _resolve_tag(module: str, name: str) -> Tag:
    tag = getattr(importlib.import_module(module), name)
    if not isinstance(tag, Tag):
        msg = f'{module}.{name} is not a Tag'
        raise TypeError(msg)
    return tag


class Nominal[T](msgspec.Struct, frozen=True, gc=False):
    """A value carrying a runtime-checked identity.

    Attributes:
        value: The wrapped payload.
        tag: The discriminator; compared by identity.
    """

    value: T
    tag: Tag


def nominal[T](value: T, tag: Tag) -> Nominal[T]:
    """Wrap ``value`` under ``tag``."""
    return Nominal(value, tag)


def type_of(n: Nominal[Any]) -> Tag:
    """Return the discriminator of a nominal value."""
    return n.tag


def value_of[T](n: Nominal[T]) -> T:
    """Return the payload of a nominal value."""
    return n.value


def is_nominal(x: object) -> bool:
    """Return True if ``x`` was produced by :func:`nominal` or a variant constructor."""
    return isinstance(x, Nominal)
