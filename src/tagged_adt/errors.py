"""Error raised when a variant is unwrapped as the wrong case."""

from __future__ import annotations

from typing import NoReturn

from tagged_adt._logging import get_logger, is_configured
from tagged_adt.tag import Tag

__all__ = ['UnwrapError']

logger = get_logger(__name__)


class UnwrapError(RuntimeError):
    """A payload was requested from a variant that does not carry it.

    This signals a programmer error: callers are expected to check the
    variant first, or to use ``unwrap_or``, ``fold`` or ``bind`` instead.

    Attributes:
        variant: The tag of the value that was unwrapped.
        expected: The tag the operation required.
    """

    def __init__(self, message: str, *, variant: Tag, expected: Tag) -> None:
        self.variant = variant
        self.expected = expected
        super().__init__(message)


def _fail_unwrap(operation: str, message: str, *, variant: Tag, expected: Tag) -> NoReturn:
    if is_configured():
        logger.debug(
            'unwrap_failed',
            operation=operation,
            variant=variant.name,
            expected=expected.name,
        )
    raise UnwrapError(message, variant=variant, expected=expected)
