"""Decorators bridging exception-raising code into Result values."""

from tagged_adt.decorators.safe import safe

__all__ = ['safe']
