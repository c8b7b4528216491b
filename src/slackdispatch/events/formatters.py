"""Formatters produce one payload field from a trigger's arguments.

A formatter is either ``Static`` (a fixed value) or ``Dynamic`` (a callable
receiving the forwarded positional arguments). An empty or false result
from the message formatter means "nothing to say" and suppresses delivery.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence


@dataclass(frozen=True)
class Static:
    """A formatter that always yields the same value."""

    value: Any

    def resolve(self, args: Sequence[Any]) -> Any:
        return self.value


@dataclass(frozen=True)
class Dynamic:
    """A formatter computed from the trigger's positional arguments."""

    fn: Callable[..., Any]

    def resolve(self, args: Sequence[Any]) -> Any:
        return self.fn(*args)


Formatter = Static | Dynamic


def as_formatter(value: Any) -> Formatter | None:
    """Wrap a raw definition value: callables become ``Dynamic``."""
    if value is None or isinstance(value, (Static, Dynamic)):
        return value
    if callable(value):
        return Dynamic(value)
    return Static(value)


def resolve(formatter: Formatter | None, args: Sequence[Any]) -> Any:
    """Resolve a formatter; a missing formatter yields an empty string."""
    if formatter is None:
        return ""
    return formatter.resolve(args)


__all__ = ["Static", "Dynamic", "Formatter", "as_formatter", "resolve"]
