"""Host event bus.

``HostEventBus`` is the only surface the dispatch engine consumes. The
in-process implementation keeps, per trigger name, an ordered list of
subscriptions sorted by priority and then by registration order.
"""

from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class HostEventBus(Protocol):
    """Protocol for the host's trigger registry."""

    def subscribe(
        self,
        trigger_name: str,
        priority: int,
        arity: int,
        handler: Handler,
    ) -> None:
        """Call ``handler`` with up to ``arity`` positional arguments
        whenever ``trigger_name`` fires."""
        ...


@dataclass(frozen=True)
class Subscription:
    """A handler registered on a trigger."""

    trigger_name: str
    priority: int
    arity: int
    handler: Handler
    sequence: int

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.priority, self.sequence)


class InProcessEventBus:
    """Synchronous event bus running handlers on the firing thread."""

    def __init__(self) -> None:
        self._subscriptions: dict[str, list[Subscription]] = defaultdict(list)
        self._sequence = itertools.count()

    def subscribe(
        self,
        trigger_name: str,
        priority: int,
        arity: int,
        handler: Handler,
    ) -> None:
        if arity < 0:
            raise ValueError(f"arity must be >= 0, got {arity}")
        subscription = Subscription(
            trigger_name=trigger_name,
            priority=priority,
            arity=arity,
            handler=handler,
            sequence=next(self._sequence),
        )
        bucket = self._subscriptions[trigger_name]
        bucket.append(subscription)
        bucket.sort(key=lambda s: s.sort_key)
        logger.debug(
            "Subscribed handler to %s (priority=%d, arity=%d)",
            trigger_name, priority, arity,
        )

    def subscribers(self, trigger_name: str) -> list[Subscription]:
        """Subscriptions for a trigger, in invocation order."""
        return list(self._subscriptions.get(trigger_name, ()))

    def fire(self, trigger_name: str, *args: Any) -> list[Any]:
        """Invoke every handler subscribed to ``trigger_name``.

        Each handler receives at most its requested number of positional
        arguments. Handler exceptions propagate to the caller and stop the
        remaining handlers from running.
        """
        results: list[Any] = []
        for subscription in self.subscribers(trigger_name):
            results.append(subscription.handler(*args[: subscription.arity]))
        return results

    def clear(self) -> None:
        """Drop every subscription."""
        self._subscriptions.clear()


__all__ = ["HostEventBus", "InProcessEventBus", "Subscription", "Handler"]
