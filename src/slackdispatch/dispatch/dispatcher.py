"""Dispatcher: bind payload builders to the host event bus.

One handler is bound per (destination, enabled event) pair, for events the
registry knows about. Binding happens once; later registry or destination
changes need a new dispatcher.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from slackdispatch.common.config import SlackDispatchConfig
from slackdispatch.common.constants import FIXED_HANDLER_ARITY
from slackdispatch.common.errors import DispatcherAlreadyBoundError
from slackdispatch.dispatch.payload import PayloadBuilder
from slackdispatch.dispatch.settings import Destination
from slackdispatch.events.registry import EventDefinition, EventRegistry
from slackdispatch.host.bus import HostEventBus
from slackdispatch.notify.base import Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Binding:
    """A handler subscribed to the bus for one destination and event."""

    event_id: str
    destination: str
    trigger_name: str
    priority: int
    arity: int
    handler: PayloadBuilder


class EventDispatcher:
    """Subscribes one payload builder per enabled event and destination."""

    def __init__(
        self,
        registry: EventRegistry,
        bus: HostEventBus,
        notifier: Notifier,
        config: SlackDispatchConfig | None = None,
    ) -> None:
        self._registry = registry
        self._bus = bus
        self._notifier = notifier
        self._config = config or SlackDispatchConfig()
        self._bindings: list[Binding] | None = None

    @property
    def bindings(self) -> list[Binding]:
        return list(self._bindings or [])

    @property
    def is_bound(self) -> bool:
        return self._bindings is not None

    def priority_for(self, event: EventDefinition) -> int:
        if event.priority:
            return int(event.priority)
        return self._config.default_priority

    def arity_for(self, event: EventDefinition) -> int:
        if self._config.fixed_handler_arity or event.arity is None:
            return FIXED_HANDLER_ARITY
        return event.arity

    def bind(self, destinations: Iterable[Destination]) -> list[Binding]:
        """Subscribe handlers for every eligible destination and event.

        Raises ``DispatcherAlreadyBoundError`` on a second call.
        """
        if self._bindings is not None:
            raise DispatcherAlreadyBoundError("Handlers are already bound to the bus")

        events = self._registry.list_events()
        bindings: list[Binding] = []
        for destination in destinations:
            for event_id, is_enabled in destination.enabled_events.items():
                event = events.get(event_id)
                if event is None:
                    logger.debug(
                        "Ignoring unknown event %s for %s", event_id, destination.name,
                    )
                    continue
                if not is_enabled:
                    continue
                bindings.append(self._bind_one(event_id, event, destination))

        self._bindings = bindings
        logger.info("Bound %d handlers", len(bindings))
        return list(bindings)

    def _bind_one(
        self, event_id: str, event: EventDefinition, destination: Destination,
    ) -> Binding:
        handler = PayloadBuilder(event_id, event, destination, self._notifier)
        priority = self.priority_for(event)
        arity = self.arity_for(event)
        self._bus.subscribe(event.trigger_name, priority, arity, handler)
        return Binding(
            event_id=event_id,
            destination=destination.name,
            trigger_name=event.trigger_name,
            priority=priority,
            arity=arity,
            handler=handler,
        )


__all__ = ["Binding", "EventDispatcher"]
