"""Event manager: the boot sequence of the dispatch engine.

Builds the registry, reads destination records from the store once,
resolves the active ones and binds their handlers to the host bus.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from slackdispatch.common.config import SlackDispatchConfig
from slackdispatch.dispatch.dispatcher import Binding, EventDispatcher
from slackdispatch.dispatch.settings import Destination, resolve_destinations
from slackdispatch.events.builtin import default_registry
from slackdispatch.events.registry import EventDefinition, EventRegistry
from slackdispatch.host.bus import HostEventBus
from slackdispatch.notify.base import Notifier
from slackdispatch.store.memory import ConfigurationStore

logger = logging.getLogger(__name__)


class EventManager:
    """Wires registry, configuration store, dispatcher and notifier together."""

    def __init__(
        self,
        bus: HostEventBus,
        store: ConfigurationStore,
        notifier: Notifier,
        config: SlackDispatchConfig | None = None,
        registry: EventRegistry | None = None,
    ) -> None:
        self._config = config or SlackDispatchConfig()
        self._registry = registry or default_registry(self._config)
        self._store = store
        self._dispatcher = EventDispatcher(self._registry, bus, notifier, self._config)
        self._destinations: list[Destination] = []

    @property
    def registry(self) -> EventRegistry:
        return self._registry

    @property
    def destinations(self) -> list[Destination]:
        return list(self._destinations)

    @property
    def bindings(self) -> list[Binding]:
        return self._dispatcher.bindings

    def get_events(self) -> Mapping[str, EventDefinition]:
        return self._registry.list_events()

    def boot(self) -> list[Binding]:
        """Bind handlers for every active destination. Runs once."""
        events = self._registry.list_events()
        self._destinations = resolve_destinations(self._store.list_destinations())
        bindings = self._dispatcher.bind(self._destinations)
        logger.info(
            "Event manager booted: %d events, %d destinations, %d bindings",
            len(events), len(self._destinations), len(bindings),
        )
        return bindings


__all__ = ["EventManager"]
