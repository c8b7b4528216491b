"""Event registry.

Builds the immutable mapping of event id to ``EventDefinition`` from the
built-in definitions plus every augmentation registered through
``EventRegistry.extend``. Augmentations run once, in registration order,
the first time the registry is read.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable

from slackdispatch.common.constants import DEFAULT_PRIORITY
from slackdispatch.common.errors import InvalidEventDefinitionError, RegistryFrozenError
from slackdispatch.events.formatters import Formatter, as_formatter

logger = logging.getLogger(__name__)


# --- Data Models ---


@dataclass(frozen=True)
class EventDefinition:
    """A dispatchable event type.

    ``arity`` is the number of positional arguments the trigger documents
    forwarding; ``None`` means undocumented.
    """

    event_id: str
    trigger_name: str
    description: str = ""
    priority: int = DEFAULT_PRIORITY
    default_enabled: bool = False
    arity: int | None = None
    message: Formatter | None = None
    attachments: Formatter | None = None
    icon: Formatter | None = None

    @classmethod
    def create(
        cls,
        event_id: str,
        trigger_name: str,
        *,
        message: Any = None,
        attachments: Any = None,
        icon: Any = None,
        **kwargs: Any,
    ) -> EventDefinition:
        """Build a definition from raw formatter values (strings or callables)."""
        return cls(
            event_id=event_id,
            trigger_name=trigger_name,
            message=as_formatter(message),
            attachments=as_formatter(attachments),
            icon=as_formatter(icon),
            **kwargs,
        )


EventMap = Mapping[str, EventDefinition]
Augmentation = Callable[[dict[str, EventDefinition]], EventMap]


@dataclass(frozen=True)
class _Extension:
    name: str
    fn: Augmentation


# --- Registry ---


class EventRegistry:
    """Registry of dispatchable events with an ordered extension pipeline."""

    def __init__(self, builtins: Callable[[], EventMap] | EventMap | None = None) -> None:
        self._builtins = builtins
        self._extensions: list[_Extension] = []
        self._events: Mapping[str, EventDefinition] | None = None

    @property
    def is_built(self) -> bool:
        return self._events is not None

    def extend(self, fn: Augmentation, name: str | None = None) -> Augmentation:
        """Register an augmentation; usable as a decorator.

        Raises ``RegistryFrozenError`` once the registry has been built.
        """
        ext_name = name or getattr(fn, "__qualname__", repr(fn))
        if self.is_built:
            raise RegistryFrozenError(ext_name)
        self._extensions.append(_Extension(name=ext_name, fn=fn))
        return fn

    def extension_names(self) -> list[str]:
        return [ext.name for ext in self._extensions]

    def _seed(self) -> dict[str, EventDefinition]:
        if self._builtins is None:
            return {}
        seed = self._builtins() if callable(self._builtins) else self._builtins
        return dict(seed)

    @staticmethod
    def _validate(events: Any, source: str) -> dict[str, EventDefinition]:
        if not isinstance(events, Mapping):
            raise InvalidEventDefinitionError(
                f"Extension {source!r} returned {type(events).__name__}, expected a mapping"
            )
        invalid = [key for key, value in events.items() if not isinstance(value, EventDefinition)]
        if invalid:
            raise InvalidEventDefinitionError(
                f"Extension {source!r} returned non-EventDefinition entries: {sorted(invalid)}"
            )
        return dict(events)

    def list_events(self) -> Mapping[str, EventDefinition]:
        """Return the read-only event map, building it on first use."""
        if self._events is None:
            events = self._validate(self._seed(), "builtins")
            for ext in self._extensions:
                events = self._validate(ext.fn(dict(events)), ext.name)
            self._events = MappingProxyType(events)
            logger.info(
                "Event registry built: %d events, %d extensions",
                len(events), len(self._extensions),
            )
        return self._events

    def get(self, event_id: str) -> EventDefinition | None:
        return self.list_events().get(event_id)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self.list_events()


__all__ = ["EventDefinition", "EventRegistry", "EventMap", "Augmentation"]
