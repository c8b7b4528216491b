"""Settings resolver: pick the destinations that can produce notifications."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from slackdispatch.common.schemas import DestinationSetting, is_enabled

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Destination:
    """An active notification target with at least one enabled event."""

    name: str
    enabled_events: Mapping[str, bool]
    delivery_fields: Mapping[str, Any] = field(default_factory=dict)

    def is_event_enabled(self, event_id: str) -> bool:
        return bool(self.enabled_events.get(event_id, False))


def _label(record: Any, index: int) -> str:
    if isinstance(record, Mapping):
        for key in ("name", "id", "channel"):
            if record.get(key):
                return str(record[key])
    return f"destination[{index}]"


def resolve_destinations(records: Iterable[Any]) -> list[Destination]:
    """Filter raw destination records down to active, event-configured ones.

    Records that are inactive, have no enabled-event map, or fail
    validation are skipped. Input records are never mutated.
    """
    destinations: list[Destination] = []
    for index, record in enumerate(records):
        label = _label(record, index)
        if not isinstance(record, Mapping):
            logger.warning("Skipping %s: expected a mapping, got %s", label, type(record).__name__)
            continue
        try:
            setting = DestinationSetting.model_validate(dict(record))
        except ValidationError as exc:
            logger.warning("Skipping %s: invalid settings (%d errors)", label, exc.error_count())
            continue

        if not setting.active:
            logger.info("Skipping %s: inactive", label)
            continue
        if not setting.events:
            logger.info("Skipping %s: no events configured", label)
            continue

        enabled = {str(event_id): is_enabled(flag) for event_id, flag in setting.events.items()}
        destinations.append(
            Destination(
                name=label,
                enabled_events=MappingProxyType(enabled),
                delivery_fields=MappingProxyType(setting.delivery_fields()),
            )
        )
    logger.debug("Resolved %d active destinations", len(destinations))
    return destinations


__all__ = ["Destination", "resolve_destinations"]
