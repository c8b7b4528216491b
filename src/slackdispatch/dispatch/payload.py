"""Payload builder: the handler bound to the host bus for one destination.

On every firing it resolves the event's formatters against the forwarded
arguments, suppresses when the message is empty, and otherwise hands the
merged payload to the notifier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from slackdispatch.dispatch.settings import Destination
from slackdispatch.events.formatters import resolve
from slackdispatch.events.registry import EventDefinition
from slackdispatch.notify.base import Notifier

logger = logging.getLogger(__name__)


# --- Outcomes ---


@dataclass(frozen=True)
class Suppressed:
    """The message formatter had nothing to say; no notification was sent."""

    event_id: str
    destination: str

    @property
    def delivered(self) -> bool:
        return False


@dataclass(frozen=True)
class Delivered:
    """A payload was handed to the notifier."""

    event_id: str
    destination: str
    payload: dict[str, Any]

    @property
    def delivered(self) -> bool:
        return True


Outcome = Suppressed | Delivered


def build_payload(
    destination: Destination,
    text: Any,
    attachments: Any,
    icon: Any,
) -> dict[str, Any]:
    """Merge resolved content over the destination's delivery fields.

    Only delivery fields are copied: the stored ``active`` flag and
    ``events`` map decide whether the handler is bound and are left out
    of the payload.
    """
    payload = dict(destination.delivery_fields)
    payload.update(
        {
            "text": text,
            "attachments": attachments,
            "icon": icon,
        }
    )
    return payload


# --- Payload Builder ---


class PayloadBuilder:
    """Bound handler producing and delivering one destination's payload."""

    def __init__(
        self,
        event_id: str,
        event: EventDefinition,
        destination: Destination,
        notifier: Notifier,
    ) -> None:
        self._event_id = event_id
        self._event = event
        self._destination = destination
        self._notifier = notifier

    @property
    def event_id(self) -> str:
        return self._event_id

    @property
    def destination(self) -> Destination:
        return self._destination

    def __call__(self, *args: Any) -> Outcome:
        # Formatters only see the arguments their event documents.
        if self._event.arity is not None:
            args = args[: self._event.arity]
        message = resolve(self._event.message, args)
        if not message:
            logger.debug(
                "Suppressed %s for %s: empty message", self._event_id, self._destination.name,
            )
            return Suppressed(event_id=self._event_id, destination=self._destination.name)

        attachments = resolve(self._event.attachments, args)
        icon = resolve(self._event.icon, args)
        payload = build_payload(self._destination, message, attachments, icon)

        self._notifier.notify(payload)
        logger.debug("Delivered %s to %s", self._event_id, self._destination.name)
        return Delivered(
            event_id=self._event_id,
            destination=self._destination.name,
            payload=payload,
        )

    def __repr__(self) -> str:
        return f"PayloadBuilder(event_id={self._event_id!r}, destination={self._destination.name!r})"


__all__ = ["Suppressed", "Delivered", "Outcome", "PayloadBuilder", "build_payload"]
