"""Destination resolution, handler binding and payload building."""

from __future__ import annotations

from slackdispatch.dispatch.dispatcher import Binding, EventDispatcher
from slackdispatch.dispatch.payload import (
    Delivered,
    Outcome,
    PayloadBuilder,
    Suppressed,
    build_payload,
)
from slackdispatch.dispatch.settings import Destination, resolve_destinations

__all__ = [
    "Binding",
    "EventDispatcher",
    "Delivered",
    "Outcome",
    "PayloadBuilder",
    "Suppressed",
    "build_payload",
    "Destination",
    "resolve_destinations",
]
