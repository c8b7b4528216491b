"""Event registry, formatters and built-in event definitions."""

from __future__ import annotations

from slackdispatch.events.builtin import (
    award_achievement_extension,
    builtin_events,
    default_registry,
)
from slackdispatch.events.formatters import Dynamic, Formatter, Static, as_formatter, resolve
from slackdispatch.events.registry import EventDefinition, EventRegistry

__all__ = [
    "award_achievement_extension",
    "builtin_events",
    "default_registry",
    "Dynamic",
    "Formatter",
    "Static",
    "as_formatter",
    "resolve",
    "EventDefinition",
    "EventRegistry",
]
