"""slackdispatch: route host application events to Slack notifications."""

from __future__ import annotations

from slackdispatch.common.config import SlackDispatchConfig
from slackdispatch.dispatch import Delivered, Destination, EventDispatcher, Suppressed
from slackdispatch.events import EventDefinition, EventRegistry, default_registry
from slackdispatch.host import InProcessEventBus
from slackdispatch.manager import EventManager
from slackdispatch.notify import RecordingNotifier, SlackWebhookNotifier
from slackdispatch.store import InMemoryConfigurationStore

__version__ = "0.1.0"

__all__ = [
    "SlackDispatchConfig",
    "Delivered",
    "Destination",
    "EventDispatcher",
    "Suppressed",
    "EventDefinition",
    "EventRegistry",
    "default_registry",
    "InProcessEventBus",
    "EventManager",
    "RecordingNotifier",
    "SlackWebhookNotifier",
    "InMemoryConfigurationStore",
]
