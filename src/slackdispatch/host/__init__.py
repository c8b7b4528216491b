"""Host application integration: event bus and forwarded objects."""

from __future__ import annotations

from slackdispatch.host.bus import HostEventBus, InProcessEventBus, Subscription
from slackdispatch.host.models import Achievement, Comment, Post, User

__all__ = [
    "HostEventBus",
    "InProcessEventBus",
    "Subscription",
    "Achievement",
    "Comment",
    "Post",
    "User",
]
