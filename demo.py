#!/usr/bin/env python3
"""
slackdispatch Demo Script.

Boots the dispatch engine against an in-memory configuration store and
fires a few host triggers, printing what would be sent to Slack.

Usage:
    python demo.py
"""

import json

from slackdispatch.common.config import SlackDispatchConfig
from slackdispatch.common.logging import configure_logging
from slackdispatch.events.builtin import AWARD_ACHIEVEMENT, INSERT_COMMENT, TRANSITION_POST_STATUS
from slackdispatch.host.bus import InProcessEventBus
from slackdispatch.host.models import Achievement, Comment, Post, User
from slackdispatch.manager import EventManager
from slackdispatch.notify.base import RecordingNotifier
from slackdispatch.notify.slack import to_slack_body
from slackdispatch.store.memory import InMemoryConfigurationStore

DESTINATIONS = [
    {
        "active": True,
        "events": {"post_published": True, "new_comment": True, "award_achievement": True},
        "service_url": "https://hooks.slack.com/services/T000/B000/XXXX",
        "channel": "#newsroom",
        "username": "wordpress",
    },
    {
        "active": False,
        "events": {"post_published": True},
        "service_url": "https://hooks.slack.com/services/T000/B000/YYYY",
        "channel": "#muted",
    },
]


def main():
    config = SlackDispatchConfig(log_level="DEBUG")
    configure_logging(config)

    bus = InProcessEventBus()
    notifier = RecordingNotifier()
    manager = EventManager(bus, InMemoryConfigurationStore(DESTINATIONS), notifier, config)
    bindings = manager.boot()
    print(f"Bound {len(bindings)} handlers for {len(manager.destinations)} destinations\n")

    author = User(user_id=1, display_name="Ada Lovelace")
    post = Post(
        post_id=10,
        title="Notes on the Analytical Engine",
        permalink="https://example.org/notes",
        author=author,
        content="The engine weaves algebraic patterns just as the Jacquard loom weaves flowers.",
    )

    bus.fire(TRANSITION_POST_STATUS, "publish", "draft", post)
    bus.fire(TRANSITION_POST_STATUS, "publish", "publish", post)  # suppressed
    bus.fire(INSERT_COMMENT, 5, Comment(comment_id=5, post=post, author="Charles", content="Splendid!"))
    bus.fire(
        AWARD_ACHIEVEMENT,
        author,
        Achievement(10, "First Post", "badges", "https://example.org/badges/first-post"),
        "publish_post",
    )

    for payload in notifier.payloads:
        print(json.dumps(to_slack_body(payload), indent=2))


if __name__ == "__main__":
    main()
