"""Outbound notifiers."""

from __future__ import annotations

from slackdispatch.notify.base import Notifier, RecordingNotifier
from slackdispatch.notify.slack import SlackWebhookNotifier, to_slack_body

__all__ = ["Notifier", "RecordingNotifier", "SlackWebhookNotifier", "to_slack_body"]
