"""Slack incoming-webhook notifier.

Sends a single request per payload; delivery retries are out of scope.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from slackdispatch.common.config import SlackDispatchConfig
from slackdispatch.common.errors import NotifierError

logger = logging.getLogger(__name__)

# Payload keys forwarded to Slack, as (payload key, wire key)
_WIRE_FIELDS: tuple[tuple[str, str], ...] = (
    ("channel", "channel"),
    ("username", "username"),
    ("text", "text"),
    ("attachments", "attachments"),
    ("icon", "icon_url"),
    ("icon_emoji", "icon_emoji"),
)


def to_slack_body(payload: dict[str, Any]) -> dict[str, Any]:
    """Translate an engine payload into a Slack webhook request body.

    Empty values are left out so Slack applies the webhook's own defaults.
    """
    body: dict[str, Any] = {}
    for key, wire_key in _WIRE_FIELDS:
        value = payload.get(key)
        if value:
            body[wire_key] = value
    attachments = body.get("attachments")
    if isinstance(attachments, dict):
        body["attachments"] = [attachments]
    return body


class SlackWebhookNotifier:
    """Posts payloads to the webhook URL held in ``payload["service_url"]``."""

    def __init__(
        self,
        config: SlackDispatchConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config or SlackDispatchConfig()
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=self._config.request_timeout_seconds)
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this notifier created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    def notify(self, payload: dict[str, Any]) -> httpx.Response:
        """Send ``payload`` to Slack.

        Raises:
            NotifierError: If the payload has no webhook URL, the request
                fails, or Slack answers with an error status.
        """
        url = payload.get("service_url")
        if not url:
            raise NotifierError("Payload has no service_url")

        try:
            response = self._get_client().post(url, json=to_slack_body(payload))
        except httpx.RequestError as e:
            logger.error("Slack request to %s failed: %s", payload.get("channel", "?"), e)
            raise NotifierError(f"Request failed: {e}") from e

        if response.is_error:
            logger.error(
                "Slack rejected notification for %s: %d %s",
                payload.get("channel", "?"), response.status_code, response.text,
            )
            raise NotifierError(
                f"Slack returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        logger.debug("Slack accepted notification for %s", payload.get("channel", "?"))
        return response

    def __enter__(self) -> SlackWebhookNotifier:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["SlackWebhookNotifier", "to_slack_body"]
