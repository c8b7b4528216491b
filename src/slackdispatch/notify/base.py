"""Notifier protocol and an in-memory recorder."""

from __future__ import annotations

from typing import Any, Protocol


class Notifier(Protocol):
    """Delivers a payload to a messaging endpoint."""

    def notify(self, payload: dict[str, Any]) -> Any:
        ...


class RecordingNotifier:
    """Keeps every payload it receives instead of sending it."""

    def __init__(self) -> None:
        self._payloads: list[dict[str, Any]] = []

    def notify(self, payload: dict[str, Any]) -> bool:
        self._payloads.append(dict(payload))
        return True

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return list(self._payloads)

    def clear(self) -> None:
        self._payloads.clear()


__all__ = ["Notifier", "RecordingNotifier"]
