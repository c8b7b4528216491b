"""Configuration store protocol and in-memory implementation."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any, Protocol


class ConfigurationStore(Protocol):
    """Source of destination records, queried once at boot."""

    def list_destinations(self) -> Iterable[Mapping[str, Any]]:
        ...


class InMemoryConfigurationStore:
    """Destination records held in a list."""

    def __init__(self, records: Iterable[Mapping[str, Any]] = ()) -> None:
        self._records: list[Mapping[str, Any]] = [copy.deepcopy(r) for r in records]

    def add(self, record: Mapping[str, Any]) -> None:
        self._records.append(copy.deepcopy(record))

    def list_destinations(self) -> list[Mapping[str, Any]]:
        return copy.deepcopy(self._records)

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["ConfigurationStore", "InMemoryConfigurationStore"]
