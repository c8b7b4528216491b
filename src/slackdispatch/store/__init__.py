"""Configuration store holding destination records."""

from __future__ import annotations

from slackdispatch.store.memory import ConfigurationStore, InMemoryConfigurationStore

__all__ = ["ConfigurationStore", "InMemoryConfigurationStore"]
