"""Tests for the event registry and its extension pipeline."""

from __future__ import annotations

import pytest

from slackdispatch.common.errors import InvalidEventDefinitionError, RegistryFrozenError
from slackdispatch.events.builtin import default_registry
from slackdispatch.events.registry import EventDefinition, EventRegistry


# --- Helpers ---


def _make_event(event_id: str = "custom_event", trigger: str = "custom_trigger", **kwargs) -> EventDefinition:
    return EventDefinition.create(event_id, trigger, message="hi", **kwargs)


def _builtins() -> dict[str, EventDefinition]:
    return {"base": _make_event("base", "base_trigger")}


# --- Definition Tests ---


def test_definition_defaults():
    event = EventDefinition(event_id="e", trigger_name="t")
    assert event.priority == 10
    assert event.default_enabled is False
    assert event.arity is None
    assert event.message is None


def test_definition_is_frozen():
    event = _make_event()
    with pytest.raises(AttributeError):
        event.priority = 1  # type: ignore[misc]


# --- Registry Tests ---


def test_registry_seeded_with_builtins():
    registry = EventRegistry(_builtins)
    assert list(registry.list_events()) == ["base"]


def test_registry_accepts_plain_mapping():
    registry = EventRegistry(_builtins())
    assert "base" in registry


def test_registry_empty_without_builtins():
    assert dict(EventRegistry().list_events()) == {}


def test_extension_adds_event():
    registry = EventRegistry(_builtins)

    @registry.extend
    def add_custom(events):
        events["custom_event"] = _make_event()
        return events

    events = registry.list_events()
    assert set(events) == {"base", "custom_event"}
    assert events["custom_event"].trigger_name == "custom_trigger"


def test_extensions_apply_in_registration_order():
    registry = EventRegistry(_builtins)
    registry.extend(lambda ev: {**ev, "x": _make_event("x", "first")}, name="first")
    registry.extend(lambda ev: {**ev, "x": _make_event("x", "second")}, name="second")

    assert registry.extension_names() == ["first", "second"]
    assert registry.get("x").trigger_name == "second"


def test_extension_sees_previous_result():
    registry = EventRegistry(_builtins)
    registry.extend(lambda ev: {**ev, "a": _make_event("a")}, name="add_a")
    seen = []

    def record(events):
        seen.append(sorted(events))
        return events

    registry.extend(record, name="record")
    registry.list_events()
    assert seen == [["a", "base"]]


def test_extension_omission_is_deletion_only_when_rebuilt():
    registry = EventRegistry(_builtins)
    registry.extend(lambda ev: {"only": _make_event("only")}, name="rebuild")
    assert list(registry.list_events()) == ["only"]


def test_registry_built_once_and_cached():
    calls = []

    def builtins():
        calls.append(1)
        return _builtins()

    registry = EventRegistry(builtins)
    first = registry.list_events()
    second = registry.list_events()
    assert first is second
    assert calls == [1]


def test_registry_snapshot_is_read_only():
    registry = EventRegistry(_builtins)
    events = registry.list_events()
    with pytest.raises(TypeError):
        events["new"] = _make_event("new")  # type: ignore[index]


def test_extension_after_build_raises():
    registry = EventRegistry(_builtins)
    registry.list_events()
    with pytest.raises(RegistryFrozenError) as excinfo:
        registry.extend(lambda ev: ev, name="late")
    assert excinfo.value.extension_name == "late"


def test_extension_returning_non_mapping_raises():
    registry = EventRegistry(_builtins)
    registry.extend(lambda ev: None, name="broken")
    with pytest.raises(InvalidEventDefinitionError, match="broken"):
        registry.list_events()


def test_extension_returning_raw_dicts_raises():
    registry = EventRegistry(_builtins)
    registry.extend(lambda ev: {**ev, "raw": {"action": "x"}}, name="raw")
    with pytest.raises(InvalidEventDefinitionError, match="raw"):
        registry.list_events()


def test_default_registry_contents():
    events = default_registry().list_events()
    assert set(events) == {
        "post_published",
        "post_pending_review",
        "new_comment",
        "award_achievement",
    }
    assert events["new_comment"].priority == 999
    assert events["post_published"].default_enabled is True
    assert events["post_pending_review"].default_enabled is False


def test_default_registry_accepts_custom_extension_before_build():
    registry = default_registry()
    registry.extend(lambda ev: {**ev, "custom_event": _make_event()}, name="custom")
    assert "custom_event" in registry
    assert "award_achievement" in registry
