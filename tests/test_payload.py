"""Tests for the payload builder (the handler bound to the bus)."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from slackdispatch.dispatch.payload import Delivered, PayloadBuilder, Suppressed, build_payload
from slackdispatch.dispatch.settings import Destination
from slackdispatch.events.registry import EventDefinition
from slackdispatch.notify.base import RecordingNotifier


# --- Helpers ---


def _make_destination(**fields: object) -> Destination:
    delivery = {"service_url": "https://hooks.example/x", "channel": "#general", "username": "bot"}
    delivery.update(fields)
    return Destination(
        name="general",
        enabled_events=MappingProxyType({"evt": True}),
        delivery_fields=MappingProxyType(delivery),
    )


def _make_builder(event: EventDefinition, destination: Destination | None = None):
    notifier = RecordingNotifier()
    builder = PayloadBuilder("evt", event, destination or _make_destination(), notifier)
    return builder, notifier


# --- Tests ---


def test_static_message_delivered():
    event = EventDefinition.create("evt", "t", message="Deploy finished")
    builder, notifier = _make_builder(event)
    outcome = builder()
    assert isinstance(outcome, Delivered)
    assert outcome.delivered is True
    assert notifier.payloads == [
        {
            "service_url": "https://hooks.example/x",
            "channel": "#general",
            "username": "bot",
            "text": "Deploy finished",
            "attachments": "",
            "icon": "",
        }
    ]


def test_dynamic_formatters_receive_args():
    event = EventDefinition.create(
        "evt",
        "t",
        message=lambda a, b: f"{a}+{b}",
        attachments=lambda a, b: [{"text": str(a * b)}],
        icon=lambda a, b: "https://icons.example/i.png",
    )
    builder, notifier = _make_builder(event)
    outcome = builder(2, 3)
    assert outcome.payload["text"] == "2+3"
    assert outcome.payload["attachments"] == [{"text": "6"}]
    assert outcome.payload["icon"] == "https://icons.example/i.png"
    assert len(notifier.payloads) == 1


@pytest.mark.parametrize("empty", ["", None, False, 0, []])
def test_empty_message_suppresses(empty):
    attachments_calls = []

    def attachments(*args):
        attachments_calls.append(args)
        return []

    event = EventDefinition.create("evt", "t", message=lambda *a: empty, attachments=attachments)
    builder, notifier = _make_builder(event)
    outcome = builder("x")
    assert outcome == Suppressed(event_id="evt", destination="general")
    assert outcome.delivered is False
    assert notifier.payloads == []
    assert attachments_calls == []


def test_missing_message_formatter_suppresses():
    event = EventDefinition(event_id="evt", trigger_name="t")
    builder, notifier = _make_builder(event)
    assert isinstance(builder(), Suppressed)
    assert notifier.payloads == []


def test_resolved_fields_override_destination_fields():
    destination = _make_destination(text="stored text", icon="stored-icon", attachments=["stored"])
    event = EventDefinition.create("evt", "t", message="computed text")
    builder, notifier = _make_builder(event, destination)
    builder()
    payload = notifier.payloads[0]
    assert payload["text"] == "computed text"
    assert payload["icon"] == ""
    assert payload["attachments"] == ""
    assert payload["channel"] == "#general"


def test_formatter_errors_propagate():
    def broken(*args):
        raise ValueError("bad post")

    event = EventDefinition.create("evt", "t", message=broken)
    builder, notifier = _make_builder(event)
    with pytest.raises(ValueError, match="bad post"):
        builder()
    assert notifier.payloads == []


def test_each_firing_builds_fresh_payload():
    event = EventDefinition.create("evt", "t", message=lambda n: f"n={n}")
    builder, notifier = _make_builder(event)
    first = builder(1)
    second = builder(2)
    assert first.payload is not second.payload
    assert [p["text"] for p in notifier.payloads] == ["n=1", "n=2"]


def test_build_payload_does_not_touch_destination():
    destination = _make_destination()
    payload = build_payload(destination, "t", [], "")
    payload["channel"] = "#changed"
    assert destination.delivery_fields["channel"] == "#general"


def test_builder_properties():
    event = EventDefinition.create("evt", "t", message="m")
    builder, _ = _make_builder(event)
    assert builder.event_id == "evt"
    assert builder.destination.name == "general"
    assert "evt" in repr(builder)


def test_documented_arity_trims_extra_args():
    event = EventDefinition.create(
        "evt", "t", arity=2,
        message=lambda a, b: f"{a}/{b}",
        icon=lambda a, b: f"icon-{a}",
    )
    builder, notifier = _make_builder(event)
    outcome = builder("x", "y", "extra", None, 5)
    assert outcome.payload["text"] == "x/y"
    assert outcome.payload["icon"] == "icon-x"


def test_undocumented_arity_forwards_all_args():
    event = EventDefinition.create("evt", "t", message=lambda *args: str(len(args)))
    builder, _ = _make_builder(event)
    assert builder(1, 2, 3, 4, 5).payload["text"] == "5"
