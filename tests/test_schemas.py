"""Tests for slackdispatch Pydantic schemas."""

import pytest
from pydantic import ValidationError

from slackdispatch.common.schemas import Attachment, DestinationSetting, is_enabled


class TestDestinationSetting:
    def test_extra_fields_kept_as_delivery_fields(self) -> None:
        setting = DestinationSetting.model_validate(
            {"active": "1", "events": {"a": True}, "channel": "#x", "username": "bot"}
        )
        assert setting.active is True
        assert setting.events == {"a": True}
        assert setting.delivery_fields() == {"channel": "#x", "username": "bot"}

    def test_defaults(self) -> None:
        setting = DestinationSetting()
        assert setting.active is False
        assert setting.events is None
        assert setting.delivery_fields() == {}

    def test_enabled_events_alias(self) -> None:
        setting = DestinationSetting.model_validate({"enabled_events": {"a": 1}})
        assert setting.events == {"a": 1}

    def test_events_must_be_mapping(self) -> None:
        with pytest.raises(ValidationError):
            DestinationSetting.model_validate({"active": True, "events": "post_published"})


class TestAttachment:
    def test_dump_has_all_fields(self) -> None:
        dumped = Attachment(title="t", mrkdwn_in=["text"]).model_dump()
        assert set(dumped) == {
            "fallback", "color", "pretext", "author_name", "author_link",
            "author_icon", "title", "title_link", "text", "mrkdwn_in",
            "image_url", "thumb_url",
        }
        assert dumped["title"] == "t"
        assert dumped["image_url"] == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, True), (1, True), ("yes", True), ("on", True),
     (False, False), (0, False), (None, False), ("", False), ("0", False), ("FALSE", False)],
)
def test_is_enabled(value, expected) -> None:
    assert is_enabled(value) is expected
