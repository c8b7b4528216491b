"""Pydantic v2 schemas for destination settings and Slack attachments."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from slackdispatch.common.constants import SETTING_META_FIELDS

_FALSY_STRINGS = frozenset({"", "0", "false", "off", "no"})


def is_enabled(value: Any) -> bool:
    """Interpret a stored flag the way form-backed settings store them."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY_STRINGS
    return bool(value)


class DestinationSetting(BaseModel):
    """A raw destination record as stored by the configuration store.

    Only ``active`` and ``events`` are interpreted. Every other key is a
    delivery field (``service_url``, ``channel``, ``username`` ...) and is
    kept untouched as a payload default.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    active: bool = False
    events: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("events", "enabled_events", "enabledEvents"),
    )

    @field_validator("active", mode="before")
    @classmethod
    def coerce_active(cls, value: Any) -> bool:
        return is_enabled(value)

    def delivery_fields(self) -> dict[str, Any]:
        """Return the record's delivery fields, without enablement metadata."""
        extra = self.model_extra or {}
        return {k: v for k, v in extra.items() if k not in SETTING_META_FIELDS}


class Attachment(BaseModel):
    """A Slack message attachment."""

    fallback: str = ""
    color: str = ""
    pretext: str = ""
    author_name: str = ""
    author_link: str = ""
    author_icon: str = ""
    title: str = ""
    title_link: str = ""
    text: str = ""
    mrkdwn_in: list[str] = Field(default_factory=list)
    image_url: str = ""
    thumb_url: str = ""


__all__ = ["DestinationSetting", "Attachment", "is_enabled"]
