"""Constants and enums for slackdispatch."""

from enum import StrEnum
from typing import Final


class PostStatus(StrEnum):
    """Post lifecycle statuses the built-in events look at."""

    DRAFT = "draft"
    PENDING = "pending"
    PUBLISH = "publish"
    FUTURE = "future"
    PRIVATE = "private"


class CommentStatus(StrEnum):
    """Moderation status of a comment."""

    APPROVED = "approved"
    UNAPPROVED = "unapproved"
    SPAM = "spam"
    TRASH = "trash"


# Lower priorities run earlier on the bus
DEFAULT_PRIORITY: Final[int] = 10

# Upper bound of positional arguments requested from the bus when an
# event does not document its own arity
FIXED_HANDLER_ARITY: Final[int] = 5

EXCERPT_WORDS: Final[int] = 55
EXCERPT_MORE: Final[str] = "&hellip;"

# Shortcodes removed when building excerpts from raw content
SHORTCODE_TAGS: Final[frozenset[str]] = frozenset(
    {"audio", "caption", "embed", "gallery", "playlist", "video", "wp_caption"}
)

# Destination record keys that control enablement and are not delivery fields
SETTING_META_FIELDS: Final[frozenset[str]] = frozenset({"active", "events"})

ACHIEVEMENT_COLOR: Final[str] = "#36a64f"

__all__ = [
    "PostStatus",
    "CommentStatus",
    "DEFAULT_PRIORITY",
    "FIXED_HANDLER_ARITY",
    "EXCERPT_WORDS",
    "EXCERPT_MORE",
    "SHORTCODE_TAGS",
    "SETTING_META_FIELDS",
    "ACHIEVEMENT_COLOR",
]
