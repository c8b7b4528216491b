"""Built-in event definitions.

Argument contracts (what the bus forwards for each trigger):

- ``transition_post_status``: ``(new_status, old_status, post)``
- ``wp_insert_comment``: ``(comment_id, comment)``
- ``badgeos_award_achievement``: ``(user, achievement, trigger)``
"""

from __future__ import annotations

from typing import Any

from slackdispatch.common.config import SlackDispatchConfig
from slackdispatch.common.constants import ACHIEVEMENT_COLOR, CommentStatus, PostStatus
from slackdispatch.common.schemas import Attachment
from slackdispatch.events.registry import EventDefinition, EventRegistry
from slackdispatch.host.models import (
    Achievement,
    Comment,
    Post,
    User,
    escape_link_text,
    post_excerpt,
    quote_lines,
)

TRANSITION_POST_STATUS = "transition_post_status"
INSERT_COMMENT = "wp_insert_comment"
AWARD_ACHIEVEMENT = "badgeos_award_achievement"

# Achievement types rendered as "badge" in the award message
_BADGE_TYPES = frozenset({"nomination", "submission", "badges"})


def _entered_status(new_status: str, old_status: str, status: str) -> bool:
    return old_status != status and new_status == status


def builtin_events(config: SlackDispatchConfig | None = None) -> dict[str, EventDefinition]:
    """Return the built-in event map, rendered with ``config``."""
    config = config or SlackDispatchConfig()
    post_types = frozenset(config.notified_post_types)
    comment_post_types = frozenset(config.notified_comment_post_types)

    def post_published(new_status: str, old_status: str, post: Post) -> str | bool:
        if post.post_type not in post_types:
            return False
        if not _entered_status(new_status, old_status, PostStatus.PUBLISH):
            return False
        return (
            f"New post published: *<{post.permalink}|{post.title}>* "
            f"by *{post.author.display_name}*\n"
            f"> {post_excerpt(post, config.excerpt_words)}"
        )

    def post_pending_review(new_status: str, old_status: str, post: Post) -> str | bool:
        if post.post_type not in post_types:
            return False
        if not _entered_status(new_status, old_status, PostStatus.PENDING):
            return False
        return (
            f"New post needs review: *<{post.edit_url}|{post.title}>* "
            f"by *{post.author.display_name}*\n"
            f"> {post_excerpt(post, config.excerpt_words)}"
        )

    def new_comment(comment_id: int, comment: Comment) -> str | bool:
        post = comment.post
        if post.post_type not in comment_post_types:
            return False
        # Ignore spam.
        if comment.status == CommentStatus.SPAM:
            return False
        return (
            f"<{comment.edit_url}|New comment> by *{comment.author}* "
            f"on *<{post.permalink}|{post.title}>* (_{comment.status}_)\n"
            f">{quote_lines(comment.content)}"
        )

    return {
        "post_published": EventDefinition.create(
            "post_published",
            TRANSITION_POST_STATUS,
            description="When a post is published",
            default_enabled=True,
            arity=3,
            message=post_published,
        ),
        "post_pending_review": EventDefinition.create(
            "post_pending_review",
            TRANSITION_POST_STATUS,
            description="When a post needs review",
            default_enabled=False,
            arity=3,
            message=post_pending_review,
        ),
        "new_comment": EventDefinition.create(
            "new_comment",
            INSERT_COMMENT,
            description="When there is a new comment",
            priority=999,
            default_enabled=False,
            arity=2,
            message=new_comment,
        ),
    }


# --- Achievement award extension ---


def _achievement_message(user: User, achievement: Achievement, trigger: str = "") -> str | None:
    if achievement.achievement_type == "step":
        return None
    # Content lives in the attachment; text only has to be non-empty.
    return " "


def _achievement_attachments(
    user: User, achievement: Achievement, trigger: str = "",
) -> list[dict[str, Any]]:
    kind = achievement.achievement_type
    if kind in _BADGE_TYPES:
        kind = "badge"
    title = escape_link_text(achievement.title)
    link = escape_link_text(achievement.permalink)
    attachment = Attachment(
        fallback="Badge award",
        color=ACHIEVEMENT_COLOR,
        title="New achievement awarded !",
        text=f"_{user.display_name}_ earned the {kind} <{link}|{title}>",
        mrkdwn_in=["text"],
        thumb_url=achievement.thumbnail_url,
    )
    return [attachment.model_dump()]


def award_achievement_extension(events: dict[str, EventDefinition]) -> dict[str, EventDefinition]:
    """Add the ``award_achievement`` event to the registry."""
    events["award_achievement"] = EventDefinition.create(
        "award_achievement",
        AWARD_ACHIEVEMENT,
        description="When user earns an achievement",
        priority=10,
        default_enabled=True,
        arity=3,
        message=_achievement_message,
        attachments=_achievement_attachments,
        icon="",
    )
    return events


def default_registry(config: SlackDispatchConfig | None = None) -> EventRegistry:
    """A registry seeded with the built-ins and the achievement extension."""
    registry = EventRegistry(lambda: builtin_events(config))
    registry.extend(award_achievement_extension, name="award_achievement")
    return registry


__all__ = [
    "TRANSITION_POST_STATUS",
    "INSERT_COMMENT",
    "AWARD_ACHIEVEMENT",
    "builtin_events",
    "award_achievement_extension",
    "default_registry",
]
