"""Host application objects forwarded by the event bus.

The built-in events read everything they render from these records, so a
host integration only has to populate them before firing a trigger.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from slackdispatch.common.constants import EXCERPT_MORE, EXCERPT_WORDS, SHORTCODE_TAGS


# --- Data Models ---


@dataclass(frozen=True)
class User:
    """A host user account."""

    user_id: int
    display_name: str


@dataclass(frozen=True)
class Post:
    """A piece of host content."""

    post_id: int
    title: str
    permalink: str
    author: User
    post_type: str = "post"
    content: str = ""
    excerpt: str = ""
    edit_url: str = ""

    @property
    def has_excerpt(self) -> bool:
        return bool(self.excerpt)


@dataclass(frozen=True)
class Comment:
    """A comment left on a post."""

    comment_id: int
    post: Post
    author: str
    content: str
    status: str = "approved"
    edit_url: str = ""


@dataclass(frozen=True)
class Achievement:
    """An achievement (badge, step, nomination ...) that can be awarded."""

    achievement_id: int
    title: str
    achievement_type: str
    permalink: str
    thumbnail_url: str = ""


# --- Text helpers ---

_TAG_RE = re.compile(r"<[^>]+>")


def _shortcode_regex(tags: Iterable[str]) -> re.Pattern[str]:
    names = "|".join(re.escape(tag) for tag in sorted(tags))
    # Groups: 1 escape bracket, 2 tag, 3 attributes, 4 self-closing slash,
    # 5 enclosed content, 6 closing escape bracket.
    return re.compile(
        r"\[(\[?)(" + names + r")(?![\w-])"
        r"([^\]/]*(?:/(?!\])[^\]/]*)*?)"
        r"(?:(/)\]|\](?:([^\[]*(?:\[(?!/\2\])[^\[]*)*)\[/\2\])?)"
        r"(\]?)"
    )


_SHORTCODE_RE = _shortcode_regex(SHORTCODE_TAGS)


def _strip_shortcode_tag(match: re.Match[str]) -> str:
    # [[tag]] is an escaped shortcode and renders as the literal [tag]
    if match.group(1) == "[" and match.group(6) == "]":
        return match.group(0)[1:-1]
    return ""


def strip_shortcodes(content: str, tags: Iterable[str] | None = None) -> str:
    """Remove registered shortcodes, enclosed content included.

    Only tags in ``tags`` (``SHORTCODE_TAGS`` by default) are stripped;
    other bracketed text is left alone and ``[[tag]]`` becomes ``[tag]``.
    """
    if "[" not in content:
        return content
    pattern = _SHORTCODE_RE if tags is None else _shortcode_regex(tags)
    return pattern.sub(_strip_shortcode_tag, content)


def trim_words(text: str, num_words: int = EXCERPT_WORDS, more: str = EXCERPT_MORE) -> str:
    """Strip markup and cut ``text`` to ``num_words`` words."""
    words = _TAG_RE.sub("", text).split()
    if len(words) > num_words:
        return " ".join(words[:num_words]) + more
    return " ".join(words)


def post_excerpt(post: Post, num_words: int = EXCERPT_WORDS) -> str:
    """The post's explicit excerpt, or a trimmed rendition of its content."""
    if post.has_excerpt:
        return post.excerpt
    return trim_words(strip_shortcodes(post.content), num_words)


def escape_link_text(value: str) -> str:
    """Escape characters that would break a ``<url|label>`` Slack link."""
    replacements = (
        ("<", "&lt;"),
        (">", "&gt;"),
        ("&nbsp;", " "),
        ("&laquo;", "<<"),
        ("&raquo;", ">>"),
    )
    for old, new in replacements:
        value = value.replace(old, new)
    return value


def quote_lines(text: str) -> str:
    """Prefix every continuation line with a Slack quote marker."""
    return text.replace("\n", "\n>")


__all__ = [
    "User",
    "Post",
    "Comment",
    "Achievement",
    "strip_shortcodes",
    "trim_words",
    "post_excerpt",
    "escape_link_text",
    "quote_lines",
]
