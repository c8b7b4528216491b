"""Tests for host models and text helpers."""

from __future__ import annotations

from slackdispatch.host.models import (
    Post,
    User,
    escape_link_text,
    post_excerpt,
    quote_lines,
    strip_shortcodes,
    trim_words,
)


def _post(**overrides: object) -> Post:
    fields: dict = {
        "post_id": 1,
        "title": "T",
        "permalink": "https://example.org/t",
        "author": User(user_id=1, display_name="A"),
    }
    fields.update(overrides)
    return Post(**fields)


def test_strip_shortcodes_removes_registered_tags():
    assert strip_shortcodes('Intro [caption id="x"]Photo[/caption] end') == "Intro  end"
    assert strip_shortcodes("[gallery]") == ""
    assert strip_shortcodes('[gallery ids="1,2"]after') == "after"


def test_strip_shortcodes_keeps_unregistered_brackets():
    assert strip_shortcodes("See [1] and [note]this[/note]") == "See [1] and [note]this[/note]"


def test_strip_shortcodes_unescapes_double_brackets():
    assert strip_shortcodes("Use [[gallery]] to embed") == "Use [gallery] to embed"


def test_strip_shortcodes_custom_tags():
    assert strip_shortcodes("[note]hidden[/note] shown", tags={"note"}) == " shown"


def test_trim_words_short_text_untouched():
    assert trim_words("one two three", 5) == "one two three"


def test_trim_words_truncates_with_marker():
    assert trim_words("a b c d e f", 3) == "a b c&hellip;"


def test_trim_words_strips_tags():
    assert trim_words("<p>Hello <b>there</b></p>", 10) == "Hello there"


def test_post_excerpt_prefers_explicit_excerpt():
    post = _post(excerpt="Given", content="Other words")
    assert post.has_excerpt
    assert post_excerpt(post) == "Given"


def test_post_excerpt_falls_back_to_content():
    post = _post(content="[embed]x[/embed] " + "word " * 3)
    assert post_excerpt(post) == "word word word"


def test_escape_link_text():
    assert escape_link_text("a<b>&nbsp;&laquo;c&raquo;") == "a&lt;b&gt; <<c>>"


def test_quote_lines():
    assert quote_lines("one\ntwo\nthree") == "one\n>two\n>three"
