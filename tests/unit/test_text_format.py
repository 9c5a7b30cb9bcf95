"""
Unit tests for newline encoding and quote text rendering.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

from markupsafe import Markup

from src.quoteboard.text_format import encode_newlines, render_quote_text


def test_crlf_becomes_marker() -> None:
    assert encode_newlines("line1\r\nline2") == "line1\\nline2"


def test_bare_newline_is_untouched() -> None:
    assert encode_newlines("line1\nline2") == "line1\nline2"


def test_marker_renders_as_break() -> None:
    rendered = render_quote_text(encode_newlines("line1\r\nline2"))

    assert isinstance(rendered, Markup)
    assert str(rendered) == "line1<br />line2"


def test_literal_marker_also_renders_as_break() -> None:
    assert str(render_quote_text("C:\\new folder")) == "C:<br />ew folder"


def test_markup_in_quotes_is_escaped() -> None:
    rendered = render_quote_text("<b>hi</b>\\nthere")

    assert str(rendered) == "&lt;b&gt;hi&lt;/b&gt;<br />there"
