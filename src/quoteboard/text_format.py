# This file converts quote text between its submitted, stored, and displayed forms.
# Submitted CRLF line breaks are stored as a two-character backslash-n marker.
# At render time the marker becomes an HTML line break after the text is escaped.
# A quote that already contains the marker literally renders it as a break as well.

from __future__ import annotations

from markupsafe import Markup, escape

NEWLINE_MARKER = "\\n"
LINE_BREAK_TAG = "<br />"


def encode_newlines(text: str) -> str:
    """Replace CRLF sequences with the stored newline marker."""

    return text.replace("\r\n", NEWLINE_MARKER)


def render_quote_text(text: str) -> Markup:
    """Escape quote text for HTML and turn newline markers into line breaks."""

    escaped = str(escape(text))
    return Markup(escaped.replace(NEWLINE_MARKER, LINE_BREAK_TAG))
