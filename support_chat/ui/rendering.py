"""Convert assistant text to HTML for chat display.

Text is split into lines; URLs and email addresses in each line become
clickable links and everything else is escaped and shown verbatim.
"""

import re
from enum import Enum

from pydantic import BaseModel

URL_PATTERN = r"https?://[^\s]+"
EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
LINK_RE = re.compile(f"({URL_PATTERN}|{EMAIL_PATTERN})")

LINK_STYLE = "color: #18A3F2; text-decoration: underline; word-break: break-all; cursor: pointer;"
LINE_STYLE = "min-height: 1.5em;"


class SegmentKind(str, Enum):
    TEXT = "text"
    URL = "url"
    EMAIL = "email"


class Segment(BaseModel):
    """A run of a line that is plain text, a URL, or an email address."""

    kind: SegmentKind
    value: str


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def split_links(line: str) -> list[Segment]:
    """Split a line into text, URL and email segments.

    Empty text between adjacent links is dropped.
    """
    segments: list[Segment] = []
    # re.split with a capture group alternates text and matched links
    for i, part in enumerate(LINK_RE.split(line)):
        if i % 2 == 0:
            if part:
                segments.append(Segment(kind=SegmentKind.TEXT, value=part))
        elif part.startswith(("http://", "https://")):
            segments.append(Segment(kind=SegmentKind.URL, value=part))
        else:
            segments.append(Segment(kind=SegmentKind.EMAIL, value=part))
    return segments


def render_segment(segment: Segment) -> str:
    value = _escape(segment.value)
    if segment.kind is SegmentKind.URL:
        return (
            f'<a href="{value}" target="_blank" rel="noopener noreferrer" '
            f'style="{LINK_STYLE}">{value}</a>'
        )
    if segment.kind is SegmentKind.EMAIL:
        return f'<a href="mailto:{value}" style="{LINK_STYLE}">{value}</a>'
    return value


def render_content(content: str) -> str:
    """Render message text as HTML, one block per line.

    Blank lines still occupy a line height.
    """
    lines = content.split("\n")
    return "".join(
        f'<div style="{LINE_STYLE}">{"".join(render_segment(s) for s in split_links(line))}</div>'
        for line in lines
    )
