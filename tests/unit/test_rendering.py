"""Unit tests for linkifying and rendering assistant text."""

import pytest_check as check

from support_chat.ui.rendering import Segment, SegmentKind, render_content, split_links


class TestSplitLinks:
    """Tests for detecting URLs and email addresses in a line."""

    def test_url_and_email_with_surrounding_text(self) -> None:
        segments = split_links("See https://example.com and mail me at a@b.com")

        assert segments == [
            Segment(kind=SegmentKind.TEXT, value="See "),
            Segment(kind=SegmentKind.URL, value="https://example.com"),
            Segment(kind=SegmentKind.TEXT, value=" and mail me at "),
            Segment(kind=SegmentKind.EMAIL, value="a@b.com"),
        ]

    def test_plain_line(self) -> None:
        assert split_links("no links here") == [
            Segment(kind=SegmentKind.TEXT, value="no links here")
        ]

    def test_empty_line(self) -> None:
        assert split_links("") == []

    def test_url_runs_until_whitespace(self) -> None:
        segments = split_links("http://x.test/a?b=1#c, next")

        check.equal(segments[0], Segment(kind=SegmentKind.URL, value="http://x.test/a?b=1#c,"))
        check.equal(segments[1], Segment(kind=SegmentKind.TEXT, value=" next"))

    def test_japanese_text_around_email(self) -> None:
        segments = split_links("窓口：motion.support@splyza.com まで")

        check.equal([s.kind for s in segments], [SegmentKind.TEXT, SegmentKind.EMAIL, SegmentKind.TEXT])
        check.equal(segments[1].value, "motion.support@splyza.com")

    def test_adjacent_links(self) -> None:
        segments = split_links("https://a.test b@c.io")

        check.equal(
            [s.kind for s in segments], [SegmentKind.URL, SegmentKind.TEXT, SegmentKind.EMAIL]
        )


class TestRenderContent:
    """Tests for HTML output."""

    def test_links_rendered_as_anchors(self) -> None:
        html = render_content("See https://example.com and mail me at a@b.com")

        check.is_in('<a href="https://example.com" target="_blank" rel="noopener noreferrer"', html)
        check.is_in('<a href="mailto:a@b.com"', html)
        check.is_in("See ", html)
        check.is_in(" and mail me at ", html)

    def test_one_block_per_line_including_blank_lines(self) -> None:
        html = render_content("first\n\n  \nlast")

        check.equal(html.count("<div "), 4)
        check.equal(html.count("min-height: 1.5em"), 4)

    def test_text_is_escaped(self) -> None:
        html = render_content('<script>alert("x")</script> & more')

        check.is_not_in("<script>", html)
        check.is_in("&lt;script&gt;", html)
        check.is_in("&amp; more", html)

    def test_url_quotes_cannot_break_attribute(self) -> None:
        html = render_content('https://evil.test/"onmouseover="x')

        assert 'href="https://evil.test/&quot;onmouseover=&quot;x"' in html
