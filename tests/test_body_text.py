"""Tests for body text extraction."""

import pytest


def _article(*blocks: str) -> str:
    inner = "".join(f'<div dir="auto">{block}</div>' for block in blocks)
    return f'<div role="article">{inner}</div>'


class TestExtractBodyText:
    """Tests for extract_body_text()."""

    def test_picks_longest_block(self, html_document, first_article):
        """Test the longest qualifying block is the body."""
        from feedscan.extractors.body_text import extract_body_text

        doc = html_document(_article(
            "A short intro line that qualifies",
            "This is the actual post body and it is clearly the longest block here.",
            "Another medium sized block of text",
        ))
        assert extract_body_text(doc, first_article(doc)) == (
            "This is the actual post body and it is clearly the longest block here."
        )

    def test_tie_goes_to_first_block(self, html_document, first_article):
        """Test equal-length blocks resolve to the one seen first."""
        from feedscan.extractors.body_text import extract_body_text

        doc = html_document(_article("first block of 25 chars..", "second block of 25 chars."))
        assert extract_body_text(doc, first_article(doc)) == "first block of 25 chars.."

    def test_length_must_exceed_twenty(self, html_document, first_article):
        """Test a 20 character block is rejected and 21 is accepted."""
        from feedscan.extractors.body_text import extract_body_text

        exactly_20 = html_document(_article("a" * 20))
        exactly_21 = html_document(_article("b" * 21))

        assert extract_body_text(exactly_20, first_article(exactly_20)) == ""
        assert extract_body_text(exactly_21, first_article(exactly_21)) == "b" * 21

    def test_only_ui_chrome_gives_empty_string(self, html_document, first_article):
        """Test a post with only buttons and counters has no body."""
        from feedscan.extractors.body_text import extract_body_text

        doc = html_document(_article("Like", "Comment", "Share", "Reply", "12 comments", "3 shares"))
        assert extract_body_text(doc, first_article(doc)) == ""

    def test_long_counter_is_still_chrome(self, html_document, first_article):
        """Test a counter longer than the threshold is still rejected."""
        from feedscan.extractors.body_text import extract_body_text

        doc = html_document(_article("123456789012345678901234 likes"))
        assert extract_body_text(doc, first_article(doc)) == ""

    def test_whitespace_trimmed(self, html_document, first_article):
        """Test surrounding whitespace is not part of the body."""
        from feedscan.extractors.body_text import extract_body_text

        doc = html_document(_article("   padded text that is long enough   "))
        assert extract_body_text(doc, first_article(doc)) == "padded text that is long enough"

    def test_never_returns_chrome_word(self, html_document, feed_builder):
        """Test no extracted body equals a bare Like/Comment/Share/Reply."""
        from feedscan.extractors.body_text import extract_body_text

        doc = html_document(feed_builder(genuine=4, comments=2))
        for node in doc.query('div[role="article"]'):
            body = extract_body_text(doc, node)
            assert body.lower() not in {"like", "comment", "share", "reply"}


class TestChromeAndSeeMore:
    """Tests for is_ui_chrome() and has_see_more()."""

    @pytest.mark.parametrize("text", [
        "Like", "like", "COMMENT", "Share", "Reply", " Reply ",
        "1 like", "25 likes", "4 comments", "1comment", "10 shares",
    ])
    def test_chrome_strings(self, text):
        """Test the closed UI vocabulary matches case-insensitively."""
        from feedscan.extractors.body_text import is_ui_chrome
        assert is_ui_chrome(text) is True

    @pytest.mark.parametrize("text", [
        "Like this post if you agree",
        "Share your thoughts below",
        "Comments are welcome",
        "likes",
    ])
    def test_non_chrome_strings(self, text):
        """Test only whole-string matches count as chrome."""
        from feedscan.extractors.body_text import is_ui_chrome
        assert is_ui_chrome(text) is False

    def test_see_more_detection(self):
        """Test truncated bodies are flagged."""
        from feedscan.extractors.body_text import has_see_more

        assert has_see_more("We are moving house next month and need... See more") is True
        assert has_see_more("Long story short…more") is True
        assert has_see_more("Something ...more") is True
        assert has_see_more("See more details in the comments below") is False
        assert has_see_more("") is False

    @pytest.mark.parametrize("text,expected", [
        ("north side of town… See more", "north side of town"),
        ("north side of town...See more", "north side of town"),
        ("north side of town see more ", "north side of town"),
        ("nothing trailing here", "nothing trailing here"),
        ("See more details in the comments below", "See more details in the comments below"),
        ("", ""),
    ])
    def test_strip_see_more(self, text, expected):
        """Test the trailing expansion affordance is removed from the body."""
        from feedscan.extractors.body_text import strip_see_more
        assert strip_see_more(text) == expected

    def test_block_query_failure_gives_empty_body(self):
        """Test a failed block lookup yields an empty body instead of raising."""
        from unittest.mock import MagicMock
        from feedscan.adapters.base import DocumentAdapter
        from feedscan.extractors.body_text import extract_body_text

        adapter = MagicMock(spec=DocumentAdapter)
        adapter.query.side_effect = RuntimeError("Element is not attached to the DOM")

        assert extract_body_text(adapter, object()) == ""
