"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


LONG_BODY = (
    "Looking for a reliable plumber on the north side of town. Our kitchen "
    "sink has been leaking for a week and nobody answers the phone. Any tips?"
)

JANE_POST = f"""
<div role="feed">
  <div role="article" aria-label="Post by Jane Doe, 2 days ago">
    <h2><a href="https://www.facebook.com/jane.doe?__cft__=abc">Jane Doe</a></h2>
    <a href="https://www.facebook.com/user/1001/" aria-label="Jane Doe profile">
      <svg><image xlink:href="https://scontent.example.net/jane.jpg"></image></svg>
    </a>
    <div dir="auto">{LONG_BODY}</div>
    <a href="https://www.facebook.com/groups/42/posts/123456/">2d</a>
    <div dir="auto">Like</div>
    <div dir="auto">Comment</div>
  </div>
</div>
"""


def genuine_article(index: int) -> str:
    """A fully rendered post with a unique id and author."""
    return f"""
  <div role="article" aria-label="Post by Author {index}, {index} hours ago">
    <h3><a href="https://www.facebook.com/profile.php?id={index}">Author {index}</a></h3>
    <div dir="auto">Post number {index}. {LONG_BODY}</div>
    <a href="https://www.facebook.com/groups/42/posts/{9000 + index}/">{index}h</a>
    <div dir="auto">Share</div>
  </div>"""


def placeholder_article() -> str:
    return """
  <div role="article">
    <div aria-label="Loading..." data-visualcompletion="loading-state"></div>
  </div>"""


def comment_article(index: int) -> str:
    return f"""
  <div role="article" aria-label="Comment by Replier {index} 3 hours ago">
    <div dir="auto">Reply number {index}. {LONG_BODY}</div>
  </div>"""


def build_feed(genuine: int = 0, placeholders: int = 0, comments: int = 0) -> str:
    """Feed markup: genuine posts first, then comments, then placeholders."""
    parts = [genuine_article(i + 1) for i in range(genuine)]
    parts += [comment_article(i + 1) for i in range(comments)]
    parts += [placeholder_article() for _ in range(placeholders)]
    return '<div role="feed">' + "".join(parts) + "\n</div>"


@pytest.fixture
def jane_post_html():
    """A single post with every author and id signal present."""
    return JANE_POST


@pytest.fixture
def feed_builder():
    """Factory for feed markup with a chosen mix of items."""
    return build_feed


@pytest.fixture
def html_document():
    """Factory turning markup into an HtmlDocument."""
    from feedscan.adapters.html_document import HtmlDocument
    return HtmlDocument


@pytest.fixture
def first_article():
    """Return the first article node of a document."""
    def _first(document):
        return document.query('div[role="article"]')[0]
    return _first
