"""Post body text extraction."""

import logging
from typing import Any

from ..adapters.base import DocumentAdapter
from ..constants import (
    MIN_BODY_TEXT_LENGTH,
    SEE_MORE_PATTERN,
    SEE_MORE_SUFFIX_PATTERN,
    TEXT_BLOCK_SELECTOR,
    UI_CHROME_PATTERN,
)

logger = logging.getLogger("feedscan")


def is_ui_chrome(text: str) -> bool:
    """True for button labels and counters like 'Like' or '12 comments'."""
    return bool(UI_CHROME_PATTERN.match(text.strip()))


def has_see_more(text: str) -> bool:
    """True when the text ends with a 'See more' expansion affordance."""
    return bool(SEE_MORE_PATTERN.search(text or ""))


def strip_see_more(text: str) -> str:
    """Drop a trailing '... See more' left on a collapsed body."""
    return SEE_MORE_SUFFIX_PATTERN.sub("", text or "").strip()


def extract_body_text(adapter: DocumentAdapter, node: Any) -> str:
    """Return the longest qualifying text block under a post node.

    Blocks that are only UI chrome are ignored. Only blocks longer than
    MIN_BODY_TEXT_LENGTH qualify; on equal length the earlier block wins.
    Returns an empty string when nothing qualifies or the blocks cannot be
    queried.
    """
    try:
        blocks = adapter.query(TEXT_BLOCK_SELECTOR, node)
    except Exception as e:
        logger.debug(f"Text block scan failed: {e}")
        return ""

    longest = ""
    for block in blocks:
        try:
            text = adapter.read_text(block).strip()
        except Exception as e:
            logger.debug(f"Text block detached during extraction: {e}")
            continue

        if len(text) <= MIN_BODY_TEXT_LENGTH or is_ui_chrome(text):
            continue
        if len(text) > len(longest):
            longest = text

    return longest
