"""Document adapter over a live Playwright page."""

import logging
from typing import Any, List, Optional

from ..errors import DocumentQueryError
from .base import DocumentAdapter

logger = logging.getLogger("feedscan")


class PlaywrightDocument(DocumentAdapter):
    """Query a page rendered by the Playwright sync API.

    Element handles go stale when the page re-renders. Node-level reads let
    Playwright's errors through so callers can skip the node; a failed
    document-level query is fatal and raised as DocumentQueryError.
    """

    def __init__(self, page):
        self.page = page

    def query(self, selector: str, root: Any = None) -> List[Any]:
        if root is not None:
            return root.query_selector_all(selector) or []
        try:
            return self.page.query_selector_all(selector) or []
        except Exception as e:
            raise DocumentQueryError(f"Could not query '{selector}': {e}") from e

    def read_attribute(self, node: Any, name: str) -> Optional[str]:
        return node.get_attribute(name)

    def read_text(self, node: Any) -> str:
        return (node.inner_text() or "").strip()

    def scroll_by(self, px: int) -> None:
        self.page.evaluate(f"window.scrollBy(0, {int(px)})")

    def sleep(self, ms: int) -> None:
        self.page.wait_for_timeout(ms)
