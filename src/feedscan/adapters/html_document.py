"""Document adapter over a static HTML snapshot."""

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from bs4 import BeautifulSoup

from .base import DocumentAdapter

logger = logging.getLogger("feedscan")


class HtmlDocument(DocumentAdapter):
    """Query a saved page with BeautifulSoup.

    A static snapshot never changes, so scrolling only records the offset
    and sleeping returns immediately.
    """

    def __init__(self, html: str, parser: str = "html.parser"):
        self.soup = BeautifulSoup(html or "", parser)
        self.scroll_offset = 0
        self.slept_ms = 0

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "HtmlDocument":
        """Load a snapshot saved to disk."""
        return cls(Path(path).read_text(encoding="utf-8"))

    def query(self, selector: str, root: Any = None) -> List[Any]:
        scope = self.soup if root is None else root
        return scope.select(selector)

    def read_attribute(self, node: Any, name: str) -> Optional[str]:
        value = node.get(name)
        if value is None:
            return None
        # bs4 splits multi-valued attributes such as class
        if isinstance(value, list):
            return " ".join(value)
        return value

    def read_text(self, node: Any) -> str:
        """Approximate rendered text: collapse runs of whitespace per line."""
        lines = []
        for line in node.get_text().splitlines():
            collapsed = " ".join(line.split())
            if collapsed:
                lines.append(collapsed)
        return "\n".join(lines)

    def scroll_by(self, px: int) -> None:
        self.scroll_offset += px

    def sleep(self, ms: int) -> None:
        self.slept_ms += ms
        logger.debug(f"Static snapshot: skipping {ms}ms wait")
