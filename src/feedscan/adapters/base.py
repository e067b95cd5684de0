"""Document query interface the extraction engine runs against."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class DocumentAdapter(ABC):
    """Read-only view of a feed document plus scroll and wait controls.

    Nodes returned by ``query`` are opaque handles that belong to the current
    snapshot. Once the document mutates (after ``scroll_by`` or ``sleep``)
    they must be re-queried, never reused.
    """

    @abstractmethod
    def query(self, selector: str, root: Any = None) -> List[Any]:
        """Return nodes matching a CSS selector.

        Args:
            selector: CSS selector.
            root: Node to search under, or None for the whole document.

        Returns:
            Matching nodes in document order.
        """

    @abstractmethod
    def read_attribute(self, node: Any, name: str) -> Optional[str]:
        """Return an attribute value, or None when absent."""

    @abstractmethod
    def read_text(self, node: Any) -> str:
        """Return the rendered text of a node."""

    @abstractmethod
    def scroll_by(self, px: int) -> None:
        """Scroll the viewport down by ``px`` pixels."""

    @abstractmethod
    def sleep(self, ms: int) -> None:
        """Give the renderer ``ms`` milliseconds to load content."""
