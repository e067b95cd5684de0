"""Document adapters the engine can run against."""

from .base import DocumentAdapter
from .html_document import HtmlDocument
from .playwright_document import PlaywrightDocument

__all__ = ["DocumentAdapter", "HtmlDocument", "PlaywrightDocument"]
