"""Classification and field extraction for feed post nodes."""

from .author import extract_author
from .body_text import extract_body_text
from .classifier import classify, count_items
from .identifier import extract_identifier

__all__ = [
    "classify",
    "count_items",
    "extract_author",
    "extract_body_text",
    "extract_identifier",
]
