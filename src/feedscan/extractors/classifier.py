"""Tell genuine feed posts apart from loading placeholders and comments.

Placeholders and comments sit in the same ``role="article"`` containers as
real top-level posts, so tree position says nothing. Classification relies on
loading markers, the container's own label, and how much text it renders.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from ..adapters.base import DocumentAdapter
from ..constants import (
    COMMENT_LABEL_MARKER,
    LOADING_LABEL,
    LOADING_SELECTORS,
    LOADING_STATE_ATTRIBUTE,
    LOADING_STATE_VALUE,
    MIN_GENUINE_TEXT_LENGTH,
)
from ..models import ItemKind, TickCounts

logger = logging.getLogger("feedscan")


def has_loading_marker(adapter: DocumentAdapter, node: Any) -> bool:
    """Check the node and its descendants for either loading signal."""
    if adapter.read_attribute(node, "aria-label") == LOADING_LABEL:
        return True
    if adapter.read_attribute(node, LOADING_STATE_ATTRIBUTE) == LOADING_STATE_VALUE:
        return True
    return any(adapter.query(selector, node) for selector in LOADING_SELECTORS)


def classify(adapter: DocumentAdapter, node: Any) -> ItemKind:
    """Classify one feed entry.

    Order matters: a loading marker wins over everything, then a comment
    label, then text length. Short entries default to PLACEHOLDER.
    """
    if has_loading_marker(adapter, node):
        return ItemKind.PLACEHOLDER

    label = adapter.read_attribute(node, "aria-label") or ""
    if COMMENT_LABEL_MARKER in label.lower():
        return ItemKind.COMMENT

    if len(adapter.read_text(node)) > MIN_GENUINE_TEXT_LENGTH:
        return ItemKind.GENUINE

    return ItemKind.PLACEHOLDER


def classify_all(
    adapter: DocumentAdapter, nodes: Sequence[Any]
) -> List[Tuple[Any, Optional[ItemKind]]]:
    """Classify a batch of nodes; a node that errors gets None."""
    results = []
    for i, node in enumerate(nodes):
        try:
            kind = classify(adapter, node)
        except Exception as e:
            # Usually a handle detached by a re-render
            logger.debug(f"Container {i + 1}: classification failed, skipping: {e}")
            kind = None
        results.append((node, kind))
    return results


def count_items(adapter: DocumentAdapter, nodes: Sequence[Any]) -> TickCounts:
    """Count classifications for one snapshot."""
    counts = TickCounts()
    for _, kind in classify_all(adapter, nodes):
        counts.add(kind)
    return counts
