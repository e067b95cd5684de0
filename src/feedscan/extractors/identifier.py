"""Permalink collection and canonical post id selection.

The same post id shows up in several URL encodings (``/posts/``,
``/permalink/``, ``story_fbid=``, opaque ``pfbid`` tokens) and sometimes in a
JSON ``data-ft`` attribute. Metadata wins; otherwise ``ID_PATTERNS`` decides,
in order. Every permalink is kept so older records stored under another
encoding can still be matched.
"""

import json
import logging
from typing import Any, List, Optional, Sequence, Tuple

from ..adapters.base import DocumentAdapter
from ..constants import (
    ANCHOR_SELECTOR,
    ID_PATTERNS,
    MAX_PERMALINK_LENGTH,
    METADATA_ATTRIBUTE,
    METADATA_ID_KEYS,
    PERMALINK_MARKERS,
)
from ..models import IdentifierInfo, Provenance

logger = logging.getLogger("feedscan")

METADATA_SOURCE = "metadata"

IdCandidate = Tuple[str, str]


def is_permalink(href: Optional[str]) -> bool:
    """True when a link target carries a post id in any known encoding."""
    if not href:
        return False
    return any(marker in href for marker in PERMALINK_MARKERS)


def collect_permalinks(adapter: DocumentAdapter, node: Any) -> List[str]:
    """Permalink targets under the node, first-seen order, exact repeats dropped."""
    permalinks = []
    seen = set()
    for anchor in adapter.query(ANCHOR_SELECTOR, node):
        try:
            href = adapter.read_attribute(anchor, "href")
        except Exception as e:
            logger.debug(f"Anchor detached while collecting permalinks: {e}")
            continue
        if not is_permalink(href):
            continue
        href = href[:MAX_PERMALINK_LENGTH]
        if href not in seen:
            seen.add(href)
            permalinks.append(href)
    return permalinks


def parse_metadata_ids(raw: Optional[str]) -> List[IdCandidate]:
    """Pull post ids out of a JSON metadata attribute.

    Malformed metadata is treated as absent.
    """
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        logger.debug(f"Ignoring malformed post metadata: {e}")
        return []
    if not isinstance(data, dict):
        return []

    ids = []
    for key in METADATA_ID_KEYS:
        value = data.get(key)
        if isinstance(value, (str, int)) and not isinstance(value, bool) and str(value):
            ids.append((key, str(value)))
    return ids


def match_ids(permalinks: Sequence[str]) -> List[IdCandidate]:
    """Every (pattern name, id) match, in pattern precedence then link order."""
    matches = []
    for name, pattern in ID_PATTERNS:
        for permalink in permalinks:
            match = pattern.search(permalink)
            if match and (name, match.group(1)) not in matches:
                matches.append((name, match.group(1)))
    return matches


def extract_identifier(adapter: DocumentAdapter, node: Any) -> IdentifierInfo:
    """Collect permalinks and choose the canonical id for a post node."""
    info = IdentifierInfo()

    try:
        info.permalink_candidates = collect_permalinks(adapter, node)
    except Exception as e:
        logger.debug(f"Permalink scan failed: {e}")

    try:
        metadata_ids = parse_metadata_ids(adapter.read_attribute(node, METADATA_ATTRIBUTE))
    except Exception as e:
        logger.debug(f"Metadata read failed: {e}")
        metadata_ids = []

    url_ids = match_ids(info.permalink_candidates)
    info.id_candidates = metadata_ids + url_ids

    if metadata_ids:
        info.canonical_id = metadata_ids[0][1]
        info.provenance = Provenance(field="canonical_id", strategy=METADATA_SOURCE, rank=1)
    elif url_ids:
        source, info.canonical_id = url_ids[0]
        rank = [name for name, _ in ID_PATTERNS].index(source) + 2
        info.provenance = Provenance(field="canonical_id", strategy=source, rank=rank)

    return info
