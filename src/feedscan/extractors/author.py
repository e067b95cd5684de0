"""Author name, profile link and photo extraction."""

import logging
from typing import Any, List, Optional, Tuple

from ..adapters.base import DocumentAdapter
from ..constants import (
    ANCHOR_SELECTOR,
    AUTHOR_LABEL_PATTERN,
    HEADER_LINK_SELECTOR,
    MAX_AUTHOR_NAME_LENGTH,
    MIN_AUTHOR_NAME_LENGTH,
    PROFILE_IMAGE_SELECTOR,
    STRONG_LINK_SELECTOR,
)
from ..models import AuthorInfo
from .strategies import first_success
from .urls import is_profile_url, normalize_profile_url

logger = logging.getLogger("feedscan")

# (name, href) where href is the profile link the name came from, if any
NameMatch = Tuple[str, Optional[str]]


def valid_name(value: Optional[str]) -> Optional[str]:
    """Trim a candidate name and reject empty or implausible lengths."""
    if not value:
        return None
    name = value.strip()
    if MIN_AUTHOR_NAME_LENGTH < len(name) < MAX_AUTHOR_NAME_LENGTH:
        return name
    return None


def profile_anchors(adapter: DocumentAdapter, node: Any) -> List[Tuple[Any, str]]:
    """Return (anchor, href) for every profile-shaped link under the node."""
    anchors = []
    for anchor in adapter.query(ANCHOR_SELECTOR, node):
        href = adapter.read_attribute(anchor, "href")
        if is_profile_url(href):
            anchors.append((anchor, href))
    return anchors


def name_from_label(adapter: DocumentAdapter, node: Any) -> Optional[NameMatch]:
    """Parse "Post by NAME ..." from the container's own aria-label."""
    label = adapter.read_attribute(node, "aria-label") or ""
    match = AUTHOR_LABEL_PATTERN.match(label.strip())
    if not match:
        return None
    name = valid_name(match.group(1))
    return (name, None) if name else None


def name_from_header_link(adapter: DocumentAdapter, node: Any) -> Optional[NameMatch]:
    """First heading link that points at a profile."""
    for link in adapter.query(HEADER_LINK_SELECTOR, node):
        href = adapter.read_attribute(link, "href")
        if not is_profile_url(href):
            continue
        name = valid_name(adapter.read_text(link))
        if name:
            return name, href
    return None


def name_from_profile_label(adapter: DocumentAdapter, node: Any) -> Optional[NameMatch]:
    """Profile links often carry the person's name as their own aria-label."""
    for anchor, href in profile_anchors(adapter, node):
        name = valid_name(adapter.read_attribute(anchor, "aria-label"))
        if name:
            return name, href
    return None


def name_from_strong_link(adapter: DocumentAdapter, node: Any) -> Optional[NameMatch]:
    """Bold inline link text. Weakest signal, only used when nothing else hits."""
    for link in adapter.query(STRONG_LINK_SELECTOR, node):
        name = valid_name(adapter.read_text(link))
        if name:
            href = adapter.read_attribute(link, "href")
            return name, href if is_profile_url(href) else None
    return None


NAME_STRATEGIES = [
    ("aria_label", name_from_label),
    ("header_link", name_from_header_link),
    ("profile_link_label", name_from_profile_label),
]

FALLBACK_STRATEGY = ("strong_link", name_from_strong_link)


def photo_from_anchors(adapter: DocumentAdapter, anchors: List[Tuple[Any, str]]) -> Optional[str]:
    """First raster or SVG image reference inside any profile link."""
    for anchor, _ in anchors:
        for image in adapter.query(PROFILE_IMAGE_SELECTOR, anchor):
            for attribute in ("src", "href", "xlink:href"):
                value = adapter.read_attribute(image, attribute)
                if value:
                    return value
    return None


def extract_author(adapter: DocumentAdapter, node: Any) -> AuthorInfo:
    """Extract author identity from a genuine post node.

    Never raises: any field that cannot be read is left as None.
    """
    info = AuthorInfo()

    try:
        anchors = profile_anchors(adapter, node)
    except Exception as e:
        logger.debug(f"Profile link scan failed: {e}")
        anchors = []

    match, provenance = first_success("author_name", NAME_STRATEGIES, adapter, node)
    if match:
        info.candidates.append((provenance.strategy, match[0]))

    # Always evaluated so the diagnostic candidate list is complete
    fallback, fallback_provenance = first_success(
        "author_name", [FALLBACK_STRATEGY], adapter, node,
        start_rank=len(NAME_STRATEGIES) + 1,
    )
    if fallback:
        info.candidates.append((fallback_provenance.strategy, fallback[0]))
        if not match:
            match, provenance = fallback, fallback_provenance

    if match:
        info.name, href = match
        info.provenance = provenance
        if href is None and anchors:
            href = anchors[0][1]
        info.profile_url = normalize_profile_url(href)
    elif anchors:
        info.profile_url = normalize_profile_url(anchors[0][1])

    try:
        info.photo_url = photo_from_anchors(adapter, anchors)
    except Exception as e:
        logger.debug(f"Profile photo lookup failed: {e}")

    return info
