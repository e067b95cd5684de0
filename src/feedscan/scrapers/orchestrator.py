"""Turn one feed snapshot into a list of post records."""

import logging
from typing import Any, List, Optional, Sequence

from ..adapters.base import DocumentAdapter
from ..constants import ARTICLE_SELECTOR
from ..extractors.author import extract_author
from ..extractors.body_text import extract_body_text, has_see_more, strip_see_more
from ..extractors.classifier import classify_all
from ..extractors.identifier import extract_identifier
from ..models import ItemKind, PostRecord, Provenance, TickCounts

logger = logging.getLogger("feedscan")


def extract_record(adapter: DocumentAdapter, node: Any) -> PostRecord:
    """Build a PostRecord from a node already classified as genuine."""
    raw_text = extract_body_text(adapter, node)
    body_text = strip_see_more(raw_text)
    author = extract_author(adapter, node)
    identifier = extract_identifier(adapter, node)

    provenance = {}
    if body_text:
        provenance["body_text"] = Provenance(field="body_text", strategy="longest_block", rank=1)
    if author.provenance:
        provenance["author_name"] = author.provenance
    if identifier.provenance:
        provenance["canonical_id"] = identifier.provenance

    return PostRecord(
        body_text=body_text,
        canonical_id=identifier.canonical_id,
        author_name=author.name,
        author_profile_url=author.profile_url,
        author_photo_url=author.photo_url,
        permalink_candidates=identifier.permalink_candidates,
        has_see_more=has_see_more(raw_text),
        provenance=provenance,
    )


def extract_posts(
    adapter: DocumentAdapter,
    nodes: Optional[Sequence[Any]] = None,
    max_posts: Optional[int] = None,
) -> List[PostRecord]:
    """Extract records for every genuine item in the current snapshot.

    Reads only; running it twice on an unchanged document gives equal
    results. A node that fails mid-extraction is skipped, but a document
    that cannot be queried at all raises.

    Args:
        adapter: Document to read.
        nodes: Candidate nodes; queried fresh from the document when None.
        max_posts: Stop after this many records.

    Returns:
        Records in document order.
    """
    if nodes is None:
        nodes = adapter.query(ARTICLE_SELECTOR)

    records = []
    counts = TickCounts()

    for i, (node, kind) in enumerate(classify_all(adapter, nodes)):
        if kind is not ItemKind.GENUINE:
            counts.add(kind)
            continue

        try:
            record = extract_record(adapter, node)
        except Exception as e:
            logger.debug(f"Container {i + 1}: extraction failed, skipping: {e}")
            counts.add(None)
            continue

        counts.add(kind)
        records.append(record)
        logger.debug(
            f"Container {i + 1}: author={record.author_name or 'Unknown'}, "
            f"id={record.canonical_id or 'None'}, {len(record.body_text)} chars"
        )

        if max_posts is not None and len(records) >= max_posts:
            break

    logger.info(f"Extraction complete: {len(records)} posts ({counts.summary()})")
    return records
