"""feedscan - find genuine posts in a lazily-loading social feed and extract them."""

from .adapters import DocumentAdapter, HtmlDocument, PlaywrightDocument
from .errors import DocumentQueryError, FeedscanError
from .extractors import classify, extract_author, extract_body_text, extract_identifier
from .models import ItemKind, PostRecord, ReadinessResult, ScanResult
from .scrapers.orchestrator import extract_posts, extract_record
from .scrapers.poller import PollerSettings, ReadinessPoller, scan

__version__ = "0.1.0"

__all__ = [
    "DocumentAdapter",
    "DocumentQueryError",
    "FeedscanError",
    "HtmlDocument",
    "ItemKind",
    "PlaywrightDocument",
    "PollerSettings",
    "PostRecord",
    "ReadinessPoller",
    "ReadinessResult",
    "ScanResult",
    "classify",
    "extract_author",
    "extract_body_text",
    "extract_identifier",
    "extract_posts",
    "extract_record",
    "scan",
]
