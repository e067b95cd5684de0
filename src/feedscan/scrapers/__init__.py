"""Readiness polling, extraction passes and the browser-driven scraper."""

from .feed_scraper import FeedScraper
from .orchestrator import extract_posts, extract_record
from .poller import PollerSettings, ReadinessPoller, scan

__all__ = [
    "FeedScraper",
    "PollerSettings",
    "ReadinessPoller",
    "extract_posts",
    "extract_record",
    "scan",
]
