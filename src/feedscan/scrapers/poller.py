"""Wait for a lazily-loading feed to show enough real posts."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from ..adapters.base import DocumentAdapter
from ..constants import (
    ARTICLE_SELECTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_READY_THRESHOLD,
    DEFAULT_SCROLL_PX,
    DEFAULT_SLEEP_MS,
)
from ..extractors.classifier import count_items
from ..models import ReadinessResult, ScanResult, TickCounts
from .orchestrator import extract_posts

logger = logging.getLogger("feedscan")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={value!r}, using {default}")
        return default


@dataclass
class PollerSettings:
    """Readiness loop tuning."""

    threshold: int = DEFAULT_READY_THRESHOLD
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    scroll_px: int = DEFAULT_SCROLL_PX
    sleep_ms: int = DEFAULT_SLEEP_MS

    def __post_init__(self):
        if self.threshold < 1:
            raise ValueError(f"threshold must be at least 1, got {self.threshold}")
        if self.max_attempts < 0:
            raise ValueError(f"max_attempts cannot be negative, got {self.max_attempts}")
        if self.scroll_px < 1:
            raise ValueError(f"scroll_px must be at least 1, got {self.scroll_px}")
        if self.sleep_ms < 0:
            raise ValueError(f"sleep_ms cannot be negative, got {self.sleep_ms}")

    @classmethod
    def from_env(cls) -> "PollerSettings":
        """Read FEEDSCAN_* environment variables, falling back to defaults."""
        return cls(
            threshold=_env_int("FEEDSCAN_READY_THRESHOLD", DEFAULT_READY_THRESHOLD),
            max_attempts=_env_int("FEEDSCAN_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
            scroll_px=_env_int("FEEDSCAN_SCROLL_PX", DEFAULT_SCROLL_PX),
            sleep_ms=_env_int("FEEDSCAN_SLEEP_MS", DEFAULT_SLEEP_MS),
        )


class ReadinessPoller:
    """Poll a feed until enough genuine posts have rendered.

    Each tick re-queries the document, since handles from earlier ticks may
    be stale. The loop ends Converged (genuine count reached the threshold)
    or Exhausted (max_attempts scrolls done); exhaustion is not an error,
    the caller carries on with what is there.
    """

    def __init__(self, adapter: DocumentAdapter, settings: Optional[PollerSettings] = None):
        self.adapter = adapter
        self.settings = settings or PollerSettings()

    def snapshot(self) -> TickCounts:
        """Classify every candidate in the document as it is right now."""
        nodes = self.adapter.query(ARTICLE_SELECTOR)
        return count_items(self.adapter, nodes)

    def wait_until_ready(self) -> ReadinessResult:
        """Run the readiness loop.

        Returns:
            ReadinessResult with attempts equal to the number of scrolls made.
        """
        settings = self.settings
        attempts = 0

        while True:
            counts = self.snapshot()
            logger.info(f"Attempt {attempts + 1}: {counts.summary()}")

            if counts.genuine >= settings.threshold:
                logger.info(f"Feed ready: {counts.genuine} genuine posts after {attempts} scrolls")
                return ReadinessResult(
                    converged=True,
                    genuine_count=counts.genuine,
                    attempts=attempts,
                    last_counts=counts,
                )

            if attempts >= settings.max_attempts:
                logger.warning(
                    f"Timed out waiting for posts: {counts.genuine}/{settings.threshold} "
                    f"genuine after {attempts} scrolls"
                )
                return ReadinessResult(
                    converged=False,
                    genuine_count=counts.genuine,
                    attempts=attempts,
                    last_counts=counts,
                )

            self.adapter.scroll_by(settings.scroll_px)
            self.adapter.sleep(settings.sleep_ms)
            attempts += 1


def scan(
    adapter: DocumentAdapter,
    settings: Optional[PollerSettings] = None,
    max_posts: Optional[int] = None,
    url: Optional[str] = None,
) -> ScanResult:
    """Wait for the feed to be ready, then extract from a fresh snapshot."""
    readiness = ReadinessPoller(adapter, settings).wait_until_ready()
    if not readiness.converged:
        logger.warning("Extracting from a feed that never became ready")
    records = extract_posts(adapter, max_posts=max_posts)
    return ScanResult(records=records, readiness=readiness, url=url)
