"""Browser-driven scraping of a social feed page."""

import logging
import time
from typing import Optional

from ..adapters.playwright_document import PlaywrightDocument
from ..constants import DIALOG_CLOSE_SELECTORS, FEED_SELECTOR, SEE_MORE_BUTTON_SELECTORS
from ..models import ScanResult
from .poller import PollerSettings, scan

try:
    from playwright.sync_api import sync_playwright, TimeoutError as PlaywrightTimeout
    PLAYWRIGHT_AVAILABLE = True
except ImportError:
    PLAYWRIGHT_AVAILABLE = False
    sync_playwright = None
    PlaywrightTimeout = Exception

logger = logging.getLogger("feedscan")


class FeedScraper:
    """Load feed pages in a Playwright browser and extract their posts.

    Login is not handled here; pass a Playwright storage state file from an
    existing session if the feed needs one.
    """

    USER_AGENT = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    VIEWPORT = {"width": 1280, "height": 900}
    NAVIGATION_TIMEOUT_MS = 90000
    FEED_WAIT_TIMEOUT_MS = 15000

    def __init__(
        self,
        headless: bool = True,
        rate_limit_seconds: float = 3.0,
        storage_state: Optional[str] = None,
        settings: Optional[PollerSettings] = None,
    ):
        """Initialize the scraper with a Playwright browser.

        Args:
            headless: Run browser in headless mode (default: True).
            rate_limit_seconds: Delay before each navigation (default: 3.0).
            storage_state: Path to a Playwright storage state file.
            settings: Readiness loop settings.
        """
        self.headless = headless
        self.rate_limit_seconds = rate_limit_seconds
        self.storage_state = storage_state
        self.settings = settings or PollerSettings()
        self.playwright = None
        self.browser = None
        self.context = None
        self.page = None

        if not PLAYWRIGHT_AVAILABLE:
            logger.warning(
                "Playwright is not installed. Feed scraping will be disabled. "
                "Install with: pip install playwright && playwright install chromium"
            )
            return

        try:
            self.playwright = sync_playwright().start()
            self.browser = self.playwright.chromium.launch(headless=headless)
            context_options = {
                "user_agent": self.USER_AGENT,
                "viewport": self.VIEWPORT,
            }
            if storage_state:
                context_options["storage_state"] = storage_state
            self.context = self.browser.new_context(**context_options)
            self.page = self.context.new_page()
            logger.info("Playwright browser initialized successfully")
        except Exception as e:
            logger.warning(f"Failed to initialize Playwright browser: {e}")
            self.close()

    def _rate_limit(self):
        """Apply rate limiting between requests."""
        if self.rate_limit_seconds > 0:
            time.sleep(self.rate_limit_seconds)

    def _wait_for_feed(self) -> bool:
        """Wait for the feed container; a missing one is not fatal."""
        try:
            self.page.wait_for_selector(FEED_SELECTOR, timeout=self.FEED_WAIT_TIMEOUT_MS)
            logger.info("Feed container found")
            return True
        except PlaywrightTimeout:
            logger.warning("Feed container not found, continuing anyway")
            return False

    def _dismiss_dialogs(self) -> int:
        """Close popups that cover the feed.

        Returns:
            Number of dialogs dismissed.
        """
        dismissed = 0
        for selector in DIALOG_CLOSE_SELECTORS:
            try:
                button = self.page.locator(selector).first
                if button.is_visible(timeout=2000):
                    button.click()
                    self.page.wait_for_timeout(500)
                    dismissed += 1
            except Exception as e:
                logger.debug(f"No dialog to dismiss for {selector}: {e}")
        if dismissed:
            logger.debug(f"Dismissed {dismissed} dialog(s)")
        return dismissed

    def _expand_see_more(self) -> int:
        """Click every visible "See more" so collapsed posts render in full.

        Returns:
            Number of posts expanded.
        """
        expanded = 0
        for selector in SEE_MORE_BUTTON_SELECTORS:
            try:
                buttons = self.page.locator(selector).all()
            except Exception as e:
                logger.debug(f"See more lookup failed for {selector}: {e}")
                continue
            for button in buttons:
                try:
                    if button.is_visible(timeout=1000):
                        button.click()
                        expanded += 1
                except Exception as e:
                    # Buttons detach as the post re-renders
                    logger.debug(f"Could not expand post: {e}")
        if expanded:
            self.page.wait_for_timeout(500)
            logger.info(f"Expanded {expanded} truncated post(s)")
        return expanded

    def scrape_feed(self, url: str, max_posts: Optional[int] = None) -> Optional[ScanResult]:
        """Open a feed page, wait for posts to load and extract them.

        Args:
            url: Feed page URL.
            max_posts: Stop after this many records.

        Returns:
            ScanResult, or None when the browser is unavailable or navigation
            fails.

        Raises:
            DocumentQueryError: The loaded page could not be queried.
        """
        if not self.page:
            logger.warning("Browser not available, skipping feed scrape")
            return None

        self._rate_limit()
        try:
            self.page.goto(url, wait_until="domcontentloaded", timeout=self.NAVIGATION_TIMEOUT_MS)
            logger.info(f"Navigated to {url}")
        except Exception as e:
            logger.error(f"Navigation to {url} failed: {e}")
            return None

        self._wait_for_feed()
        self._dismiss_dialogs()
        self._expand_see_more()

        result = scan(PlaywrightDocument(self.page), self.settings, max_posts=max_posts, url=url)
        logger.info(
            f"Extracted {len(result.records)} posts from {url} "
            f"(converged={result.readiness.converged}, attempts={result.readiness.attempts})"
        )
        return result

    def close(self):
        """Clean up browser and Playwright resources.

        Safe to call multiple times.
        """
        for attr, method in (
            ("page", "close"),
            ("context", "close"),
            ("browser", "close"),
            ("playwright", "stop"),
        ):
            resource = getattr(self, attr)
            if not resource:
                continue
            try:
                getattr(resource, method)()
                logger.debug(f"{attr} {method}: done")
            except Exception as e:
                logger.debug(f"Error during {attr} {method}: {e}")
            setattr(self, attr, None)

    def __enter__(self):
        """Support context manager protocol."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Clean up on context manager exit."""
        self.close()
        return False
