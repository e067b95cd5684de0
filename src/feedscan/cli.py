"""Command-line interface for feedscan."""

import argparse
import dataclasses
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from feedscan.adapters.html_document import HtmlDocument
from feedscan.constants import ARTICLE_SELECTOR
from feedscan.errors import FeedscanError
from feedscan.extractors.classifier import classify_all
from feedscan.models import TickCounts
from feedscan.scrapers.feed_scraper import FeedScraper
from feedscan.scrapers.orchestrator import extract_posts
from feedscan.scrapers.poller import PollerSettings
from feedscan.utils.logger import parse_level, setup_logger

logger = logging.getLogger("feedscan")

PREVIEW_LENGTH = 120


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog='feedscan',
        description='Find and extract posts from social feed pages'
    )
    parser.add_argument('--log-level', help='Logging level (default: $LOG_LEVEL or INFO)')
    parser.add_argument('--log-file', help='Also log to this file (default: $LOG_FILE)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # scan <url>
    scan_parser = subparsers.add_parser('scan', help='Scrape a live feed page in a browser')
    scan_parser.add_argument('url', help='Feed page URL')
    scan_parser.add_argument('--threshold', type=int, help='Genuine posts needed before extracting')
    scan_parser.add_argument('--max-attempts', type=int, help='Scrolls before giving up on readiness')
    scan_parser.add_argument('--scroll-px', type=int, help='Pixels per scroll')
    scan_parser.add_argument('--sleep-ms', type=int, help='Wait after each scroll')
    scan_parser.add_argument('--max-posts', type=int, help='Stop after this many posts')
    scan_parser.add_argument('--headed', action='store_true', help='Show the browser window')
    scan_parser.add_argument('--storage-state', help='Playwright storage state file for the session')
    scan_parser.add_argument('--rate-limit', type=float, default=0.0, help='Seconds to wait before navigating')
    scan_parser.add_argument('--output', '-o', metavar='FILE', help='Write JSON here instead of stdout')

    # inspect <html_file>
    inspect_parser = subparsers.add_parser('inspect', help='Analyze a saved feed snapshot')
    inspect_parser.add_argument('html_file', help='Saved HTML of a feed page')
    inspect_parser.add_argument('--classify-only', action='store_true', help='Only report classifications')
    inspect_parser.add_argument('--max-posts', type=int, help='Stop after this many posts')
    inspect_parser.add_argument('--output', '-o', metavar='FILE', help='Write JSON here instead of stdout')

    return parser


def write_output(data: dict, output: Optional[str] = None) -> None:
    """Print JSON or write it to a file."""
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote {path}")
    else:
        print(text)


def build_settings(args: argparse.Namespace) -> PollerSettings:
    """Environment settings with command-line overrides applied."""
    overrides = {
        name: getattr(args, name)
        for name in ('threshold', 'max_attempts', 'scroll_px', 'sleep_ms')
        if getattr(args, name, None) is not None
    }
    return dataclasses.replace(PollerSettings.from_env(), **overrides)


def handle_scan(args: argparse.Namespace) -> int:
    """Handle the scan command.

    Returns:
        Exit code.
    """
    try:
        settings = build_settings(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with FeedScraper(
        headless=not args.headed,
        rate_limit_seconds=args.rate_limit,
        storage_state=args.storage_state,
        settings=settings,
    ) as scraper:
        result = scraper.scrape_feed(args.url, max_posts=args.max_posts)

    if result is None:
        print(f"Error: could not scrape {args.url}", file=sys.stderr)
        return 1

    write_output(result.to_dict(), args.output)
    return 0


def handle_inspect(args: argparse.Namespace) -> int:
    """Handle the inspect command: classify and extract from a saved page."""
    path = Path(args.html_file)
    if not path.is_file():
        print(f"Error: '{path}' not found", file=sys.stderr)
        return 1

    document = HtmlDocument.from_file(path)
    nodes = document.query(ARTICLE_SELECTOR)

    counts = TickCounts()
    items = []
    for i, (node, kind) in enumerate(classify_all(document, nodes)):
        counts.add(kind)
        text = document.read_text(node)
        items.append({
            "index": i,
            "kind": kind.value if kind else "skipped",
            "aria_label": document.read_attribute(node, "aria-label"),
            "text_length": len(text),
            "preview": " ".join(text.split())[:PREVIEW_LENGTH],
        })

    report = {
        "file": str(path),
        "counts": dataclasses.asdict(counts),
        "items": items,
    }
    if not args.classify_only:
        records = extract_posts(document, max_posts=args.max_posts)
        report["records"] = [record.to_dict() for record in records]

    write_output(report, args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()

    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logger(
        log_file=args.log_file or os.getenv("LOG_FILE"),
        level=parse_level(args.log_level or os.getenv("LOG_LEVEL")),
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == 'scan':
            return handle_scan(args)
        if args.command == 'inspect':
            return handle_inspect(args)
    except FeedscanError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
