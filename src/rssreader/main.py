"""Command line entry point.

Adds a feed, lists feed titles and shows the items of one feed. Each
requested step runs even when an earlier one failed.
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from rssreader.config.settings import Settings, settings
from rssreader.exceptions import RssReaderError
from rssreader.models.feed import FeedKind
from rssreader.services.feed_service import FeedService
from rssreader.services.fetch_coordinator import FetchCoordinator
from rssreader.storage.file_db import FileFeedStorage
from rssreader.utils.http_client import create_http_client
from rssreader.utils.logger import configure_logging, get_logger


def build_parser(config: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rssreader",
        description="rssreader - manage feed locations and show items of a feed",
    )
    parser.add_argument("-a", "--add", metavar="URL", help="add a feed's URL to fetch")
    parser.add_argument(
        "-k",
        "--kind",
        choices=[kind.value for kind in FeedKind],
        help="format of the feed added with --add (default: xml)",
    )
    parser.add_argument(
        "-l", "--list", action="store_true", help="show a list of current feeds"
    )
    parser.add_argument(
        "-s",
        "--show",
        metavar="INDEX",
        help="show a list of items for a feed with the specified index",
    )
    parser.add_argument(
        "--feeds-path",
        type=Path,
        default=config.feeds_path,
        help=f"feeds file (default: {config.feeds_path})",
    )
    return parser


def create_service(config: Settings) -> FeedService:
    """Create the feed service from configuration."""
    coordinator = FetchCoordinator(
        client_factory=lambda: create_http_client(
            timeout=config.fetch_timeout,
            user_agent=config.user_agent,
        ),
        max_concurrency=config.max_concurrency,
        fetch_timeout=config.fetch_timeout,
    )
    return FeedService(coordinator)


async def show_feed_titles(storage: FileFeedStorage, service: FeedService) -> bool:
    """Print the feed title list. Returns False if the listing is incomplete."""
    descriptors = storage.read()
    lines, error = await service.list_feed_titles(descriptors)
    for line in lines:
        print(line)
    if error is not None:
        print(error)
        return False
    return True


async def show_feed_items(storage: FileFeedStorage, service: FeedService, index: str) -> None:
    """Print the items of the feed at a stored index."""
    n = int(index)
    descriptors = storage.read()
    for line in await service.list_items_for_index(descriptors, n):
        print(line)


async def run(args: argparse.Namespace, storage: FileFeedStorage, service: FeedService) -> int:
    """Run the requested steps, printing errors and continuing.

    Returns:
        Process exit status.
    """
    logger = get_logger("cli")
    status = 0

    try:
        if storage.initialize():
            print("New feeds collection has been created.")
    except RssReaderError as e:
        print(e)
        status = 1

    if args.add:
        try:
            kind = FeedKind(args.kind) if args.kind else None
            storage.save(args.add, kind)
        except RssReaderError as e:
            print(e)
            status = 1

    if args.list:
        try:
            if not await show_feed_titles(storage, service):
                status = 1
        except RssReaderError as e:
            print(e)
            status = 1

    if args.show:
        try:
            await show_feed_items(storage, service, args.show)
        except (RssReaderError, ValueError) as e:
            print(e)
            status = 1

    logger.debug("Done", status=status)
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser(settings).parse_args(argv)

    configure_logging(
        log_level=settings.log_level,
        json_format=settings.log_json,
    )

    storage = FileFeedStorage(args.feeds_path)
    service = create_service(settings)
    return asyncio.run(run(args, storage, service))


if __name__ == "__main__":
    sys.exit(main())
