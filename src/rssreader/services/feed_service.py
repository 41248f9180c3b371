"""Feed listing service.

Exposes the fetch entry points and turns fetched documents into the two
report shapes: the feed-title list and the item list of one feed.
"""

from collections.abc import Sequence

import structlog

from rssreader.exceptions import RssReaderError
from rssreader.models.document import Document
from rssreader.models.feed import FeedDescriptor
from rssreader.services.fetch_coordinator import FetchCoordinator
from rssreader.services.ordering import sort_items

logger = structlog.get_logger()


def format_feed_titles(
    descriptors: Sequence[FeedDescriptor], documents: Sequence[Document]
) -> list[str]:
    """Build "[index] title" lines.

    The index is the descriptor's position in storage, not the position of
    the document in the (unordered) fetch results. Descriptors without a
    fetched document produce no line.
    """
    lines = []
    for index, descriptor in enumerate(descriptors):
        for document in documents:
            if document.channel_link == descriptor.location:
                lines.append(f"[{index}] {document.channel_title.strip()}")
    return lines


def format_items(document: Document) -> list[str]:
    """Build one "pubDate title (link)" line per item, omitting empty dates."""
    lines = []
    for item in document.items:
        if item.pub_date:
            lines.append(f"{item.pub_date} {item.title} ({item.link})")
        else:
            lines.append(f"{item.title} ({item.link})")
    return lines


class FeedService:
    """Facade over the fetch coordinator used by the command line.

    Reason: Keeps report formatting apart from fetching so both can be tested
    without a terminal.
    """

    def __init__(self, coordinator: FetchCoordinator):
        self._coordinator = coordinator

    async def fetch_all(
        self, descriptors: Sequence[FeedDescriptor]
    ) -> tuple[list[Document], RssReaderError | None]:
        return await self._coordinator.fetch_all(descriptors)

    async def fetch_one(self, descriptors: Sequence[FeedDescriptor], index: int) -> Document:
        return await self._coordinator.fetch_one(descriptors, index)

    async def list_feed_titles(
        self, descriptors: Sequence[FeedDescriptor]
    ) -> tuple[list[str], RssReaderError | None]:
        """List the titles of all feeds that could be fetched.

        Returns:
            Title lines and the first fetch failure, if any. Lines for the
            feeds that succeeded are returned even when some failed.
        """
        documents, error = await self.fetch_all(descriptors)
        lines = format_feed_titles(descriptors, documents)
        if error is not None:
            logger.warning("Feed list is incomplete", listed=len(lines), total=len(descriptors))
        return lines, error

    async def list_items_for_index(
        self, descriptors: Sequence[FeedDescriptor], index: int
    ) -> list[str]:
        """List the items of one feed, newest first.

        Raises:
            FeedIndexError: If index is out of range.
            RssReaderError: If the fetch fails.
        """
        document = await self.fetch_one(descriptors, index)
        sort_items(document)
        logger.debug("Listing feed items", index=index, items=len(document.items))
        return format_items(document)
