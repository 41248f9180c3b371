"""RSS/Atom feed parser built on feedparser."""

import asyncio
import re

import feedparser
import httpx

from rssreader.exceptions import DecodeError
from rssreader.models.document import Document, Item
from rssreader.utils.http_client import get


class RssParser:
    """Parser turning raw RSS/Atom XML into a Document.

    Keeps each entry's publication date as the raw published string so
    ordering can parse it later.
    """

    def parse(self, raw_content: bytes | str, location: str) -> Document:
        """Parse RSS content into a Document.

        Args:
            raw_content: Raw XML from the feed.
            location: Feed location for error reporting.

        Returns:
            Parsed Document.

        Raises:
            DecodeError: When the content is not a recognizable feed.
        """
        feed = feedparser.parse(raw_content)

        if not feed.version and not feed.entries:
            # feedparser leaves version empty when no feed format was recognized
            reason = feed.get("bozo_exception") or "no RSS or Atom feed found"
            raise DecodeError(location, f"Feed parse error: {reason}")

        items = [self._parse_entry(entry) for entry in feed.entries]

        return Document(
            channel_title=feed.feed.get("title", ""),
            channel_link=feed.feed.get("link", ""),
            items=items,
        )

    def _parse_entry(self, entry: feedparser.FeedParserDict) -> Item:
        return Item(
            title=self._clean_text(entry.get("title", "")),
            link=entry.get("link", ""),
            pub_date=entry.get("published", entry.get("updated", "")),
        )

    def _clean_text(self, text: str) -> str:
        """Clean text by normalizing whitespace."""
        return re.sub(r"\s+", " ", text).strip()


async def parse_rss_at_url(url: str, client: httpx.AsyncClient) -> Document:
    """Fetch an RSS feed and parse it.

    Raises:
        NetworkError: On request failure.
        DecodeError: When the body is not a feed.
    """
    response = await get(client, url, url)
    # feedparser is sync; parse off the event loop
    return await asyncio.to_thread(RssParser().parse, response.content, url)
