"""RSS/XML feed fetcher."""

from collections.abc import Awaitable, Callable

import httpx

from rssreader.models.document import Document
from rssreader.models.feed import FeedDescriptor
from rssreader.parsers.rss_parser import parse_rss_at_url

RssParseFunc = Callable[[str, httpx.AsyncClient], Awaitable[Document]]


class XmlFeedFetcher:
    """Fetches RSS/Atom feeds through the RSS parser."""

    def __init__(self, parse: RssParseFunc = parse_rss_at_url):
        self._parse = parse

    async def fetch(self, descriptor: FeedDescriptor, client: httpx.AsyncClient) -> Document:
        document = await self._parse(descriptor.location, client)
        # The parser reports the channel's own link; results are keyed by location.
        document.channel_link = descriptor.location
        return document
