"""JSON collection feed fetcher."""

import httpx

from rssreader.exceptions import NetworkError
from rssreader.models.document import Document
from rssreader.models.feed import FeedDescriptor
from rssreader.parsers.collections import flatten_collections
from rssreader.utils.http_client import get_json


def host_title(location: str) -> str:
    """Return the host (and port) of a location, used as a fallback title.

    Raises:
        NetworkError: When the location is not a valid URL.
    """
    try:
        return httpx.URL(location).netloc.decode("ascii")
    except httpx.InvalidURL as e:
        raise NetworkError(location, f"Invalid URL: {e}") from e


class JsonFeedFetcher:
    """Fetches a JSON document of named item collections.

    Items carry only a title and a link; JSON feeds have no publication dates.
    """

    async def fetch(self, descriptor: FeedDescriptor, client: httpx.AsyncClient) -> Document:
        document = Document(
            channel_title=host_title(descriptor.location),
            channel_link=descriptor.location,
        )

        payload = await get_json(client, descriptor.location, descriptor.location)
        document.items = flatten_collections(payload, descriptor.location)
        return document
