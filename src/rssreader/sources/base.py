"""Abstract feed fetcher interface using Protocol."""

from typing import Protocol

import httpx

from rssreader.models.document import Document
from rssreader.models.feed import FeedDescriptor


class Fetcher(Protocol):
    """Fetches one descriptor of a given kind and normalizes it.

    Reason: Using Protocol instead of ABC lets tests pass any object with a
    matching fetch coroutine.
    """

    async def fetch(self, descriptor: FeedDescriptor, client: httpx.AsyncClient) -> Document:
        """Fetch a feed and build its Document.

        Args:
            descriptor: Feed to fetch.
            client: HTTP client to issue requests with.

        Returns:
            Document whose channel_link is the descriptor location.

        Raises:
            NetworkError: When a request fails.
            DecodeError: When a body is malformed.
            SchemaError: When a required field is missing.
        """
        ...
