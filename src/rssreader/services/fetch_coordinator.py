"""Concurrent fetching of many feeds.

One task per descriptor, bounded by a semaphore and a per-fetch deadline.
"""

import asyncio
from collections.abc import Callable, Sequence

import httpx
import structlog

from rssreader.exceptions import FeedIndexError, NetworkError, RssReaderError
from rssreader.models.document import Document, FetchResult
from rssreader.models.feed import FeedDescriptor, FeedKind
from rssreader.sources.base import Fetcher
from rssreader.sources.factory import create_fetchers, get_fetcher
from rssreader.utils.http_client import create_http_client

logger = structlog.get_logger()

ClientFactory = Callable[[], httpx.AsyncClient]


class FetchCoordinator:
    """Fans fetches out over all descriptors and collects their outcomes.

    Reason: Feeds are independent and I/O bound, so one slow or broken feed
    must not hold back or hide the others. A semaphore and a per-fetch
    deadline keep a large feed list from opening unbounded connections.
    """

    def __init__(
        self,
        fetchers: dict[FeedKind, Fetcher] | None = None,
        client_factory: ClientFactory = create_http_client,
        max_concurrency: int = 16,
        fetch_timeout: float = 30.0,
    ):
        """Initialize the coordinator.

        Args:
            fetchers: Fetcher per feed kind. Defaults to the built-in fetchers.
            client_factory: Creates the HTTP client shared by one fan-out.
            max_concurrency: Maximum fetches in flight at once.
            fetch_timeout: Deadline in seconds for each fetch.
        """
        self._fetchers = fetchers if fetchers is not None else create_fetchers()
        self._client_factory = client_factory
        self._max_concurrency = max_concurrency
        self._fetch_timeout = fetch_timeout

    async def fetch_results(self, descriptors: Sequence[FeedDescriptor]) -> list[FetchResult]:
        """Fetch every descriptor concurrently.

        Returns:
            One FetchResult per descriptor, in descriptor order.
        """
        if not descriptors:
            return []

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def fetch_single(
            descriptor: FeedDescriptor, client: httpx.AsyncClient
        ) -> FetchResult:
            async with semaphore:
                try:
                    document = await self._fetch(descriptor, client)
                except RssReaderError as e:
                    logger.warning(
                        "Feed fetch failed",
                        location=descriptor.location,
                        kind=descriptor.kind.value,
                        error=str(e),
                    )
                    return FetchResult(descriptor=descriptor, error=e)
                logger.debug(
                    "Feed fetched",
                    location=descriptor.location,
                    items=len(document.items),
                )
                return FetchResult(descriptor=descriptor, document=document)

        async with self._client_factory() as client:
            results = await asyncio.gather(*[fetch_single(d, client) for d in descriptors])

        return list(results)

    async def fetch_all(
        self, descriptors: Sequence[FeedDescriptor]
    ) -> tuple[list[Document], RssReaderError | None]:
        """Fetch every descriptor, keeping successes when some fail.

        Returns:
            The fetched documents and the first failure, if any. A non-None
            error means the document list may be incomplete.
        """
        results = await self.fetch_results(descriptors)

        documents = [r.document for r in results if r.document is not None]
        errors = [r.error for r in results if r.error is not None]

        logger.info(
            "Fetched feeds",
            total=len(results),
            succeeded=len(documents),
            failed=len(errors),
        )
        return documents, (errors[0] if errors else None)

    async def fetch_one(self, descriptors: Sequence[FeedDescriptor], index: int) -> Document:
        """Fetch the descriptor at a position.

        Raises:
            FeedIndexError: If index is outside [0, len(descriptors)).
            RssReaderError: Whatever the fetcher raised.
        """
        if not 0 <= index < len(descriptors):
            raise FeedIndexError(index, len(descriptors))

        async with self._client_factory() as client:
            return await self._fetch(descriptors[index], client)

    async def _fetch(self, descriptor: FeedDescriptor, client: httpx.AsyncClient) -> Document:
        fetcher = get_fetcher(self._fetchers, descriptor.kind)
        try:
            return await asyncio.wait_for(
                fetcher.fetch(descriptor, client), timeout=self._fetch_timeout
            )
        except asyncio.TimeoutError as e:
            raise NetworkError(
                descriptor.location, f"No response within {self._fetch_timeout}s"
            ) from e
