"""Test configuration and fixtures."""

import asyncio
import tempfile
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from rssreader.exceptions import RssReaderError
from rssreader.models.document import Document
from rssreader.models.feed import FeedDescriptor
from rssreader.utils.logger import configure_logging

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def feeds_path():
    """Create a temporary feeds file path for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "feeds"


@pytest.fixture
def sample_rss_content():
    """Sample RSS 2.0 content with items out of date order."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>
      Example Channel
    </title>
    <link>https://example.com/</link>
    <description>Example content</description>
    <item>
      <title>First post</title>
      <link>https://example.com/post-1</link>
      <pubDate>Mon, 01 Jan 2024 00:00:00 +0000</pubDate>
    </item>
    <item>
      <title>Third post</title>
      <link>https://example.com/post-3</link>
      <pubDate>Wed, 03 Jan 2024 08:15:00 +0000</pubDate>
    </item>
    <item>
      <title>Second post</title>
      <link>https://example.com/post-2</link>
      <pubDate>Tue, 02 Jan 2024 12:30:00 +0000</pubDate>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def sample_collections():
    """Sample JSON collection payload."""
    return {
        "a": [{"name": "N1", "url": "U1"}],
        "b": [{"name": "N2", "url": "U2"}],
    }


@pytest.fixture
def mock_client_factory():
    """Build a client factory whose requests are answered by a handler."""

    def factory(handler: Handler) -> Callable[[], httpx.AsyncClient]:
        return lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


class FakeFetcher:
    """Fetcher answering from a location -> Document/exception table."""

    def __init__(self, outcomes: dict[str, Document | RssReaderError], delay: float = 0.0):
        self.outcomes = outcomes
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    async def fetch(self, descriptor: FeedDescriptor, client: httpx.AsyncClient) -> Document:
        self.calls.append(descriptor.location)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            outcome = self.outcomes[descriptor.location]
            if isinstance(outcome, Exception):
                raise outcome
            return outcome.model_copy(deep=True)
        finally:
            self.in_flight -= 1


@pytest.fixture
def fake_fetcher_cls():
    return FakeFetcher


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Send test logs to stderr so stdout assertions only see CLI output."""
    configure_logging(log_level="DEBUG")
