"""Fetcher registry keyed by feed kind."""

from rssreader.models.feed import FeedKind
from rssreader.sources.base import Fetcher
from rssreader.sources.json_feed import JsonFeedFetcher
from rssreader.sources.parsehub import ParseHubFetcher
from rssreader.sources.xml_feed import XmlFeedFetcher


def create_fetchers() -> dict[FeedKind, Fetcher]:
    """Create the default fetcher for every feed kind."""
    return {
        FeedKind.XML: XmlFeedFetcher(),
        FeedKind.JSON: JsonFeedFetcher(),
        FeedKind.PARSEHUB: ParseHubFetcher(),
    }


def get_fetcher(fetchers: dict[FeedKind, Fetcher], kind: FeedKind) -> Fetcher:
    """Look up the fetcher for a kind.

    Raises:
        ValueError: If no fetcher is registered for the kind.
    """
    try:
        return fetchers[kind]
    except KeyError:
        supported = ", ".join(k.value for k in fetchers)
        raise ValueError(f"Unsupported feed kind: {kind}. Supported kinds: {supported}") from None
