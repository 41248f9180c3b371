"""Sources package: one fetcher per feed kind."""

from rssreader.sources.base import Fetcher
from rssreader.sources.factory import create_fetchers, get_fetcher
from rssreader.sources.json_feed import JsonFeedFetcher
from rssreader.sources.parsehub import ParseHubFetcher
from rssreader.sources.xml_feed import XmlFeedFetcher

__all__ = [
    "Fetcher",
    "XmlFeedFetcher",
    "JsonFeedFetcher",
    "ParseHubFetcher",
    "create_fetchers",
    "get_fetcher",
]
