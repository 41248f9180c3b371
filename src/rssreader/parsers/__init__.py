"""Parsers package."""

from rssreader.parsers.collections import flatten_collections
from rssreader.parsers.rss_parser import RssParser, parse_rss_at_url

__all__ = [
    "RssParser",
    "parse_rss_at_url",
    "flatten_collections",
]
