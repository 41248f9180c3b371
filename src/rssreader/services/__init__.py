"""Services package."""

from rssreader.services.feed_service import FeedService, format_feed_titles, format_items
from rssreader.services.fetch_coordinator import FetchCoordinator
from rssreader.services.ordering import parse_pub_date, sort_items

__all__ = [
    "FeedService",
    "FetchCoordinator",
    "format_feed_titles",
    "format_items",
    "parse_pub_date",
    "sort_items",
]
