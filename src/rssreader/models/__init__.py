"""Models package."""

from rssreader.models.document import Document, FetchResult, Item
from rssreader.models.feed import FeedDescriptor, FeedKind

__all__ = [
    "FeedKind",
    "FeedDescriptor",
    "Item",
    "Document",
    "FetchResult",
]
