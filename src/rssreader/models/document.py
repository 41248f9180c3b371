"""Normalized feed document models."""

from dataclasses import dataclass

from pydantic import BaseModel, Field

from rssreader.exceptions import RssReaderError
from rssreader.models.feed import FeedDescriptor


class Item(BaseModel):
    """One entry of a feed.

    pub_date keeps the raw published string; it may be empty or unparsable.
    """

    title: str = ""
    link: str = ""
    pub_date: str = Field(default="", description="Raw publication date, RFC1123Z when present")


class Document(BaseModel):
    """Channel metadata and items of one fetched feed."""

    channel_title: str = ""
    channel_link: str = Field(default="", description="Always the originating feed location")
    items: list[Item] = Field(default_factory=list)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of fetching a single descriptor."""

    descriptor: FeedDescriptor
    document: Document | None = None
    error: RssReaderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
