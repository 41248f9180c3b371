"""Feed descriptor models."""

from enum import Enum

from pydantic import BaseModel, Field


class FeedKind(str, Enum):
    """Wire format of a stored feed."""

    XML = "xml"
    JSON = "json"
    PARSEHUB = "parsehub"


class FeedDescriptor(BaseModel):
    """A stored feed location plus its format kind."""

    location: str = Field(..., description="Feed URL")
    kind: FeedKind = Field(default=FeedKind.XML, description="Format used to fetch the feed")

    model_config = {"frozen": True}
