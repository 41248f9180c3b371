"""Custom exceptions for rssreader.

Provides a structured exception hierarchy for fetch, decode and storage failures.
"""


class RssReaderError(Exception):
    """Base exception class for all rssreader errors."""

    pass


class NetworkError(RssReaderError):
    """Raised when an HTTP call fails (transport, status or timeout).

    Attributes:
        location: The feed location that failed.
    """

    def __init__(self, location: str, message: str):
        self.location = location
        super().__init__(f"Failed to fetch {location}: {message}")


class DecodeError(RssReaderError):
    """Raised when a response body is not valid JSON/XML or has an irregular shape.

    Attributes:
        location: The feed location with the malformed body.
    """

    def __init__(self, location: str, message: str):
        self.location = location
        super().__init__(f"Failed to decode {location}: {message}")


class SchemaError(RssReaderError):
    """Raised when a well-formed body lacks a required field.

    Attributes:
        location: The feed location.
        field: Name of the missing or mistyped field.
    """

    def __init__(self, location: str, field: str, message: str):
        self.location = location
        self.field = field
        super().__init__(f"Invalid {field!r} in {location}: {message}")


class FeedIndexError(RssReaderError, IndexError):
    """Raised when a feed index is outside the stored descriptor range.

    Attributes:
        index: The requested index.
        count: Number of stored descriptors.
    """

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Feed index {index} out of range (have {count} feeds)")


class StorageError(RssReaderError):
    """Raised when the feeds file cannot be created, read or appended to.

    Attributes:
        path: Path of the feeds file.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Feeds file {path}: {message}")
