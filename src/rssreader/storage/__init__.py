"""Storage package."""

from rssreader.storage.file_db import FileFeedStorage, format_line, parse_line

__all__ = [
    "FileFeedStorage",
    "format_line",
    "parse_line",
]
