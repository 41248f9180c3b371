"""Utils package."""

from rssreader.utils.http_client import create_http_client, get_json
from rssreader.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "create_http_client",
    "get_json",
]
