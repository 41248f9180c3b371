"""ParseHub project feed fetcher.

A ParseHub project URL answers with the project metadata; the scraped
data of its last ready run lives under ``/last_ready_run/data``.
"""

import httpx
import structlog

from rssreader.exceptions import DecodeError, SchemaError
from rssreader.models.document import Document
from rssreader.models.feed import FeedDescriptor
from rssreader.parsers.collections import flatten_collections
from rssreader.sources.json_feed import host_title
from rssreader.utils.http_client import get_json

logger = structlog.get_logger()

DATA_PATH_SUFFIX = "/last_ready_run/data"


def data_url(location: str) -> httpx.URL:
    """Build the last-run data URL, keeping the query string (api_key)."""
    url = httpx.URL(location)
    return url.copy_with(path=url.path + DATA_PATH_SUFFIX)


class ParseHubFetcher:
    """Fetches a ParseHub project's title and last run data.

    Both requests must succeed; no partial Document is returned.
    """

    async def fetch(self, descriptor: FeedDescriptor, client: httpx.AsyncClient) -> Document:
        location = descriptor.location
        document = Document(channel_title=host_title(location), channel_link=location)

        project = await get_json(client, location, location)
        if not isinstance(project, dict):
            raise DecodeError(location, "Expected a project object")

        title = project.get("title")
        if not isinstance(title, str):
            raise SchemaError(location, "title", "missing or not a string")
        document.channel_title = title

        payload = await get_json(client, data_url(location), location)
        document.items = flatten_collections(payload, location)

        logger.debug("ParseHub project fetched", location=location, items=len(document.items))
        return document
