"""Tests for the per-kind feed fetchers."""

import httpx
import pytest

from rssreader.exceptions import DecodeError, NetworkError, SchemaError
from rssreader.models.document import Document
from rssreader.models.feed import FeedDescriptor, FeedKind
from rssreader.parsers.collections import flatten_collections
from rssreader.sources import JsonFeedFetcher, ParseHubFetcher, XmlFeedFetcher
from rssreader.sources.factory import create_fetchers, get_fetcher
from rssreader.sources.parsehub import data_url

PROJECT_URL = "https://www.parsehub.com/api/v2/projects/tok123?api_key=secret"
PROJECT_PATH = "/api/v2/projects/tok123"


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# XML


@pytest.mark.asyncio
async def test_xml_fetch_parses_items_and_overwrites_link(sample_rss_content):
    location = "https://feeds.example.com/rss"

    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == location
        return httpx.Response(200, text=sample_rss_content)

    async with _client(handler) as client:
        doc = await XmlFeedFetcher().fetch(FeedDescriptor(location=location), client)

    assert doc.channel_link == location
    assert doc.channel_title.strip() == "Example Channel"
    assert [item.title for item in doc.items] == ["First post", "Third post", "Second post"]
    assert doc.items[0].link == "https://example.com/post-1"
    assert doc.items[0].pub_date == "Mon, 01 Jan 2024 00:00:00 +0000"


@pytest.mark.asyncio
async def test_xml_fetch_uses_injected_parser():
    async def parse(url, client):
        return Document(channel_title="T", channel_link="https://elsewhere.example.com/")

    async with _client(lambda r: httpx.Response(500)) as client:
        doc = await XmlFeedFetcher(parse=parse).fetch(
            FeedDescriptor(location="https://a.example.com/feed"), client
        )

    assert doc.channel_link == "https://a.example.com/feed"


@pytest.mark.asyncio
async def test_xml_fetch_http_error_is_network_error():
    async with _client(lambda r: httpx.Response(404)) as client:
        with pytest.raises(NetworkError, match="HTTP 404"):
            await XmlFeedFetcher().fetch(FeedDescriptor(location="https://x.example.com/"), client)


@pytest.mark.asyncio
async def test_xml_fetch_non_feed_body_is_decode_error():
    def handler(request):
        return httpx.Response(200, text="this is plainly not a feed")

    async with _client(handler) as client:
        with pytest.raises(DecodeError):
            await XmlFeedFetcher().fetch(FeedDescriptor(location="https://x.example.com/"), client)


@pytest.mark.asyncio
async def test_xml_fetch_html_page_is_decode_error():
    html = "<html><head><title>Login</title></head><body>nope</body></html>"

    async with _client(lambda r: httpx.Response(200, text=html)) as client:
        with pytest.raises(DecodeError):
            await XmlFeedFetcher().fetch(FeedDescriptor(location="https://x.example.com/"), client)


@pytest.mark.asyncio
async def test_xml_fetch_empty_channel_is_a_feed():
    rss = (
        '<?xml version="1.0"?><rss version="2.0"><channel>'
        "<title>Quiet</title><link>https://q.example.com/</link></channel></rss>"
    )

    async with _client(lambda r: httpx.Response(200, text=rss)) as client:
        doc = await XmlFeedFetcher().fetch(
            FeedDescriptor(location="https://q.example.com/rss"), client
        )

    assert doc.channel_title == "Quiet"
    assert doc.items == []


# JSON


@pytest.mark.asyncio
async def test_json_fetch_flattens_collections(sample_collections):
    location = "https://api.example.com:8080/items.json"

    async with _client(lambda r: httpx.Response(200, json=sample_collections)) as client:
        doc = await JsonFeedFetcher().fetch(
            FeedDescriptor(location=location, kind=FeedKind.JSON), client
        )

    assert doc.channel_title == "api.example.com:8080"
    assert doc.channel_link == location
    assert {item.title for item in doc.items} == {"N1", "N2"}
    assert {item.link for item in doc.items} == {"U1", "U2"}
    assert all(item.pub_date == "" for item in doc.items)


@pytest.mark.asyncio
async def test_json_fetch_missing_keys_yield_empty_strings():
    payload = {"c": [{"name": "only name"}, {"url": "only url"}, {}]}

    async with _client(lambda r: httpx.Response(200, json=payload)) as client:
        doc = await JsonFeedFetcher().fetch(
            FeedDescriptor(location="https://api.example.com/", kind=FeedKind.JSON), client
        )

    assert [(i.title, i.link) for i in doc.items] == [
        ("only name", ""),
        ("", "only url"),
        ("", ""),
    ]


@pytest.mark.asyncio
async def test_json_fetch_invalid_body_is_decode_error():
    async with _client(lambda r: httpx.Response(200, text="{not json")) as client:
        with pytest.raises(DecodeError):
            await JsonFeedFetcher().fetch(
                FeedDescriptor(location="https://api.example.com/", kind=FeedKind.JSON), client
            )


@pytest.mark.asyncio
async def test_json_fetch_transport_failure_is_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(NetworkError, match="Request failed"):
            await JsonFeedFetcher().fetch(
                FeedDescriptor(location="https://api.example.com/", kind=FeedKind.JSON), client
            )


@pytest.mark.parametrize(
    "payload",
    [
        [{"name": "N", "url": "U"}],
        {"a": {"name": "N"}},
        {"a": [{"name": {"nested": "deeper"}}]},
        {"a": [{"name": 1}]},
    ],
)
def test_flatten_rejects_irregular_shapes(payload):
    with pytest.raises(DecodeError):
        flatten_collections(payload, "https://api.example.com/")


# ParseHub


def _parsehub_handler(project: object, data: object, seen: list[httpx.URL] | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request.url)
        if request.url.path == PROJECT_PATH:
            return httpx.Response(200, json=project)
        if request.url.path == PROJECT_PATH + "/last_ready_run/data":
            return httpx.Response(200, json=data)
        return httpx.Response(404)

    return handler


def test_data_url_keeps_query():
    url = data_url(PROJECT_URL)
    assert url.path == PROJECT_PATH + "/last_ready_run/data"
    assert url.params["api_key"] == "secret"


@pytest.mark.asyncio
async def test_parsehub_fetch_uses_project_title(sample_collections):
    seen: list[httpx.URL] = []
    project = {"title": "My Project", "token": "tok123"}
    handler = _parsehub_handler(project, sample_collections, seen)

    async with _client(handler) as client:
        doc = await ParseHubFetcher().fetch(
            FeedDescriptor(location=PROJECT_URL, kind=FeedKind.PARSEHUB), client
        )

    assert doc.channel_title == "My Project"
    assert doc.channel_link == PROJECT_URL
    assert {item.title for item in doc.items} == {"N1", "N2"}
    assert [url.path for url in seen] == [PROJECT_PATH, PROJECT_PATH + "/last_ready_run/data"]
    assert all(url.params["api_key"] == "secret" for url in seen)


@pytest.mark.asyncio
@pytest.mark.parametrize("project", [{"token": "tok123"}, {"title": 42}, {"title": None}])
async def test_parsehub_fetch_without_title_is_schema_error(project, sample_collections):
    seen: list[httpx.URL] = []
    handler = _parsehub_handler(project, sample_collections, seen)

    async with _client(handler) as client:
        with pytest.raises(SchemaError) as exc_info:
            await ParseHubFetcher().fetch(
                FeedDescriptor(location=PROJECT_URL, kind=FeedKind.PARSEHUB), client
            )

    assert exc_info.value.field == "title"
    assert len(seen) == 1


@pytest.mark.asyncio
async def test_parsehub_fetch_non_object_project_is_decode_error(sample_collections):
    handler = _parsehub_handler(["not", "an", "object"], sample_collections)

    async with _client(handler) as client:
        with pytest.raises(DecodeError):
            await ParseHubFetcher().fetch(
                FeedDescriptor(location=PROJECT_URL, kind=FeedKind.PARSEHUB), client
            )


@pytest.mark.asyncio
async def test_parsehub_fetch_data_failure_aborts():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == PROJECT_PATH:
            return httpx.Response(200, json={"title": "My Project"})
        return httpx.Response(503)

    async with _client(handler) as client:
        with pytest.raises(NetworkError, match="HTTP 503"):
            await ParseHubFetcher().fetch(
                FeedDescriptor(location=PROJECT_URL, kind=FeedKind.PARSEHUB), client
            )


# Registry


def test_create_fetchers_covers_every_kind():
    fetchers = create_fetchers()
    assert isinstance(get_fetcher(fetchers, FeedKind.XML), XmlFeedFetcher)
    assert isinstance(get_fetcher(fetchers, FeedKind.JSON), JsonFeedFetcher)
    assert isinstance(get_fetcher(fetchers, FeedKind.PARSEHUB), ParseHubFetcher)


def test_get_fetcher_unknown_kind():
    with pytest.raises(ValueError, match="Unsupported feed kind"):
        get_fetcher({FeedKind.XML: XmlFeedFetcher()}, FeedKind.JSON)
