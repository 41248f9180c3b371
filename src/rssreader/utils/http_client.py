"""HTTP client utilities.

Provides a configured HTTP client and a JSON GET helper that translates
httpx failures into the rssreader error taxonomy.
"""

from typing import Any

import httpx

from rssreader.exceptions import DecodeError, NetworkError


def create_http_client(
    timeout: float = 30,
    user_agent: str = "rssreader/1.0",
    follow_redirects: bool = True,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        follow_redirects: Whether to follow redirects.

    Returns:
        Configured httpx.AsyncClient.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": user_agent},
        follow_redirects=follow_redirects,
    )


async def get(client: httpx.AsyncClient, url: str | httpx.URL, location: str) -> httpx.Response:
    """GET a URL, raising NetworkError on transport failure or non-2xx status.

    Args:
        client: HTTP client to send the request with.
        url: URL to fetch.
        location: Feed location reported in errors.

    Raises:
        NetworkError: On request failure.
    """
    try:
        response = await client.get(url)
        response.raise_for_status()
        return response
    except httpx.TimeoutException as e:
        raise NetworkError(location, f"Request timed out: {e}") from e
    except httpx.HTTPStatusError as e:
        raise NetworkError(location, f"HTTP {e.response.status_code}") from e
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise NetworkError(location, f"Request failed: {e}") from e


async def get_json(client: httpx.AsyncClient, url: str | httpx.URL, location: str) -> Any:
    """GET a URL and decode its body as JSON.

    Raises:
        NetworkError: On request failure.
        DecodeError: When the body is not valid JSON.
    """
    response = await get(client, url, location)
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(location, f"Invalid JSON body: {e}") from e
