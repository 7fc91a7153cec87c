"""HTTP utilities for fetching raw documents with retry logic and connection pooling."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from docbookmarks.config import (
    DOCBOOKMARKS_FETCH_BACKOFF_S,
    DOCBOOKMARKS_FETCH_MAX_RETRIES,
    DOCBOOKMARKS_FETCH_TIMEOUT_S,
    DOCBOOKMARKS_USER_AGENT,
)
from docbookmarks.exceptions import FetchError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def create_client() -> httpx.AsyncClient:
    """Create an AsyncClient with the default timeout, headers and redirect policy."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(DOCBOOKMARKS_FETCH_TIMEOUT_S),
        headers={"User-Agent": DOCBOOKMARKS_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    )


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """Fetch text content from a URL with retry logic for transient failures.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        on_404: Custom exception class to raise on 404. Defaults to FetchError.
        on_404_message: Custom error message for 404 responses. If None,
            a generic message is used.

    Returns:
        The fetched content as a string.

    Raises:
        FetchError (or custom on_404 exception): If the fetch fails after all
            retries or returns 404.
    """
    last_exc: Exception | None = None
    not_found_exc_class = on_404 or FetchError

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        nonlocal last_exc

        for attempt in range(DOCBOOKMARKS_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    message = on_404_message or f"Document not found at {url}"
                    raise not_found_exc_class(message)

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc
            except not_found_exc_class:
                raise

            if attempt < DOCBOOKMARKS_FETCH_MAX_RETRIES:
                backoff = DOCBOOKMARKS_FETCH_BACKOFF_S * (2**attempt)
                await asyncio.sleep(backoff)

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with create_client() as new_client:
        return await do_fetch(new_client)
