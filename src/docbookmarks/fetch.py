"""Content sources that supply raw markdown for the index and the articles."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from docbookmarks.exceptions import IndexNotAvailableError
from docbookmarks.http_utils import create_client, fetch_with_retries

logger = logging.getLogger(__name__)


class ContentSource(Protocol):
    """Anything that can return the raw text of a document path."""

    async def fetch(self, path: str) -> str:
        """Return the raw text for ``path`` or raise FetchError."""
        ...


class HttpContentSource:
    """Fetch raw markdown over HTTP relative to a base URL.

    The source can be used as an async context manager, in which case a
    single pooled client is shared by every request until exit. Used
    without the context manager, each fetch opens its own client.

    A 404 on ``index_path`` raises IndexNotAvailableError instead of the
    generic FetchError.
    """

    def __init__(
        self,
        raw_base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        index_path: str | None = None,
    ) -> None:
        self.raw_base_url = raw_base_url.rstrip("/")
        self.index_path = index_path
        self._client = client
        self._owns_client = False

    async def __aenter__(self) -> HttpContentSource:
        if self._client is None:
            self._client = create_client()
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    def url_for(self, path: str) -> str:
        """Join a document path onto the raw base URL."""
        return f"{self.raw_base_url}/{path.lstrip('/')}"

    async def fetch(self, path: str) -> str:
        url = self.url_for(path)
        logger.debug("Fetching %s", url)
        if self.index_path is not None and path == self.index_path:
            return await fetch_with_retries(
                url,
                client=self._client,
                on_404=IndexNotAvailableError,
                on_404_message=f"Table of contents not found at {url}",
            )
        return await fetch_with_retries(url, client=self._client)
