"""Documentation source model."""

from __future__ import annotations

from pydantic import BaseModel

from docbookmarks.config import (
    DOCBOOKMARKS_DOCS_BASE_URL_TEMPLATE,
    DOCBOOKMARKS_INDEX_PATH,
    DOCBOOKMARKS_RAW_BASE_URL_TEMPLATE,
    DOCBOOKMARKS_VERSION,
)


class DocsSource(BaseModel):
    """Where a given documentation version lives.

    Attributes:
        version: Documentation version identifier (e.g., "master", "11.x").
        raw_base_url: Base URL of the raw markdown sources.
        docs_base_url: Base URL of the published documentation pages.
        index_path: Path of the table of contents, relative to raw_base_url.
    """

    version: str
    raw_base_url: str
    docs_base_url: str
    index_path: str = DOCBOOKMARKS_INDEX_PATH

    @classmethod
    def for_version(cls, version: str | None = None) -> DocsSource:
        """Build a source from the configured URL templates."""
        version = version or DOCBOOKMARKS_VERSION
        return cls(
            version=version,
            raw_base_url=DOCBOOKMARKS_RAW_BASE_URL_TEMPLATE.format(version=version).rstrip("/"),
            docs_base_url=DOCBOOKMARKS_DOCS_BASE_URL_TEMPLATE.format(version=version).rstrip("/"),
        )
