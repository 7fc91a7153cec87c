"""Local configuration for docbookmarks."""

from __future__ import annotations

import os


DEFAULT_VERSION = "master"
DEFAULT_RAW_BASE_URL_TEMPLATE = "https://raw.githubusercontent.com/laravel/docs/{version}"
DEFAULT_DOCS_BASE_URL_TEMPLATE = "https://laravel.com/docs/{version}"
DEFAULT_INDEX_PATH = "documentation.md"
DEFAULT_ARTICLE_SUFFIX = ".md"
DEFAULT_ROOT_TITLE = "Documentation"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_MAX_CONCURRENCY = 8
DEFAULT_USER_AGENT = "docbookmarks/0.1 (+https://github.com/docbookmarks/docbookmarks)"

DOCBOOKMARKS_VERSION = os.getenv("DOCBOOKMARKS_VERSION", DEFAULT_VERSION)
# Both templates are formatted with the docs version (e.g. "master", "11.x").
DOCBOOKMARKS_RAW_BASE_URL_TEMPLATE = os.getenv(
    "DOCBOOKMARKS_RAW_BASE_URL_TEMPLATE", DEFAULT_RAW_BASE_URL_TEMPLATE
)
DOCBOOKMARKS_DOCS_BASE_URL_TEMPLATE = os.getenv(
    "DOCBOOKMARKS_DOCS_BASE_URL_TEMPLATE", DEFAULT_DOCS_BASE_URL_TEMPLATE
)
DOCBOOKMARKS_INDEX_PATH = os.getenv("DOCBOOKMARKS_INDEX_PATH", DEFAULT_INDEX_PATH)
DOCBOOKMARKS_ARTICLE_SUFFIX = os.getenv("DOCBOOKMARKS_ARTICLE_SUFFIX", DEFAULT_ARTICLE_SUFFIX)
DOCBOOKMARKS_ROOT_TITLE = os.getenv("DOCBOOKMARKS_ROOT_TITLE", DEFAULT_ROOT_TITLE)
DOCBOOKMARKS_FETCH_TIMEOUT_S = float(os.getenv("DOCBOOKMARKS_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
DOCBOOKMARKS_FETCH_MAX_RETRIES = int(os.getenv("DOCBOOKMARKS_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
DOCBOOKMARKS_FETCH_BACKOFF_S = float(os.getenv("DOCBOOKMARKS_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
DOCBOOKMARKS_MAX_CONCURRENCY = int(os.getenv("DOCBOOKMARKS_MAX_CONCURRENCY", str(DEFAULT_MAX_CONCURRENCY)))
DOCBOOKMARKS_USER_AGENT = os.getenv("DOCBOOKMARKS_USER_AGENT", DEFAULT_USER_AGENT)
