"""Shared schemas for docbookmarks."""

from docbookmarks.schemas.articles import Article, Heading, IndexSection
from docbookmarks.schemas.result import BookmarkResult, BookmarkTree
from docbookmarks.schemas.source import DocsSource

__all__ = [
    "Article",
    "BookmarkResult",
    "BookmarkTree",
    "DocsSource",
    "Heading",
    "IndexSection",
]
