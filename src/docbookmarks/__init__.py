"""docbookmarks: turn a markdown manual into a numbered bookmark tree."""

from docbookmarks.anchors import make_anchor
from docbookmarks.article_parser import article_bookmarks, parse_article
from docbookmarks.assembler import assemble_tree, number_tree
from docbookmarks.builder import BuildOptions, build_bookmarks
from docbookmarks.exceptions import (
    DocBookmarksError,
    FetchError,
    IndexNotAvailableError,
    MalformedDocumentError,
    ParseError,
)
from docbookmarks.fetch import ContentSource, HttpContentSource
from docbookmarks.numbering import SerialNumberer
from docbookmarks.schemas import (
    Article,
    BookmarkResult,
    BookmarkTree,
    DocsSource,
    Heading,
    IndexSection,
)
from docbookmarks.toc_parser import parse_table_of_contents

__all__ = [
    "Article",
    "BookmarkResult",
    "BookmarkTree",
    "BuildOptions",
    "ContentSource",
    "DocBookmarksError",
    "DocsSource",
    "FetchError",
    "Heading",
    "HttpContentSource",
    "IndexNotAvailableError",
    "IndexSection",
    "MalformedDocumentError",
    "ParseError",
    "SerialNumberer",
    "article_bookmarks",
    "assemble_tree",
    "build_bookmarks",
    "make_anchor",
    "number_tree",
    "parse_article",
    "parse_table_of_contents",
]
