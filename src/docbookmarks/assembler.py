"""Assemble parsed sections and articles into a numbered bookmark tree."""

from __future__ import annotations

from collections.abc import Mapping

from docbookmarks.article_parser import article_bookmarks
from docbookmarks.config import DOCBOOKMARKS_ROOT_TITLE
from docbookmarks.schemas import Article, BookmarkTree, IndexSection


def assemble_tree(
    sections: list[IndexSection],
    articles: Mapping[tuple[str, str], Article],
    docs_base_url: str,
    *,
    include_root: bool = True,
    root_title: str = DOCBOOKMARKS_ROOT_TITLE,
) -> BookmarkTree:
    """Build the numbered section -> article -> heading -> URL tree.

    Args:
        sections: Sections from the table of contents, in order.
        articles: Parsed articles keyed by ``(section name, display name)``.
            Missing entries produce an article with only its ``0.`` link.
        docs_base_url: Base URL of the published documentation.
        include_root: Prepend a ``root_title`` link to ``docs_base_url``.
        root_title: Label of the root link.

    Returns:
        The tree after :func:`number_tree` has been applied.
    """
    tree: BookmarkTree = {}
    if include_root:
        tree[root_title] = docs_base_url

    for section in sections:
        section_tree: dict[str, dict[str, str]] = {}
        for display_name, article_id in section.articles.items():
            article = articles.get((section.name, display_name)) or Article(id=article_id)
            section_tree[display_name] = article_bookmarks(
                article, docs_base_url, fallback_title=display_name
            )
        tree[section.name] = section_tree

    return number_tree(tree)


def number_tree(tree: BookmarkTree) -> BookmarkTree:
    """Prefix root keys with 0-based and article keys with 1-based numbers.

    >>> number_tree({"Docs": "https://x", "Basics": {"Routing": {}, "Views": {}}})
    {'0. Docs': 'https://x', '1. Basics': {'1. Routing': {}, '2. Views': {}}}
    """
    numbered: BookmarkTree = {}
    for index, (section_name, value) in enumerate(tree.items()):
        if isinstance(value, Mapping):
            value = {
                f"{position}. {article_name}": headings
                for position, (article_name, headings) in enumerate(value.items(), start=1)
            }
        numbered[f"{index}. {section_name}"] = value
    return numbered
