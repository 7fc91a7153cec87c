"""Build pipeline: table of contents -> articles -> numbered bookmark tree."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from docbookmarks.article_parser import parse_article
from docbookmarks.assembler import assemble_tree
from docbookmarks.config import DOCBOOKMARKS_ARTICLE_SUFFIX, DOCBOOKMARKS_MAX_CONCURRENCY
from docbookmarks.exceptions import FetchError, IndexNotAvailableError, MalformedDocumentError
from docbookmarks.fetch import ContentSource, HttpContentSource
from docbookmarks.numbering import SerialNumberer
from docbookmarks.schemas import Article, BookmarkResult, DocsSource, IndexSection
from docbookmarks.toc_parser import parse_table_of_contents

logger = logging.getLogger(__name__)


@dataclass
class BuildOptions:
    """Options for a bookmark build.

    Attributes:
        include_root: If True, prepend a link to the documentation home page.
        max_concurrency: Maximum number of article fetches in flight.
            Defaults to DOCBOOKMARKS_MAX_CONCURRENCY.
        article_suffix: Suffix appended to article ids to get their paths.
    """

    include_root: bool = True
    max_concurrency: int | None = None
    article_suffix: str = DOCBOOKMARKS_ARTICLE_SUFFIX


async def build_bookmarks(
    *,
    version: str | None = None,
    docs: DocsSource | None = None,
    source: ContentSource | None = None,
    options: BuildOptions | None = None,
) -> BookmarkResult:
    """Fetch the documentation and build its bookmark tree.

    Args:
        version: Documentation version used to build a DocsSource from the
            configured URL templates. Ignored when ``docs`` is given.
        docs: Explicit documentation location.
        source: Content source for raw markdown. Defaults to an
            HttpContentSource on ``docs.raw_base_url``.
        options: Build options. Uses defaults if None.

    Returns:
        The numbered tree together with warnings and skipped article ids.

    Raises:
        IndexNotAvailableError: If the table of contents cannot be fetched.
    """
    docs = docs or DocsSource.for_version(version)
    opts = options or BuildOptions()

    if source is not None:
        return await _build(docs, source, opts)

    async with HttpContentSource(docs.raw_base_url, index_path=docs.index_path) as http_source:
        return await _build(docs, http_source, opts)


async def _build(docs: DocsSource, source: ContentSource, opts: BuildOptions) -> BookmarkResult:
    logger.info("Building bookmarks for %s (version %s)", docs.docs_base_url, docs.version)
    warnings: list[str] = []
    skipped: list[str] = []

    try:
        index_text = await source.fetch(docs.index_path)
    except IndexNotAvailableError:
        raise
    except FetchError as exc:
        raise IndexNotAvailableError(
            f"Could not fetch table of contents {docs.index_path!r}: {exc}"
        ) from exc

    try:
        sections = parse_table_of_contents(index_text)
    except MalformedDocumentError as exc:
        _warn(warnings, f"{docs.index_path}: {exc}")
        sections = []

    articles = await _parse_articles(sections, source, opts, warnings, skipped)

    tree = assemble_tree(
        sections,
        articles,
        docs.docs_base_url,
        include_root=opts.include_root,
    )
    logger.info(
        "Built %d sections, %d articles (%d skipped)",
        len(sections),
        len(articles),
        len(skipped),
    )
    return BookmarkResult(tree=tree, warnings=warnings, skipped_articles=skipped)


async def _parse_articles(
    sections: list[IndexSection],
    source: ContentSource,
    opts: BuildOptions,
    warnings: list[str],
    skipped: list[str],
) -> dict[tuple[str, str], Article]:
    semaphore = asyncio.Semaphore(opts.max_concurrency or DOCBOOKMARKS_MAX_CONCURRENCY)

    async def fetch_article(article_id: str) -> str | FetchError:
        path = article_id + opts.article_suffix
        async with semaphore:
            try:
                return await source.fetch(path)
            except FetchError as exc:
                return exc

    keys = [
        (section.name, display_name, article_id)
        for section in sections
        for display_name, article_id in section.articles.items()
    ]
    results = await asyncio.gather(*(fetch_article(article_id) for _, _, article_id in keys))

    articles: dict[tuple[str, str], Article] = {}
    for (section_name, display_name, article_id), result in zip(keys, results):
        text: str | None = None
        if isinstance(result, FetchError):
            skipped.append(article_id)
            _warn(warnings, f"Skipping article {article_id!r}: {result}")
        else:
            text = result
        article = parse_article(text, article_id, numberer=SerialNumberer())
        if text is not None and not article.title:
            _warn(warnings, f"Article {article_id!r} has no '# Title' heading")
        articles[(section_name, display_name)] = article
    return articles


def _warn(warnings: list[str], message: str) -> None:
    logger.warning(message)
    warnings.append(message)
