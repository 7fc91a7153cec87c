"""Extract the title and numbered headings from an article's markdown."""

from __future__ import annotations

import re

from docbookmarks.anchors import make_anchor
from docbookmarks.numbering import SerialNumberer
from docbookmarks.schemas import Article, Heading

_TITLE_RE = re.compile(r"^[ \t]*# (.+?)[ \t]*\n\n", re.MULTILINE)
_HEADING_RE = re.compile(r"^(#{2,6})[ \t]+(.+?)[ \t]*\n\n", re.MULTILINE)
_FENCE_RE = re.compile(r"^[ \t]*(```|~~~).*?^[ \t]*\1[ \t]*$", re.MULTILINE | re.DOTALL)
_FENCE_PLACEHOLDER = "```"

TITLE_SERIAL_NUMBER = "0."


def parse_article(
    text: str | None,
    article_id: str,
    *,
    numberer: SerialNumberer | None = None,
) -> Article:
    """Parse raw article markdown into an :class:`Article`.

    ``text`` is None when the article could not be fetched; the result is
    then an article with no title and no headings. An empty document is
    parsed like any other and simply has no title.

    Args:
        text: Raw markdown of the article, or None.
        article_id: Identifier of the article (its file name without suffix).
        numberer: Numbering state for this article. A fresh one is used when
            omitted; never share one instance between articles.

    Returns:
        The parsed article. ``title`` is empty when no ``# Title`` line
        followed by a blank line exists.
    """
    if text is None:
        return Article(id=article_id)

    numberer = numberer or SerialNumberer()
    text = _strip_code_fences(text.replace("\r\n", "\n"))
    # Headings on the last line still count
    if not text.endswith("\n\n"):
        text = text.rstrip("\n") + "\n\n"

    title_match = _TITLE_RE.search(text)
    title = title_match.group(1) if title_match else ""

    headings: list[Heading] = []
    for hashes, heading_text in _HEADING_RE.findall(text):
        level = len(hashes)
        headings.append(
            Heading(
                level=level,
                text=heading_text,
                serial_number=numberer.next(level),
                anchor=make_anchor(heading_text),
            )
        )

    return Article(id=article_id, title=title, headings=headings)


def article_bookmarks(article: Article, docs_base_url: str, *, fallback_title: str = "") -> dict[str, str]:
    """Map heading labels of an article to their published URLs.

    The first entry is always ``"0. <title>"`` pointing at the article page
    itself; ``fallback_title`` is used when the article has no title.
    """
    page_url = f"{docs_base_url.rstrip('/')}/{article.id}"
    title = article.title or fallback_title
    bookmarks = {f"{TITLE_SERIAL_NUMBER} {title}": page_url}
    for heading in article.headings:
        bookmarks[heading.label] = page_url + heading.anchor
    return bookmarks


def _strip_code_fences(text: str) -> str:
    # Shell comments inside code samples look like headings. Each block
    # collapses to one non-blank line so surrounding lines keep their spacing.
    return _FENCE_RE.sub(_FENCE_PLACEHOLDER, text)
