"""Parse the table of contents document into sections and article ids."""

from __future__ import annotations

import logging
import re

from docbookmarks.exceptions import MalformedDocumentError
from docbookmarks.schemas import IndexSection

logger = logging.getLogger(__name__)

_SECTION_RE = re.compile(r"^[ \t]*- ## (.+?)[ \t]*$", re.MULTILINE)
_LINK_RE = re.compile(r"\[(.+?)\]\((.+?)\)")
_PLACEHOLDER_RE = re.compile(r"^\{\{.*\}\}$")
_EXTENSION_RE = re.compile(r"\.[A-Za-z]+$")


def parse_table_of_contents(text: str) -> list[IndexSection]:
    """Split the index document into sections and their linked articles.

    Sections are introduced by ``- ## <name>`` lines. Each link found before
    the next section line becomes an article of that section, keyed by its
    display name. Links whose last path segment is a ``{{...}}`` placeholder
    (API reference pages) are skipped.

    Raises:
        MalformedDocumentError: If the document has no section lines.
    """
    text = text.replace("\r\n", "\n")
    matches = list(_SECTION_RE.finditer(text))
    if not matches:
        raise MalformedDocumentError("No '- ## <section>' lines found in table of contents")

    sections: dict[str, IndexSection] = {}
    for index, match in enumerate(matches):
        name = match.group(1)
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        block = text[match.end() : end]

        section = sections.setdefault(name, IndexSection(name=name))
        for label, path in _LINK_RE.findall(block):
            article_id = article_id_from_path(path)
            if article_id is None:
                logger.debug("Skipping link without concrete article: %s -> %s", label, path)
                continue
            section.articles[label] = article_id

    return list(sections.values())


def article_id_from_path(path: str) -> str | None:
    """Return the article id for a link path, or None for non-article links.

    >>> article_id_from_path("/docs/{{version}}/installation")
    'installation'
    >>> article_id_from_path("/api/{{version}}") is None
    True
    """
    path = re.split(r"[#?]", path.strip(), maxsplit=1)[0]
    segment = _EXTENSION_RE.sub("", path.rsplit("/", 1)[-1])
    if not segment or _PLACEHOLDER_RE.match(segment):
        return None
    return segment
