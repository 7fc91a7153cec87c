"""Build output model."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

# "<n>. <section>" -> URL for standalone links, or
# "<n>. <section>" -> {"<n>. <article>" -> {"<serial> <heading>" -> URL}}.
BookmarkTree = dict[str, Union[str, dict[str, dict[str, str]]]]


class BookmarkResult(BaseModel):
    """Final bookmark tree plus everything that was skipped along the way."""

    tree: BookmarkTree
    warnings: list[str] = Field(default_factory=list)
    skipped_articles: list[str] = Field(default_factory=list)
