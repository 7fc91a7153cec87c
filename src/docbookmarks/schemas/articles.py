"""Index and article structure models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class IndexSection(BaseModel):
    """A named group of articles from the table of contents.

    ``articles`` maps display name to article id in first-seen order.
    """

    name: str
    articles: dict[str, str] = Field(default_factory=dict)


class Heading(BaseModel):
    """A level 2-6 heading inside an article."""

    level: int = Field(..., ge=2, le=6)
    text: str
    serial_number: str
    anchor: str

    @property
    def label(self) -> str:
        """Bookmark label: serial number followed by the heading text."""
        return f"{self.serial_number} {self.text}"


class Article(BaseModel):
    """Parsed article: its title heading and numbered subheadings."""

    id: str
    title: str = ""
    headings: list[Heading] = Field(default_factory=list)
