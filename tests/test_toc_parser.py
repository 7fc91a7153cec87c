"""Tests for table of contents parsing."""

from __future__ import annotations

import pytest

from docbookmarks.exceptions import MalformedDocumentError
from docbookmarks.toc_parser import article_id_from_path, parse_table_of_contents


class TestParseTableOfContents:
    """Tests for parse_table_of_contents function."""

    def test_sections_in_source_order(self, index_text: str) -> None:
        """Every section line yields one section, in order."""
        sections = parse_table_of_contents(index_text)
        assert [section.name for section in sections] == [
            "Prologue",
            "Getting Started",
            "API Documentation",
        ]

    def test_articles_in_source_order(self, index_text: str) -> None:
        """Articles map display names to ids in first-seen order."""
        sections = parse_table_of_contents(index_text)
        assert list(sections[0].articles.items()) == [
            ("Release Notes", "releases"),
            ("Upgrade Guide", "upgrade"),
        ]
        assert list(sections[1].articles.items()) == [
            ("Installation", "installation"),
            ("Configuration", "configuration"),
        ]

    def test_placeholder_links_are_skipped(self, index_text: str) -> None:
        """A {{version}} final segment is an API link, not an article."""
        sections = parse_table_of_contents(index_text)
        assert sections[2].articles == {}
        for section in sections:
            assert all("{{" not in article_id for article_id in section.articles.values())

    def test_placeholder_with_extension_is_skipped(self) -> None:
        """A placeholder stays a placeholder after its extension is removed."""
        sections = parse_table_of_contents("- ## API\n- [API](/api/{{version}}.html)\n")
        assert sections[0].articles == {}

    def test_single_section_scenario(self) -> None:
        """The minimal index from the docs yields one article."""
        text = "- ## Getting Started\n\n- [Installation](/docs/{{version}}/installation)\n"
        sections = parse_table_of_contents(text)
        assert len(sections) == 1
        assert sections[0].name == "Getting Started"
        assert sections[0].articles == {"Installation": "installation"}

    def test_repeated_article_name_overwrites_in_place(self) -> None:
        """The later id wins but the first position is kept."""
        text = (
            "- ## Basics\n"
            "- [Routing](/docs/routing)\n"
            "- [Views](/docs/views)\n"
            "- [Routing](/docs/routing-v2)\n"
        )
        sections = parse_table_of_contents(text)
        assert list(sections[0].articles.items()) == [
            ("Routing", "routing-v2"),
            ("Views", "views"),
        ]

    def test_repeated_section_name_merges(self) -> None:
        """A second block with the same name adds to the first section."""
        text = (
            "- ## Basics\n- [Routing](/docs/routing)\n"
            "- ## Security\n- [Hashing](/docs/hashing)\n"
            "- ## Basics\n- [Views](/docs/views)\n"
        )
        sections = parse_table_of_contents(text)
        assert [section.name for section in sections] == ["Basics", "Security"]
        assert list(sections[0].articles) == ["Routing", "Views"]

    def test_text_before_first_section_is_ignored(self) -> None:
        """Links above the first section line belong to no section."""
        text = "[Home](/docs/home)\n\n- ## Basics\n- [Routing](/docs/routing)\n"
        sections = parse_table_of_contents(text)
        assert sections[0].articles == {"Routing": "routing"}

    def test_crlf_line_endings(self) -> None:
        """Windows line endings do not leak into section names."""
        text = "- ## Basics\r\n- [Routing](/docs/routing)\r\n"
        sections = parse_table_of_contents(text)
        assert sections[0].name == "Basics"

    def test_empty_section_is_kept(self) -> None:
        """A section without links still counts."""
        text = "- ## Empty\n\n- ## Basics\n- [Routing](/docs/routing)\n"
        sections = parse_table_of_contents(text)
        assert [section.name for section in sections] == ["Empty", "Basics"]
        assert sections[0].articles == {}

    def test_no_sections_raises(self) -> None:
        """An index without section lines is malformed."""
        with pytest.raises(MalformedDocumentError):
            parse_table_of_contents("# Docs\n\n- [Routing](/docs/routing)\n")


class TestArticleIdFromPath:
    """Tests for article_id_from_path function."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/docs/{{version}}/installation", "installation"),
            ("installation.md", "installation"),
            ("/docs/master/eloquent-relationships", "eloquent-relationships"),
            ("/docs/{{version}}/routing#basic-routing", "routing"),
            ("/docs/{{version}}/routing?tab=1", "routing"),
        ],
    )
    def test_extracts_last_segment(self, path: str, expected: str) -> None:
        """Takes the last path segment without extension or fragment."""
        assert article_id_from_path(path) == expected

    @pytest.mark.parametrize("path", ["/api/{{version}}", "/api/{{version}}.html", "/docs/{{ version }}", "/docs/", ""])
    def test_non_articles(self, path: str) -> None:
        """Placeholders and empty segments are not articles."""
        assert article_id_from_path(path) is None
