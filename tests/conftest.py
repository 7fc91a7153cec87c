"""Test setup for docbookmarks."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from docbookmarks.exceptions import FetchError  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


class DictSource:
    """In-memory content source keyed by document path."""

    def __init__(self, documents: dict[str, str]) -> None:
        self.documents = documents
        self.requested: list[str] = []

    async def fetch(self, path: str) -> str:
        self.requested.append(path)
        try:
            return self.documents[path]
        except KeyError:
            raise FetchError(f"Document not found: {path}") from None


@pytest.fixture
def index_text() -> str:
    """A small table of contents with two sections and an API link."""
    return (
        "- ## Prologue\n"
        "    - [Release Notes](/docs/{{version}}/releases)\n"
        "    - [Upgrade Guide](/docs/{{version}}/upgrade)\n"
        "- ## Getting Started\n"
        "    - [Installation](/docs/{{version}}/installation)\n"
        "    - [Configuration](/docs/{{version}}/configuration)\n"
        "- ## API Documentation\n"
        "    - [API Documentation](/api/{{version}})\n"
    )


@pytest.fixture
def installation_text() -> str:
    """An article with nested headings and a fenced code sample."""
    return (
        "# Installation\n"
        "\n"
        "- [Meet Laravel](#meet-laravel)\n"
        "\n"
        "## Meet Laravel\n"
        "\n"
        "Laravel is a web application framework.\n"
        "\n"
        "### Why Laravel?\n"
        "\n"
        "Some reasons.\n"
        "\n"
        "## Creating a Project\n"
        "\n"
        "```shell\n"
        "# Install the installer\n"
        "\n"
        "composer global require laravel/installer\n"
        "```\n"
        "\n"
        "### Installing PHP & Composer\n"
        "\n"
        "Text.\n"
    )


@pytest.fixture
def dict_source_factory():
    """Build DictSource instances inside tests."""
    return DictSource
