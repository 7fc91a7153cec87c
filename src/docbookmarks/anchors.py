"""Heading text to URL fragment conversion."""

from __future__ import annotations

import re

_DISALLOWED_RE = re.compile(r"[^ \-0-9a-z]")


def make_anchor(text: str) -> str:
    """Turn heading text into a ``#fragment`` matching the published pages.

    Characters outside ``a-z``, digits, space and hyphen are dropped, so
    accented and non-Latin letters disappear rather than being transliterated.

    >>> make_anchor("Server Requirements")
    '#server-requirements'
    >>> make_anchor("Using `env()` Helpers")
    '#using-env-helpers'
    """
    slug = _DISALLOWED_RE.sub("", text.lower())
    return "#" + slug.strip().replace(" ", "-")
