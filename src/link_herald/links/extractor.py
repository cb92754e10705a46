"""Find candidate links in chat message text."""

from __future__ import annotations

import re

# Greedy: trailing punctuation and closing parentheses stay attached.
URL_REGEX = re.compile(r"(https?://\S+)")


def extract_links(text: str | None) -> list[str]:
    """Return every URL in ``text`` in order of appearance (duplicates kept)."""
    if not text:
        return []
    return URL_REGEX.findall(text)


__all__ = ["URL_REGEX", "extract_links"]
