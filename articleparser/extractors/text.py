"""Whitespace and entity normalization shared by every extraction stage."""

from __future__ import annotations

import html
import re

_WHITESPACE_RE = re.compile(r"\s+")

# ASCII comma and the full-width comma used by CJK text
_COMMAS: tuple[str, ...] = (",", "，")


def normalize_text(text: str | None, *, unescape: bool = False) -> str:
    """Collapse whitespace runs to one space and trim both ends.

    With *unescape* set, HTML entities left in *text* are decoded first
    (BeautifulSoup already decodes entities in parsed text nodes).
    """
    if not text:
        return ""
    if unescape:
        text = html.unescape(text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def char_length(text: str) -> int:
    """Length of *text* in Unicode code points."""
    return len(text)


def count_commas(text: str) -> int:
    return sum(text.count(comma) for comma in _COMMAS)


def word_count(text: str) -> int:
    return len(text.split())
