"""Article title disambiguation.

The ``<title>`` tag usually carries the site name as well
(``"Post title | Site"``, ``"Site: Post title"``); this module works out
which part is the article's own title, falling back to the first
``<h1>`` for missing or garbled titles.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from articleparser.extractors.text import char_length, normalize_text, word_count

logger = logging.getLogger(__name__)

SEPARATORS: tuple[str, ...] = ("|", "-", "\\", "/", ">", "»")
HIERARCHICAL_SEPARATORS: tuple[str, ...] = ("\\", "/", ">", "»")

_MIN_TITLE_WORDS = 3
_MAX_PREFIX_WORDS = 5
_SHORT_TITLE_WORDS = 4
_MIN_TITLE_LENGTH = 15
_MAX_TITLE_LENGTH = 150


def find_separator(title: str, separators: tuple[str, ...] = SEPARATORS) -> str | None:
    """Return the first whitespace-delimited separator word in *title*."""
    for word in title.split():
        if word in separators:
            return word
    return None


def remove_separators(title: str, separators: tuple[str, ...] = SEPARATORS) -> str:
    return " ".join(word for word in title.split() if word not in separators)


def _split_on_separator(title: str, separator: str) -> str:
    words = title.split()
    positions = [i for i, word in enumerate(words) if word == separator]
    head = words[:positions[-1]]
    if len(head) < _MIN_TITLE_WORDS:
        return " ".join(words[positions[0] + 1:])
    return " ".join(head)


def _split_on_colon(title: str) -> str:
    tail = title[title.rindex(":") + 1:]
    if word_count(tail) < _MIN_TITLE_WORDS:
        return title[title.index(":") + 1:]
    if word_count(title[:title.index(":")]) > _MAX_PREFIX_WORDS:
        return title
    return tail


def _heading_matches(soup: BeautifulSoup, title: str) -> bool:
    return any(
        normalize_text(heading.get_text()) == title
        for heading in soup.find_all(["h1", "h2"])
    )


def resolve_title(soup: BeautifulSoup) -> str:
    """Return the article title for *soup*, or "" when there is none."""
    title_tag = soup.find("title")
    original = normalize_text(title_tag.get_text()) if title_tag else ""
    title = original
    had_hierarchical_separators = False

    separator = find_separator(original)
    if separator is not None:
        had_hierarchical_separators = find_separator(original, HIERARCHICAL_SEPARATORS) is not None
        title = _split_on_separator(original, separator)
        branch = "separator"
    elif ": " in original:
        if _heading_matches(soup, original):
            branch = "colon-heading"
        else:
            title = _split_on_colon(original)
            branch = "colon"
    elif not _MIN_TITLE_LENGTH <= char_length(original) <= _MAX_TITLE_LENGTH:
        h1 = soup.find("h1")
        if h1 is not None:
            title = normalize_text(h1.get_text())
        branch = "h1"
    else:
        branch = "plain"

    title = normalize_text(title)

    # A short result is only trusted when it came from a hierarchical title
    # and dropped exactly the separator word.
    current_words = word_count(title)
    if current_words <= _SHORT_TITLE_WORDS and (
        not had_hierarchical_separators
        or current_words != word_count(remove_separators(original)) - 1
    ):
        title = original
        branch += "+original"

    logger.debug("resolve_title: %r -> %r (%s)", original, title, branch)
    return title
