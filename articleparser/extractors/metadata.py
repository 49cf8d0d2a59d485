"""Deterministic metadata extraction from ``<meta>`` tags.

Priority chain per field (first non-empty wins):
    author  <- first meta whose name/property mentions "author"
    image   <- og:image -> twitter:image
    excerpt <- description -> og:description -> twitter:description
    title   <- resolved <title> -> og:title -> twitter:title
"""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup, Tag

from articleparser.extractors.title import resolve_title

_IMAGE_KEYS: tuple[str, ...] = ("og:image", "twitter:image")
_EXCERPT_KEYS: tuple[str, ...] = ("description", "og:description", "twitter:description")
_TITLE_KEYS: tuple[str, ...] = ("og:title", "twitter:title")
_WANTED_KEYS: frozenset[str] = frozenset(_IMAGE_KEYS + _EXCERPT_KEYS + _TITLE_KEYS)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _safe_str(val: Any, default: str = "") -> str:
    """Safely convert a BeautifulSoup attribute value (str | list | None) to str."""
    if val is None:
        return default
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def _first(mapping: dict[str, str], keys: tuple[str, ...]) -> str:
    for key in keys:
        if mapping.get(key):
            return mapping[key]
    return ""


def _absolute_image(url: str) -> str:
    if url.startswith("//"):
        return "http:" + url
    return url


def _scan_meta(soup: BeautifulSoup) -> tuple[str, dict[str, str]]:
    """Return (author, {meta key: content}) keeping the first value per key."""
    author = ""
    found: dict[str, str] = {}

    for tag in soup.find_all("meta"):
        if not isinstance(tag, Tag):
            continue
        name = _safe_str(tag.get("name")).strip().lower()
        prop = _safe_str(tag.get("property")).strip().lower()
        content = _safe_str(tag.get("content")).strip()
        if not content:
            continue

        if "author" in name + prop:
            if not author:
                author = content
            continue

        for key in (prop, name):
            if key in _WANTED_KEYS and key not in found:
                found[key] = content

    return author, found


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_metadata(soup: BeautifulSoup) -> dict:
    """Extract title, image, excerpt and author from the parsed page.

    Returns a dict with keys: title, image, excerpt, author.
    """
    author, found = _scan_meta(soup)

    title = resolve_title(soup) or _first(found, _TITLE_KEYS)

    return {
        "title": title,
        "image": _absolute_image(_first(found, _IMAGE_KEYS)),
        "excerpt": _first(found, _EXCERPT_KEYS),
        "author": author,
    }
