"""Deterministic heuristics for scoring content candidates."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from articleparser.extractors.patterns import DEFAULT_PATTERNS, Patterns
from articleparser.extractors.text import char_length, normalize_text

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CLASS_WEIGHT = 25

_TAG_SCORES: dict[str, float] = {
    "article": 10,
    "section": 8,
    "div": 5,
    **dict.fromkeys(("pre", "blockquote", "td"), 3),
    **dict.fromkeys(("form", "ol", "ul", "dl", "dd", "dt", "li", "address"), -3),
    **dict.fromkeys(("th", "h1", "h2", "h3", "h4", "h5", "h6"), -5),
}


def attr_text(tag: Tag, name: str) -> str | None:
    """Return attribute *name* as a string (multi-valued ``class`` joined), or None."""
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(str(v) for v in value)
    return str(value)


def tag_score(tag: Tag) -> float:
    """Base score for the element type alone."""
    return _TAG_SCORES.get(tag.name or "", 0)


def node_ancestors(tag: Tag, max_depth: int) -> list[Tag]:
    """Return up to *max_depth* element ancestors, nearest first."""
    ancestors: list[Tag] = []
    parent = tag.parent
    while parent is not None and len(ancestors) < max_depth:
        if isinstance(parent, BeautifulSoup):
            break
        ancestors.append(parent)
        parent = parent.parent
    return ancestors


def has_ancestor_tag(tag: Tag, name: str) -> bool:
    return tag.find_parent(name) is not None


class Heuristics:
    """Stateless heuristic scorer. Safe to instantiate once and reuse."""

    def __init__(self, patterns: Patterns | None = None) -> None:
        self.patterns = patterns or DEFAULT_PATTERNS

    # ------------------------------------------------------------------
    # Class/id weighting
    # ------------------------------------------------------------------

    def class_weight(self, tag: Tag) -> float:
        """Score *tag* by keyword matches in its class and id attributes.

        Each attribute is tested independently; a negative match costs
        ``CLASS_WEIGHT`` and a positive match earns it, so an attribute
        matching both nets zero.
        """
        weight = 0.0
        for name in ("class", "id"):
            value = attr_text(tag, name)
            if value is None:
                continue
            if self.patterns.negative.search(value):
                weight -= CLASS_WEIGHT
            if self.patterns.positive.search(value):
                weight += CLASS_WEIGHT
        return weight

    def initial_score(self, tag: Tag) -> float:
        """Seed score of a newly registered candidate."""
        return tag_score(tag) + self.class_weight(tag)

    # ------------------------------------------------------------------
    # Link density
    # ------------------------------------------------------------------

    @staticmethod
    def link_density(tag: Tag | None) -> float:
        """Share of *tag*'s visible text that sits inside ``<a>`` elements.

        0 when the node has no text; never above 1.
        """
        if tag is None:
            return 0.0
        text_length = char_length(normalize_text(tag.get_text()))
        if text_length == 0:
            return 0.0
        link_length = sum(
            char_length(normalize_text(a.get_text())) for a in tag.find_all("a")
        )
        return min(link_length / text_length, 1.0)

    # ------------------------------------------------------------------
    # Video embeds
    # ------------------------------------------------------------------

    def is_video_embed(self, tag: Tag) -> bool:
        """True if an attribute value or the inner markup points at a video host."""
        values = " ".join(attr_text(tag, name) or "" for name in tag.attrs)
        if self.patterns.videos.search(values):
            return True
        return bool(self.patterns.videos.search(tag.decode_contents()))
