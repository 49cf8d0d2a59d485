"""Main content extraction: paragraph scoring and candidate selection.

Algorithm:
1. Node prepping: drop bylines, unlikely candidates, form controls and
   empty containers; turn block-less ``<div>`` into ``<p>``.
2. Score every paragraph of at least ``_MIN_PARAGRAPH_LENGTH`` characters
   and credit its nearest ancestors, with credit decaying by distance.
3. Scale every candidate by ``1 - link density`` and keep the best one.
4. Sanitize the winner (see :mod:`articleparser.extractors.cleaning`).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from articleparser.errors import NoContentFound
from articleparser.extractors.cleaning import prep_article
from articleparser.extractors.heuristics import Heuristics, attr_text, node_ancestors
from articleparser.extractors.patterns import Patterns
from articleparser.extractors.text import char_length, count_commas, normalize_text

logger = logging.getLogger(__name__)

# Paragraphs shorter than this (in characters) are not scored
_MIN_PARAGRAPH_LENGTH = 25
# Ancestor levels credited by each paragraph
_ANCESTOR_DEPTH = 3
# One bonus point per 100 characters, capped
_LENGTH_BONUS_CHARS = 100
_LENGTH_BONUS_CAP = 3

_EMPTY_REMOVABLE_TAGS: frozenset[str] = frozenset(
    {"div", "section", "header", "h1", "h2", "h3", "h4", "h5", "h6"},
)


@dataclass
class Candidate:
    score: float
    node: Tag


def _has_no_markup(tag: Tag) -> bool:
    return not tag.decode_contents().strip()


# ---------------------------------------------------------------------------
# Node prepping
# ---------------------------------------------------------------------------

def prep_nodes(soup: BeautifulSoup, heuristics: Heuristics) -> int:
    """Trash nodes that look cruddy and turn misused ``<div>`` into ``<p>``.

    Returns the number of removed elements.
    """
    patterns = heuristics.patterns
    removed = 0

    for el in list(soup.find_all(True)):
        if el.decomposed:
            continue

        match_string = f"{attr_text(el, 'class') or ''} {attr_text(el, 'id') or ''}"

        rel = el.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()
        if "author" in rel or patterns.byline.search(match_string):
            el.decompose()
            removed += 1
            continue

        if (
            patterns.unlikely_candidates.search(match_string)
            and not patterns.ok_maybe_candidate.search(match_string)
            and el.name not in ("body", "a")
        ):
            el.decompose()
            removed += 1
            continue

        if patterns.unlikely_elements.search(el.name or ""):
            el.decompose()
            removed += 1
            continue

        if el.name in _EMPTY_REMOVABLE_TAGS and _has_no_markup(el):
            el.decompose()
            removed += 1
            continue

        if el.name == "div" and not patterns.div_to_p_elements.search(el.decode_contents()):
            el.name = "p"

    logger.debug("prep_nodes: removed %d elements", removed)
    return removed


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def paragraph_score(text: str) -> float:
    """Content score of one normalized paragraph text."""
    score = 1.0
    score += count_commas(text)
    score += min(math.floor(char_length(text) / _LENGTH_BONUS_CHARS), _LENGTH_BONUS_CAP)
    return score


def score_divider(level: int) -> int:
    """Credit divisor for the ancestor *level* levels above a paragraph.

    parent: 1, grandparent: 2, great-grandparent and beyond: level * 3.
    """
    if level == 0:
        return 1
    if level == 1:
        return 2
    return level * 3


def score_paragraphs(soup: BeautifulSoup, heuristics: Heuristics) -> dict[int, Candidate]:
    """Score paragraphs and propagate their scores to nearby ancestors.

    Candidates are keyed by ``id()`` of the node: the candidate holds a
    reference to the node, so the identity stays valid while the map lives.
    """
    candidates: dict[int, Candidate] = {}

    for p in list(soup.find_all("p")):
        if p.decomposed:
            continue
        inner_text = normalize_text(p.get_text())
        if char_length(inner_text) < _MIN_PARAGRAPH_LENGTH:
            continue

        ancestors = node_ancestors(p, _ANCESTOR_DEPTH)
        if not ancestors:
            continue

        content_score = paragraph_score(inner_text)
        for level, ancestor in enumerate(ancestors):
            key = id(ancestor)
            candidate = candidates.get(key)
            if candidate is None:
                candidate = Candidate(heuristics.initial_score(ancestor), ancestor)
                candidates[key] = candidate
            candidate.score += content_score / score_divider(level)

    return candidates


def select_top_candidate(
    candidates: dict[int, Candidate],
    heuristics: Heuristics,
) -> Candidate:
    """Scale every candidate by ``1 - link density`` and return the best.

    Raises:
        NoContentFound: when *candidates* is empty.
    """
    top: Candidate | None = None
    for candidate in candidates.values():
        candidate.score *= 1 - heuristics.link_density(candidate.node)
        if top is None or candidate.score > top.score:
            top = candidate

    if top is None:
        raise NoContentFound("No content candidate found")
    return top


def grab_article(soup: BeautifulSoup, patterns: Patterns | None = None) -> Tag:
    """Return the element most likely to hold the article, unsanitized.

    Mutates *soup* (node prepping).

    Raises:
        NoContentFound: when no paragraph qualifies for scoring.
    """
    heuristics = Heuristics(patterns)
    prep_nodes(soup, heuristics)
    candidates = score_paragraphs(soup, heuristics)
    top = select_top_candidate(candidates, heuristics)
    logger.debug(
        "grab_article: %d candidates, top <%s> score=%.2f",
        len(candidates), top.node.name, top.score,
    )
    return top.node


def extract_main_content(
    soup: BeautifulSoup,
    url: str = "",
    patterns: Patterns | None = None,
) -> Tag:
    """Select the article container in *soup* and sanitize it in place.

    Raises:
        NoContentFound: when no paragraph qualifies for scoring.
    """
    node = grab_article(soup, patterns)
    prep_article(node, base_url=url, patterns=patterns)
    return node
