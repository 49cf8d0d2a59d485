"""Post-selection cleanup of the article container.

:func:`prep_article` runs the steps in a fixed order: later conditional
steps key off structure the earlier steps leave behind.
"""

from __future__ import annotations

import logging
import math

from bs4 import Tag

from articleparser.extractors.heuristics import CLASS_WEIGHT, Heuristics, has_ancestor_tag
from articleparser.extractors.patterns import Patterns
from articleparser.extractors.text import char_length, count_commas, normalize_text
from articleparser.extractors.urlnorm import fix_relative_uris

logger = logging.getLogger(__name__)

_PRESENTATION_ATTRS: tuple[str, ...] = (
    "align",
    "background",
    "bgcolor",
    "border",
    "cellpadding",
    "cellspacing",
    "frame",
    "hspace",
    "rules",
    "style",
    "valign",
    "vspace",
)
_DIMENSION_ATTRS: tuple[str, ...] = ("width", "height")
# Tags allowed to keep width/height
_SIZED_TAGS: frozenset[str] = frozenset({"table", "th", "td", "hr", "pre"})

_EMBED_TAGS: frozenset[str] = frozenset({"object", "embed", "iframe"})

# Elements that are meaningful without inner markup
_VOID_TAGS: frozenset[str] = frozenset(
    {"img", "br", "hr", "iframe", "embed", "object", "video", "audio", "source", "svg"},
)

# Conditional cleaning thresholds
_MIN_COMMAS = 10
_LIST_ITEM_ALLOWANCE = 100
_MIN_IMAGE_RATIO = 0.5
_MIN_CONTENT_LENGTH = 25
_MAX_EMBED_CONTENT_LENGTH = 75
_LOW_WEIGHT_LINK_DENSITY = 0.2
_HIGH_WEIGHT_LINK_DENSITY = 0.5


def _find_all(node: Tag, *names: str | bool) -> list[Tag]:
    target = names[0] if len(names) == 1 else list(names)
    return [el for el in node.find_all(target) if isinstance(el, Tag)]


def _is_empty(tag: Tag) -> bool:
    if tag.name in _VOID_TAGS:
        return False
    return not tag.decode_contents().strip()


# ---------------------------------------------------------------------------
# Individual steps
# ---------------------------------------------------------------------------

def clean_style(node: Tag) -> None:
    """Remove presentational and event-handler attributes below *node*."""
    for el in _find_all(node, True):
        if el.name == "svg":
            continue
        for attr in list(el.attrs):
            lowered = attr.lower()
            if (
                lowered in _PRESENTATION_ATTRS
                or lowered.startswith("on")
                or (lowered in _DIMENSION_ATTRS and el.name not in _SIZED_TAGS)
            ):
                del el[attr]


def clean(node: Tag, tag: str, heuristics: Heuristics) -> int:
    """Remove every *tag* below *node*, sparing video embeds.

    Returns the number of removed elements.
    """
    is_embed = tag in _EMBED_TAGS
    removed = 0
    for el in _find_all(node, tag):
        if el.decomposed:
            continue
        if is_embed and heuristics.is_video_embed(el):
            continue
        el.decompose()
        removed += 1
    return removed


def clean_headers(node: Tag, heuristics: Heuristics) -> int:
    """Drop ``h1``-``h3`` whose class/id weight is negative."""
    removed = 0
    for el in _find_all(node, "h1", "h2", "h3"):
        if not el.decomposed and heuristics.class_weight(el) < 0:
            el.decompose()
            removed += 1
    return removed


def should_remove_conditionally(el: Tag, tag: str, heuristics: Heuristics) -> bool:
    """Decide whether *el* (a ``table``/``ul``/``div``...) looks like junk."""
    weight = heuristics.class_weight(el)
    if weight < 0:
        return True

    text = normalize_text(el.get_text())
    if count_commas(text) >= _MIN_COMMAS:
        return False

    is_list = tag in ("ul", "ol")
    p = len(_find_all(el, "p"))
    img = len(_find_all(el, "img"))
    li = len(_find_all(el, "li")) - _LIST_ITEM_ALLOWANCE
    inputs = len(_find_all(el, "input"))
    embeds = sum(
        1 for embed in _find_all(el, "embed")
        if not heuristics.patterns.videos.search(str(embed.get("src") or ""))
    )
    link_density = heuristics.link_density(el)
    content_length = char_length(text)
    in_figure = has_ancestor_tag(el, "figure")

    return (
        (not is_list and li > p)
        or (img > 1 and p / img < _MIN_IMAGE_RATIO and not in_figure)
        or (inputs > math.floor(p / 3))
        or (
            not is_list
            and content_length < _MIN_CONTENT_LENGTH
            and (img == 0 or img > 2)
            and not in_figure
        )
        or (not is_list and weight < CLASS_WEIGHT and link_density > _LOW_WEIGHT_LINK_DENSITY)
        or (weight >= CLASS_WEIGHT and link_density > _HIGH_WEIGHT_LINK_DENSITY)
        or (embeds == 1 and content_length < _MAX_EMBED_CONTENT_LENGTH)
        or embeds > 1
    )


def clean_conditionally(node: Tag, tag: str, heuristics: Heuristics) -> int:
    """Remove every *tag* below *node* that :func:`should_remove_conditionally` flags."""
    removed = 0
    for el in _find_all(node, tag):
        if el.decomposed:
            continue
        if should_remove_conditionally(el, tag, heuristics):
            el.decompose()
            removed += 1
    return removed


def prune_empty(node: Tag) -> int:
    """Remove empty elements children-first and strip class/id attributes."""
    removed = 0
    for el in reversed(_find_all(node, True)):
        if _is_empty(el):
            el.decompose()
            removed += 1
            continue
        el.attrs.pop("class", None)
        el.attrs.pop("id", None)
    return removed


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def prep_article(
    node: Tag,
    base_url: str = "",
    patterns: Patterns | None = None,
) -> Tag:
    """Clean the selected article container in place and return it."""
    heuristics = Heuristics(patterns)
    removed = 0

    clean_style(node)

    for tag in ("form", "fieldset", "h1", "object", "embed", "footer", "link"):
        removed += clean(node, tag, heuristics)

    # A lone h2/h3 is most likely the article title repeated as a header;
    # the title is extracted separately.
    for tag in ("h2", "h3"):
        if len(_find_all(node, tag)) == 1:
            removed += clean(node, tag, heuristics)

    for tag in ("iframe", "input", "textarea", "select", "button"):
        removed += clean(node, tag, heuristics)
    removed += clean_headers(node, heuristics)

    for tag in ("table", "ul", "div"):
        removed += clean_conditionally(node, tag, heuristics)

    fix_relative_uris(node, base_url)
    removed += prune_empty(node)

    logger.debug("prep_article: removed %d elements", removed)
    return node
