"""Raw-markup preprocessing, parsing, and document preparation.

Pipeline position::

    raw HTML -> preprocess_html() -> parse_html() -> prepare_document() -> scoring
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from articleparser.errors import EmptyDocumentError, ParseError

logger = logging.getLogger(__name__)

# Two or more <br> in a row (whitespace between them ignored)
_REPLACE_BRS_RE = re.compile(r"(<br[^>]*>[ \n\r\t]*){2,}", re.IGNORECASE)

# Tags that carry no readable content and must not influence scoring
_STRIP_TAGS: tuple[str, ...] = ("script", "noscript", "style", "link")

# Presentational wrappers rewritten to <span>
_FONT_TAGS: tuple[str, ...] = ("font",)


def preprocess_html(html: str, url: str = "") -> str:
    """Turn ``<br><br>`` runs into paragraph breaks and trim the markup.

    ``<div>foo<br>bar<br> <br><br>abc</div>`` becomes
    ``<div>foo<br>bar</p><p>abc</div>``; the parser then closes the
    dangling paragraph so ``abc`` is scored as its own paragraph.

    Raises:
        EmptyDocumentError: when nothing is left after trimming.
    """
    html = _REPLACE_BRS_RE.sub("</p><p>", html or "").strip()
    if not html:
        raise EmptyDocumentError("HTML is empty", url=url)
    return html


def parse_html(html: str, url: str = "") -> BeautifulSoup:
    """Build a mutable document tree from *html* with the lxml builder.

    Raises:
        ParseError: when the tree builder fails or yields no element at all.
    """
    try:
        soup = BeautifulSoup(html, "lxml")
    except Exception as exc:
        raise ParseError(f"Could not parse HTML: {exc}", url=url) from exc
    if soup.find(True) is None:
        raise ParseError("HTML contains no elements", url=url)
    return soup


def prepare_document(soup: BeautifulSoup) -> BeautifulSoup:
    """Strip non-content tags and rewrite ``<font>`` wrappers, in place."""
    removed = 0
    for el in soup.find_all(_STRIP_TAGS):
        if isinstance(el, Tag) and not el.decomposed:
            el.decompose()
            removed += 1

    for font in soup.find_all(_FONT_TAGS):
        if isinstance(font, Tag) and not font.decomposed:
            font.name = "span"
            font.attrs = {}

    logger.debug("prepare_document: removed %d non-content elements", removed)
    return soup
