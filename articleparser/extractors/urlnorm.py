"""URL validation and relative-URL resolution."""

from __future__ import annotations

import logging
from urllib.parse import urljoin, urlparse

from bs4 import Tag

from articleparser.errors import InvalidURLError

logger = logging.getLogger(__name__)

_ABSOLUTE_PREFIXES: tuple[str, ...] = ("http://", "https://")


def validate_url(url: str) -> str:
    """Return *url* stripped, or raise if it is not an absolute http(s) URL.

    Raises:
        InvalidURLError: on a malformed URL or an unsupported scheme.
    """
    url = (url or "").strip()
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InvalidURLError(f"Malformed URL {url!r}: {exc}", url=url) from exc
    if parsed.scheme.lower() not in ("http", "https"):
        raise InvalidURLError(f"Unsupported URL scheme: {parsed.scheme!r}", url=url)
    if not parsed.netloc:
        raise InvalidURLError(f"URL has no host: {url!r}", url=url)
    return url


def resolve_url(base_url: str, href: str) -> str:
    """Resolve *href* against *base_url*.

    Already-absolute http(s) URLs, fragment-only references (``#top``) and
    an empty *base_url* leave *href* unchanged.
    """
    href = href.strip()
    if not base_url or href.startswith("#") or href.lower().startswith(_ABSOLUTE_PREFIXES):
        return href
    try:
        return urljoin(base_url, href)
    except ValueError as exc:
        logger.debug("Could not resolve %r against %s: %s", href, base_url, exc)
        return href


def fix_relative_uris(node: Tag, base_url: str) -> None:
    """Make every ``<img src>`` and ``<a href>`` below *node* absolute.

    ``<img file=...>`` (some lazy-loading scripts) is promoted to ``src``;
    images without any source are removed.
    """
    for img in list(node.find_all("img")):
        if not isinstance(img, Tag) or img.decomposed:
            continue
        file_src = img.get("file")
        if file_src is not None:
            img["src"] = file_src
            del img["file"]
        src = str(img.get("src") or "").strip()
        if not src:
            img.decompose()
            continue
        img["src"] = resolve_url(base_url, src)

    for link in node.find_all("a", href=True):
        if isinstance(link, Tag):
            link["href"] = resolve_url(base_url, str(link["href"]))
