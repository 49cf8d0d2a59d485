"""articleparser.query - single-URL fetch and extraction API.

Basic usage::

    from articleparser.query import extract

    article = extract("https://example.com/blog/some-post", timeout=10)
    print(article.meta.title)
    print(article.meta.min_read_time, article.meta.max_read_time)
    print(article.content)

Low-level access::

    from articleparser.query import fetch_html, parse

    html = fetch_html("https://example.com/blog/post")
    article = parse(html, url="https://example.com/blog/post")

Each call owns its own document tree, so independent calls may run in
parallel threads; nothing is shared between them.
"""

from __future__ import annotations

import gzip
import logging
import urllib.error
import urllib.request
import zlib
from datetime import timedelta
from typing import TYPE_CHECKING

from articleparser import settings
from articleparser.errors import NoContentFound, RetrievalError
from articleparser.extractors.document import parse_html, prepare_document, preprocess_html
from articleparser.extractors.main_content import extract_main_content
from articleparser.extractors.metadata import extract_metadata
from articleparser.extractors.readtime import estimate_read_time
from articleparser.extractors.serialize import first_paragraph_text, html_content, text_content
from articleparser.extractors.urlnorm import validate_url
from articleparser.items import Article, Metadata

if TYPE_CHECKING:
    from articleparser.extractors.patterns import Patterns

logger = logging.getLogger(__name__)


def _seconds(timeout: float | timedelta) -> float:
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)


def _decode_response_body(raw: bytes, headers: object | None, url: str) -> str:
    encoding = ""
    if headers is not None:
        try:
            encoding = str(headers.get("Content-Encoding", "")).lower().strip()
        except Exception:
            encoding = ""

    try:
        if encoding == "gzip":
            raw = gzip.decompress(raw)
        elif encoding in ("deflate", "zlib"):
            raw = zlib.decompress(raw)
    except (OSError, zlib.error) as exc:
        raise RetrievalError(f"{encoding} decompression failed for {url}: {exc}", url=url) from exc
    if encoding == "br":
        raise RetrievalError(f"Brotli-encoded response from {url} is not supported", url=url)

    charset = "utf-8"
    if headers is not None:
        try:
            charset = headers.get_content_charset("utf-8") or "utf-8"
        except Exception:
            charset = "utf-8"
    try:
        return raw.decode(charset, errors="replace")
    except (LookupError, ValueError):
        return raw.decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# Low-level HTTP fetch
# ---------------------------------------------------------------------------

def fetch_html(
    url: str,
    timeout: float | timedelta = settings.DEFAULT_TIMEOUT,
    *,
    user_agent: str | None = None,
) -> str:
    """Fetch *url* with a single blocking GET and return the decoded body.

    No retries: retry policy belongs to the caller.

    Raises:
        InvalidURLError: if *url* is not an absolute http(s) URL.
        RetrievalError:  on HTTP errors, connection failures or timeout.
    """
    url = validate_url(url)
    req = urllib.request.Request(
        url,
        headers={
            "User-Agent": user_agent or settings.USER_AGENT,
            "Accept": (
                "text/html,application/xhtml+xml,application/xml;"
                "q=0.9,image/avif,image/webp,*/*;q=0.8"
            ),
            "Accept-Language": "en-US,en;q=0.9",
            "Accept-Encoding": "gzip, deflate",
        },
    )

    try:
        with urllib.request.urlopen(req, timeout=_seconds(timeout)) as resp:
            raw: bytes = resp.read()
            return _decode_response_body(raw, resp.headers, url)
    except urllib.error.HTTPError as exc:
        raise RetrievalError(
            f"HTTP {exc.code} fetching {url}: {exc.reason}",
            url=url,
            status=exc.code,
        ) from exc
    except urllib.error.URLError as exc:
        raise RetrievalError(f"URL error fetching {url}: {exc.reason}", url=url) from exc
    except TimeoutError as exc:
        raise RetrievalError(f"Timed out fetching {url}", url=url) from exc
    except OSError as exc:
        raise RetrievalError(f"Network error fetching {url}: {exc}", url=url) from exc


# ---------------------------------------------------------------------------
# Extraction (pure HTML -> Article, no network)
# ---------------------------------------------------------------------------

def parse(
    html: str,
    url: str = "",
    *,
    patterns: Patterns | None = None,
    language: str | None = None,
) -> Article:
    """Extract the readable content and metadata of *html*.

    Args:
        html:     Raw HTML string of the page.
        url:      Page URL; relative links and images are resolved against
                  it.  Pass "" if unknown.
        patterns: Keyword pattern tables; defaults to the stock vocabulary.
        language: ISO 639-1 code for the reading-time model; detected from
                  the content when omitted.

    Returns:
        :class:`~articleparser.items.Article`.  When no content candidate
        is found, ``content`` and ``raw_content`` are empty but metadata is
        still filled in.

    Raises:
        InvalidURLError:    if *url* is given but not an absolute http(s) URL.
        EmptyDocumentError: if *html* is empty after pre-processing.
        ParseError:         if no document tree can be built.
    """
    if url:
        url = validate_url(url)

    html = preprocess_html(html, url=url)
    soup = parse_html(html, url=url)
    prepare_document(soup)

    # Before content selection: node prepping and sanitizing mutate the tree.
    meta = extract_metadata(soup)

    try:
        content_node = extract_main_content(soup, url=url, patterns=patterns)
    except NoContentFound:
        logger.info("No content found for %s", url or "<html>")
        content_node = None

    min_read, max_read, language = estimate_read_time(content_node, language=language)

    text = ""
    raw_html = ""
    if content_node is not None:
        if not meta["excerpt"]:
            meta["excerpt"] = first_paragraph_text(content_node)
        text = text_content(content_node)
        raw_html = html_content(content_node)

    return Article(
        url=url,
        meta=Metadata(
            **meta,
            min_read_time=min_read,
            max_read_time=max_read,
            language=language,
        ),
        content=text,
        raw_content=raw_html,
    )


def extract(
    url: str,
    timeout: float | timedelta = settings.DEFAULT_TIMEOUT,
    *,
    user_agent: str | None = None,
    patterns: Patterns | None = None,
) -> Article:
    """Fetch *url* and extract its article.

    Args:
        url:        Fully-qualified HTTP/HTTPS URL.
        timeout:    Fetch timeout, seconds or :class:`~datetime.timedelta`.
        user_agent: Override the default browser User-Agent string.
        patterns:   Keyword pattern tables; defaults to the stock vocabulary.

    Raises:
        InvalidURLError, RetrievalError, EmptyDocumentError, ParseError.
        No partial article is returned on failure.
    """
    url = validate_url(url)
    html = fetch_html(url, timeout, user_agent=user_agent)
    logger.debug("Fetched %d characters from %s", len(html), url)
    return parse(html, url=url, patterns=patterns)
