"""Convert cleaned article HTML to Markdown."""

from __future__ import annotations

import re

from markdownify import markdownify  # type: ignore[import-untyped]

_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n{3,}")
_TRAILING_WHITESPACE_RE = re.compile(r"[ \t]+$", re.MULTILINE)


def html_to_markdown(html: str) -> str:
    """Convert sanitized article *html* to Markdown.

    ATX headings and ``-`` bullets; trailing whitespace is stripped and
    blank-line runs are squeezed to one.
    """
    if not html or not html.strip():
        return ""

    md = markdownify(
        html,
        heading_style="ATX",
        bullets="-",
    )

    md = _TRAILING_WHITESPACE_RE.sub("", md)
    md = _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", md)
    return md.strip()


def format_markdown_article(
    title: str,
    author: str | None,
    read_time: tuple[int, int] | None,
    excerpt: str | None,
    content_markdown: str,
) -> str:
    """Render a complete article Markdown document with a short header."""
    lines: list[str] = []

    if title:
        lines.append(f"# {title}")
        lines.append("")

    meta_parts: list[str] = []
    if author:
        meta_parts.append(f"**Author:** {author}")
    if read_time and any(read_time):
        low, high = read_time
        span = f"{low}" if low == high else f"{low}-{high}"
        meta_parts.append(f"**Reading time:** {span} min")

    if meta_parts:
        lines.append(" | ".join(meta_parts))
        lines.append("")

    if excerpt:
        lines.append(f"> {excerpt}")
        lines.append("")

    if lines:
        lines.append("---")
        lines.append("")
    lines.append(content_markdown)

    return "\n".join(lines).strip()
