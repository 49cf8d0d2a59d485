"""Render the selected content as plain text and as cleaned HTML."""

from __future__ import annotations

import html
import re

from bs4.element import NavigableString, PreformattedString, Tag

from articleparser.extractors.text import normalize_text

_COMMENTS_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_KILL_BREAKS_RE = re.compile(r"(<br\s*/?>(\s|&nbsp;?)*)+", re.IGNORECASE)
_SPACES_RE = re.compile(r"\s{2,}")


def text_content(node: Tag) -> str:
    """Plain text of *node* with a paragraph break wherever an element sits
    outside a ``<p>``; paragraphs are separated by one blank line.
    """
    paragraphs: list[str] = []
    buffer: list[str] = []

    def flush() -> None:
        text = normalize_text("".join(buffer))
        if text:
            paragraphs.append(text)
        buffer.clear()

    def walk(el: Tag) -> None:
        for child in el.children:
            if isinstance(child, Tag):
                if child.parent is not None and child.parent.name != "p":
                    flush()
                walk(child)
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                buffer.append(str(child))

    walk(node)
    flush()
    return "\n\n".join(paragraphs)


def html_content(node: Tag) -> str:
    """Inner markup of *node* with entities decoded, comments stripped and
    ``<br>`` runs and whitespace runs collapsed.
    """
    markup = node.decode_contents()
    markup = html.unescape(markup)
    markup = _COMMENTS_RE.sub("", markup)
    markup = _KILL_BREAKS_RE.sub("<br />", markup)
    markup = _SPACES_RE.sub(" ", markup)
    return markup.strip()


def first_paragraph_text(node: Tag) -> str:
    p = node.find("p")
    return normalize_text(p.get_text()) if p is not None else ""
