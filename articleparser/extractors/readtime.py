"""Language-aware reading time estimate."""

from __future__ import annotations

import logging
import math

from bs4 import Tag

from articleparser.extractors.text import char_length, normalize_text
from articleparser.language import detect_language, reading_speed

logger = logging.getLogger(__name__)

# Minutes spent looking at one image
IMAGE_MINUTES = 0.2


def read_time(n_chars: int, n_images: int = 0, language: str | None = None) -> tuple[int, int]:
    """Return ``(min_minutes, max_minutes)`` for the given amount of content.

    ``(0, 0)`` when there is neither text nor images.
    """
    if n_chars == 0 and n_images == 0:
        return 0, 0
    speed = reading_speed(language)
    image_time = n_images * IMAGE_MINUTES
    min_time = math.floor(n_chars / (speed.cpm + speed.sd) + image_time + 0.5)
    max_time = math.floor(n_chars / (speed.cpm - speed.sd) + image_time + 0.5)
    return min_time, max_time


def estimate_read_time(
    content: Tag | None,
    language: str | None = None,
) -> tuple[int, int, str | None]:
    """Estimate reading time of *content*.

    Returns ``(min_minutes, max_minutes, language)``; the language is
    detected from the text unless given.
    """
    if content is None:
        return 0, 0, language
    text = normalize_text(content.get_text())
    if language is None:
        language = detect_language(text)
    n_images = len(content.find_all("img"))
    min_time, max_time = read_time(char_length(text), n_images, language)
    logger.debug(
        "estimate_read_time: %d chars, %d images, lang=%s -> %d-%d min",
        char_length(text), n_images, language, min_time, max_time,
    )
    return min_time, max_time, language
