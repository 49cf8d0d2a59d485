"""Pydantic models for extracted articles."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Metadata(BaseModel):
    """Descriptive metadata of an article.  Blank fields were not found."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    image: str = ""
    excerpt: str = ""
    author: str = ""
    min_read_time: int = 0
    max_read_time: int = 0
    language: str | None = None

    @field_validator("title", "image", "excerpt", "author", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""


class Article(BaseModel):
    """Canonical output of one extraction call."""

    model_config = ConfigDict(frozen=True)

    url: str
    meta: Metadata = Field(default_factory=Metadata)
    content: str = ""       # plain text
    raw_content: str = ""   # sanitized HTML

    @field_validator("url", mode="before")
    @classmethod
    def strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def has_content(self) -> bool:
        return bool(self.raw_content)

    def to_markdown(self) -> str:
        """Render the article as a Markdown document (requires ``markdownify``)."""
        from articleparser.extractors.markdown import format_markdown_article, html_to_markdown

        return format_markdown_article(
            title=self.meta.title,
            author=self.meta.author,
            read_time=(self.meta.min_read_time, self.meta.max_read_time),
            excerpt=self.meta.excerpt,
            content_markdown=html_to_markdown(self.raw_content),
        )
