"""CLI entry point: python -m articleparser URL [options]"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from articleparser import settings
from articleparser.errors import ExtractionError
from articleparser.items import Article
from articleparser.parser import ArticleParser

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="articleparser",
        description="Extract the readable article and its metadata from a web page.",
    )
    parser.add_argument("url", metavar="URL", help="Page to extract")
    parser.add_argument("--timeout", type=float, default=settings.DEFAULT_TIMEOUT,
                        metavar="SECONDS",
                        help=f"Fetch timeout (default: {settings.DEFAULT_TIMEOUT:g})")
    parser.add_argument("--format", dest="output_format", default="text",
                        choices=["text", "html", "markdown", "json"],
                        help="Output format (default: text)")
    parser.add_argument("--patterns", default=None, metavar="FILE",
                        help="YAML profile overriding the keyword pattern tables")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    return parser


def _print_summary(console: Console, article: Article) -> None:
    meta = article.meta
    console.print(
        Panel.fit(
            f"[bold cyan]{escape(meta.title or '(untitled)')}[/bold cyan]\n"
            f"URL:        [green]{article.url}[/green]\n"
            f"Author:     {escape(meta.author or '-')}\n"
            f"Image:      {escape(meta.image or '-')}\n"
            f"Read time:  {meta.min_read_time}-{meta.max_read_time} min\n"
            f"Language:   {meta.language or '-'}",
            border_style="cyan",
            title="[bold]Article[/bold]",
        ),
    )
    if meta.excerpt:
        console.print(f"[italic]{escape(meta.excerpt)}[/italic]\n", highlight=False)


def render(article: Article, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(article.model_dump(), ensure_ascii=False, indent=2)
    if output_format == "html":
        return article.raw_content
    if output_format == "markdown":
        return article.to_markdown()
    return article.content


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT)

    try:
        if args.patterns:
            parser = ArticleParser.from_profile(args.patterns, args.url, timeout=args.timeout)
        else:
            parser = ArticleParser(timeout=args.timeout)
        article = parser.extract(args.url)
    except (ExtractionError, ValueError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if not article.has_content:
        logger.warning("No readable content found at %s", article.url)

    if args.output_format == "text":
        console = Console()
        _print_summary(console, article)
        console.print(article.content, markup=False, highlight=False)
    else:
        print(render(article, args.output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
