"""CLI entry point: python -m wikiextract FILE [options]

Runs the extraction pipeline over a saved wiki page.  Nothing is fetched:
FILE is a local HTML file, or ``-`` to read from stdin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from wikiextract import settings
from wikiextract.items import ContentDocument, ExtractionFailure
from wikiextract.parser import WikiPageParser
from wikiextract.profiles import load_profile

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikiextract",
        description=(
            "Extract clean HTML, plain text, Markdown and a structural summary\n"
            "from a saved MediaWiki page."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", metavar="FILE",
                        help="HTML file to parse ('-' reads stdin)")
    parser.add_argument("--base-url", default=None, metavar="URL",
                        help=f"Wiki base URL for absolutising links (default: {settings.BASE_URL})")
    parser.add_argument("--title", default=None,
                        help="Page title hint, used when the page has no #firstHeading")
    parser.add_argument("--namespace", default=None,
                        help="Namespace hint")
    parser.add_argument("--profile", default=None, metavar="YAML",
                        help="YAML option profile (see wikiextract.profiles)")
    parser.add_argument("--format", default="json",
                        choices=["json", "text", "markdown", "summary"],
                        help="Output format (default: json)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    base_url = args.base_url or settings.BASE_URL
    overrides: dict[str, Any] = {}
    if args.profile:
        overrides.update(load_profile(args.profile, base_url))
    if args.base_url:
        parser = WikiPageParser(**overrides)
        link_options = parser.get_options().link_options.model_dump()
        link_options["base_url"] = args.base_url
        overrides["link_options"] = link_options
    return overrides


def _print_summary(console: Console, doc: ContentDocument) -> None:
    components = doc.content.components

    info = Table(box=box.SIMPLE, show_header=False)
    info.add_column(style="bold cyan")
    info.add_column()
    info.add_row("Title", doc.title or "-")
    info.add_row("Namespace", doc.namespace or "-")
    info.add_row("Last modified", doc.last_modified or "-")
    info.add_row("Language", doc.meta.language or "-")
    info.add_row("Words", str(doc.meta.word_count))
    info.add_row("Images", str(doc.meta.image_count))
    info.add_row("Tables", str(doc.meta.table_count))
    info.add_row("Infoboxes", str(len(components.infoboxes)))
    info.add_row("Categories", ", ".join(c.name for c in doc.categories) or "-")
    info.add_row("TOC entries", "-" if components.toc is None else str(len(components.toc.items)))
    console.print(info)

    if components.sections:
        sections = Table(title="Sections", box=box.SIMPLE_HEAD)
        sections.add_column("Level", justify="right", style="dim")
        sections.add_column("Heading")
        sections.add_column("Anchor", style="green")
        for s in components.sections:
            sections.add_row(str(s.level), "  " * (s.level - 2) + s.text, s.anchor)
        console.print(sections)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT, stream=sys.stderr)

    try:
        markup = _read_input(args.file)
    except OSError as exc:
        print(f"ERROR: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    try:
        overrides = _build_overrides(args)
        parser = WikiPageParser(**overrides)
    except Exception as exc:
        print(f"ERROR: invalid configuration: {exc}", file=sys.stderr)
        return 1

    result = parser.extract(markup, {"title": args.title, "namespace": args.namespace})
    if isinstance(result, ExtractionFailure):
        print(f"ERROR [{result.kind}]: {result.message}", file=sys.stderr)
        return 1

    doc = result.document
    if args.format == "json":
        sys.stdout.write(result.model_dump_json(by_alias=True, indent=2) + "\n")
    elif args.format == "text":
        sys.stdout.write(doc.content.text + "\n")
    elif args.format == "markdown":
        sys.stdout.write(doc.content.markdown + "\n")
    else:
        _print_summary(Console(), doc)
    return 0


if __name__ == "__main__":
    sys.exit(main())
