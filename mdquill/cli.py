"""
Command-line interface for mdquill.

Usage:
    mdquill render notes.md --output notes.pdf
    mdquill render notes.md --settings settings.json --align justify
    mdquill preview notes.md --output notes.html
    mdquill version
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import RenderSettings
from .exceptions import MdQuillError, ParsingError
from .utils.logger import configure_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdquill",
        description="mdquill - paginated PDF and HTML output for markdown notes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mdquill render notes.md --output notes.pdf
  mdquill render notes.md --align justify --font-size 11
  mdquill preview notes.md --output notes.html
  mdquill version
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render markdown to PDF")
    render_parser.add_argument("input", help="Input markdown file")
    render_parser.add_argument(
        "-o", "--output",
        help="Output PDF path (default: input name with .pdf extension)"
    )
    render_parser.add_argument(
        "--settings",
        help="JSON file with render settings"
    )
    render_parser.add_argument(
        "--align",
        choices=["left", "center", "right", "justify"],
        help="Paragraph alignment (overrides settings)"
    )
    render_parser.add_argument(
        "--font-size",
        type=float,
        help="Body font size in points (overrides settings)"
    )
    render_parser.add_argument("--title", help="PDF document title")
    render_parser.add_argument("--author", help="PDF document author")

    preview_parser = subparsers.add_parser("preview", help="Render markdown to an HTML fragment")
    preview_parser.add_argument("input", help="Input markdown file")
    preview_parser.add_argument(
        "-o", "--output",
        help="Output HTML path (default: print to stdout)"
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def _read_input(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParsingError("Input is not valid UTF-8 text", f"{path}: {exc}") from exc


def cmd_render(args) -> int:
    """Handle render command."""
    from .renderers.pdf_renderer import PdfRenderer

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    output_path = Path(args.output) if args.output else input_path.with_suffix(".pdf")

    settings = RenderSettings.from_json_file(args.settings) if args.settings else RenderSettings()
    settings = settings.with_overrides(align=args.align, font_size=args.font_size)

    renderer = PdfRenderer(settings, title=args.title, author=args.author)
    pages = renderer.render(_read_input(input_path), output_path)

    print(f"Saved: {output_path} ({pages} page{'s' if pages != 1 else ''})")
    return 0


def cmd_preview(args) -> int:
    """Handle preview command."""
    from .renderers.html_renderer import render_html

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    fragment = render_html(_read_input(input_path))
    if args.output:
        Path(args.output).write_text(fragment + "\n", encoding="utf-8")
        print(f"Saved: {args.output}")
    else:
        print(fragment)
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    print(f"mdquill v{__version__}")
    return 0


def main(argv=None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(level="DEBUG" if args.verbose else "WARNING", log_file=args.log_file)

    commands = {
        "render": cmd_render,
        "preview": cmd_preview,
        "version": cmd_version,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args)
    except MdQuillError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
