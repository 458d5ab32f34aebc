"""Command-line interface for htmlruns.

Usage::

    htmlruns page.html                      # prints fragments as JSON
    htmlruns page.html -o page.json         # explicit output path
    htmlruns notes.md -f markdown -t text   # Markdown in, plain text out
    htmlruns page.html --style compact      # use compact preset
    htmlruns --list-styles                  # list available presets
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from htmlruns import __version__
from htmlruns.converter import Converter
from htmlruns.fragments import to_data, to_plain_text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlruns",
        description="Render HTML or Markdown as nested styled text runs.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the markup file to render, or '-' for stdin.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file path. Defaults to stdout.",
    )
    parser.add_argument(
        "-s", "--style",
        default="default",
        choices=Converter.STYLE_PRESETS,
        help="Tag style preset (default: %(default)s).",
    )
    parser.add_argument(
        "-b", "--base-font-size",
        type=float,
        default=16,
        help="Font size that em units resolve against (default: %(default)s).",
    )
    parser.add_argument(
        "-f", "--source",
        default="html",
        choices=Converter.SOURCES,
        help="Input markup format (default: %(default)s).",
    )
    parser.add_argument(
        "-t", "--to",
        default="json",
        choices=["json", "text"],
        help="Output format (default: %(default)s).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--allow-links",
        action="store_true",
        help="Validate anchor targets and mark runs that can be activated.",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        help="List available style presets and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _read_input(source: str, encoding: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding=encoding)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_styles:
        print("Available style presets:")
        for preset in Converter.STYLE_PRESETS:
            print(f"  - {preset}")
        return 0

    if not args.input:
        parser.error("the following argument is required: input")

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.input != "-" and not Path(args.input).is_file():
        print(f"Error: file not found: {args.input}", file=sys.stderr)
        return 1

    output_path = Path(args.output) if args.output else None

    if args.verbose:
        print(f"Input:  {args.input}", file=sys.stderr)
        print(f"Output: {output_path or '<stdout>'}", file=sys.stderr)
        print(f"Style:  {args.style}", file=sys.stderr)

    try:
        converter = Converter(
            style_preset=args.style,
            base_font_size=args.base_font_size,
            allow_links=args.allow_links,
            source=args.source,
        )
        fragments = converter.convert_text(_read_input(args.input, args.encoding))
        if converter.binder is not None:
            converter.binder.wait(timeout=5)
            converter.binder.close()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.to == "text":
        rendered = to_plain_text(fragments)
    else:
        rendered = json.dumps(to_data(fragments), ensure_ascii=False, indent=2) + "\n"

    if output_path is None:
        sys.stdout.write(rendered)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered, encoding="utf-8")
        if args.verbose:
            print(f"Done. {output_path.stat().st_size} bytes written.", file=sys.stderr)
        else:
            print(f"Rendered: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
