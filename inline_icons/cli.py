"""Command line: render one icon to a file or stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from inline_icons.config import settings
from inline_icons.dependencies import get_fetcher, get_registry, get_renderer
from inline_icons.errors import IconError
from inline_icons.render.colors import parse_color_spec


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inline-icons",
        description="Fetch an icon from a remote collection and render it at glyph size",
    )
    parser.add_argument("collection", nargs="?", help="Collection name (see --list)")
    parser.add_argument("name", nargs="?", help="Icon name")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--fg", help="Foreground color, or style:NAME")
    parser.add_argument("--bg", help="Background color, or style:NAME")
    parser.add_argument("--zoom", type=float, help="Integer zoom factor")
    parser.add_argument("--reload", action="store_true", help="Fetch even if cached")
    parser.add_argument("--png", action="store_true", help="Write PNG instead of SVG")
    parser.add_argument("--raw", action="store_true", help="Write the fetched SVG unchanged")
    parser.add_argument("--list", action="store_true", help="List collections and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.list:
        registry = get_registry()
        for name in registry.names():
            print(f"{name}\t{registry.template(name)}")
        return 0

    if not args.collection or not args.name:
        parser.error("collection and name are required")

    try:
        if args.raw:
            data = get_fetcher().get_bytes(args.collection, args.name, force_reload=args.reload)
        else:
            icon = get_renderer().render(
                args.collection,
                args.name,
                fg=parse_color_spec(args.fg),
                bg=parse_color_spec(args.bg),
                zoom=args.zoom,
                force_reload=args.reload,
            )
            data = icon.to_png() if args.png else icon.svg.encode("utf-8")
    except IconError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_bytes(data)
    else:
        sys.stdout.buffer.write(data)
    return 0
