"""Command line entry point for svglayout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from svglayout.config import settings
from svglayout.engine.config import LayoutConfig
from svglayout.engine.pipeline import define_layout_from_svg
from svglayout.errors import LayoutError
from svglayout.formatter import pretty_print_layout, print_layout


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="svglayout",
        description="svglayout - page layout extraction from Inkscape SVG templates",
    )
    parser.add_argument(
        "--log-level",
        default=settings.svglayout_log_level,
        help=f"Logging level (default: {settings.svglayout_log_level})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    extract = sub.add_parser("extract", help="Print the layout of an SVG file as JSON")
    extract.add_argument("path", metavar="FILE", help="SVG file to read")
    extract.add_argument(
        "-p", "--pretty",
        action="store_true",
        help="Tab-indented output instead of a single line",
    )
    extract.add_argument(
        "--threshold",
        type=float,
        default=settings.dynamic_dim_threshold,
        help=f"Dynamic size threshold in document units (default: {settings.dynamic_dim_threshold})",
    )

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")

    return parser.parse_args(argv)


def _extract(args: argparse.Namespace) -> int:
    data = Path(args.path).read_bytes()
    try:
        layout = define_layout_from_svg(data, LayoutConfig(dynamic_dim_threshold=args.threshold))
    except LayoutError as e:
        print(f"svglayout: {args.path}: {e}", file=sys.stderr)
        return 1

    if args.pretty:
        pretty_print_layout(layout)
    else:
        print_layout(layout)
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("svglayout.main:app", host=args.host, port=args.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "serve":
        return _serve(args)
    return _extract(args)


if __name__ == "__main__":
    sys.exit(main())
