"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from feastday_clock import __version__
from feastday_clock.config import get_settings
from feastday_clock.flows.context import create_context
from feastday_clock.flows.page import render_page
from feastday_clock.server import run

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="feastday-clock",
        description="Clock page with current weather and today's feast day",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'serve' command - run the web server
    serve_parser = subparsers.add_parser("serve", help="Serve the page over HTTP")
    serve_parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Address to bind (default: host from settings)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: port from settings, env PORT)",
    )

    # 'render' command - render the page once
    render_parser = subparsers.add_parser("render", help="Render the page once")
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write HTML to this file instead of stdout",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool = False) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command."""
    settings = get_settings()
    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port
    run(host, port, create_context(settings))
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the 'render' command: fetch, render and print or save the page."""
    ctx = create_context(get_settings())
    try:
        html = asyncio.run(render_page(ctx))
    finally:
        ctx.session.close()

    if args.output is None:
        sys.stdout.write(html)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(html, encoding="utf-8")
        print(f"Wrote {args.output}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Location: ({settings.lat}, {settings.lon}) {settings.timezone}")
    print(f"Forecast: {'on' if settings.show_forecast else 'off'}")
    print(f"Fasting: {'on' if settings.show_fasting else 'off'}")
    print(f"Liturgical API: {'configured' if settings.liturgical_token_url else 'not configured'}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "serve": cmd_serve,
        "render": cmd_render,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
