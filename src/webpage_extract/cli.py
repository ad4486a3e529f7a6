"""Command line interface for the webpage-extract MCP server."""

import argparse

from webpage_extract import __version__
from webpage_extract.config import MAX_PORT, TRANSPORTS, Settings

EPILOG = """\
tools:
  fetch_url                  Fetch raw HTML from a URL
  extract_readable_markdown  Convert HTML to readable Markdown
  extract_tables             Extract tables as structured JSON
  extract_metadata           Extract metadata (title, OG tags, JSON-LD, etc.)

examples:
  webpage-extract --transport stdio
  webpage-extract --transport http --port 3000
"""


def port_number(value: str) -> int:
    """Parse a TCP port for argparse."""
    try:
        port = int(value)
    except ValueError:
        port = 0
    if not 1 <= port <= MAX_PORT:
        msg = f"invalid port: {value!r}. Must be a number between 1 and {MAX_PORT}"
        raise argparse.ArgumentTypeError(msg)
    return port


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from settings."""
    parser = argparse.ArgumentParser(
        prog="webpage-extract",
        description="MCP server for webpage extraction",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-t",
        "--transport",
        choices=TRANSPORTS,
        default=settings.transport,
        help=f"transport type (default: {settings.transport})",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=port_number,
        default=settings.port,
        help=f"HTTP server port, http transport only (default: {settings.port})",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"HTTP bind address, http transport only (default: {settings.host})",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"webpage-extract v{__version__}",
    )
    return parser


def parse_args(settings: Settings, argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments; they override the settings defaults."""
    return build_parser(settings).parse_args(argv)
