"""Logging configuration for webpage-extract."""

import logging
import sys

from webpage_extract.config import settings

# Single app logger that can be imported throughout the application
logger = logging.getLogger("webpage_extract")

# httpx logs one INFO line per request; shown only when debugging URL inputs
HTTP_CLIENT_LOGGER = "httpx"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug: bool | None = None) -> None:
    """Configure application logging.

    Everything goes to stderr: with the stdio transport, stdout carries the
    MCP protocol and must not see a single log line.

    Args:
        debug: Force debug mode on or off; defaults to WEBPAGE_EXTRACT_DEBUG.

    """
    if debug is None:
        debug = settings.webpage_extract_debug

    # Clear existing handlers to prevent duplicate log entries on reload
    logging.root.handlers = []

    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)

    # Pipeline stage timings are logged at DEBUG, tool calls and timings at INFO
    app_log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(app_log_level)

    http_log_level = logging.INFO if debug else logging.WARNING
    logging.getLogger(HTTP_CLIENT_LOGGER).setLevel(http_log_level)

    level_name = logging.getLevelName(app_log_level)
    logger.info(
        "webpage-extract logging initialized at %s level (transport: %s)",
        level_name,
        settings.transport,
    )
