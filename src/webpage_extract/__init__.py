"""webpage-extract - MCP server for webpage extraction.

Derives readable Markdown, structured tables, and page metadata from
arbitrary HTML or from a URL.
"""

from webpage_extract.config import Settings, settings
from webpage_extract.fetcher import Fetcher
from webpage_extract.service import ExtractionService

__version__ = "1.0.0"

__all__ = [
    "ExtractionService",
    "Fetcher",
    "Settings",
    "__version__",
    "settings",
]
