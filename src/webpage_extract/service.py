"""Extraction service: the operation boundary behind every tool.

Validates input, resolves URLs to HTML, runs a parser view off the event
loop, and turns every outcome into a response envelope.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from webpage_extract.config import Settings
from webpage_extract.envelope import error_from_exception, error_response, success_response
from webpage_extract.exceptions import InvalidInputError, WebpageExtractError
from webpage_extract.fetcher import Fetcher, is_url
from webpage_extract.logger import logger
from webpage_extract.parser.parser import ExtractionOutput, Parser

View = Callable[[str, str | None], ExtractionOutput]


class ExtractionService:
    """Runs fetch and extraction operations and wraps their results in envelopes."""

    def __init__(self, settings: Settings, fetcher: Fetcher | None = None) -> None:
        """Initialize the service.

        Args:
            settings: Application settings.
            fetcher: Fetch collaborator; a default httpx-backed one is created if omitted.

        """
        self._settings = settings
        self._fetcher = fetcher or Fetcher(settings)
        self._parser = Parser(settings)

    async def close(self) -> None:
        """Release the fetcher's connections."""
        await self._fetcher.close()

    async def fetch_url(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> dict[str, Any]:
        """Fetch raw HTML from a URL.

        Returns:
            Envelope with html, status_code, content_type and final_url.

        """
        try:
            result = await self._fetcher.fetch(url, headers=headers, timeout_ms=timeout_ms)
        except WebpageExtractError as e:
            logger.warning("fetch_url failed [%s]: %s", e.code, e.message)
            return error_from_exception(e)
        except Exception as e:
            logger.exception("Unexpected error while fetching %s", url)
            return error_response(
                "INTERNAL_ERROR", str(e), {"url": url, "error_type": type(e).__name__}
            )
        return success_response(result.to_dict(), source=url)

    async def extract_readable_markdown(self, html_or_url: str) -> dict[str, Any]:
        """Convert a page to readable Markdown."""
        return await self._run(
            "extract_readable_markdown",
            html_or_url,
            lambda html, _source: self._parser.extract_markdown(html),
        )

    async def extract_tables(self, html_or_url: str) -> dict[str, Any]:
        """Extract a page's data tables."""
        return await self._run(
            "extract_tables",
            html_or_url,
            lambda html, _source: self._parser.extract_tables(html),
        )

    async def extract_metadata(self, html_or_url: str) -> dict[str, Any]:
        """Extract a page's metadata."""
        return await self._run("extract_metadata", html_or_url, self._parser.extract_metadata)

    async def _run(self, operation: str, html_or_url: Any, view: View) -> dict[str, Any]:
        """Validate, resolve, extract, and wrap the result for one operation.

        Args:
            operation: Operation name, for logging.
            html_or_url: Raw HTML or an http(s) URL.
            view: Parser view taking the HTML and its source URL.

        Returns:
            Success or error envelope. Never raises.

        """
        try:
            html, source = await self._resolve_html(html_or_url)
            output = await asyncio.to_thread(view, html, source)
        except WebpageExtractError as e:
            logger.warning("%s failed [%s]: %s", operation, e.code, e.message)
            return error_from_exception(e)
        except Exception as e:
            logger.exception("Unexpected error in %s", operation)
            return error_response("INTERNAL_ERROR", str(e) or type(e).__name__)

        return success_response(output.data, source=source, warnings=output.warnings)

    async def _resolve_html(self, html_or_url: Any) -> tuple[str, str | None]:
        """Return the HTML to extract from and the URL it came from, if any.

        Raises:
            InvalidInputError: If the input is missing or the HTML is blank
            FetchError: If fetching a URL input fails

        """
        if not html_or_url or not isinstance(html_or_url, str):
            raise InvalidInputError("html_or_url is required and must be a string")

        source: str | None = None
        html = html_or_url
        if is_url(html_or_url):
            result = await self._fetcher.fetch(html_or_url)
            html = result.html
            source = html_or_url

        if not html.strip():
            raise InvalidInputError("Empty HTML content provided")

        return html, source
