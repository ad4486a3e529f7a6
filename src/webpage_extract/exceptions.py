"""webpage-extract custom exceptions.

Every exception carries the error code reported in the response envelope.
"""

from typing import Any, ClassVar


class WebpageExtractError(Exception):
    """Base exception for all webpage-extract errors."""

    code: ClassVar[str] = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human readable error message.
            details: Optional structured context (URL, status code, timeout).

        """
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidInputError(WebpageExtractError):
    """Missing, empty or malformed tool input."""

    code = "INVALID_INPUT"


class FetchError(WebpageExtractError):
    """Errors from the fetch collaborator."""


class UpstreamError(FetchError):
    """The remote server answered with an error status or could not be reached."""

    code = "UPSTREAM_ERROR"


class RateLimitedError(UpstreamError):
    """The remote server answered with HTTP 429."""

    code = "RATE_LIMITED"


class FetchTimeoutError(FetchError):
    """The fetch did not complete within the configured timeout."""

    code = "TIMEOUT"


class ParserError(WebpageExtractError):
    """Errors while parsing content."""

    code = "PARSE_ERROR"


class DocumentLoadError(ParserError):
    """The document loader rejected the markup."""


class MarkdownGeneratorError(ParserError):
    """Errors while generating Markdown output."""
