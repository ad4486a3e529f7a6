"""Uniform response envelope shared by every tool."""

from datetime import UTC, datetime
from typing import Any, Literal

from webpage_extract.exceptions import WebpageExtractError

ErrorCode = Literal[
    "INVALID_INPUT",
    "UPSTREAM_ERROR",
    "RATE_LIMITED",
    "TIMEOUT",
    "PARSE_ERROR",
    "INTERNAL_ERROR",
]


def retrieved_at() -> str:
    """Return the current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success_response(
    data: Any,
    source: str | None = None,
    warnings: list[str] | None = None,
) -> dict[str, Any]:
    """Build a success envelope.

    Args:
        data: Operation-specific payload.
        source: URL the HTML was fetched from, omitted for raw HTML input.
        warnings: Advisory, non-fatal messages.

    Returns:
        Envelope dict with ``ok`` set to True.

    """
    meta: dict[str, Any] = {}
    if source is not None:
        meta["source"] = source
    meta["retrieved_at"] = retrieved_at()
    meta["pagination"] = {"next_cursor": None}
    meta["warnings"] = list(warnings or [])
    return {"ok": True, "data": data, "meta": meta}


def error_response(
    code: ErrorCode,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build an error envelope.

    Args:
        code: Machine readable error code.
        message: Human readable error message.
        details: Optional structured context, omitted when None.

    Returns:
        Envelope dict with ``ok`` set to False.

    """
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"ok": False, "error": error, "meta": {"retrieved_at": retrieved_at()}}


def error_from_exception(exc: WebpageExtractError) -> dict[str, Any]:
    """Build an error envelope from a webpage-extract exception."""
    return error_response(exc.code, exc.message, exc.details)  # type: ignore[arg-type]
