"""HTTP fetcher that resolves URL inputs to raw HTML."""

from typing import NamedTuple
from urllib.parse import urlparse

import httpx

from webpage_extract.config import Settings
from webpage_extract.exceptions import (
    FetchTimeoutError,
    InvalidInputError,
    RateLimitedError,
    UpstreamError,
)
from webpage_extract.logger import logger

HTTP_TOO_MANY_REQUESTS = 429


def is_url(value: str) -> bool:
    """Return True if the input should be fetched rather than parsed as HTML."""
    return value.startswith(("http://", "https://"))


def is_valid_url(value: str) -> bool:
    """Return True for an absolute http(s) URL with a host."""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class FetchResult(NamedTuple):
    """Result of a successful fetch."""

    html: str
    status_code: int
    content_type: str | None
    final_url: str

    def to_dict(self) -> dict[str, str | int | None]:
        """Return the fetch_url tool payload."""
        return self._asdict()


class Fetcher:
    """HTTP client for fetching web pages.

    Uses a persistent httpx client to reuse connections across requests.
    Redirects are followed; retries are left to the caller.
    """

    def __init__(
        self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        """Initialize the fetcher.

        Args:
            settings: Application settings containing fetch configuration.
            transport: Optional httpx transport, used to stub the network in tests.

        """
        self._settings = settings
        self._default_headers = {
            "User-Agent": settings.user_agent,
            "Accept": settings.accept_header,
        }
        self._client = httpx.AsyncClient(follow_redirects=True, transport=transport)

    async def fetch(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> FetchResult:
        """Fetch a page and return its HTML.

        Args:
            url: Absolute http(s) URL.
            headers: Extra request headers, overriding the defaults.
            timeout_ms: Request timeout in milliseconds (default from settings).

        Returns:
            FetchResult with the body, status code, content type and final URL.

        Raises:
            InvalidInputError: If the URL is missing or not http(s)
            RateLimitedError: If the server answered 429
            UpstreamError: If the server answered non-2xx or could not be reached
            FetchTimeoutError: If the request exceeded the timeout

        """
        if not url or not isinstance(url, str):
            raise InvalidInputError("URL is required")
        if not is_valid_url(url):
            raise InvalidInputError(
                "Invalid URL format. Must be a valid HTTP or HTTPS URL.", {"url": url}
            )

        timeout = timeout_ms if timeout_ms is not None else self._settings.default_timeout_ms
        request_headers = {**self._default_headers, **(headers or {})}

        try:
            logger.debug("[FETCH STARTED] %s (timeout=%dms)", url, timeout)
            resp = await self._client.get(url, headers=request_headers, timeout=timeout / 1000)

        except httpx.TimeoutException as e:
            raise FetchTimeoutError(
                f"Request timed out after {timeout}ms", {"timeout_ms": timeout, "url": url}
            ) from e

        except httpx.RequestError as e:
            raise UpstreamError(f"Failed to connect to {url}: {e}", {"url": url}) from e

        if resp.status_code == HTTP_TOO_MANY_REQUESTS:
            raise RateLimitedError(
                f"HTTP {resp.status_code}: {resp.reason_phrase}",
                {
                    "status_code": resp.status_code,
                    "url": url,
                    "retry_after": resp.headers.get("retry-after"),
                },
            )

        if not resp.is_success:
            raise UpstreamError(
                f"HTTP {resp.status_code}: {resp.reason_phrase}",
                {"status_code": resp.status_code, "url": url},
            )

        logger.debug("Fetched %s (%d, %d bytes)", resp.url, resp.status_code, len(resp.content))
        return FetchResult(
            html=resp.text,
            status_code=resp.status_code,
            content_type=resp.headers.get("content-type"),
            final_url=str(resp.url),
        )

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        logger.debug("Closing fetcher HTTP client")
        await self._client.aclose()
