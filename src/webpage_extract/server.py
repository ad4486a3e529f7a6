"""MCP server exposing webpage fetch and extraction tools."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastmcp import FastMCP

from webpage_extract.cli import parse_args
from webpage_extract.config import settings
from webpage_extract.fetcher import is_url
from webpage_extract.logger import logger, setup_logging
from webpage_extract.middleware.redis_middleware import RedisLoggingMiddleware
from webpage_extract.service import ExtractionService
from webpage_extract.timing import timeit

# Initialize logging as soon as possible
setup_logging()


class TypedFastMCP(FastMCP):
    """Typed FastMCP subclass with server state attribute.

    This allows proper type checking for the state attribute
    instead of using type: ignore comments.
    """

    state: "ServerState | None"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize TypedFastMCP with state set to None."""
        super().__init__(*args, **kwargs)
        self.state = None


class ServerState:
    """Encapsulates the server dependencies and state.

    Owns the extraction service (and through it the HTTP client) for the
    lifetime of the server.
    """

    def __init__(self) -> None:
        """Initialize the server state."""
        self.service = ExtractionService(settings)

    async def start(self) -> None:
        """Startup logic for server resources."""
        logger.info("Starting webpage-extract server resources...")

    async def stop(self) -> None:
        """Cleanup logic for server resources."""
        logger.info("Stopping webpage-extract server resources...")
        await self.service.close()


@asynccontextmanager
async def lifespan(app: TypedFastMCP) -> AsyncIterator[dict[str, Any]]:
    """Manage application lifespan: initialize and cleanup the HTTP client."""
    state = ServerState()
    await state.start()

    # Attach state to the typed mcp object
    app.state = state

    # Initialize middleware if present
    for middleware in app.middleware:
        if hasattr(middleware, "startup"):
            await middleware.startup()

    try:
        yield {"state": state}
    finally:
        # Cleanup middleware if present
        for middleware in app.middleware:
            if hasattr(middleware, "shutdown"):
                await middleware.shutdown()

        await state.stop()
        app.state = None


# Helper functions
def log_tool_call(tool_name: str, details: str) -> None:
    """Log a tool call.

    Args:
        tool_name: Name of the tool being called
        details: Details about the tool call (e.g., URL, input size)

    """
    logger.info("[TOOL CALLED] %s: %s", tool_name, details)


def describe_input(html_or_url: Any) -> str:
    """Summarize a tool input for logging without dumping whole documents."""
    if isinstance(html_or_url, str) and is_url(html_or_url):
        return f"URL: {html_or_url}"
    if isinstance(html_or_url, str):
        return f"HTML ({len(html_or_url)} chars)"
    return f"invalid input ({type(html_or_url).__name__})"


def get_state() -> ServerState:
    """Get the server state from the context."""
    if mcp.state is None:
        raise RuntimeError("Server state not initialized")
    return mcp.state


def get_service(state: ServerState) -> ExtractionService:
    """Get the extraction service from server state."""
    return state.service


mcp = TypedFastMCP("webpage-extract", lifespan=lifespan)

# Add Redis middleware if enabled
if settings.redis_url:
    mcp.add_middleware(RedisLoggingMiddleware(redis_url=settings.redis_url))


@mcp.tool(
    title="fetch_url",
    description=settings.tool_fetch_url_desc,
)
@timeit("fetch_url tool")
async def fetch_url(
    url: Annotated[str, settings.arg_fetch_url_url_desc],
    headers: Annotated[dict[str, str] | None, settings.arg_fetch_url_headers_desc] = None,
    timeout_ms: Annotated[int | None, settings.arg_fetch_url_timeout_ms_desc] = None,
) -> dict[str, Any]:
    """Fetch raw HTML from a URL."""
    log_tool_call("fetch_url", f"URL: {url}")
    service = get_service(get_state())
    return await service.fetch_url(url, headers=headers, timeout_ms=timeout_ms)


@mcp.tool(
    title="extract_readable_markdown",
    description=settings.tool_extract_readable_markdown_desc,
)
@timeit("extract_readable_markdown tool")
async def extract_readable_markdown(
    html_or_url: Annotated[str, settings.arg_html_or_url_desc],
) -> dict[str, Any]:
    """Convert HTML to readable Markdown with headings and word count."""
    log_tool_call("extract_readable_markdown", describe_input(html_or_url))
    service = get_service(get_state())
    return await service.extract_readable_markdown(html_or_url)


@mcp.tool(
    title="extract_tables",
    description=settings.tool_extract_tables_desc,
)
@timeit("extract_tables tool")
async def extract_tables(
    html_or_url: Annotated[str, settings.arg_html_or_url_desc],
) -> dict[str, Any]:
    """Extract data tables as structured records."""
    log_tool_call("extract_tables", describe_input(html_or_url))
    service = get_service(get_state())
    return await service.extract_tables(html_or_url)


@mcp.tool(
    title="extract_metadata",
    description=settings.tool_extract_metadata_desc,
)
@timeit("extract_metadata tool")
async def extract_metadata(
    html_or_url: Annotated[str, settings.arg_html_or_url_desc],
) -> dict[str, Any]:
    """Extract page metadata through fallback chains."""
    log_tool_call("extract_metadata", describe_input(html_or_url))
    service = get_service(get_state())
    return await service.extract_metadata(html_or_url)


def main(argv: list[str] | None = None) -> None:
    """Run the MCP server."""
    args = parse_args(settings, argv)
    if args.transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="streamable-http", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
