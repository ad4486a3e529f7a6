"""Timing utilities for tool calls and pipeline stages."""

import asyncio
import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from webpage_extract.logger import logger

__all__ = ["describe_outcome", "timeit", "timer"]

P = ParamSpec("P")
R = TypeVar("R")


def describe_outcome(result: Any) -> str:
    """Summarize a call result for the timing log.

    Envelopes report ``ok`` or their error code; anything else reports ``done``.
    """
    if isinstance(result, dict) and "ok" in result:
        if result["ok"]:
            return "ok"
        return str(result.get("error", {}).get("code", "error"))
    return "done"


@contextmanager
def timer(name: str = "Operation", log_level: int = logging.DEBUG) -> Iterator[None]:
    """Context manager for timing code blocks.

    Args:
        name: Name of the operation being timed
        log_level: Logging level to use (default: DEBUG)

    Example:
        >>> with timer("Table extraction"):
        ...     output = parser.extract_tables(html)

    """
    start_time = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.log(log_level, "%s took %.1f ms", name, elapsed_ms)


def timeit(
    name: str | None = None, log_level: int = logging.INFO
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Time function execution and log the outcome (supports both sync and async).

    Args:
        name: Custom name for the operation (default: uses function name)
        log_level: Logging level to use (default: INFO)

    Example:
        >>> @mcp.tool()
        ... @timeit("extract_tables tool")
        ... async def extract_tables(html_or_url: str) -> dict[str, Any]:
        ...     ...

    """
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        operation_name = name or f"{func.__module__}.{func.__name__}"

        if asyncio.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
                start_time = time.perf_counter()
                outcome = "raised"
                try:
                    result = await func(*args, **kwargs)
                    outcome = describe_outcome(result)
                    return result
                finally:
                    elapsed_ms = (time.perf_counter() - start_time) * 1000
                    logger.log(
                        log_level, "%s took %.1f ms (%s)", operation_name, elapsed_ms, outcome
                    )
            return async_wrapper  # type: ignore[return-value]

        @wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start_time = time.perf_counter()
            outcome = "raised"
            try:
                result = func(*args, **kwargs)
                outcome = describe_outcome(result)
                return result
            finally:
                elapsed_ms = (time.perf_counter() - start_time) * 1000
                logger.log(log_level, "%s took %.1f ms (%s)", operation_name, elapsed_ms, outcome)
        return sync_wrapper
    return decorator
