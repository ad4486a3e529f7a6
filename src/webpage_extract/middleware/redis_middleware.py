"""Redis middleware that keeps an audit log of tool calls."""

import json
import secrets
import time
from typing import Any

from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools.tool import ToolResult
from redis.asyncio import Redis

from webpage_extract.config import settings
from webpage_extract.logger import logger


def _response_payload(result: Any) -> Any:
    """Recover the envelope (or its text) from a tool result."""
    if isinstance(result, ToolResult):
        if result.structured_content:
            return result.structured_content
        texts = [getattr(item, "text", str(item)) for item in result.content]
        joined = "\n".join(texts)
        try:
            return json.loads(joined)
        except ValueError:
            return joined
    return result


class RedisLoggingMiddleware(Middleware):
    """Middleware that stores tool parameters and envelopes in Redis."""

    def __init__(self, redis_url: str = "") -> None:
        """Initialize the middleware.

        The client is created on startup and released on shutdown.

        Args:
            redis_url: Redis connection URL; empty disables the middleware

        """
        self._redis_url = redis_url
        self.redis_client: Redis | None = None

    async def startup(self) -> None:
        """Open the Redis client."""
        if self._redis_url and self.redis_client is None:
            self.redis_client = Redis.from_url(self._redis_url)
            logger.info("Redis audit log enabled")

    async def shutdown(self) -> None:
        """Close the Redis client."""
        if self.redis_client is not None:
            await self.redis_client.aclose()
            self.redis_client = None

    async def on_call_tool(self, context: MiddlewareContext, call_next: Any) -> Any:
        """Process the tool call and store params and envelope in Redis.

        Args:
            context: The middleware context
            call_next: Function to process the next middleware or tool

        Returns:
            The result from the tool execution

        """
        # If Redis is not configured, just pass through
        if self.redis_client is None:
            return await call_next(context)

        result = await call_next(context)

        try:
            payload = _response_payload(result)
            envelope = payload if isinstance(payload, dict) else {}
            log_data = {
                "tool": context.message.name,
                "params": context.message.arguments,
                "ok": envelope.get("ok"),
                "error_code": (envelope.get("error") or {}).get("code"),
                "response": payload,
            }

            key = f"{settings.redis_key_prefix}:{int(time.time())}:{secrets.token_hex(4)}"
            await self.redis_client.setex(
                key,
                settings.redis_expiration_seconds,
                json.dumps(log_data, default=str),
            )
        except Exception:
            # Audit logging never fails the tool call
            logger.exception("Failed to store tool call in Redis")

        return result
