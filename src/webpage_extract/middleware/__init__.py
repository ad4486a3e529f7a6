"""FastMCP middleware."""

from webpage_extract.middleware.redis_middleware import RedisLoggingMiddleware

__all__ = ["RedisLoggingMiddleware"]
