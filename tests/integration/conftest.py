"""Pytest configuration for integration tests.

These tests drive the real server through an in-memory MCP client, so no
server process or network access is needed. Inputs are raw HTML.
Run: pytest tests/integration
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from fastmcp import Client

from webpage_extract.server import ServerState, mcp


@pytest.fixture
async def mcp_client() -> AsyncGenerator[Client[Any]]:
    """Provide an MCP client connected to the server in memory."""
    state = ServerState()
    await state.start()
    mcp.state = state
    try:
        async with Client(mcp) as client:
            yield client
    finally:
        await state.stop()
        mcp.state = None

