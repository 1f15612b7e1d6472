"""
Purpose:
- Minimal async client for the MCP search server, on the SDK's streamable HTTP transport.
- Entering the client connects and runs the initialize handshake; then tools/list and tools/call("search").

Notes:
- JSON-RPC error responses surface as mcp.shared.exceptions.McpError (`.error.code`).
"""

from __future__ import annotations
from contextlib import AsyncExitStack
from typing import Any, Callable, Dict, List, Optional
import httpx
from loguru import logger
from mcp import ClientSession, types
from mcp.client.streamable_http import streamablehttp_client
from .search.schema import SearchResult

CLIENT_NAME = "streamable-http-client"
CLIENT_VERSION = "1.0.0"

class McpClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000/mcp",
        timeout: float = 30.0,
        httpx_client_factory: Optional[Callable[..., httpx.AsyncClient]] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.httpx_client_factory = httpx_client_factory
        self._stack: Optional[AsyncExitStack] = None
        self._session: Optional[ClientSession] = None
        self.server_info: Optional[types.Implementation] = None

    async def __aenter__(self) -> "McpClient":
        stack = AsyncExitStack()
        try:
            transport_kwargs: Dict[str, Any] = {"timeout": self.timeout}
            if self.httpx_client_factory is not None:
                transport_kwargs["httpx_client_factory"] = self.httpx_client_factory
            read_stream, write_stream, _ = await stack.enter_async_context(
                streamablehttp_client(self.base_url, **transport_kwargs)
            )
            session = await stack.enter_async_context(
                ClientSession(
                    read_stream,
                    write_stream,
                    client_info=types.Implementation(name=CLIENT_NAME, version=CLIENT_VERSION),
                )
            )
            result = await session.initialize()
        except BaseException:
            await stack.aclose()
            raise
        self._stack = stack
        self._session = session
        self.server_info = result.serverInfo
        logger.info("Connected to {} {}", result.serverInfo.name, result.serverInfo.version)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        stack, self._stack, self._session = self._stack, None, None
        if stack is not None:
            await stack.aclose()

    @property
    def session(self) -> ClientSession:
        if self._session is None:
            raise RuntimeError("McpClient must be used as an async context manager")
        return self._session

    async def list_tools(self) -> List[types.Tool]:
        result = await self.session.list_tools()
        return result.tools

    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        return await self.session.call_tool(name, arguments)

    async def search(self, query: str, limit: Optional[int] = None) -> List[SearchResult]:
        args: Dict[str, Any] = {"query": query}
        if limit is not None:
            args["limit"] = limit
        result = await self.call_tool("search", args)
        payload = result.structuredContent or {}
        return [SearchResult(**r) for r in payload.get("results", [])]
