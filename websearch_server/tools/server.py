"""
Purpose:
- Build the single MCP low-level Server that fronts the tool registry.
- The SDK owns the protocol (initialize, ping, notifications, envelopes); this module only wires tools in.

Notes:
- tools/call is registered as a raw request handler: the call_tool() decorator would turn
  raised errors into isError results, and callers must get the JSON-RPC code of each error kind.
"""

from __future__ import annotations
from loguru import logger
from mcp import types
from mcp.server.lowlevel import Server
from ..core.errors import ToolServerError
from .registry import ToolRegistry

def build_server(registry: ToolRegistry, name: str, version: str) -> Server:
    server = Server(name, version=version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.list_tools()

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await registry.call(req.params.name, req.params.arguments)
        except ToolServerError as e:
            logger.info("Tool {} failed: {} ({})", req.params.name, e.message, type(e).__name__)
            raise e.to_mcp_error() from e
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = call_tool
    return server
