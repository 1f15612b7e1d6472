"""
Purpose:
- Hold the static set of remote-callable tools (mcp.types.Tool + handler).
- Route a tools/call to its handler and shape the CallToolResult.

Notes:
- The registry is filled once at startup and only read afterwards.
- Handlers receive the raw, untyped arguments and must validate them before any I/O.
"""

from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List
from loguru import logger
from mcp import types
from ..core.errors import InternalError, MethodNotFound, ToolServerError

ToolHandler = Callable[[Any], Awaitable[Dict[str, Any]]]

@dataclass(frozen=True)
class RegisteredTool:
    tool: types.Tool
    handler: ToolHandler

class ToolRegistry:
    def __init__(self) -> None:
        self._tools: Dict[str, RegisteredTool] = {}

    def register(self, tool: types.Tool, handler: ToolHandler) -> None:
        if tool.name in self._tools:
            raise ValueError(f"tool already registered: {tool.name}")
        self._tools[tool.name] = RegisteredTool(tool=tool, handler=handler)

    def names(self) -> List[str]:
        return list(self._tools)

    def list_tools(self) -> List[types.Tool]:
        return [t.tool for t in self._tools.values()]

    async def call(self, name: str, arguments: Any) -> types.CallToolResult:
        """
        Run tool `name` and wrap its structured payload.
        - unknown name -> MethodNotFound (handler never runs)
        - ToolServerError from the handler propagates as-is
        - anything else -> InternalError, details only in the server log
        """
        registered = self._tools.get(name)
        if registered is None:
            raise MethodNotFound(f"Unknown tool: {name}")

        logger.info("Tool call: {}", name)
        try:
            structured = await registered.handler(arguments)
        except ToolServerError:
            raise
        except Exception as e:
            logger.exception("Tool {} failed unexpectedly", name)
            raise InternalError("Internal error") from e

        return types.CallToolResult(
            content=[types.TextContent(type="text", text=json.dumps(structured, indent=2))],
            structuredContent=structured,
            isError=False,
        )
