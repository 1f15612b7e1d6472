"""
Purpose:
- One exception family for everything a tool call can fail with.
- Each class carries the JSON-RPC error code the caller sees; `to_mcp_error` hands it to the MCP SDK.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData

# Server-defined range (-32000..-32099)
TRANSPORT_ERROR = -32000
FETCH_ERROR = -32001
MARKUP_PARSE_ERROR = -32002

class ToolServerError(Exception):
    """Base class; subclasses pin `code`."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.data = data

    def to_error(self) -> ErrorData:
        data = {"type": type(self).__name__}
        if self.data:
            data.update(self.data)
        return ErrorData(code=self.code, message=self.message, data=data)

    def to_mcp_error(self) -> McpError:
        return McpError(self.to_error())

class InvalidParams(ToolServerError):
    code = INVALID_PARAMS

class MethodNotFound(ToolServerError):
    code = METHOD_NOT_FOUND

class FetchError(ToolServerError):
    """Upstream page could not be retrieved (network, timeout, non-2xx)."""

    code = FETCH_ERROR

class ParseError(ToolServerError):
    """Upstream body could not be parsed as markup at all."""

    code = MARKUP_PARSE_ERROR

class InternalError(ToolServerError):
    code = INTERNAL_ERROR
