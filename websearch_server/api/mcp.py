"""
Purpose:
- Bind the MCP session manager (stateless streamable HTTP, JSON responses) to a single HTTP path.
- POST carries JSON-RPC payloads; GET/DELETE answer 405 (no SSE stream, no sessions to end).
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.types import INTERNAL_ERROR
from starlette.types import Message, Receive, Scope, Send
from ..core.errors import TRANSPORT_ERROR
from ..core.settings import settings

router = APIRouter(tags=["mcp"])

def _jsonrpc_error(status_code: int, code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"jsonrpc": "2.0", "error": {"code": code, "message": message}, "id": None},
        headers=headers,
    )

class McpEndpoint:
    """Raw ASGI endpoint: hands POST requests to the app's session manager."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        manager: StreamableHTTPSessionManager = scope["app"].state.mcp_session_manager
        started = False

        async def send_tracking(message: Message) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await manager.handle_request(scope, receive, send_tracking)
        except Exception:
            logger.exception("Error handling MCP request")
            if not started:
                await _jsonrpc_error(500, INTERNAL_ERROR, "Internal server error")(scope, receive, send)
        finally:
            logger.debug("Request closed")

router.add_route(settings.mcp_path, McpEndpoint(), methods=["POST"])

@router.get(settings.mcp_path)
async def mcp_get():
    logger.info("GET not allowed")
    return _jsonrpc_error(405, TRANSPORT_ERROR, "Method not allowed.", headers={"Allow": "POST"})

@router.delete(settings.mcp_path)
async def mcp_delete():
    logger.info("DELETE not allowed")
    return _jsonrpc_error(405, TRANSPORT_ERROR, "Method not allowed.", headers={"Allow": "POST"})
