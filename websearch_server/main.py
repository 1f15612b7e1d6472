"""
Purpose:
- FastAPI application factory and router mounts.
- Builds the MCP server (tool registry + session manager) exactly once per app; requests only read it.
- The session manager's task group lives for the app's lifespan.
- Uvicorn serves this on 0.0.0.0:$PORT (default 3000).
"""

from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from .core.logging import setup_logging
from .core.settings import settings
from .api.health import router as health_router
from .api.mcp import router as mcp_router
from .tools.search_tool import build_registry
from .tools.server import build_server

@asynccontextmanager
async def lifespan(app: FastAPI):
    async with app.state.mcp_session_manager.run():
        logger.info("MCP session manager started")
        yield

def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title="Web Search MCP Server", version=settings.server_version, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],
    )
    registry = build_registry()
    server = build_server(registry, settings.server_name, settings.server_version)
    app.state.tool_registry = registry
    app.state.mcp_server = server
    app.state.mcp_session_manager = StreamableHTTPSessionManager(app=server, stateless=True, json_response=True)
    app.include_router(health_router)
    app.include_router(mcp_router)
    return app

app = create_app()

def run() -> None:
    logger.info("MCP Web Search HTTP server is running on http://localhost:{}{}", settings.port, settings.mcp_path)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    run()
