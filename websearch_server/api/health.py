# Common language: Environment/ops check that surfaces version pins, effective config, and registered tools.
# Use this before/after upgrades to confirm no silent drift.

from fastapi import APIRouter, Request
from ..core.settings import settings
import sys, importlib

router = APIRouter(tags=["health"])

def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except Exception:
        return "not-installed"

@router.get("/healthz")
def healthz(request: Request):
    server = request.app.state.mcp_server
    registry = request.app.state.tool_registry
    return {
        "status": "ok",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "pydantic": _ver("pydantic"),
            "pydantic_settings": _ver("pydantic_settings"),
            "httpx": _ver("httpx"),
            "selectolax": _ver("selectolax"),
            "loguru": _ver("loguru"),
            "mcp": _ver("mcp"),
        },
        "server": {"name": server.name, "version": server.version, "path": settings.mcp_path},
        "search_config": {
            "endpoint": settings.search_endpoint,
            "timeout": settings.fetch_timeout,
            "default_limit": settings.default_limit,
            "max_limit": settings.max_limit,
            "selectors": {
                "container": settings.result_container_selector,
                "title": settings.result_title_selector,
                "link": settings.result_link_selector,
                "snippet": settings.result_snippet_selector,
            },
        },
        "tools": registry.names(),
    }
