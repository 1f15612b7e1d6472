"""
Purpose:
- Declare the `search` tool (name, description, input/output JSON schemas).
- Validate raw call arguments into a SearchRequest before any network I/O.
"""

from __future__ import annotations
from typing import Any, Dict
from mcp import types
from pydantic import ValidationError
from ..core.errors import InvalidParams
from ..search import service as search_service
from ..search.schema import SearchRequest, SearchResponse
from .registry import ToolRegistry

SEARCH_TOOL = types.Tool(
    name="search",
    description="Search the web using Google (no API key required)",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search query"},
            "limit": {
                "type": "number",
                "description": "Maximum number of results to return (default: 5)",
                "minimum": 1,
                "maximum": 10,
            },
        },
        "required": ["query"],
    },
    outputSchema={
        "type": "object",
        "properties": {
            "results": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "title": {"type": "string"},
                        "url": {"type": "string"},
                        "description": {"type": "string"},
                    },
                    "required": ["title", "url", "description"],
                },
            },
        },
        "required": ["results"],
    },
)

def validate_search_arguments(arguments: Any) -> SearchRequest:
    if not isinstance(arguments, dict):
        raise InvalidParams("Invalid search arguments")
    try:
        return SearchRequest.model_validate(arguments)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        raise InvalidParams("Invalid search arguments", {"errors": errors}) from e

async def call_search(arguments: Any) -> Dict[str, Any]:
    req = validate_search_arguments(arguments)
    results = await search_service.search(req.query, req.limit)
    return SearchResponse(results=results).model_dump()

def build_registry() -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(SEARCH_TOOL, call_search)
    return registry
