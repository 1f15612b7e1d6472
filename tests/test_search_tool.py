import json

import pytest
from mcp import types
from mcp.shared.exceptions import McpError

from websearch_server.core.errors import FetchError, InternalError, InvalidParams, MethodNotFound, ParseError
from websearch_server.tools.registry import ToolRegistry
from websearch_server.tools.search_tool import SEARCH_TOOL, build_registry, validate_search_arguments
from websearch_server.tools.server import build_server
from websearch_server.search import service

from conftest import result_block, results_page


@pytest.fixture
def fetch_calls(monkeypatch, rust_page) -> list:
    calls: list = []

    async def fake_fetch(query: str) -> str:
        calls.append(query)
        return rust_page

    monkeypatch.setattr(service, "fetch_page", fake_fetch)
    return calls


def test_list_tools_exposes_search_descriptor() -> None:
    tools = build_registry().list_tools()

    assert [t.name for t in tools] == ["search"]
    schema = tools[0].inputSchema
    assert schema["required"] == ["query"]
    assert schema["properties"]["limit"]["minimum"] == 1
    assert schema["properties"]["limit"]["maximum"] == 10
    assert "results" in tools[0].outputSchema["properties"]


@pytest.mark.parametrize(
    "arguments",
    [
        None,
        "rust",
        [],
        {},
        {"limit": 3},
        {"query": ""},
        {"query": "   "},
        {"query": 42},
        {"query": "rust", "limit": "3"},
        {"query": "rust", "limit": True},
        {"query": "rust", "limit": float("nan")},
    ],
)
def test_validate_search_arguments_rejects(arguments) -> None:
    with pytest.raises(InvalidParams):
        validate_search_arguments(arguments)


def test_validate_search_arguments_accepts_optional_limit() -> None:
    assert validate_search_arguments({"query": "rust"}).limit is None
    assert validate_search_arguments({"query": "rust", "limit": 3}).limit == 3
    assert validate_search_arguments({"query": "rust", "limit": 2.5}).limit == 2.5


@pytest.mark.asyncio
async def test_invalid_arguments_never_fetch(fetch_calls) -> None:
    registry = build_registry()

    with pytest.raises(InvalidParams):
        await registry.call("search", {"limit": 3})

    assert fetch_calls == []


@pytest.mark.asyncio
async def test_unknown_tool_is_method_not_found(fetch_calls) -> None:
    with pytest.raises(MethodNotFound, match="Unknown tool: lookup"):
        await build_registry().call("lookup", {"query": "rust"})

    assert fetch_calls == []


@pytest.mark.asyncio
async def test_search_call_envelope_text_matches_structured(fetch_calls) -> None:
    envelope = await build_registry().call("search", {"query": "rust programming", "limit": 3})

    assert fetch_calls == ["rust programming"]
    assert envelope.isError is False
    structured = envelope.structuredContent
    assert [r["title"] for r in structured["results"]] == [
        "Rust Programming Language",
        "The Rust Book",
        "Rust by Example",
    ]
    assert json.loads(envelope.content[0].text) == structured
    assert envelope.content[0].type == "text"


@pytest.mark.asyncio
async def test_search_limit_above_max_is_clamped(monkeypatch) -> None:
    page = results_page(*[result_block(f"Hit {i}", f"https://example.com/{i}") for i in range(20)])

    async def fake_fetch(query: str) -> str:
        return page

    monkeypatch.setattr(service, "fetch_page", fake_fetch)

    envelope = await build_registry().call("search", {"query": "many", "limit": 25})

    assert len(envelope.structuredContent["results"]) == 10


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [FetchError("upstream returned HTTP 503"), ParseError("not markup")])
async def test_fetch_and_parse_errors_propagate_unchanged(monkeypatch, error) -> None:
    async def failing_fetch(query: str) -> str:
        raise error

    monkeypatch.setattr(service, "fetch_page", failing_fetch)

    with pytest.raises(type(error)) as exc_info:
        await build_registry().call("search", {"query": "rust"})

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_unexpected_handler_error_becomes_internal_error() -> None:
    async def broken(arguments):
        raise KeyError("boom")

    registry = ToolRegistry()
    registry.register(types.Tool(name="broken", description="x", inputSchema={"type": "object"}), broken)

    with pytest.raises(InternalError) as exc_info:
        await registry.call("broken", {})

    assert "boom" not in exc_info.value.message


def test_register_rejects_duplicate_names() -> None:
    registry = build_registry()

    with pytest.raises(ValueError):
        registry.register(SEARCH_TOOL, lambda arguments: None)


@pytest.mark.asyncio
async def test_server_call_handler_raises_mcp_error_with_code(fetch_calls) -> None:
    server = build_server(build_registry(), "web-search", "0.1.0")
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="search", arguments={"limit": 2}),
    )

    with pytest.raises(McpError) as exc_info:
        await handler(request)

    assert exc_info.value.error.code == types.INVALID_PARAMS
    assert exc_info.value.error.data["type"] == "InvalidParams"
    assert fetch_calls == []


@pytest.mark.asyncio
async def test_server_call_handler_returns_structured_result(fetch_calls) -> None:
    server = build_server(build_registry(), "web-search", "0.1.0")
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="search", arguments={"query": "rust", "limit": 1}),
    )

    result = (await server.request_handlers[types.CallToolRequest](request)).root

    assert isinstance(result, types.CallToolResult)
    assert result.structuredContent["results"][0]["url"] == "https://www.rust-lang.org/"
