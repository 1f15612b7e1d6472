"""
Purpose:
- Smoke-check a running server: handshake, list tools, optionally run one search.
- Usage: python scripts/list_tools.py [query] [limit]   (MCP_URL overrides the endpoint)
"""

import asyncio
import json
import os
import sys
from websearch_server.client import McpClient

async def main() -> None:
    url = os.getenv("MCP_URL", "http://localhost:3000/mcp")
    async with McpClient(url) as client:
        for tool in await client.list_tools():
            print(tool.name, "-", tool.description or "")
        if len(sys.argv) > 1:
            limit = int(sys.argv[2]) if len(sys.argv) > 2 else None
            results = await client.search(sys.argv[1], limit)
            print(json.dumps([r.model_dump() for r in results], indent=2))

asyncio.run(main())
