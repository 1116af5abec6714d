"""MCP server over stdin/stdout using the MCP SDK's low-level Server."""

from __future__ import annotations

import logging
from typing import Any, List

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from evm_mcp import MCP_SERVER_NAME, MCP_SERVER_VERSION, catalog
from evm_mcp.rpc import default_client

logger = logging.getLogger(__name__)

server: Server = Server(MCP_SERVER_NAME, version=MCP_SERVER_VERSION)


@server.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(name=tool["name"], description=tool["description"], inputSchema=tool["inputSchema"])
        for tool in catalog.list_tools()
    ]


# Arguments are checked by the catalog so failures keep the "Error: ..." text form.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Any) -> List[TextContent]:
    text = await catalog.call_tool(name, arguments if arguments is not None else {})
    return [TextContent(type="text", text=text)]


async def serve() -> None:
    """Serve MCP requests on stdio until the host closes the stream."""
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("MCP stdio transport ready")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await default_client.aclose()
