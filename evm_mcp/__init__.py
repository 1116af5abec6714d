"""
EVM MCP server package.

Exposes Ethereum JSON-RPC methods as MCP tools so an assistant host can query
balances, blocks, transactions, logs and gas prices from one configured node.
See DESIGN.md for full details.
"""

MCP_SERVER_NAME = "evm-mcp"
MCP_SERVER_VERSION = "1.0.0"

__all__ = ["MCP_SERVER_NAME", "MCP_SERVER_VERSION", "config"]
