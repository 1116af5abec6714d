"""Client-level tools (web3_* namespace)."""

from __future__ import annotations

from evm_mcp.rpc import default_client
from evm_mcp.tools.formatting import format_response, rpc_tool


@rpc_tool
async def web3_client_version(*, client=default_client) -> str:
    """Return the node client version string."""
    result = await client.call("web3_clientVersion")
    return format_response(result, "Web3 Client Version")


@rpc_tool
async def web3_sha3(data: str, *, client=default_client) -> str:
    """Return the Keccak-256 hash of hex ``data`` as computed by the node."""
    result = await client.call("web3_sha3", [data])
    return format_response(result, "Keccak-256 Hash")
