"""Network identity and peer tools."""

from __future__ import annotations

from evm_mcp.rpc import default_client
from evm_mcp.tools.conversions import chain_name, hex_to_int
from evm_mcp.tools.formatting import format_response, rpc_tool


@rpc_tool
async def eth_chain_id(*, client=default_client) -> str:
    """Return the chain id in hex and decimal plus a human network name."""
    result = await client.call("eth_chainId")
    chain_id = hex_to_int(result)
    return format_response(
        {
            "chain_id_hex": result,
            "chain_id_decimal": chain_id,
            "chain_name": chain_name(chain_id),
        },
        "Network Chain ID",
    )


@rpc_tool
async def net_version(*, client=default_client) -> str:
    result = await client.call("net_version")
    return format_response({"network_id": result}, "Network Version")


@rpc_tool
async def net_listening(*, client=default_client) -> str:
    result = await client.call("net_listening")
    return format_response({"is_listening": result}, "Network Status")


@rpc_tool
async def net_peer_count(*, client=default_client) -> str:
    result = await client.call("net_peerCount")
    return format_response(
        {
            "peer_count_hex": result,
            "peer_count_decimal": hex_to_int(result),
        },
        "Connected Peers",
    )
