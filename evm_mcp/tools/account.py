"""Account and contract state tools."""

from __future__ import annotations

from typing import Optional

from evm_mcp.rpc import default_client
from evm_mcp.tools.conversions import format_ether, hex_to_int
from evm_mcp.tools.formatting import format_response, rpc_tool
from evm_mcp.tools.validators import normalize_block_tag


@rpc_tool
async def eth_get_balance(
    address: str, block_number: Optional[str] = None, *, client=default_client
) -> str:
    """
    Return the balance of ``address`` in wei and ether.

    Args:
        address: Account address (0x-prefixed).
        block_number: Block number or tag; defaults to ``latest``.
        client: JSON-RPC client (override for testing).

    Returns:
        Formatted text, or ``Error: ...`` text on failure.
    """
    block_tag = normalize_block_tag(block_number)
    result = await client.call("eth_getBalance", [address, block_tag])
    return format_response(
        {
            "address": address,
            "balance_wei": result,
            "balance_eth": format_ether(result),
            "block": block_tag,
        },
        "Account Balance",
    )


@rpc_tool
async def eth_get_transaction_count(
    address: str, block_number: Optional[str] = None, *, client=default_client
) -> str:
    """Return the nonce (number of sent transactions) of ``address``."""
    block_tag = normalize_block_tag(block_number)
    result = await client.call("eth_getTransactionCount", [address, block_tag])
    return format_response(
        {
            "address": address,
            "nonce_hex": result,
            "nonce_decimal": hex_to_int(result),
            "block": block_tag,
        },
        "Transaction Count (Nonce)",
    )


@rpc_tool
async def eth_get_code(
    address: str, block_number: Optional[str] = None, *, client=default_client
) -> str:
    block_tag = normalize_block_tag(block_number)
    result = await client.call("eth_getCode", [address, block_tag])
    # Length of the hex string as returned, "0x" prefix included.
    return format_response(
        {
            "address": address,
            "code": result,
            "code_length": len(result or ""),
            "block": block_tag,
        },
        "Contract Code",
    )


@rpc_tool
async def eth_get_storage_at(
    address: str,
    position: str,
    block_number: Optional[str] = None,
    *,
    client=default_client,
) -> str:
    block_tag = normalize_block_tag(block_number)
    result = await client.call("eth_getStorageAt", [address, position, block_tag])
    return format_response(
        {
            "address": address,
            "position": position,
            "value": result,
            "block": block_tag,
        },
        "Storage Value",
    )
