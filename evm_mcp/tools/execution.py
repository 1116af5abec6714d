"""Message-call, gas estimation and gas price tools."""

from __future__ import annotations

from typing import Optional

from evm_mcp.rpc import default_client
from evm_mcp.tools.conversions import format_gwei, hex_to_int
from evm_mcp.tools.formatting import format_response, rpc_tool
from evm_mcp.tools.validators import build_transaction_object, normalize_block_tag


@rpc_tool
async def eth_call(
    to: str,
    data: str,
    block_number: Optional[str] = None,
    from_address: Optional[str] = None,
    value: Optional[str] = None,
    gas: Optional[str] = None,
    gas_price: Optional[str] = None,
    *,
    client=default_client,
) -> str:
    """
    Execute a read-only message call against a contract.

    Optional transaction fields are only sent when supplied.
    """
    block_tag = normalize_block_tag(block_number)
    tx_object = build_transaction_object(
        to=to,
        data=data,
        from_address=from_address,
        value=value,
        gas=gas,
        gas_price=gas_price,
    )
    result = await client.call("eth_call", [tx_object, block_tag])
    return format_response(
        {
            "result": result,
            "to": to,
            "data": data,
            "block": block_tag,
        },
        "Contract Call Result",
    )


@rpc_tool
async def eth_estimate_gas(
    to: Optional[str] = None,
    data: Optional[str] = None,
    from_address: Optional[str] = None,
    value: Optional[str] = None,
    gas: Optional[str] = None,
    gas_price: Optional[str] = None,
    *,
    client=default_client,
) -> str:
    tx_object = build_transaction_object(
        to=to,
        data=data,
        from_address=from_address,
        value=value,
        gas=gas,
        gas_price=gas_price,
    )
    result = await client.call("eth_estimateGas", [tx_object])
    return format_response(
        {
            "gas_estimate_hex": result,
            "gas_estimate_decimal": hex_to_int(result),
            "transaction_object": tx_object,
        },
        "Gas Estimate",
    )


@rpc_tool
async def eth_gas_price(*, client=default_client) -> str:
    result = await client.call("eth_gasPrice")
    gas_price = hex_to_int(result)
    return format_response(
        {
            "gas_price_hex": result,
            "gas_price_wei": str(gas_price),
            "gas_price_gwei": format_gwei(gas_price),
        },
        "Current Gas Price",
    )
