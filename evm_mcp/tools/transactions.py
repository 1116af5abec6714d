"""Transaction lookup and submission tools."""

from __future__ import annotations

import logging

from evm_mcp.rpc import default_client
from evm_mcp.tools.formatting import format_response, rpc_tool

logger = logging.getLogger(__name__)

SUBMITTED_STATUS = "Transaction submitted successfully"


@rpc_tool
async def eth_get_transaction_by_hash(tx_hash: str, *, client=default_client) -> str:
    result = await client.call("eth_getTransactionByHash", [tx_hash])
    if not result:
        logger.debug("Transaction %s not found", tx_hash)
        return f"Transaction not found: {tx_hash}"
    return format_response(result, "Transaction Information")


@rpc_tool
async def eth_get_transaction_receipt(tx_hash: str, *, client=default_client) -> str:
    result = await client.call("eth_getTransactionReceipt", [tx_hash])
    if not result:
        logger.debug("Receipt for %s not found", tx_hash)
        return f"Transaction receipt not found: {tx_hash}"
    return format_response(result, "Transaction Receipt")


@rpc_tool
async def eth_send_raw_transaction(signed_transaction_data: str, *, client=default_client) -> str:
    """
    Broadcast an already-signed transaction.

    Nothing is signed locally; the payload is forwarded to the node as-is.
    """
    result = await client.call("eth_sendRawTransaction", [signed_transaction_data])
    logger.info("Raw transaction submitted hash=%s", result)
    return format_response(
        {
            "transaction_hash": result,
            "status": SUBMITTED_STATUS,
        },
        "Raw Transaction Sent",
    )
