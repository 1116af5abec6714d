"""Block-related tools."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from evm_mcp.rpc import default_client
from evm_mcp.tools.conversions import hex_to_int
from evm_mcp.tools.formatting import format_response, rpc_tool
from evm_mcp.tools.validators import normalize_block_tag

logger = logging.getLogger(__name__)

BLOCK_SUMMARY_FIELDS = ("number", "hash", "parentHash", "timestamp", "gasLimit", "gasUsed")


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _summarize_block(block: Dict[str, Any]) -> Dict[str, Any]:
    summary: Dict[str, Any] = {field: block.get(field) for field in BLOCK_SUMMARY_FIELDS}
    summary["transactionCount"] = len(block.get("transactions") or [])
    summary["baseFeePerGas"] = block.get("baseFeePerGas")
    return summary


@rpc_tool
async def eth_block_number(*, client=default_client) -> str:
    result = await client.call("eth_blockNumber")
    return format_response(
        {
            "hex": result,
            "decimal": hex_to_int(result),
            "timestamp": _utc_timestamp(),
        },
        "Latest Block Number",
    )


@rpc_tool
async def eth_get_block_by_number(
    block_number: Optional[str] = None,
    include_transactions: bool = False,
    *,
    client=default_client,
) -> str:
    """
    Summarize a block selected by number or tag.

    Only header fields plus the transaction count are reported, even when
    full transaction objects are requested from the node.
    """
    block_tag = normalize_block_tag(block_number)
    result = await client.call("eth_getBlockByNumber", [block_tag, include_transactions])
    if not result:
        logger.debug("Block %s not found", block_tag)
        return f"Block not found: {block_tag}"
    return format_response(_summarize_block(result), "Block Information")
