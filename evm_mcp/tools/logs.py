"""Event log query tool."""

from __future__ import annotations

from typing import List, Optional

from evm_mcp.rpc import default_client
from evm_mcp.tools.formatting import format_response, rpc_tool
from evm_mcp.tools.validators import build_log_filter


@rpc_tool
async def eth_get_logs(
    from_block: Optional[str] = None,
    to_block: Optional[str] = None,
    address: Optional[str] = None,
    topics: Optional[List[str]] = None,
    *,
    client=default_client,
) -> str:
    """
    Return logs matching a filter built from the supplied fields.

    With no fields at all an empty filter is sent and the node applies its
    own defaults (usually the latest block only).
    """
    log_filter = build_log_filter(
        from_block=from_block,
        to_block=to_block,
        address=address,
        topics=topics,
    )
    result = await client.call("eth_getLogs", [log_filter])
    logs = result or []
    return format_response(
        {
            "logs_count": len(logs),
            "logs": logs,
            "filter": log_filter,
        },
        "Event Logs",
    )
