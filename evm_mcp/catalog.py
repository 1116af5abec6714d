"""
Static catalog of MCP tools backed by Ethereum JSON-RPC methods.

Each entry maps an MCP tool name to its JSON input schema and the coroutine
that implements it. The catalog is built once at import and exposed read-only;
both the stdio and HTTP transports dispatch through ``call_tool``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

import jsonschema

from evm_mcp.metrics import default_metrics
from evm_mcp.tools import (
    eth_block_number,
    eth_call,
    eth_chain_id,
    eth_estimate_gas,
    eth_gas_price,
    eth_get_balance,
    eth_get_block_by_number,
    eth_get_code,
    eth_get_logs,
    eth_get_storage_at,
    eth_get_transaction_by_hash,
    eth_get_transaction_count,
    eth_get_transaction_receipt,
    eth_send_raw_transaction,
    net_listening,
    net_peer_count,
    net_version,
    web3_client_version,
    web3_sha3,
)
from evm_mcp.tools.validators import DEFAULT_BLOCK_TAG

logger = logging.getLogger(__name__)

BLOCK_DESCRIPTION = "Block number or 'latest', 'earliest', 'pending'"

ToolCallable = Callable[..., Awaitable[str]]


def _string(description: str, **extra: Any) -> Dict[str, Any]:
    return {"type": "string", "description": description, **extra}


def _block_param() -> Dict[str, Any]:
    return _string(BLOCK_DESCRIPTION, default=DEFAULT_BLOCK_TAG)


def _object_schema(properties: Dict[str, Any], required: Optional[List[str]] = None) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": required or [],
        "additionalProperties": False,
    }


def _transaction_properties(*, optional_target: bool) -> Dict[str, Any]:
    if optional_target:
        target = {
            "to": _string("Contract address (optional for contract creation)"),
            "data": _string("Data to send (hex string)"),
        }
    else:
        target = {
            "to": _string("Contract address"),
            "data": _string("Data to send (hex string)"),
        }
    return {
        **target,
        "from": _string("From address (optional)"),
        "value": _string("Value in wei (optional)"),
        "gas": _string("Gas limit (optional)"),
        "gasPrice": _string("Gas price (optional)"),
    }


TRANSACTION_ARGUMENTS = {"from": "from_address", "gasPrice": "gas_price"}


@dataclass(slots=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]
    callable: ToolCallable
    # MCP argument name -> Python keyword, where they differ
    arguments: Dict[str, str] = field(default_factory=dict)


_TOOLS: List[ToolDefinition] = [
    ToolDefinition(
        name="web3_clientVersion",
        description="Returns the current client version",
        input_schema=_object_schema({}),
        callable=web3_client_version,
    ),
    ToolDefinition(
        name="web3_sha3",
        description="Returns Keccak-256 hash of the given data",
        input_schema=_object_schema(
            {"data": _string("Data to hash (hex string starting with 0x)")}, ["data"]
        ),
        callable=web3_sha3,
    ),
    ToolDefinition(
        name="eth_blockNumber",
        description="Returns the number of the most recent block",
        input_schema=_object_schema({}),
        callable=eth_block_number,
    ),
    ToolDefinition(
        name="eth_getBalance",
        description="Returns the balance of the account of given address",
        input_schema=_object_schema(
            {
                "address": _string("Address to check balance for"),
                "blockNumber": _block_param(),
            },
            ["address"],
        ),
        callable=eth_get_balance,
        arguments={"blockNumber": "block_number"},
    ),
    ToolDefinition(
        name="eth_getTransactionCount",
        description="Returns the number of transactions sent from an address",
        input_schema=_object_schema(
            {
                "address": _string("Address to check transaction count for"),
                "blockNumber": _block_param(),
            },
            ["address"],
        ),
        callable=eth_get_transaction_count,
        arguments={"blockNumber": "block_number"},
    ),
    ToolDefinition(
        name="eth_getBlockByNumber",
        description="Returns information about a block by block number",
        input_schema=_object_schema(
            {
                "blockNumber": _string("Block number (hex) or 'latest', 'earliest', 'pending'"),
                "includeTransactions": {
                    "type": "boolean",
                    "description": "Include full transaction objects",
                    "default": False,
                },
            },
            ["blockNumber"],
        ),
        callable=eth_get_block_by_number,
        arguments={"blockNumber": "block_number", "includeTransactions": "include_transactions"},
    ),
    ToolDefinition(
        name="eth_getTransactionByHash",
        description="Returns the information about a transaction requested by transaction hash",
        input_schema=_object_schema({"txHash": _string("Transaction hash")}, ["txHash"]),
        callable=eth_get_transaction_by_hash,
        arguments={"txHash": "tx_hash"},
    ),
    ToolDefinition(
        name="eth_getTransactionReceipt",
        description="Returns the receipt of a transaction by transaction hash",
        input_schema=_object_schema({"txHash": _string("Transaction hash")}, ["txHash"]),
        callable=eth_get_transaction_receipt,
        arguments={"txHash": "tx_hash"},
    ),
    ToolDefinition(
        name="eth_call",
        description="Executes a new message call immediately without creating a transaction",
        input_schema=_object_schema(
            {
                **_transaction_properties(optional_target=False),
                "blockNumber": _block_param(),
            },
            ["to", "data"],
        ),
        callable=eth_call,
        arguments={**TRANSACTION_ARGUMENTS, "blockNumber": "block_number"},
    ),
    ToolDefinition(
        name="eth_estimateGas",
        description="Generates and returns an estimate of how much gas is necessary",
        input_schema=_object_schema(_transaction_properties(optional_target=True)),
        callable=eth_estimate_gas,
        arguments=dict(TRANSACTION_ARGUMENTS),
    ),
    ToolDefinition(
        name="eth_sendRawTransaction",
        description="Creates new message call transaction or a contract creation",
        input_schema=_object_schema(
            {"signedTransactionData": _string("Signed transaction data (hex string)")},
            ["signedTransactionData"],
        ),
        callable=eth_send_raw_transaction,
        arguments={"signedTransactionData": "signed_transaction_data"},
    ),
    ToolDefinition(
        name="eth_gasPrice",
        description="Returns the current price per gas in wei",
        input_schema=_object_schema({}),
        callable=eth_gas_price,
    ),
    ToolDefinition(
        name="eth_getCode",
        description="Returns code at a given address",
        input_schema=_object_schema(
            {
                "address": _string("Contract address"),
                "blockNumber": _block_param(),
            },
            ["address"],
        ),
        callable=eth_get_code,
        arguments={"blockNumber": "block_number"},
    ),
    ToolDefinition(
        name="eth_getStorageAt",
        description="Returns the value from a storage position at a given address",
        input_schema=_object_schema(
            {
                "address": _string("Contract address"),
                "position": _string("Storage position (hex string)"),
                "blockNumber": _block_param(),
            },
            ["address", "position"],
        ),
        callable=eth_get_storage_at,
        arguments={"blockNumber": "block_number"},
    ),
    ToolDefinition(
        name="eth_getLogs",
        description="Returns an array of all logs matching a given filter object",
        input_schema=_object_schema(
            {
                "fromBlock": _string("Starting block (hex or 'latest', 'earliest', 'pending')"),
                "toBlock": _string("Ending block (hex or 'latest', 'earliest', 'pending')"),
                "address": _string("Contract address (optional)"),
                "topics": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Array of topic filters (optional)",
                },
            }
        ),
        callable=eth_get_logs,
        arguments={"fromBlock": "from_block", "toBlock": "to_block"},
    ),
    ToolDefinition(
        name="eth_chainId",
        description="Returns the chain ID of the current network",
        input_schema=_object_schema({}),
        callable=eth_chain_id,
    ),
    ToolDefinition(
        name="net_version",
        description="Returns the current network id",
        input_schema=_object_schema({}),
        callable=net_version,
    ),
    ToolDefinition(
        name="net_listening",
        description="Returns true if client is actively listening for network connections",
        input_schema=_object_schema({}),
        callable=net_listening,
    ),
    ToolDefinition(
        name="net_peerCount",
        description="Returns number of peers currently connected to the client",
        input_schema=_object_schema({}),
        callable=net_peer_count,
    ),
]

TOOL_REGISTRY: Mapping[str, ToolDefinition] = MappingProxyType({tool.name: tool for tool in _TOOLS})


def list_tools() -> List[Dict[str, Any]]:
    """Return a simple list of available tools."""
    return [
        {
            "name": tool.name,
            "description": tool.description,
            "inputSchema": tool.input_schema,
        }
        for tool in TOOL_REGISTRY.values()
    ]


def _check_type(key: str, value: Any, schema: Dict[str, Any]) -> None:
    try:
        jsonschema.validate(instance=value, schema=schema)
    except jsonschema.ValidationError as exc:
        raise ValueError(f"argument '{key}': {exc.message}") from None


def _bind_arguments(tool: ToolDefinition, params: Dict[str, Any]) -> Dict[str, Any]:
    properties = tool.input_schema.get("properties", {})
    unknown = [key for key in params if key not in properties]
    if unknown:
        raise ValueError(f"unexpected argument '{unknown[0]}'")
    missing = [key for key in tool.input_schema.get("required", []) if params.get(key) is None]
    if missing:
        raise ValueError(f"missing required argument '{missing[0]}'")

    kwargs: Dict[str, Any] = {}
    for key, schema in properties.items():
        if key in params and params[key] is not None:
            value = params[key]
            _check_type(key, value, schema)
        elif "default" in schema:
            value = schema["default"]
        else:
            continue
        kwargs[tool.arguments.get(key, key)] = value
    return kwargs


def _log_tool_result(tool_name: str, text: str) -> None:
    if text.startswith("Error:"):
        logger.warning(
            "tool=%s outcome=error error=%s",
            tool_name,
            text,
            extra={"tool": tool_name, "error": text},
        )
        default_metrics.record_tool(tool_name, success=False)
    else:
        logger.info("tool=%s outcome=success", tool_name, extra={"tool": tool_name})
        default_metrics.record_tool(tool_name, success=True)


async def call_tool(
    tool_name: str,
    params: Optional[Dict[str, Any]] = None,
    *,
    client: Any = None,
) -> str:
    """
    Dispatch to a tool by name and return its text response.

    Failures never raise: unknown tools, bad arguments and RPC errors all come
    back as ``Error: ...`` text.
    """
    if params is None:
        params = {}
    tool = TOOL_REGISTRY.get(tool_name)
    if tool is None:
        text = f"Error: Unknown tool: {tool_name}"
    elif not isinstance(params, dict):
        text = "Error: Invalid parameters: arguments must be an object"
    else:
        try:
            kwargs = _bind_arguments(tool, params)
        except ValueError as exc:
            text = f"Error: Invalid parameters: {exc}"
        else:
            if client is not None:
                kwargs["client"] = client
            text = await tool.callable(**kwargs)
    _log_tool_result(tool_name, text)
    return text
