"""LLM-facing tool implementations."""

from .node import web3_client_version, web3_sha3
from .blocks import eth_block_number, eth_get_block_by_number
from .account import (
    eth_get_balance,
    eth_get_code,
    eth_get_storage_at,
    eth_get_transaction_count,
)
from .transactions import (
    eth_get_transaction_by_hash,
    eth_get_transaction_receipt,
    eth_send_raw_transaction,
)
from .execution import eth_call, eth_estimate_gas, eth_gas_price
from .logs import eth_get_logs
from .network import eth_chain_id, net_listening, net_peer_count, net_version
from . import validators

__all__ = [
    "web3_client_version",
    "web3_sha3",
    "eth_block_number",
    "eth_get_block_by_number",
    "eth_get_balance",
    "eth_get_code",
    "eth_get_storage_at",
    "eth_get_transaction_count",
    "eth_get_transaction_by_hash",
    "eth_get_transaction_receipt",
    "eth_send_raw_transaction",
    "eth_call",
    "eth_estimate_gas",
    "eth_gas_price",
    "eth_get_logs",
    "eth_chain_id",
    "net_version",
    "net_listening",
    "net_peer_count",
    "validators",
]
