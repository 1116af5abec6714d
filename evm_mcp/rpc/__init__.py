"""JSON-RPC client wrappers for Ethereum-compatible nodes."""

from .client import (
    EvmRpcClient,
    RpcError,
    RpcRemoteError,
    RpcTimeoutError,
    RpcUnreachableError,
    default_client,
)

__all__ = [
    "EvmRpcClient",
    "RpcError",
    "RpcRemoteError",
    "RpcTimeoutError",
    "RpcUnreachableError",
    "default_client",
]
