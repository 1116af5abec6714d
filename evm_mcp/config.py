"""
Configuration helpers for the EVM MCP server.

This module centralizes endpoint selection, chain id, HTTP timeout and logging
settings. Values are read from the environment once, at import time; the RPC
URL often embeds a provider API key, so it is never logged in full.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

RPC_URL_ENV_VARS = ("RPC_URL", "ETHEREUM_RPC_URL")
DEFAULT_CHAIN_ID = 1
DEFAULT_TIMEOUT = 30.0
DEFAULT_HTTP_HOST = "127.0.0.1"
DEFAULT_HTTP_PORT = 8000


def _load_rpc_url() -> Optional[str]:
    for name in RPC_URL_ENV_VARS:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return None


def _load_chain_id() -> int:
    raw_chain_id = os.getenv("CHAIN_ID")
    if raw_chain_id:
        try:
            return int(raw_chain_id)
        except ValueError:
            return DEFAULT_CHAIN_ID
    return DEFAULT_CHAIN_ID


def _load_timeout() -> float:
    raw_timeout = os.getenv("EVM_RPC_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return DEFAULT_TIMEOUT
    return DEFAULT_TIMEOUT


def _load_port() -> int:
    raw_port = os.getenv("EVM_MCP_PORT")
    if raw_port:
        try:
            return int(raw_port)
        except ValueError:
            return DEFAULT_HTTP_PORT
    return DEFAULT_HTTP_PORT


def redact_url(url: Optional[str]) -> str:
    """Hide path and query of an endpoint URL, where provider keys usually live."""
    if not url:
        return "<unset>"
    scheme, sep, rest = url.partition("://")
    if not sep:
        return url
    host = rest.split("/", 1)[0].split("?", 1)[0]
    if host != rest:
        return f"{scheme}://{host}/..."
    return url


@dataclass(frozen=True, slots=True)
class EvmConfig:
    """Runtime configuration for JSON-RPC endpoint access."""

    rpc_url: Optional[str] = None
    chain_id: int = DEFAULT_CHAIN_ID
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    log_format: str = "json"
    http_host: str = DEFAULT_HTTP_HOST
    http_port: int = DEFAULT_HTTP_PORT


def load_config() -> EvmConfig:
    """Build an EvmConfig from the current environment."""
    return EvmConfig(
        rpc_url=_load_rpc_url(),
        chain_id=_load_chain_id(),
        timeout=_load_timeout(),
        log_level=os.getenv("EVM_MCP_LOG_LEVEL", "INFO"),
        log_format=os.getenv("EVM_MCP_LOG_FORMAT", "json"),  # json or plain
        http_host=os.getenv("EVM_MCP_HOST", DEFAULT_HTTP_HOST),
        http_port=_load_port(),
    )


default_config = load_config()
