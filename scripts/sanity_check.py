"""Minimal sanity checks for the EVM MCP tools against the configured RPC_URL."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from evm_mcp.rpc import default_client  # noqa: E402
from evm_mcp.tools import (  # noqa: E402
    eth_block_number,
    eth_chain_id,
    eth_gas_price,
    eth_get_balance,
    eth_get_block_by_number,
    net_peer_count,
    web3_client_version,
)

# Well-known public address; override via env.
SAMPLE_ADDRESS = os.getenv("EVM_SAMPLE_ADDRESS", "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045")
# Opt-in to fetching the latest block (larger response).
RUN_BLOCK_FETCH = os.getenv("RUN_BLOCK_SANITY", "false").lower() in {"1", "true", "yes"}


async def main() -> None:
    try:
        print(await web3_client_version())
        print(await eth_chain_id())
        print(await eth_block_number())
        print(await eth_gas_price())
        print(await net_peer_count())
        print(await eth_get_balance(SAMPLE_ADDRESS))

        if RUN_BLOCK_FETCH:
            print(await eth_get_block_by_number("latest"))
    finally:
        await default_client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
