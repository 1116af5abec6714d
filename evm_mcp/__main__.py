"""Process entry point: ``python -m evm_mcp`` or the ``evm-mcp`` script."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from evm_mcp.config import EvmConfig, default_config, redact_url
from evm_mcp.log import configure_logging

logger = logging.getLogger("evm_mcp")

MISSING_URL_MESSAGE = """\
Error: RPC_URL environment variable is required
Example: RPC_URL=https://mainnet.infura.io/v3/YOUR_API_KEY
Or: RPC_URL=https://eth-mainnet.g.alchemy.com/v2/YOUR_API_KEY"""


def _parse_args(argv: Optional[List[str]], config: EvmConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="evm-mcp", description="EVM JSON-RPC tools over MCP.")
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default="stdio",
        help="MCP transport to serve (default: stdio)",
    )
    parser.add_argument("--host", default=config.http_host, help="HTTP bind host")
    parser.add_argument("--port", type=int, default=config.http_port, help="HTTP bind port")
    return parser.parse_args(argv)


def _run_http(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("evm_mcp.server:app", host=host, port=port, log_config=None)


def _run_stdio() -> None:
    from evm_mcp.stdio_server import serve

    asyncio.run(serve())


def main(argv: Optional[List[str]] = None, *, config: EvmConfig = default_config) -> int:
    args = _parse_args(argv, config)
    configure_logging(config)

    if not config.rpc_url:
        print(MISSING_URL_MESSAGE, file=sys.stderr)
        return 1

    if args.transport == "http":
        logger.info("EVM MCP Server listening on http://%s:%s", args.host, args.port)
    else:
        logger.info("EVM MCP Server running on stdio")
    logger.info("Connected to: %s", redact_url(config.rpc_url))
    logger.info("Chain ID: %s", config.chain_id)

    try:
        if args.transport == "http":
            _run_http(args.host, args.port)
        else:
            _run_stdio()
    except KeyboardInterrupt:
        return 0
    except Exception:
        logger.exception("Fatal error in main()")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
