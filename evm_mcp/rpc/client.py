"""
Thin JSON-RPC 2.0 client for an Ethereum-compatible node.

A single POST per call, no retries. Transport and endpoint failures are mapped
to RpcError subclasses whose message carries the "RPC call failed: " prefix,
so the tool layer can surface them verbatim.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, Optional, Sequence

import httpx

from evm_mcp.config import EvmConfig, default_config

logger = logging.getLogger(__name__)

ERROR_PREFIX = "RPC call failed: "


class RpcError(Exception):
    """Base exception for JSON-RPC gateway errors."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int] = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.data = data


class RpcTimeoutError(RpcError):
    """Raised when the endpoint does not answer in time."""


class RpcUnreachableError(RpcError):
    """Raised when the endpoint cannot be reached."""


class RpcRemoteError(RpcError):
    """Raised when the endpoint returns a JSON-RPC error object."""


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class EvmRpcClient:
    """Async client for a single JSON-RPC endpoint."""

    def __init__(
        self,
        config: EvmConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None
        self._ids = itertools.count(1)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_payload(self, method: str, params: Optional[Sequence[Any]]) -> Dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": list(params) if params is not None else [],
        }

    def _process_response(self, method: str, response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            error = body["error"]
            message = error.get("message") or "Unknown JSON-RPC error"
            logger.debug("rpc method=%s remote error code=%s", method, error.get("code"))
            raise RpcRemoteError(
                f"{ERROR_PREFIX}{message}", code=error.get("code"), data=error.get("data")
            )

        if response.status_code >= 400:
            raise RpcError(f"{ERROR_PREFIX}HTTP {response.status_code}")

        if not isinstance(body, dict):
            raise RpcError(f"{ERROR_PREFIX}invalid JSON response")

        if "result" not in body:
            raise RpcError(f"{ERROR_PREFIX}missing result in response")

        return body["result"]

    async def call(self, method: str, params: Optional[Sequence[Any]] = None) -> Any:
        """
        Invoke a JSON-RPC method and return its raw result.

        Args:
            method: JSON-RPC method name, e.g. ``eth_getBalance``.
            params: Positional parameters, sent as-is.

        Returns:
            The decoded ``result`` member (any JSON value, including None).

        Raises:
            RpcError: on timeout, unreachable endpoint, remote error or a
                malformed response.
        """
        if not self.config.rpc_url:
            raise RpcError(f"{ERROR_PREFIX}RPC endpoint is not configured")

        client = await self._get_client()
        payload = self._build_payload(method, params)
        logger.debug("rpc call method=%s id=%s", method, payload["id"])
        try:
            response = await client.post(self.config.rpc_url, json=payload)
        except httpx.TimeoutException as exc:
            logger.warning("RPC endpoint timed out for method %s", method)
            raise RpcTimeoutError(f"{ERROR_PREFIX}timeout") from exc
        except httpx.RequestError as exc:
            logger.warning("RPC endpoint unreachable for method %s", method)
            raise RpcUnreachableError(f"{ERROR_PREFIX}{_describe(exc)}") from exc
        return self._process_response(method, response)


default_client = EvmRpcClient()
