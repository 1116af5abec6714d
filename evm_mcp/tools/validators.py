"""Shared input normalization helpers for EVM MCP tools."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Optional

BLOCK_TAGS = frozenset({"latest", "earliest", "pending", "safe", "finalized"})
DEFAULT_BLOCK_TAG = "latest"
DECIMAL_REGEX = re.compile(r"^[0-9]+$")


def normalize_block_tag(value: Optional[str], *, default: str = DEFAULT_BLOCK_TAG) -> str:
    """
    Apply the block selector default and convert plain decimal numbers to hex.

    Known tags are lower-cased and hex quantities pass through untouched;
    anything else is left for the endpoint to reject.
    """
    if value is None:
        return default
    cleaned = str(value).strip()
    if not cleaned:
        return default
    if cleaned.lower() in BLOCK_TAGS:
        return cleaned.lower()
    if DECIMAL_REGEX.fullmatch(cleaned):
        return hex(int(cleaned))
    return cleaned


def compact(fields: Iterable[tuple[str, Any]]) -> Dict[str, Any]:
    """Build a dict from (key, value) pairs, dropping None and empty values."""
    return {key: value for key, value in fields if value is not None and value != ""}


def build_transaction_object(
    *,
    to: Optional[str] = None,
    data: Optional[str] = None,
    from_address: Optional[str] = None,
    value: Optional[str] = None,
    gas: Optional[str] = None,
    gas_price: Optional[str] = None,
) -> Dict[str, Any]:
    """Transaction call object with only the fields the caller supplied."""
    return compact(
        [
            ("to", to),
            ("data", data),
            ("from", from_address),
            ("value", value),
            ("gas", gas),
            ("gasPrice", gas_price),
        ]
    )


def build_log_filter(
    *,
    from_block: Optional[str] = None,
    to_block: Optional[str] = None,
    address: Optional[str] = None,
    topics: Optional[list] = None,
) -> Dict[str, Any]:
    """Log filter object with only the fields the caller supplied."""
    return compact(
        [
            ("fromBlock", normalize_block_tag(from_block, default="") or None),
            ("toBlock", normalize_block_tag(to_block, default="") or None),
            ("address", address),
            ("topics", topics),
        ]
    )
