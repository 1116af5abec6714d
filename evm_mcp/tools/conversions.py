"""Quantity and unit conversions used when shaping RPC results."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from eth_utils import from_wei, is_0x_prefixed, is_hex, to_int

UNKNOWN_NETWORK = "Unknown Network"

CHAIN_NAMES: Dict[int, str] = {
    1: "Ethereum Mainnet",
    11155111: "Sepolia Testnet",
    5: "Goerli Testnet",
    137: "Polygon Mainnet",
    80001: "Polygon Mumbai Testnet",
    42161: "Arbitrum One",
    421614: "Arbitrum Sepolia",
    10: "Optimism",
    420: "Optimism Sepolia",
    56: "BNB Smart Chain",
    97: "BNB Smart Chain Testnet",
}


def _is_quantity(value: str) -> bool:
    return is_0x_prefixed(value) and len(value) > 2 and is_hex(value)


def hex_to_int(value: Any) -> int:
    """Parse a JSON-RPC hex quantity such as ``"0x1a"``; ints are returned as-is."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid hex quantity: {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str) or not _is_quantity(value):
        raise ValueError(f"Invalid hex quantity: {value!r}")
    return to_int(hexstr=value)


def format_units(value: Any, unit: str) -> str:
    """
    Render a wei amount in ``unit`` ("ether", "gwei", ...) as a decimal string.

    At least one fractional digit is kept and trailing zeros are dropped, so
    10**18 wei in ether renders as ``"1.0"``.
    """
    amount = Decimal(from_wei(hex_to_int(value), unit))
    whole, _, fraction = format(amount, "f").partition(".")
    return f"{whole}.{fraction.rstrip('0') or '0'}"


def format_ether(wei: Any) -> str:
    return format_units(wei, "ether")


def format_gwei(wei: Any) -> str:
    return format_units(wei, "gwei")


def chain_name(chain_id: int) -> str:
    return CHAIN_NAMES.get(chain_id, UNKNOWN_NETWORK)
