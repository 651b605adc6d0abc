"""Shared constants for the x402 autopay client."""

from __future__ import annotations

from typing import Dict, List, TypedDict


SUPPORTED_CHAINS: List[str] = ["base", "solana"]

CHAIN_NETWORKS: Dict[str, str] = {
    "base": "eip155:8453",
    "solana": "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp",
}

# v2 name first, v1 fallback
PAYMENT_RESPONSE_HEADERS: List[str] = ["PAYMENT-RESPONSE", "X-PAYMENT-RESPONSE"]
PAYMENT_HEADERS: List[str] = ["PAYMENT-SIGNATURE", "X-PAYMENT"]
PAYMENT_REQUIRED_HEADER = "PAYMENT-REQUIRED"

DEFAULT_INTERVAL_MS = 1000
DEFAULT_TIMEOUT_SECONDS = 30.0


class DefaultAsset(TypedDict):
    address: str
    name: str
    version: str
    decimals: int


DEFAULT_ASSETS: Dict[str, DefaultAsset] = {
    "eip155:8453": {
        "address": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
        "name": "USD Coin",
        "version": "2",
        "decimals": 6,
    },
    "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp": {
        "address": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
        "name": "USDC",
        "version": "",
        "decimals": 6,
    },
}


class UnsupportedChainError(ValueError):
    """Raised when a chain identifier is not one of SUPPORTED_CHAINS."""


def get_network(chain: str) -> str:
    try:
        return CHAIN_NETWORKS[chain]
    except KeyError as exc:
        supported = ", ".join(SUPPORTED_CHAINS)
        raise UnsupportedChainError(
            f"Unsupported chain {chain!r} (expected one of: {supported})"
        ) from exc


def get_default_asset(network: str) -> DefaultAsset:
    try:
        return DEFAULT_ASSETS[network]
    except KeyError as exc:
        raise UnsupportedChainError(f"No default asset configured for network {network}") from exc
