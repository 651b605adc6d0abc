"""Interactive x402 autopay client (Python)."""

from __future__ import annotations

from .client import (
    PaymentResponseNotFoundError,
    decode_payment_response,
    with_payment_interceptor,
)
from .config import SessionConfig, ask, collect_config
from .constants import (
    CHAIN_NETWORKS,
    DEFAULT_INTERVAL_MS,
    SUPPORTED_CHAINS,
    UnsupportedChainError,
    get_network,
)
from .menu import run_menu
from .runner import ConcurrentFireRunner, RunCounters, run_once
from .signer import InvalidPrivateKeyError, WalletSigner, create_signer

__version__ = "0.1.0"
__all__ = [
    "SUPPORTED_CHAINS",
    "CHAIN_NETWORKS",
    "DEFAULT_INTERVAL_MS",
    "UnsupportedChainError",
    "get_network",
    "SessionConfig",
    "ask",
    "collect_config",
    "WalletSigner",
    "InvalidPrivateKeyError",
    "create_signer",
    "PaymentResponseNotFoundError",
    "decode_payment_response",
    "with_payment_interceptor",
    "RunCounters",
    "ConcurrentFireRunner",
    "run_once",
    "run_menu",
]

try:  # Optional: demo server depends on fastapi
    from .demo_server import create_app as create_demo_app

    __all__.append("create_demo_app")
except ImportError:
    create_demo_app = None  # type: ignore[assignment]
