"""Wallet signers for the x402 exact payment scheme."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from x402 import x402Client

from .constants import get_network

logger = logging.getLogger(__name__)


class InvalidPrivateKeyError(ValueError):
    """Raised when a private key cannot be parsed for the requested chain."""


@dataclass(frozen=True)
class WalletSigner:
    """A private key bound to one chain, able to pay x402 challenges."""

    chain: str
    network: str
    address: str
    inner: Any

    def register(self, client: x402Client) -> x402Client:
        if self.chain == "solana":
            from x402.mechanisms.svm.exact.register import register_exact_svm_client

            register_exact_svm_client(client, self.inner)
        else:
            from x402.mechanisms.evm.exact.register import register_exact_evm_client

            register_exact_evm_client(client, self.inner)
        return client


def _evm_signer(private_key: str) -> tuple[Any, str]:
    from eth_account import Account
    from x402.mechanisms.evm import EthAccountSigner

    try:
        account = Account.from_key(private_key)
    except Exception as exc:
        raise InvalidPrivateKeyError(f"Invalid EVM private key: {exc}") from exc
    return EthAccountSigner(account), account.address


def _svm_signer(private_key: str) -> tuple[Any, str]:
    from x402.mechanisms.svm import KeypairSigner

    try:
        signer = KeypairSigner.from_base58(private_key)
    except Exception as exc:
        raise InvalidPrivateKeyError(f"Invalid Solana private key: {exc}") from exc
    return signer, str(signer.address)


def _build_signer(chain: str, private_key: str) -> WalletSigner:
    network = get_network(chain)
    if chain == "solana":
        inner, address = _svm_signer(private_key)
    else:
        inner, address = _evm_signer(private_key)
    return WalletSigner(chain=chain, network=network, address=address, inner=inner)


async def create_signer(chain: str, private_key: str) -> WalletSigner:
    """Derive the wallet for ``chain`` from ``private_key``.

    Raises UnsupportedChainError for an unknown chain and InvalidPrivateKeyError
    when the key does not parse. Neither is retried.
    """
    get_network(chain)
    signer = await asyncio.to_thread(_build_signer, chain, private_key)
    logger.debug("created %s signer for %s", signer.network, signer.address)
    return signer
