"""Payment-aware httpx client and payment response decoding."""

from __future__ import annotations

import logging
from typing import Callable, Mapping

import httpx
from x402 import x402Client
from x402.http import decode_payment_response_header
from x402.http.clients import x402_httpx_transport

from .constants import DEFAULT_TIMEOUT_SECONDS, PAYMENT_RESPONSE_HEADERS
from .signer import WalletSigner

logger = logging.getLogger(__name__)

ClientFactory = Callable[[WalletSigner, str], httpx.AsyncClient]


class PaymentResponseNotFoundError(LookupError):
    """Raised when a response carries no payment response header."""


def with_payment_interceptor(
    signer: WalletSigner,
    base_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return an AsyncClient that answers 402 challenges with ``signer``.

    The x402 transport performs the whole handshake: it reads the payment
    requirements, signs a payload and replays the request with it attached.
    ``transport`` is the inner transport the x402 layer sends through; httpx's
    default network transport when omitted.
    """
    client = signer.register(x402Client())
    logger.debug("payment client for %s on %s", base_url, signer.network)
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout, connect=min(timeout, 10.0)),
        transport=x402_httpx_transport(client, transport=transport),
    )


def decode_payment_response(headers: Mapping[str, str]):
    for name in PAYMENT_RESPONSE_HEADERS:
        value = headers.get(name)
        if value:
            return decode_payment_response_header(value)
    raise PaymentResponseNotFoundError("response carried no payment response header")
