#!/usr/bin/env python3
"""
Demo paid API for local smoke runs of the autopay client.

  • Calling the paid endpoint without a payment header answers 402 and
    advertises an x402 v2 ``exact`` requirement, in the JSON body and in the
    base64 ``PAYMENT-REQUIRED`` header.
  • Any ``PAYMENT-SIGNATURE`` / ``X-PAYMENT`` header is accepted without
    verification and the protected payload is returned together with a base64
    ``PAYMENT-RESPONSE`` settlement header.

Run with:

    PAY_TO_ADDRESS=0x... python -m x402_autopay.demo_server

No facilitator is contacted, so nothing is ever settled on chain. Only EVM
networks are served: Solana exact payments need a facilitator fee payer.
"""

from __future__ import annotations

import base64
import hashlib
import json
import os
from decimal import Decimal
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .constants import (
    CHAIN_NETWORKS,
    PAYMENT_HEADERS,
    PAYMENT_REQUIRED_HEADER,
    PAYMENT_RESPONSE_HEADERS,
    UnsupportedChainError,
    get_default_asset,
)

JsonDict = Dict[str, Any]

PROTECTED_PATH = "/api/premium-data"
DEFAULT_PRICE = "$0.01"
DEFAULT_PAY_TO = "0x0000000000000000000000000000000000000402"
DEMO_CHAINS = ["base"]


def encode_header(data: JsonDict) -> str:
    return base64.b64encode(json.dumps(data).encode("utf-8")).decode("utf-8")


def _convert_to_token_amount(price: str, decimals: int) -> str:
    clean = price.replace("$", "").strip()
    try:
        amount = Decimal(clean)
    except ArithmeticError as exc:
        raise ValueError(f"Invalid money format: {price}") from exc
    if amount < 0:
        raise ValueError("Amount must be non-negative")
    return str(int(amount.scaleb(decimals)))


def build_payment_requirements(network: str, pay_to: str, price: str) -> JsonDict:
    if not network.startswith("eip155:"):
        raise UnsupportedChainError(f"Demo server only serves EVM networks, got {network}")
    asset = get_default_asset(network)
    extra: JsonDict = {"name": asset["name"]}
    if asset["version"]:
        extra["version"] = asset["version"]
    return {
        "scheme": "exact",
        "network": network,
        "asset": asset["address"],
        "amount": _convert_to_token_amount(price, asset["decimals"]),
        "payTo": pay_to,
        "maxTimeoutSeconds": 60,
        "extra": extra,
    }


def _payer_from_header(header: str) -> Optional[str]:
    try:
        decoded = json.loads(base64.b64decode(header.strip()))
    except ValueError:
        return None
    if not isinstance(decoded, dict):
        return None
    payload = decoded.get("payload")
    if not isinstance(payload, dict):
        return None
    authorization = payload.get("authorization")
    if isinstance(authorization, dict) and authorization.get("from"):
        return str(authorization["from"])
    return None


def create_app(
    network: str = CHAIN_NETWORKS["base"],
    pay_to: str = DEFAULT_PAY_TO,
    price: str = DEFAULT_PRICE,
) -> FastAPI:
    app = FastAPI(title="x402 Autopay Demo Server")
    requirements = build_payment_requirements(network, pay_to, price)
    app.state.paid_requests = 0

    @app.get("/")
    async def root() -> JsonDict:
        return {
            "message": "x402 Demo Server",
            "endpoints": {
                "free": ["/", "/health"],
                "protected": [
                    {
                        "path": PROTECTED_PATH,
                        "price": price,
                        "network": network,
                        "description": "Premium data endpoint (requires payment)",
                    }
                ],
            },
        }

    @app.get("/health")
    async def health() -> JsonDict:
        return {"status": "ok"}

    @app.get(PROTECTED_PATH)
    async def premium_data(request: Request) -> JSONResponse:
        payment = next(
            (request.headers[name] for name in PAYMENT_HEADERS if name in request.headers),
            None,
        )
        if payment is None:
            body = {
                "x402Version": 2,
                "error": "payment required",
                "resource": {
                    "url": str(request.url),
                    "description": "Access to premium data endpoint",
                    "mimeType": "application/json",
                },
                "accepts": [requirements],
            }
            return JSONResponse(
                body,
                status_code=status.HTTP_402_PAYMENT_REQUIRED,
                headers={PAYMENT_REQUIRED_HEADER: encode_header(body)},
            )

        app.state.paid_requests += 1
        settlement = {
            "success": True,
            "transaction": "0x" + hashlib.sha256(payment.encode("utf-8")).hexdigest(),
            "network": network,
            "payer": _payer_from_header(payment) or "unknown",
        }
        return JSONResponse(
            {
                "message": "Success! You've accessed the premium data.",
                "data": {"request": app.state.paid_requests},
            },
            headers={PAYMENT_RESPONSE_HEADERS[0]: encode_header(settlement)},
        )

    return app


def main() -> None:
    from dotenv import load_dotenv

    load_dotenv()
    port = int(os.getenv("PORT", "3000"))
    chain = os.getenv("CHAIN", "base")
    if chain not in DEMO_CHAINS:
        raise SystemExit(
            f"error: demo server supports CHAIN={', '.join(DEMO_CHAINS)} only, got {chain!r}"
        )
    pay_to = os.getenv("PAY_TO_ADDRESS", DEFAULT_PAY_TO)
    app = create_app(CHAIN_NETWORKS[chain], pay_to)

    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
