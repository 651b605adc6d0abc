"""Session configuration collected from the terminal, plus CLI defaults."""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import Awaitable, Callable

from .constants import DEFAULT_INTERVAL_MS, DEFAULT_TIMEOUT_SECONDS

Prompt = Callable[[str], Awaitable[str]]

PRIVATE_KEY_PROMPT = "Enter the wallet privateKey (hex string): "
BASE_URL_PROMPT = "Enter the baseURL (e.g. https://api.ping.observer): "
ENDPOINT_PATH_PROMPT = "Enter the endpointPath (e.g. /mint-v2): "
CHAIN_PROMPT = "Enter the chain, base or solana: "


@dataclass(frozen=True)
class SessionConfig:
    private_key: str
    base_url: str
    endpoint_path: str
    chain: str


async def ask(question: str) -> str:
    # input() blocks, keep it off the event loop
    answer = await asyncio.to_thread(input, question)
    return answer.strip()


async def collect_config(prompt: Prompt = ask) -> SessionConfig:
    """Ask for the four session values in order. The prompt returns trimmed answers."""
    private_key = await prompt(PRIVATE_KEY_PROMPT)
    base_url = await prompt(BASE_URL_PROMPT)
    endpoint_path = await prompt(ENDPOINT_PATH_PROMPT)
    chain = await prompt(CHAIN_PROMPT)
    return SessionConfig(
        private_key=private_key,
        base_url=base_url,
        endpoint_path=endpoint_path,
        chain=chain,
    )


def describe_config(config: SessionConfig) -> None:
    print("\n✅ Input complete:")
    print("privateKey:", config.private_key)
    print("baseURL:", config.base_url)
    print("endpointPath:", config.endpoint_path)
    print("chain:", config.chain)


def default_interval_ms() -> int:
    return int(os.getenv("FIRE_INTERVAL_MS", str(DEFAULT_INTERVAL_MS)))


def default_timeout() -> float:
    return float(os.getenv("HTTP_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)))
