"""Single-shot and concurrent-fire request runners."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Set

import httpx

from .client import ClientFactory, decode_payment_response, with_payment_interceptor
from .config import SessionConfig
from .console import print_error, response_data
from .constants import DEFAULT_INTERVAL_MS
from .signer import WalletSigner, create_signer

logger = logging.getLogger(__name__)

SignerFactory = Callable[[str, str], Awaitable[WalletSigner]]


async def run_once(
    config: SessionConfig,
    *,
    signer_factory: SignerFactory = create_signer,
    client_factory: ClientFactory = with_payment_interceptor,
) -> httpx.Response:
    """Perform one paid GET and print the body and payment confirmation.

    HTTP and configuration errors propagate. A missing or undecodable payment
    response header only produces a warning.
    """
    signer = await signer_factory(config.chain, config.private_key)
    async with client_factory(signer, config.base_url) as api:
        response = await api.get(config.endpoint_path)
        response.raise_for_status()

    print("✅ response.data:", response_data(response))

    try:
        payment_response = decode_payment_response(response.headers)
    except Exception as exc:
        logger.debug("payment response not decoded: %r", exc)
        print("⚠️ No payment response header detected, or it could not be decoded.")
    else:
        print("💰 paymentResponse:", payment_response)
    return response


@dataclass
class RunCounters:
    total: int = 0
    success: int = 0


class ConcurrentFireRunner:
    """Fires one GET per tick without waiting for earlier requests.

    Runs until ``stop()`` is called or the task is cancelled. Log lines show
    ``total`` as it is when the line is printed, so a slow response can report
    a total that already includes later ticks.
    """

    def __init__(
        self,
        config: SessionConfig,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        *,
        signer_factory: SignerFactory = create_signer,
        client_factory: ClientFactory = with_payment_interceptor,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.config = config
        self.interval_ms = interval_ms
        self.counters = RunCounters()
        self._signer_factory = signer_factory
        self._client_factory = client_factory
        self._stop = asyncio.Event()
        self._in_flight: Set[asyncio.Task] = set()
        self._task: Optional[asyncio.Task] = None

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self.run(), name="x402-autopay-fire")
        return self._task

    async def join(self) -> RunCounters:
        if self._task is None:
            raise RuntimeError("runner was not started")
        return await self._task

    def stop(self) -> None:
        self._stop.set()

    async def settle(self) -> None:
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)

    async def run(self) -> RunCounters:
        print(
            f"🚀 Firing concurrently every {self.interval_ms}ms, "
            "without waiting for responses (Ctrl+C to exit)"
        )
        signer = await self._signer_factory(self.config.chain, self.config.private_key)
        api = self._client_factory(signer, self.config.base_url)
        try:
            await self._tick_until_stopped(api)
        finally:
            try:
                await self.settle()
            finally:
                await api.aclose()
        return self.counters

    async def _tick_until_stopped(self, api: httpx.AsyncClient) -> None:
        loop = asyncio.get_running_loop()
        interval = self.interval_ms / 1000
        deadline = loop.time() + interval
        while not self._stop.is_set():
            try:
                await asyncio.wait_for(
                    self._stop.wait(), timeout=max(0.0, deadline - loop.time())
                )
            except asyncio.TimeoutError:
                self._tick(api)
                deadline += interval

    def _tick(self, api: httpx.AsyncClient) -> None:
        self.counters.total += 1
        attempt = self.counters.total
        print(f"[{attempt}] request fired")
        task = asyncio.create_task(self._fire(api, attempt))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _fire(self, api: httpx.AsyncClient, attempt: int) -> None:
        try:
            response = await api.get(self.config.endpoint_path)
            response.raise_for_status()
        except Exception as exc:
            counters = self.counters
            print_error(f"❌ [{attempt}] failure ({counters.success}/{counters.total})")
            print_error(f"error: {exc}")
            return

        self.counters.success += 1
        print(f"✅ [{attempt}] success ({self.counters.success}/{self.counters.total})")
