"""Interactive main menu."""

from __future__ import annotations

from .client import ClientFactory, with_payment_interceptor
from .config import Prompt, SessionConfig, ask
from .constants import DEFAULT_INTERVAL_MS
from .runner import ConcurrentFireRunner, SignerFactory, run_once
from .signer import create_signer


def menu_prompt(interval_ms: int) -> str:
    return (
        "\nChoose a mode:\n"
        "1. Run main() once\n"
        f"2. Fire concurrently every {interval_ms}ms (do not wait for responses)\n"
        "3. Exit\n"
        "Enter an option (1 / 2 / 3): "
    )


async def run_menu(
    config: SessionConfig,
    *,
    prompt: Prompt = ask,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    signer_factory: SignerFactory = create_signer,
    client_factory: ClientFactory = with_payment_interceptor,
) -> ConcurrentFireRunner:
    """Loop on the mode menu until concurrent fire starts or the user exits.

    Returns the started runner for option 2. Option 3 raises SystemExit(0).
    Errors raised by a single run are not caught here.
    """
    question = menu_prompt(interval_ms)
    while True:
        mode = await prompt(question)

        if mode == "1":
            await run_once(
                config,
                signer_factory=signer_factory,
                client_factory=client_factory,
            )
            print("\n✅ Done, back to the main menu.")
        elif mode == "2":
            runner = ConcurrentFireRunner(
                config,
                interval_ms,
                signer_factory=signer_factory,
                client_factory=client_factory,
            )
            runner.start()
            return runner
        elif mode == "3":
            print("👋 Program exited.")
            raise SystemExit(0)
        else:
            print("❌ Invalid choice, please try again.")
