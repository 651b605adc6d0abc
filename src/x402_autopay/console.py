"""Console output and logging setup."""

from __future__ import annotations

import logging
import sys
from typing import Any

import httpx


def configure_logging(level: int = logging.WARNING) -> None:
    """
    Configure Python logging for the CLI.

    Sets up a root logger with a single console handler on stderr so that
    diagnostics never interleave with the prompts written to stdout. Calling it
    again once handlers exist is a no-op.
    """
    root_logger = logging.getLogger()

    if root_logger.handlers:
        return

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


def print_error(message: str) -> None:
    print(message, file=sys.stderr)


def response_data(response: httpx.Response) -> Any:
    """Return the decoded JSON body, or the raw text when it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text
