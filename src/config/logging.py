"""Logging configuration for the webhook service."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Interaction records (redacted user text) and diagnostics share the same stream; neither is ever
    sent back to the conversational channel.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Reduce noisy third-party logs by default.
    for name in ("aiohttp.access", "urllib3", "google.auth"):
        logging.getLogger(name).setLevel(logging.WARNING)
