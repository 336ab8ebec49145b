"""Webhook process entrypoint."""

from __future__ import annotations

import asyncio
import logging

from aiohttp import web

from src.app import create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.web.router import build_web_app

logger = logging.getLogger(__name__)


async def main() -> None:
    """Serve the fulfillment webhook until cancelled."""

    settings = load_settings()
    configure_logging()

    runner = web.AppRunner(build_web_app(create_app(settings)))
    await runner.setup()
    site = web.TCPSite(runner, host=settings.host, port=settings.port)
    await site.start()
    logger.info("webhook listening host=%s port=%d", settings.host, settings.port)

    try:
        await asyncio.Event().wait()
    finally:
        logger.info("shutting down")
        await runner.cleanup()


if __name__ == "__main__":
    asyncio.run(main())
