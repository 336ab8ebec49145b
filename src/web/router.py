"""Web application composition."""

from __future__ import annotations

from aiohttp import web

from src.app import App
from src.web.handlers import APP_KEY, handle_health, handle_webhook


def build_web_app(app: App) -> web.Application:
    """Create the aiohttp application serving `/webhook` and `/health`."""

    web_app = web.Application()
    web_app[APP_KEY] = app
    web_app.router.add_post("/webhook", handle_webhook)
    web_app.router.add_get("/health", handle_health)
    return web_app
