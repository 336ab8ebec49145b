"""aiohttp request handlers for the Dialogflow fulfillment webhook.

Any request that parses as a Dialogflow `WebhookRequest` gets exactly one text reply; fulfillment
never fails the HTTP call. A body that is not a valid webhook request is rejected with 400 before
fulfillment starts.
"""

from __future__ import annotations

import logging

from aiohttp import web
from pydantic import ValidationError

from src.app import App
from src.fulfillment.dispatcher import fulfill
from src.fulfillment.schema import WebhookRequest, build_webhook_response

logger = logging.getLogger(__name__)

APP_KEY = web.AppKey("app", App)


async def handle_webhook(request: web.Request) -> web.Response:
    """Handle one Dialogflow fulfillment call."""

    try:
        payload = await request.json()
        webhook_request = WebhookRequest.model_validate(payload)
    except (ValueError, ValidationError) as exc:
        # ValueError covers JSONDecodeError and UnicodeDecodeError from non-UTF-8 bodies.
        logger.info("rejected webhook request reason=%s", type(exc).__name__)
        return web.json_response({"error": "invalid webhook request"}, status=400)

    reply = await fulfill(webhook_request.to_intent_request(), request.app[APP_KEY])
    return web.json_response(build_webhook_response(reply))


async def handle_health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})
