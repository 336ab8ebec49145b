"""Fulfillment dispatch.

Hard contract: every request produces exactly one reply string. Gateway failures and any internal
error inside a handler become the generic apology with the helpline; nothing is raised to the
transport.
"""

from __future__ import annotations

import logging
from time import monotonic

from src.app import App
from src.fulfillment.interaction_log import log_interaction
from src.fulfillment.outcome import Outcome, Unavailable
from src.fulfillment.schema import IntentRequest
from src.sheets.gateway import LookupUnavailable

logger = logging.getLogger(__name__)


async def resolve_outcome(request: IntentRequest, app: App) -> Outcome:
    """Run the handler registered for the request's intent and return its outcome."""

    handler = app.router.resolve(request.intent_name)
    try:
        return await handler(request, app.gateway)
    except LookupUnavailable as exc:
        logger.warning("lookup unavailable intent=%s reason=%s", request.intent_name, exc)
    except Exception:
        # Handler boundary: any internal error must still produce a reply.
        logger.exception("handler failed intent=%s", request.intent_name)
    return Unavailable()


async def fulfill(request: IntentRequest, app: App) -> str:
    """Produce the reply text for one fulfillment request."""

    started = monotonic()
    log_interaction(request.intent_name, request.query_text)

    outcome = await resolve_outcome(request, app)
    try:
        reply = app.formatter.render(outcome)
    except Exception:
        logger.exception("formatting failed intent=%s outcome=%s", request.intent_name, outcome.kind)
        outcome = Unavailable()
        reply = app.formatter.render(outcome)

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "handled intent=%s registered=%s outcome=%s latency_ms=%d",
        request.intent_name,
        app.router.is_registered(request.intent_name),
        outcome.kind,
        latency_ms,
    )
    return reply
