"""Interaction logging with redaction of long digit runs (phone numbers, IDs, card numbers)."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

logger = logging.getLogger("src.fulfillment.interactions")
diagnostics = logging.getLogger(__name__)

MASK_TOKEN = "***"
_LONG_DIGIT_RUN_RE = re.compile(r"[0-9]{4,}")


def redact(text: str) -> str:
    """Replace every maximal run of four or more digits with the mask token.

    Shorter digit runs are left unchanged.
    """

    return _LONG_DIGIT_RUN_RE.sub(MASK_TOKEN, text or "")


def log_interaction(intent_name: str, utterance: str, timestamp: datetime | None = None) -> None:
    """Emit one interaction record. Never raises."""

    # noinspection PyBroadException
    try:
        ts = (timestamp or datetime.now(timezone.utc)).isoformat()
        logger.info("interaction ts=%s intent=%s text=%s", ts, intent_name, redact(utterance))
    except Exception:
        diagnostics.warning("interaction logging failed", exc_info=True)
