"""Intent registry and router.

The registry is built once at startup and is read-only afterwards. Unknown intents are not an error:
they resolve to the fallback handler.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol

from src.fulfillment import handlers
from src.fulfillment.outcome import Outcome
from src.fulfillment.schema import IntentRequest
from src.sheets.gateway import TableGateway

WELCOME_INTENT = "Default Welcome Intent"
FALLBACK_INTENT = "Default Fallback Intent"


class Handler(Protocol):
    async def __call__(self, request: IntentRequest, gateway: TableGateway) -> Outcome: ...


def build_registry() -> Mapping[str, Handler]:
    """Return the read-only intent name -> handler mapping."""

    return MappingProxyType(
        {
            WELCOME_INTENT: handlers.welcome,
            FALLBACK_INTENT: handlers.fallback,
            "Ask_Hospital_Hours": handlers.hospital_hours,
            "Ask_Location": handlers.location,
            "Department_Info": handlers.department_info,
            "Doctor_Availability": handlers.doctor_availability,
            "Lab_Report_Status": handlers.lab_report_status,
            "Billing_Query": handlers.billing_query,
            "FAQ_General": handlers.faq_general,
        }
    )


class IntentRouter:
    """Resolves intent names to handlers."""

    def __init__(
            self,
            registry: Mapping[str, Handler],
            *,
            fallback: Handler = handlers.fallback,
    ) -> None:
        self._registry = registry
        self._fallback = fallback

    def resolve(self, intent_name: str) -> Handler:
        return self._registry.get(intent_name, self._fallback)

    def is_registered(self, intent_name: str) -> bool:
        return intent_name in self._registry
