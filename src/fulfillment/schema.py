"""Fulfillment request/response models (Pydantic).

`IntentRequest` is the envelope every handler receives. The Dialogflow ES webhook models below are
only the transport shape; they are converted into an `IntentRequest` before dispatch.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_parameter(value: Any) -> str | None:
    """Render one Dialogflow parameter value as a plain string (or None when empty)."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, list):
        for item in value:
            normalized = _normalize_parameter(item)
            if normalized:
                return normalized
        return None
    if isinstance(value, dict):
        # Person entities arrive as {"name": "..."}.
        return _normalize_parameter(value.get("name"))
    return None


class IntentRequest(BaseModel):
    """A single fulfillment request: intent name, raw utterance and extracted parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    intent_name: str
    query_text: str = ""
    parameters: dict[str, str] = Field(default_factory=dict)

    @field_validator("parameters", mode="before")
    @classmethod
    def normalize_parameters(cls, value: Any) -> dict[str, str]:
        """Drop empty values and coerce the rest to stripped strings."""

        if not value:
            return {}
        if not isinstance(value, dict):
            raise ValueError("parameters must be a mapping")
        normalized: dict[str, str] = {}
        for name, raw in value.items():
            rendered = _normalize_parameter(raw)
            if rendered:
                normalized[str(name)] = rendered
        return normalized

    def parameter(self, name: str) -> str | None:
        """Return a non-empty parameter value, or None when the extractor did not supply it."""

        return self.parameters.get(name) or None


class DialogflowIntent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    display_name: str = Field(default="", alias="displayName")


class DialogflowQueryResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    query_text: str = Field(default="", alias="queryText")
    parameters: dict[str, Any] | None = None
    intent: DialogflowIntent = Field(default_factory=DialogflowIntent)


class WebhookRequest(BaseModel):
    """Subset of the Dialogflow ES `WebhookRequest` the dispatcher relies on."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    session: str = ""
    query_result: DialogflowQueryResult = Field(alias="queryResult")

    def to_intent_request(self) -> IntentRequest:
        result = self.query_result
        return IntentRequest(
            intent_name=result.intent.display_name,
            query_text=result.query_text,
            parameters=result.parameters or {},
        )


def build_webhook_response(text: str) -> dict[str, Any]:
    """Build the Dialogflow ES webhook response body for a plain text reply."""

    return {
        "fulfillmentText": text,
        "fulfillmentMessages": [{"text": {"text": [text]}}],
    }
