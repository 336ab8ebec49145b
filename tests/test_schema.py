"""Tests for the fulfillment request envelope and Dialogflow mapping."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.fulfillment.schema import IntentRequest, WebhookRequest, build_webhook_response


def test_parameters_are_normalized_to_strings() -> None:
    request = IntentRequest(
        intent_name="Lab_Report_Status",
        parameters={
            "sample_id": "  S123 ",
            "count": 4.0,
            "ratio": 2.5,
            "service": ["", "lab"],
            "doctor_name": {"name": "Sharma"},
            "department_name": "",
            "flag": True,
            "empty": None,
        },
    )

    assert request.parameters == {
        "sample_id": "S123",
        "count": "4",
        "ratio": "2.5",
        "service": "lab",
        "doctor_name": "Sharma",
    }
    assert request.parameter("department_name") is None


def test_intent_request_is_immutable() -> None:
    request = IntentRequest(intent_name="FAQ_General")

    with pytest.raises(ValidationError):
        request.intent_name = "Other"  # type: ignore[misc]


def test_webhook_request_maps_to_intent_request() -> None:
    payload = {
        "responseId": "r-1",
        "session": "projects/demo/agent/sessions/abc",
        "queryResult": {
            "queryText": "when is dr sharma available",
            "parameters": {"doctor_name": "Sharma", "department_name": ""},
            "intent": {"name": "projects/demo/agent/intents/1", "displayName": "Doctor_Availability"},
            "languageCode": "en",
        },
    }

    request = WebhookRequest.model_validate(payload).to_intent_request()

    assert request == IntentRequest(
        intent_name="Doctor_Availability",
        query_text="when is dr sharma available",
        parameters={"doctor_name": "Sharma"},
    )


def test_webhook_request_without_parameters() -> None:
    payload = {"queryResult": {"queryText": "hi", "intent": {"displayName": "Default Welcome Intent"}}}

    request = WebhookRequest.model_validate(payload).to_intent_request()

    assert request.parameters == {}


def test_webhook_request_requires_query_result() -> None:
    with pytest.raises(ValidationError):
        WebhookRequest.model_validate({"session": "s"})


def test_webhook_response_shape() -> None:
    assert build_webhook_response("Hello") == {
        "fulfillmentText": "Hello",
        "fulfillmentMessages": [{"text": {"text": ["Hello"]}}],
    }
