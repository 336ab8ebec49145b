"""Tests for the aiohttp webhook transport."""

from __future__ import annotations

from typing import Any

import pytest
from aiohttp import test_utils
from fakes import HELPLINE, FakeTableReader, make_app

from src.web.router import build_web_app


def _payload(intent: str, query_text: str = "", parameters: dict[str, Any] | None = None) -> dict[str, Any]:
    return {
        "responseId": "r-1",
        "session": "projects/demo/agent/sessions/s-1",
        "queryResult": {
            "queryText": query_text,
            "parameters": parameters or {},
            "intent": {"displayName": intent},
        },
    }


@pytest.mark.asyncio
async def test_webhook_returns_fulfillment_text(hospital_tables) -> None:
    web_app = build_web_app(make_app(FakeTableReader(hospital_tables)))

    async with test_utils.TestClient(test_utils.TestServer(web_app)) as client:
        resp = await client.post(
            "/webhook", json=_payload("FAQ_General", "do you accept insurance")
        )
        body = await resp.json()

    assert resp.status == 200
    assert body["fulfillmentText"].startswith("Yes, we accept most major plans.")
    assert body["fulfillmentMessages"] == [{"text": {"text": [body["fulfillmentText"]]}}]


@pytest.mark.asyncio
async def test_webhook_replies_with_apology_when_sheets_fail() -> None:
    web_app = build_web_app(make_app(FakeTableReader(error=ConnectionError("down"))))

    async with test_utils.TestClient(test_utils.TestServer(web_app)) as client:
        resp = await client.post(
            "/webhook", json=_payload("Billing_Query", parameters={"service": "lab"})
        )
        body = await resp.json()

    assert resp.status == 200
    assert body["fulfillmentText"] == (
        f"I'm sorry, I don't have that info in the demo. Please call {HELPLINE} for help."
    )


@pytest.mark.asyncio
async def test_webhook_rejects_invalid_body() -> None:
    web_app = build_web_app(make_app(FakeTableReader()))

    async with test_utils.TestClient(test_utils.TestServer(web_app)) as client:
        not_json = await client.post("/webhook", data=b"not json")
        not_utf8 = await client.post(
            "/webhook", data=b"\xff\xfe{", headers={"Content-Type": "application/json"}
        )
        wrong_shape = await client.post("/webhook", json={"session": "s"})

    assert not_json.status == 400
    assert not_utf8.status == 400
    assert wrong_shape.status == 400


@pytest.mark.asyncio
async def test_health() -> None:
    web_app = build_web_app(make_app(FakeTableReader()))

    async with test_utils.TestClient(test_utils.TestServer(web_app)) as client:
        resp = await client.get("/health")
        body = await resp.json()

    assert body == {"status": "ok"}
