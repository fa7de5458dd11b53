"""Shared test fixtures: request envelopes shaped like platform payloads."""

from __future__ import annotations

from typing import Any

import pytest


def make_envelope(
    slots: dict[str, Any] | None = None,
    request_type: str = "IntentRequest",
    intent_name: str = "GetWeatherIntent",
) -> dict[str, Any]:
    """Build a minimal request envelope around *slots*."""
    request: dict[str, Any] = {"type": request_type, "requestId": "req-1"}
    if slots is not None:
        request["intent"] = {"name": intent_name, "slots": slots}
    return {"version": "1.0", "session": {"new": True}, "request": request}


def make_slot(name: str, authorities: list[dict[str, Any]] | None) -> dict[str, Any]:
    slot: dict[str, Any] = {"name": name, "value": "raw"}
    if authorities is not None:
        slot["resolutions"] = {"resolutionsPerAuthority": authorities}
    return slot


NOMATCH = {"authority": "amzn1.er-authority.a", "status": {"code": "ER_SUCCESS_NOMATCH"}}
PARIS = {"id": "123", "name": "Paris"}
MATCH = {
    "authority": "amzn1.er-authority.b",
    "status": {"code": "ER_SUCCESS_MATCH"},
    "values": [PARIS],
}


@pytest.fixture
def city_envelope() -> dict[str, Any]:
    return make_envelope({"city": make_slot("city", [dict(NOMATCH), dict(MATCH)])})


@pytest.fixture
def launch_envelope() -> dict[str, Any]:
    return make_envelope(request_type="LaunchRequest")
