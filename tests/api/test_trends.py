from __future__ import annotations

import httpx
import pytest

from tests.api.helpers import make_trend_payload

pytestmark = pytest.mark.asyncio


async def test_trend_projection(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.post(
        "/v1/trend", json=make_trend_payload((0, 80.0), (10, 78.0)), headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["target_weight_kg"] == 64.0
    assert body["deviation_available"] is False
    assert body["regression"]["slope"] == pytest.approx(-0.2)
    assert body["direction"]["days_remaining"] == pytest.approx(70.0)
    assert body["estimated_arrival"].startswith("2025-03-22")
    assert len(body["projection"]) == 4
    assert body["projection"][-1]["projected_weight_kg"] == 64.0
    assert body["chart"][1]["trend_weight_kg"] == 78.0
    assert body["chart"][2]["weight_kg"] is None


async def test_trend_with_overrides(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    payload = make_trend_payload(
        (0, 80.0), (5, 79.1), (10, 78.0), target_weight_kg=75.0, point_count=2
    )

    response = await client.post("/v1/trend", json=payload, headers=auth_headers)

    body = response.json()
    assert body["target_weight_kg"] == 75.0
    assert body["deviation_available"] is True
    assert body["deviation"]["degrees_of_freedom"] == 1
    assert len(body["projection"]) == 3
    assert body["projection"][0]["upper_bound_kg"] > body["projection"][0]["projected_weight_kg"]


async def test_trend_moving_away(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.post(
        "/v1/trend", json=make_trend_payload((0, 70.0), (10, 71.0)), headers=auth_headers
    )

    body = response.json()
    assert body["status"] == "moving_away"
    assert body["direction"]["moving_away"] is True
    assert body["estimated_arrival"] is None
    assert body["projection"] == []


async def test_trend_insufficient_data(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.post(
        "/v1/trend", json=make_trend_payload((0, 70.0)), headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["status"] == "insufficient_data"


async def test_trend_rejects_invalid_point_count(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    payload = make_trend_payload((0, 80.0), (10, 78.0), point_count=0)

    response = await client.post("/v1/trend", json=payload, headers=auth_headers)

    assert response.status_code == 422


async def test_trend_accepts_mixed_timezone_awareness(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    payload = make_trend_payload((0, 80.0), (10, 78.0))
    payload["samples"][0]["measurement_time"] = "2025-01-01T07:00:00Z"
    payload["samples"][1]["measurement_time"] = "2025-01-11T07:00:00"

    response = await client.post("/v1/trend", json=payload, headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["regression"]["slope"] == pytest.approx(-0.2)
