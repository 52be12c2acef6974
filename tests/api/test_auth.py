"""Authentication and schema contract tests."""

from __future__ import annotations

import httpx
import pytest

from bodytrend.settings import Settings

pytestmark = pytest.mark.asyncio


@pytest.mark.parametrize(
    ("headers", "expected_status"),
    [
        pytest.param({}, 401, id="missing"),
        pytest.param({"x-api-key": "wrong"}, 401, id="invalid"),
        pytest.param("valid", 200, id="valid"),
    ],
)
async def test_sources_auth_contract(
    client: httpx.AsyncClient, settings: Settings, headers: dict[str, str] | str, expected_status: int
) -> None:
    """Every /v1 endpoint enforces the x-api-key contract."""

    request_headers = (
        {"x-api-key": settings.api_key} if isinstance(headers, str) else headers
    )

    response = await client.get("/v1/sources", headers=request_headers)

    assert response.status_code == expected_status


async def test_empty_configured_key_rejects_everything(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    settings.api_key = ""

    response = await client.get("/v1/sources", headers={"x-api-key": ""})

    assert response.status_code == 401


async def test_openapi_declares_api_key_scheme(client: httpx.AsyncClient) -> None:
    response = await client.get("/openapi.json")

    assert response.status_code == 200
    schema = response.json()
    assert schema["components"]["securitySchemes"]["ApiKeyAuth"]["name"] == "x-api-key"
    assert "/v1/trend" in schema["paths"]
