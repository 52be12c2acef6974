"""Shared test fixtures and doubles."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from bodytrend import main
from bodytrend.settings import CsvSourceConfig, Settings, get_settings
from bodytrend.wiring import provide_csv_source_port

from tests.fakes import CsvSourceFake

DEMO_CSV_URL = "https://sheets.example.com/demo.csv"


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        target_weight_kg=64.0,
        projection_point_count=3,
        target_epsilon_kg=0.1,
        csv_sources={"demo": CsvSourceConfig(name="Demo", url=DEMO_CSV_URL)},
    )


@pytest.fixture
def csv_source_fake() -> CsvSourceFake:
    return CsvSourceFake()


@pytest.fixture
def app(settings: Settings, csv_source_fake: CsvSourceFake) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        provide_csv_source_port: lambda: csv_source_fake,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as api_client:
        yield api_client


@pytest.fixture
def auth_headers(settings: Settings) -> dict[str, str]:
    return {"x-api-key": settings.api_key}
