import httpx
import pytest
import respx

from bodytrend.importer.application import CsvImportError, import_measurements
from bodytrend.importer.infrastructure.client import HttpCsvSource
from bodytrend.settings import CsvSourceConfig, Settings

TEST_SETTINGS = Settings(api_key="key", http_timeout_seconds=2.0)
EXPORT_URL = "https://sheets.example.com/export.csv"

pytestmark = pytest.mark.asyncio


@respx.mock
async def test_fetch_csv_returns_body(respx_mock: respx.Router) -> None:
    respx_mock.get(EXPORT_URL).mock(
        return_value=httpx.Response(200, text="date,weight\n2025-01-01,80\n")
    )

    text = await HttpCsvSource(TEST_SETTINGS).fetch_csv(EXPORT_URL)

    assert text.startswith("date,weight")


@respx.mock
async def test_fetch_csv_rejects_error_status(respx_mock: respx.Router) -> None:
    respx_mock.get(EXPORT_URL).mock(return_value=httpx.Response(404))

    with pytest.raises(CsvImportError, match="404"):
        await HttpCsvSource(TEST_SETTINGS).fetch_csv(EXPORT_URL)


@respx.mock
async def test_fetch_csv_wraps_transport_errors(respx_mock: respx.Router) -> None:
    respx_mock.get(EXPORT_URL).mock(side_effect=httpx.ConnectError("boom"))

    with pytest.raises(CsvImportError, match="Error loading CSV"):
        await HttpCsvSource(TEST_SETTINGS).fetch_csv(EXPORT_URL)


@respx.mock
async def test_import_measurements_filters_sources(respx_mock: respx.Router) -> None:
    respx_mock.get(EXPORT_URL).mock(
        return_value=httpx.Response(
            200,
            text=(
                "date,weight,source\n"
                "2025-01-02,79.8,Garmin\n"
                "2025-01-01,80.0,Withings\n"
                "2025-01-03,79.5,Withings\n"
            ),
        )
    )
    source = CsvSourceConfig(name="Export", url=EXPORT_URL)

    measurements = await import_measurements(
        HttpCsvSource(TEST_SETTINGS), source, frozenset({"Withings"})
    )

    assert [m.weight_kg for m in measurements] == [80.0, 79.5]
