"""HTTP-backed implementation of the CSV source port."""
from __future__ import annotations

import logging

import httpx

from ...settings import Settings
from ..application.ports import CsvImportError, CsvSourcePort

logger = logging.getLogger(__name__)


class HttpCsvSource(CsvSourcePort):
    """Download published CSV exports (e.g. a Google Sheets "publish to web" link)."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def fetch_csv(self, url: str) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.http_timeout_seconds, follow_redirects=True
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("Fetching CSV export from %s failed: %s", url, exc)
            raise CsvImportError(f"Error loading CSV: {exc}") from exc

        if response.status_code != 200:
            raise CsvImportError(
                f"Error loading CSV: upstream returned {response.status_code}"
            )
        return response.text


def create_csv_source_adapter(*, settings: Settings) -> CsvSourcePort:
    """Create a CSV source adapter without FastAPI dependencies."""
    return HttpCsvSource(settings=settings)
