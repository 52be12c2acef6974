"""Application services for importing measurement exports."""

from __future__ import annotations

from typing import AbstractSet, List, Optional

from ...domain.body_metrics import filter_by_sources
from ...models.body import BodyMeasurement
from ...settings import CsvSourceConfig
from ..infrastructure.csv_reader import parse_measurements_csv
from .ports import CsvSourcePort


async def import_measurements(
    port: CsvSourcePort,
    source: CsvSourceConfig,
    sources: Optional[AbstractSet[str]] = None,
) -> List[BodyMeasurement]:
    """Fetch a published export and return its samples in time order.

    ``sources`` restricts the result to the given device labels.
    """

    text = await port.fetch_csv(source.url)
    measurements = parse_measurements_csv(text)
    if sources:
        measurements = filter_by_sources(measurements, sources)
    return measurements
