from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..application.trends import AnalyzeWeightTrendUseCase
from ..importer.application import CsvImportError, CsvSourcePort, import_measurements
from ..models.body import BodyMeasurement
from ..models.trend import TrendAnalysis
from ..settings import CsvSourceConfig, Settings, get_settings
from ..wiring import get_analyze_weight_trend_use_case, provide_csv_source_port
from .utils import selected_sources, sources_query

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter()


def _lookup(key: str, settings: Settings) -> CsvSourceConfig:
    source = settings.csv_sources.get(key)
    if source is None:
        raise HTTPException(status_code=404, detail={"error": f"Unknown source {key!r}"})
    return source


async def _load(
    key: str,
    settings: Settings,
    port: CsvSourcePort,
    source: Optional[List[str]],
) -> List[BodyMeasurement]:
    config = _lookup(key, settings)
    try:
        return await import_measurements(port, config, selected_sources(source))
    except CsvImportError as exc:
        logger.exception("Importing measurements from source %s failed", key)
        raise HTTPException(status_code=502, detail={"error": str(exc)}) from exc


@router.get("/sources", response_model=Dict[str, CsvSourceConfig])
async def list_sources(
    settings: Settings = Depends(get_settings),
) -> Dict[str, CsvSourceConfig]:
    """List the predefined CSV exports that can be imported."""
    return settings.csv_sources


@router.get("/sources/{key}/measurements", response_model=List[BodyMeasurement])
async def list_measurements(
    key: str,
    source: Optional[List[str]] = sources_query,
    settings: Settings = Depends(get_settings),
    port: CsvSourcePort = Depends(provide_csv_source_port),
) -> List[BodyMeasurement]:
    """Import a predefined export and return its samples in time order."""
    return await _load(key, settings, port, source)


@router.get("/sources/{key}/trend", response_model=TrendAnalysis)
async def source_trend(
    key: str,
    source: Optional[List[str]] = sources_query,
    target_weight_kg: Optional[float] = Query(
        None, description="Target weight; defaults to the configured target."
    ),
    point_count: Optional[int] = Query(
        None, ge=1, le=12, description="Number of intermediate projection points."
    ),
    settings: Settings = Depends(get_settings),
    port: CsvSourcePort = Depends(provide_csv_source_port),
    use_case: AnalyzeWeightTrendUseCase = Depends(get_analyze_weight_trend_use_case),
) -> TrendAnalysis:
    """Import a predefined export and analyse its weight trend."""
    measurements = await _load(key, settings, port, source)
    return use_case(measurements, target_weight_kg, point_count)
