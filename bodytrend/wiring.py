"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from fastapi import Depends

from .application.trends import AnalyzeWeightTrendUseCase
from .importer.application import CsvSourcePort
from .importer.infrastructure import create_csv_source_adapter
from .settings import Settings, get_settings


def provide_csv_source_port(
    settings: Settings = Depends(get_settings),
) -> CsvSourcePort:
    return create_csv_source_adapter(settings=settings)


def get_analyze_weight_trend_use_case(
    settings: Settings = Depends(get_settings),
) -> AnalyzeWeightTrendUseCase:
    return AnalyzeWeightTrendUseCase(
        default_target_weight=settings.target_weight_kg,
        default_point_count=settings.projection_point_count,
        epsilon=settings.target_epsilon_kg,
    )


__all__ = [
    "provide_csv_source_port",
    "get_analyze_weight_trend_use_case",
]
