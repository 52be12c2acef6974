"""Pure view-model construction for the dashboard page."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, List, Optional, Sequence

from ..domain.body_metrics import (
    available_sources,
    filter_by_sources,
    normalize_measurements,
)
from ..models.body import BodyMeasurement
from ..models.dashboard import DashboardView, MeasurementRow
from .trends import INSUFFICIENT_DATA_MESSAGE, analyze_weight_trend


@dataclass(frozen=True)
class DashboardViewState:
    """User selections driving what the dashboard shows.

    ``selected_sources`` of ``None`` means every available source.
    """

    target_weight_kg: float
    selected_sources: Optional[FrozenSet[str]] = None
    normalize: bool = False
    table_expanded: bool = False
    point_count: int = 3

    def toggle_source(
        self, source: str, available: Sequence[str]
    ) -> "DashboardViewState":
        current = (
            set(available) if self.selected_sources is None else set(self.selected_sources)
        )
        current.symmetric_difference_update({source})
        return replace(self, selected_sources=frozenset(current))

    def toggle_normalize(self) -> "DashboardViewState":
        return replace(self, normalize=not self.normalize)

    def toggle_table(self) -> "DashboardViewState":
        return replace(self, table_expanded=not self.table_expanded)

    def with_target(self, target_weight_kg: float) -> "DashboardViewState":
        return replace(self, target_weight_kg=target_weight_kg)


def to_row(measurement: BodyMeasurement) -> MeasurementRow:
    return MeasurementRow(
        date=measurement.measurement_time.strftime("%d/%m"),
        time=measurement.measurement_time.strftime("%H:%M"),
        weight=measurement.weight_kg,
        fat_percentage=measurement.body_fat_percent,
        bmi=measurement.bmi,
        source=measurement.source,
    )


def build_dashboard(
    measurements: Sequence[BodyMeasurement],
    state: DashboardViewState,
    epsilon: float = 0.1,
) -> DashboardView:
    """Build everything the page renders from the samples and view state."""

    ordered = sorted(measurements, key=lambda m: m.measurement_time)
    sources = available_sources(ordered)
    selected = (
        frozenset(sources) if state.selected_sources is None else state.selected_sources
    )
    filtered = filter_by_sources(ordered, selected)
    preview = normalize_measurements(filtered) if state.normalize else filtered

    # Trend math always runs on raw kilograms so the target stays meaningful.
    trend = analyze_weight_trend(
        filtered, state.target_weight_kg, state.point_count, epsilon
    )

    newest_first: List[BodyMeasurement] = list(reversed(preview))
    rows = [to_row(m) for m in (newest_first if state.table_expanded else newest_first[:1])]

    return DashboardView(
        available_sources=sources,
        selected_sources=[s for s in sources if s in selected],
        normalized=state.normalize,
        rows=rows,
        total_rows=len(preview),
        preview=preview,
        trend=trend,
        placeholder=None if trend.has_trend else INSUFFICIENT_DATA_MESSAGE,
    )
