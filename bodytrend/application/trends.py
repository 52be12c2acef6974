"""Fit, classify and project a weight series toward a target."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..domain.body_metrics import (
    classify_trend_direction,
    estimate_arrival,
    estimate_deviation,
    fit_linear_regression,
    generate_projection_points,
)
from ..domain.body_metrics.projection import TARGET_EPSILON_KG
from ..models.body import BodyMeasurement
from ..models.trend import (
    ChartPoint,
    DeviationEstimate,
    ProjectionPoint,
    TrendAnalysis,
    TrendStatus,
)

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA_MESSAGE = "Insufficient data for trend analysis"


def build_chart_series(
    measurements: Sequence[BodyMeasurement],
    projection: Sequence[ProjectionPoint],
    deviation: Optional[DeviationEstimate],
) -> List[ChartPoint]:
    """Merge observed samples and projected points into one chart series."""

    if not measurements:
        return []

    last_index = len(measurements) - 1
    last = measurements[last_index]
    join_bound = last.weight_kg if deviation is not None and projection else None
    chart: List[ChartPoint] = []
    for index, m in enumerate(measurements):
        is_join = index == last_index and bool(projection)
        chart.append(
            ChartPoint(
                label=m.measurement_time.strftime("%d/%m"),
                measurement_time=m.measurement_time,
                weight_kg=m.weight_kg,
                trend_weight_kg=m.weight_kg if is_join else None,
                upper_bound_kg=join_bound if is_join else None,
                lower_bound_kg=join_bound if is_join else None,
            )
        )
    for point in projection:
        chart.append(
            ChartPoint(
                label=point.label,
                measurement_time=point.measurement_time,
                trend_weight_kg=point.projected_weight_kg,
                upper_bound_kg=point.upper_bound_kg,
                lower_bound_kg=point.lower_bound_kg,
                is_projection=True,
            )
        )
    return chart


def analyze_weight_trend(
    measurements: Sequence[BodyMeasurement],
    target_weight: float,
    point_count: int = 3,
    epsilon: float = TARGET_EPSILON_KG,
) -> TrendAnalysis:
    """Run the full trend pipeline over a chronologically ordered series.

    Never raises for insufficient or degenerate data; the returned
    ``status`` says which stage gave up.
    """

    n = len(measurements)
    if n < 2:
        return TrendAnalysis(
            status=TrendStatus.INSUFFICIENT_DATA,
            target_weight_kg=target_weight,
            sample_count=n,
        )

    regression = fit_linear_regression(measurements)
    if regression is None:
        logger.info("Trend analysis skipped: series contains non-finite values")
        return TrendAnalysis(
            status=TrendStatus.INVALID_INPUT,
            target_weight_kg=target_weight,
            sample_count=n,
        )

    history = list(measurements)
    if regression.sxx == 0:
        return TrendAnalysis(
            status=TrendStatus.DEGENERATE_REGRESSION,
            target_weight_kg=target_weight,
            sample_count=n,
            regression=regression,
            weekly_rate_kg=0.0,
            chart=build_chart_series(history, [], None),
        )

    deviation = estimate_deviation(regression)
    last = history[-1]
    direction = classify_trend_direction(regression, last, target_weight, epsilon)
    weekly_rate = regression.slope * 7

    if (
        direction.target_reached
        or direction.moving_away
        or direction.days_remaining is None
    ):
        return TrendAnalysis(
            status=(
                TrendStatus.TARGET_REACHED
                if direction.target_reached
                else TrendStatus.MOVING_AWAY
            ),
            target_weight_kg=target_weight,
            sample_count=n,
            regression=regression,
            deviation=deviation,
            direction=direction,
            weekly_rate_kg=weekly_rate,
            estimated_arrival=last.measurement_time if direction.target_reached else None,
            chart=build_chart_series(history, [], deviation),
        )

    arrival = estimate_arrival(last, direction.days_remaining)
    projection: List[ProjectionPoint] = []
    if arrival is not None:
        projection = list(
            generate_projection_points(
                regression, deviation, last, arrival, target_weight, point_count
            )
        )
    else:
        logger.info(
            "Projected arrival %.0f days out is beyond the calendar range",
            direction.days_remaining,
        )

    return TrendAnalysis(
        status=TrendStatus.OK,
        target_weight_kg=target_weight,
        sample_count=n,
        regression=regression,
        deviation=deviation,
        direction=direction,
        weekly_rate_kg=weekly_rate,
        estimated_arrival=arrival,
        projection=projection,
        chart=build_chart_series(history, projection, deviation),
    )


@dataclass
class AnalyzeWeightTrendUseCase:
    """Apply configured defaults and analyse a submitted series."""

    default_target_weight: float
    default_point_count: int = 3
    epsilon: float = TARGET_EPSILON_KG

    def __call__(
        self,
        measurements: Sequence[BodyMeasurement],
        target_weight: Optional[float] = None,
        point_count: Optional[int] = None,
    ) -> TrendAnalysis:
        ordered = sorted(measurements, key=lambda m: m.measurement_time)
        return analyze_weight_trend(
            ordered,
            self.default_target_weight if target_weight is None else target_weight,
            self.default_point_count if point_count is None else point_count,
            self.epsilon,
        )


__all__ = [
    "AnalyzeWeightTrendUseCase",
    "INSUFFICIENT_DATA_MESSAGE",
    "analyze_weight_trend",
    "build_chart_series",
]
