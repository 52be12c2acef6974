"""Trend direction and future projections toward a target weight."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator, Optional

from ...models.body import BodyMeasurement
from ...models.trend import (
    DeviationEstimate,
    ProjectionPoint,
    RegressionResult,
    TrendDirection,
)
from .regression import SECONDS_PER_DAY

TARGET_EPSILON_KG = 0.1


def classify_trend_direction(
    regression: RegressionResult,
    last_measurement: BodyMeasurement,
    target_weight: float,
    epsilon: float = TARGET_EPSILON_KG,
) -> TrendDirection:
    """Decide whether the fitted trend approaches ``target_weight``.

    Arrival is measured from the last observed sample.
    """

    distance = target_weight - last_measurement.weight_kg
    if abs(distance) <= epsilon:
        return TrendDirection(moving_away=False, days_remaining=0.0, target_reached=True)

    slope = regression.slope
    if slope == 0 or (distance > 0) != (slope > 0):
        return TrendDirection(moving_away=True)

    return TrendDirection(moving_away=False, days_remaining=distance / slope)


def estimate_arrival(
    last_measurement: BodyMeasurement, days_remaining: float
) -> Optional[datetime]:
    """Return the date the target is reached, or ``None`` if out of range."""

    try:
        return last_measurement.measurement_time + timedelta(days=days_remaining)
    except (OverflowError, ValueError):
        return None


def _interval_half_width(
    regression: RegressionResult, deviation: DeviationEstimate, x: float
) -> float:
    spread = math.sqrt(
        1
        + 1 / regression.sample_count
        + (x - regression.x_mean) ** 2 / regression.sxx
    )
    return deviation.t_value * deviation.standard_error * spread


@dataclass(frozen=True)
class Projection:
    """Projected points from the last sample to the target date.

    Iterating recomputes the points, so the sequence can be consumed any
    number of times.
    """

    regression: RegressionResult
    deviation: Optional[DeviationEstimate]
    last_measurement: BodyMeasurement
    target_date: datetime
    target_weight: float
    point_count: int = 3

    @property
    def total_days(self) -> float:
        delta = self.target_date - self.last_measurement.measurement_time
        return delta.total_seconds() / SECONDS_PER_DAY

    def __len__(self) -> int:
        if self.point_count < 1 or self.total_days <= 0:
            return 0
        return self.point_count + 1

    def __iter__(self) -> Iterator[ProjectionPoint]:
        total_days = self.total_days
        if self.point_count < 1 or total_days <= 0:
            return

        start = self.last_measurement.measurement_time
        start_x = (
            start - self.regression.first_measurement_time
        ).total_seconds() / SECONDS_PER_DAY
        steps = self.point_count + 1

        for i in range(1, steps + 1):
            if i == steps:
                offset_days = total_days
                when = self.target_date
                weight = self.target_weight
                label = when.strftime("%d/%m")
            else:
                offset_days = total_days * i / steps
                when = start + timedelta(days=offset_days)
                weight = self.last_measurement.weight_kg + self.regression.slope * offset_days
                label = f"+{round(offset_days / 7)}w"

            upper = lower = None
            if self.deviation is not None:
                margin = _interval_half_width(
                    self.regression, self.deviation, start_x + offset_days
                )
                upper = weight + margin
                lower = weight - margin

            yield ProjectionPoint(
                label=label,
                measurement_time=when,
                projected_weight_kg=weight,
                upper_bound_kg=upper,
                lower_bound_kg=lower,
            )


def generate_projection_points(
    regression: RegressionResult,
    deviation: Optional[DeviationEstimate],
    last_measurement: BodyMeasurement,
    target_date: datetime,
    target_weight: float,
    point_count: int = 3,
) -> Projection:
    """Project ``point_count`` evenly spaced points plus one pinned at the target.

    A ``point_count`` below one yields an empty projection.
    """
    return Projection(
        regression=regression,
        deviation=deviation,
        last_measurement=last_measurement,
        target_date=target_date,
        target_weight=target_weight,
        point_count=point_count,
    )
