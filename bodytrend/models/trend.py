from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .body import BodyMeasurement


class RegressionResult(BaseModel):
    """Ordinary least squares fit of weight against elapsed days."""

    model_config = ConfigDict(frozen=True)

    slope: float = Field(..., description="Weight change in kilograms per day")
    intercept: float = Field(..., description="Fitted weight at the first sample")
    elapsed_days: Tuple[float, ...] = Field(
        ..., description="Days since the first sample, one entry per sample"
    )
    residuals: Tuple[float, ...] = Field(
        ..., description="Observed minus fitted weight, one entry per sample"
    )
    r_squared: float = Field(..., ge=0.0, le=1.0)
    sample_count: int
    x_mean: float = Field(..., description="Mean of the elapsed days")
    sxx: float = Field(..., description="Sum of squared elapsed-day deviations")
    residual_sum_squares: float
    first_measurement_time: datetime

    def predict(self, elapsed_days: float) -> float:
        return self.intercept + self.slope * elapsed_days


class DeviationEstimate(BaseModel):
    """Spread of the residuals used to size prediction intervals."""

    model_config = ConfigDict(frozen=True)

    standard_error: float
    t_value: float
    degrees_of_freedom: int


class TrendDirection(BaseModel):
    model_config = ConfigDict(frozen=True)

    moving_away: bool
    days_remaining: Optional[float] = None
    target_reached: bool = False


class ProjectionPoint(BaseModel):
    """A future point on the projected trend line."""

    model_config = ConfigDict(frozen=True)

    label: str
    measurement_time: datetime
    projected_weight_kg: float
    upper_bound_kg: Optional[float] = None
    lower_bound_kg: Optional[float] = None


class ChartPoint(BaseModel):
    """One x position of the trend chart.

    Historical samples carry ``weight_kg``; projected points carry
    ``trend_weight_kg`` and the bounds. The last historical sample carries
    both so the trend line joins the observed series.
    """

    label: str
    measurement_time: datetime
    weight_kg: Optional[float] = None
    trend_weight_kg: Optional[float] = None
    upper_bound_kg: Optional[float] = None
    lower_bound_kg: Optional[float] = None
    is_projection: bool = False


class TrendStatus(str, Enum):
    OK = "ok"
    TARGET_REACHED = "target_reached"
    MOVING_AWAY = "moving_away"
    INSUFFICIENT_DATA = "insufficient_data"
    DEGENERATE_REGRESSION = "degenerate_regression"
    INVALID_INPUT = "invalid_input"


class TrendAnalysis(BaseModel):
    """Outcome of fitting and projecting a weight series toward a target."""

    status: TrendStatus
    target_weight_kg: float
    sample_count: int
    regression: Optional[RegressionResult] = None
    deviation: Optional[DeviationEstimate] = None
    direction: Optional[TrendDirection] = None
    weekly_rate_kg: Optional[float] = Field(
        None, description="Fitted slope expressed per week"
    )
    estimated_arrival: Optional[datetime] = Field(
        None, description="Projected date the target weight is reached"
    )
    projection: List[ProjectionPoint] = Field(default_factory=list)
    chart: List[ChartPoint] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def deviation_available(self) -> bool:
        return self.deviation is not None

    @property
    def has_trend(self) -> bool:
        return self.status in {
            TrendStatus.OK,
            TrendStatus.TARGET_REACHED,
            TrendStatus.MOVING_AWAY,
        }


class TrendRequest(BaseModel):
    samples: List[BodyMeasurement]
    target_weight_kg: Optional[float] = Field(
        None, description="Target weight; defaults to the configured target"
    )
    point_count: Optional[int] = Field(
        None, ge=1, le=12, description="Number of intermediate projection points"
    )
