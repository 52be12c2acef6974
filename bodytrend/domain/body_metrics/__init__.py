"""Body metrics domain utilities."""

from .normalization import available_sources, filter_by_sources, normalize_measurements
from .projection import (
    Projection,
    classify_trend_direction,
    estimate_arrival,
    generate_projection_points,
)
from .regression import estimate_deviation, fit_linear_regression, t_value_95

__all__ = [
    "Projection",
    "available_sources",
    "classify_trend_direction",
    "estimate_arrival",
    "estimate_deviation",
    "filter_by_sources",
    "fit_linear_regression",
    "generate_projection_points",
    "normalize_measurements",
    "t_value_95",
]
