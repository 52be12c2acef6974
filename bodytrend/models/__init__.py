from .body import BodyMeasurement
from .dashboard import DashboardView, MeasurementRow
from .trend import (
    ChartPoint,
    DeviationEstimate,
    ProjectionPoint,
    RegressionResult,
    TrendAnalysis,
    TrendDirection,
    TrendRequest,
    TrendStatus,
)

__all__ = [
    'BodyMeasurement',
    'ChartPoint',
    'DashboardView',
    'DeviationEstimate',
    'MeasurementRow',
    'ProjectionPoint',
    'RegressionResult',
    'TrendAnalysis',
    'TrendDirection',
    'TrendRequest',
    'TrendStatus',
]
