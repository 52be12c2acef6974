"""Application use cases."""

from .dashboard import DashboardViewState, build_dashboard
from .trends import AnalyzeWeightTrendUseCase, analyze_weight_trend

__all__ = [
    "AnalyzeWeightTrendUseCase",
    "DashboardViewState",
    "analyze_weight_trend",
    "build_dashboard",
]
