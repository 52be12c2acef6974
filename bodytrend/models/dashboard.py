from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .body import BodyMeasurement
from .trend import TrendAnalysis


class MeasurementRow(BaseModel):
    """Display-ready row of the measurement table."""

    date: str
    time: str
    weight: float
    fat_percentage: Optional[float] = None
    bmi: Optional[float] = None
    source: str


class DashboardView(BaseModel):
    available_sources: List[str]
    selected_sources: List[str]
    normalized: bool = False
    rows: List[MeasurementRow] = Field(
        default_factory=list, description="Table rows, newest first"
    )
    total_rows: int = 0
    preview: List[BodyMeasurement] = Field(
        default_factory=list, description="Series plotted in the preview chart"
    )
    trend: TrendAnalysis
    placeholder: Optional[str] = Field(
        None, description="Message shown instead of the trend chart"
    )

    @property
    def is_truncated(self) -> bool:
        return len(self.rows) < self.total_rows
