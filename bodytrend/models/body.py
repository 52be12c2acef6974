from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BodyMeasurement(BaseModel):
    """A single body measurement sample as exported by a scale or tracker."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "measurement_time": "2025-01-06T07:42:00",
                "weight_kg": 78.4,
                "body_fat_percent": 21.3,
                "bmi": 24.1,
                "source": "Withings Body+",
            }
        },
    )

    measurement_time: datetime = Field(..., description="Date and time the sample was taken")
    weight_kg: float = Field(..., description="Body weight in kilograms")
    body_fat_percent: Optional[float] = Field(None, description="Body fat percentage")
    bmi: Optional[float] = Field(None, description="Body mass index")
    source: str = Field("unknown", description="Label of the device or app that recorded the sample")

    @field_validator("measurement_time")
    @classmethod
    def _naive_utc(cls, value: datetime) -> datetime:
        """Store aware timestamps as naive UTC so every series sorts together."""
        if value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)
