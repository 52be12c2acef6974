"""Factories and assertion helpers for API tests."""

from __future__ import annotations

from typing import Any, Dict, List

from tests.builders import make_measurement_payload


def make_trend_payload(*points: tuple[float, float], **overrides: Any) -> Dict[str, Any]:
    """Return a trend request body for ``(day, weight)`` points."""

    payload: Dict[str, Any] = {
        "samples": [make_measurement_payload(day, weight) for day, weight in points]
    }
    payload.update(overrides)
    return payload


def make_csv_export(rows: List[tuple[str, str, float, str]]) -> str:
    """Render ``(date, time, weight, source)`` rows as a CSV export."""

    lines = ["date,time,weight,fat_percentage,bmi,source"]
    lines.extend(f"{date},{time},{weight},21.0,24.0,{source}" for date, time, weight, source in rows)
    return "\n".join(lines) + "\n"
