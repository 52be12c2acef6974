"""Parse measurement exports into ``BodyMeasurement`` samples."""

from __future__ import annotations

import csv
import io
import logging
import math
from datetime import datetime, time, timezone
from typing import Any, Dict, List, Optional

from ...models.body import BodyMeasurement
from ..application.ports import CsvImportError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("date", "weight")
DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d.%m.%Y")
TIME_FORMATS = ("%H:%M:%S", "%H:%M")


def parse_date(value: str) -> Optional[datetime]:
    """Parse a calendar date or ISO datetime, returning ``None`` if invalid."""

    value = value.strip()
    if not value:
        return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_time(value: Optional[str]) -> Optional[time]:
    if not value or not value.strip():
        return None
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    return None


def parse_number(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _combine(day: datetime, at: Optional[time]) -> datetime:
    # A full ISO datetime in the date column wins over the time column.
    if at is None or day.time() != time():
        return day
    return datetime.combine(day.date(), at)


def row_to_measurement(row: Dict[str, Any]) -> Optional[BodyMeasurement]:
    """Convert one CSV record, dropping records without a date or weight."""

    day = parse_date(row.get("date") or "")
    weight = parse_number(row.get("weight"))
    if day is None or weight is None:
        return None

    return BodyMeasurement(
        measurement_time=_combine(day, parse_time(row.get("time"))),
        weight_kg=weight,
        body_fat_percent=parse_number(row.get("fat_percentage")),
        bmi=parse_number(row.get("bmi")),
        source=(row.get("source") or "").strip() or "unknown",
    )


def parse_measurements_csv(text: str) -> List[BodyMeasurement]:
    """Parse a CSV export and return its samples sorted by time.

    The header must contain ``date`` and ``weight``; ``time``,
    ``fat_percentage``, ``bmi`` and ``source`` are optional.
    """

    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    if reader.fieldnames is None:
        raise CsvImportError("CSV export is empty")

    columns = {name.strip().lower() for name in reader.fieldnames if name}
    missing = [c for c in REQUIRED_COLUMNS if c not in columns]
    if missing:
        raise CsvImportError(f"CSV export is missing columns: {', '.join(missing)}")

    measurements: List[BodyMeasurement] = []
    try:
        for line_number, raw in enumerate(reader, start=2):
            row = {
                (key or "").strip().lower(): value
                for key, value in raw.items()
                if key is not None
            }
            measurement = row_to_measurement(row)
            if measurement is None:
                logger.debug("Dropping CSV line %d without date or weight", line_number)
                continue
            measurements.append(measurement)
    except csv.Error as exc:
        raise CsvImportError(f"Error parsing CSV: {exc}") from exc

    return sorted(measurements, key=lambda m: m.measurement_time)
