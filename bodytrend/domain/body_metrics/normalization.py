"""Source filtering and baseline normalization for measurement series."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List, Optional, Sequence

from ...models.body import BodyMeasurement


def available_sources(measurements: Iterable[BodyMeasurement]) -> List[str]:
    """Return distinct source labels in first-seen order."""

    seen: dict[str, None] = {}
    for m in measurements:
        seen.setdefault(m.source, None)
    return list(seen)


def filter_by_sources(
    measurements: Sequence[BodyMeasurement], sources: AbstractSet[str]
) -> List[BodyMeasurement]:
    return [m for m in measurements if m.source in sources]


def _relative(value: Optional[float], baseline: Optional[float]) -> Optional[float]:
    if value is None or not baseline:
        return None
    return round(value / baseline * 100, 1)


def normalize_measurements(
    measurements: Sequence[BodyMeasurement],
) -> List[BodyMeasurement]:
    """Express every metric as a percentage of the first sample's value.

    Metrics whose baseline is missing or zero become ``None``; weight falls
    back to the raw value in that case since it is always required.
    """

    if not measurements:
        return []

    baseline = measurements[0]
    normalized: List[BodyMeasurement] = []
    for m in measurements:
        weight = _relative(m.weight_kg, baseline.weight_kg)
        normalized.append(
            m.model_copy(
                update={
                    "weight_kg": m.weight_kg if weight is None else weight,
                    "body_fat_percent": _relative(
                        m.body_fat_percent, baseline.body_fat_percent
                    ),
                    "bmi": _relative(m.bmi, baseline.bmi),
                }
            )
        )
    return normalized
