"""Linear regression helpers for body measurements."""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional, Sequence

from ...models.body import BodyMeasurement
from ...models.trend import DeviationEstimate, RegressionResult

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400

# Two-tailed 95% critical values of Student's t, keyed by degrees of freedom.
T_TABLE_95: Dict[int, float] = {
    1: 12.706,
    2: 4.303,
    3: 3.182,
    4: 2.776,
    5: 2.571,
    6: 2.447,
    7: 2.365,
    8: 2.306,
    9: 2.262,
    10: 2.228,
    11: 2.201,
    12: 2.179,
    13: 2.160,
    14: 2.145,
    15: 2.131,
    16: 2.120,
    17: 2.110,
    18: 2.101,
    19: 2.093,
    20: 2.086,
    21: 2.080,
    22: 2.074,
    23: 2.069,
    24: 2.064,
    25: 2.060,
    26: 2.056,
    27: 2.052,
    28: 2.048,
    29: 2.045,
    30: 2.042,
    40: 2.021,
    50: 2.009,
    60: 2.000,
}
T_ASYMPTOTIC_95 = 1.960


def elapsed_days(measurements: Sequence[BodyMeasurement]) -> list[float]:
    """Return fractional days between each sample and the first one."""

    if not measurements:
        return []
    start = measurements[0].measurement_time
    return [
        (m.measurement_time - start).total_seconds() / SECONDS_PER_DAY
        for m in measurements
    ]


def fit_linear_regression(
    measurements: Sequence[BodyMeasurement],
) -> Optional[RegressionResult]:
    """Fit weight against elapsed days since the first sample.

    The series must already be in chronological order. Returns ``None`` when
    fewer than two samples are given or any value is not finite.
    """

    n = len(measurements)
    if n < 2:
        return None

    xs = elapsed_days(measurements)
    ys = [m.weight_kg for m in measurements]
    if not all(math.isfinite(v) for v in xs) or not all(
        math.isfinite(v) for v in ys
    ):
        logger.debug("Skipping regression over non-finite input")
        return None

    x_mean = sum(xs) / n
    y_mean = sum(ys) / n
    sxx = sum((x - x_mean) ** 2 for x in xs)
    sxy = sum((x - x_mean) * (y - y_mean) for x, y in zip(xs, ys))
    ss_tot = sum((y - y_mean) ** 2 for y in ys)

    if sxx == 0:
        slope = 0.0
        intercept = y_mean
    else:
        slope = sxy / sxx
        intercept = y_mean - slope * x_mean

    residuals = tuple(y - (intercept + slope * x) for x, y in zip(xs, ys))
    ss_res = sum(r * r for r in residuals)
    if not all(math.isfinite(v) for v in (slope, intercept, ss_res, ss_tot)):
        logger.debug("Skipping regression whose sums overflowed")
        return None

    if sxx == 0:
        r2 = 0.0
    elif ss_tot == 0:
        r2 = 1.0
    else:
        r2 = min(1.0, max(0.0, 1 - ss_res / ss_tot))

    return RegressionResult(
        slope=slope,
        intercept=intercept,
        elapsed_days=tuple(xs),
        residuals=residuals,
        r_squared=r2,
        sample_count=n,
        x_mean=x_mean,
        sxx=sxx,
        residual_sum_squares=ss_res,
        first_measurement_time=measurements[0].measurement_time,
    )


def t_value_95(degrees_of_freedom: int) -> float:
    """Approximate the two-tailed 95% t multiplier from ``T_TABLE_95``.

    Degrees of freedom between tabulated entries use the closest entry,
    preferring the smaller one on ties. Anything above 60 uses 1.960.
    """

    if degrees_of_freedom < 1:
        raise ValueError("degrees_of_freedom must be at least 1")
    if degrees_of_freedom > max(T_TABLE_95):
        return T_ASYMPTOTIC_95
    if degrees_of_freedom in T_TABLE_95:
        return T_TABLE_95[degrees_of_freedom]
    closest = min(T_TABLE_95, key=lambda df: (abs(df - degrees_of_freedom), df))
    return T_TABLE_95[closest]


def estimate_deviation(
    regression: RegressionResult,
) -> Optional[DeviationEstimate]:
    """Return the residual standard error and t multiplier, if defined."""

    degrees_of_freedom = regression.sample_count - 2
    if degrees_of_freedom < 1 or regression.sxx == 0:
        return None

    standard_error = math.sqrt(regression.residual_sum_squares / degrees_of_freedom)
    if not math.isfinite(standard_error):
        return None

    return DeviationEstimate(
        standard_error=standard_error,
        t_value=t_value_95(degrees_of_freedom),
        degrees_of_freedom=degrees_of_freedom,
    )
