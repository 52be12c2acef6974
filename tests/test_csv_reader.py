from datetime import datetime

import pytest

from bodytrend.importer.application.ports import CsvImportError
from bodytrend.importer.infrastructure.csv_reader import (
    parse_date,
    parse_measurements_csv,
    parse_number,
)

CSV_EXPORT = """date,time,weight,fat_percentage,bmi,source
2025-01-03,07:45,79.6,21.0,24.3,Withings
2025-01-01,07:30:15,80.1,21.4,24.5,Withings
2025-01-02,08:00,79.9,,24.4,
2025-01-04,08:10,,21.1,24.2,Garmin
,08:00,79.0,21.0,24.0,Garmin
"""


def test_parse_export_sorted_and_filtered() -> None:
    measurements = parse_measurements_csv(CSV_EXPORT)

    assert [m.weight_kg for m in measurements] == [80.1, 79.9, 79.6]
    assert measurements[0].measurement_time == datetime(2025, 1, 1, 7, 30, 15)
    assert measurements[0].body_fat_percent == 21.4
    assert measurements[0].bmi == 24.5
    assert measurements[1].body_fat_percent is None
    assert measurements[1].source == "unknown"
    assert measurements[2].source == "Withings"


def test_time_column_is_optional() -> None:
    measurements = parse_measurements_csv("date,weight\n2025-02-01,70.5\n")

    assert measurements[0].measurement_time == datetime(2025, 2, 1)
    assert measurements[0].source == "unknown"
    assert measurements[0].bmi is None


def test_header_names_are_case_insensitive() -> None:
    measurements = parse_measurements_csv("\ufeffDate, Weight ,Source\n2025-02-01,70.5,Scale\n")

    assert measurements[0].weight_kg == 70.5
    assert measurements[0].source == "Scale"


def test_duplicate_timestamps_are_kept() -> None:
    text = "date,time,weight\n2025-02-01,07:00,70.5\n2025-02-01,07:00,70.7\n"

    assert len(parse_measurements_csv(text)) == 2


def test_missing_required_columns() -> None:
    with pytest.raises(CsvImportError, match="weight"):
        parse_measurements_csv("date,time,bmi\n2025-02-01,07:00,24\n")


def test_empty_document() -> None:
    with pytest.raises(CsvImportError):
        parse_measurements_csv("")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2025-03-04", datetime(2025, 3, 4)),
        ("04/03/2025", datetime(2025, 3, 4)),
        ("04.03.2025", datetime(2025, 3, 4)),
        ("2025-03-04T06:15:00", datetime(2025, 3, 4, 6, 15)),
        ("2025-03-04T06:15:00+01:00", datetime(2025, 3, 4, 5, 15)),
        ("", None),
        ("yesterday", None),
    ],
)
def test_parse_date(value: str, expected: datetime | None) -> None:
    assert parse_date(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("78.4", 78.4),
        (" 78,4 ", 78.4),
        (78, 78.0),
        ("", None),
        ("n/a", None),
        ("nan", None),
        (None, None),
    ],
)
def test_parse_number(value: object, expected: float | None) -> None:
    assert parse_number(value) == expected


def test_iso_datetime_in_date_column_wins_over_time() -> None:
    measurements = parse_measurements_csv(
        "date,time,weight\n2025-03-04T06:15:00,09:00,70.0\n"
    )

    assert measurements[0].measurement_time == datetime(2025, 3, 4, 6, 15)
