"""Infrastructure helpers for measurement imports."""

from .client import HttpCsvSource, create_csv_source_adapter
from .csv_reader import parse_measurements_csv

__all__ = ["HttpCsvSource", "create_csv_source_adapter", "parse_measurements_csv"]
