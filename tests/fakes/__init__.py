from .csv_source import CsvSourceFake

__all__ = ["CsvSourceFake"]
