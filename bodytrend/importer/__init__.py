"""Import body measurements from published CSV exports."""

from .application import CsvImportError, CsvSourcePort, import_measurements

__all__ = ["CsvImportError", "CsvSourcePort", "import_measurements"]
