"""Application layer helpers for measurement imports."""

from .ports import CsvImportError, CsvSourcePort
from .services import import_measurements

__all__ = ["CsvImportError", "CsvSourcePort", "import_measurements"]
