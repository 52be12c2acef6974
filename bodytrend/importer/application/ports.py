"""Ports for loading measurement exports."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CsvImportError(ValueError):
    """Raised when a measurement export cannot be fetched or parsed."""


class CsvSourcePort(ABC):
    """Interface describing where raw measurement CSV text comes from."""

    @abstractmethod
    async def fetch_csv(self, url: str) -> str:
        """Return the CSV document published at ``url``."""
