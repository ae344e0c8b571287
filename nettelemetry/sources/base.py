"""Abstract base data source for network telemetry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class NetworkDataSource(ABC):
    """Abstract provider of raw interface descriptors and traffic counters.

    Implementations return a list on success and raise on failure. Items may
    be model instances or plain mappings with the same keys.
    """

    @abstractmethod
    def fetch_interfaces(self) -> Any:
        """Return the current list of raw interface descriptors."""

    @abstractmethod
    def fetch_counters(self) -> Any:
        """Return the current list of raw per-interface counter samples."""
