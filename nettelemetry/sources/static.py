"""Static data source — fixed payloads or a replayed JSON snapshot."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from nettelemetry.exceptions import SnapshotError
from nettelemetry.sources.base import NetworkDataSource


class StaticNetworkSource(NetworkDataSource):
    """Serve pre-recorded interface and counter payloads.

    Payloads are returned exactly as given, so a non-list payload or a
    configured error can be used to exercise the degrade paths.
    """

    def __init__(
        self,
        interfaces: Any = None,
        counters: Any = None,
        interfaces_error: BaseException | None = None,
        counters_error: BaseException | None = None,
    ) -> None:
        self.interfaces = [] if interfaces is None else interfaces
        self.counters = [] if counters is None else counters
        self.interfaces_error = interfaces_error
        self.counters_error = counters_error

    @classmethod
    def from_file(cls, path: str | Path) -> StaticNetworkSource:
        """Load a snapshot file of the form ``{"interfaces": [...], "counters": [...]}``."""
        path = Path(path)
        try:
            data = json.loads(path.read_text())
        except (OSError, ValueError) as e:
            raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e
        if not isinstance(data, dict):
            raise SnapshotError(f"Snapshot {path} must contain a JSON object")

        logger.debug(
            f"Loaded snapshot {path}: {len(data.get('interfaces') or [])} interfaces, "
            f"{len(data.get('counters') or [])} counter samples"
        )
        return cls(interfaces=data.get("interfaces"), counters=data.get("counters"))

    def fetch_interfaces(self) -> Any:
        if self.interfaces_error is not None:
            raise self.interfaces_error
        return self.interfaces

    def fetch_counters(self) -> Any:
        if self.counters_error is not None:
            raise self.counters_error
        return self.counters
