"""Host Network Telemetry Library.

Collects network interface descriptors and traffic counters from the host,
normalizes them into GraphQL-ready models and derives per-interface link
utilization.
"""

__version__ = "0.0.1"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from nettelemetry.exceptions import (  # noqa: E402
    ProcessingError,
    SnapshotError,
    SourceCallError,
    SourceShapeError,
    TelemetryError,
)
from nettelemetry.metrics import MetricsAggregator  # noqa: E402
from nettelemetry.models import (  # noqa: E402
    IPv4Address,
    IPv6Address,
    NetworkInterface,
    NetworkMetric,
    RawCounterSample,
    RawInterface,
)
from nettelemetry.normalizer import InterfaceNormalizer  # noqa: E402
from nettelemetry.service import NetworkService  # noqa: E402
from nettelemetry.sources import HostNetworkSource, NetworkDataSource, StaticNetworkSource  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "NetworkService",
    "InterfaceNormalizer",
    "MetricsAggregator",
    "NetworkDataSource",
    "HostNetworkSource",
    "StaticNetworkSource",
    "RawInterface",
    "RawCounterSample",
    "IPv4Address",
    "IPv6Address",
    "NetworkInterface",
    "NetworkMetric",
    "TelemetryError",
    "SourceShapeError",
    "SourceCallError",
    "ProcessingError",
    "SnapshotError",
]
