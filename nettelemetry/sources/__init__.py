"""Data sources for raw interface descriptors and traffic counters."""

from nettelemetry.sources.base import NetworkDataSource
from nettelemetry.sources.host import HostNetworkSource
from nettelemetry.sources.static import StaticNetworkSource

__all__ = [
    "NetworkDataSource",
    "HostNetworkSource",
    "StaticNetworkSource",
]
