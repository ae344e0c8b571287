"""NetworkService — read operations exposed to callers."""

from __future__ import annotations

from nettelemetry.metrics import MetricsAggregator
from nettelemetry.models import NetworkInterface, NetworkMetric
from nettelemetry.normalizer import InterfaceNormalizer
from nettelemetry.sources.base import NetworkDataSource
from nettelemetry.sources.host import HostNetworkSource


class NetworkService:
    """Bind the normalizer and aggregator to one data source.

    Each call is an independent snapshot; results are never cached.
    """

    def __init__(self, source: NetworkDataSource | None = None) -> None:
        self.source = source if source is not None else HostNetworkSource()
        self.normalizer = InterfaceNormalizer(self.source)
        self.aggregator = MetricsAggregator(self.source)

    def network_interfaces(self) -> list[NetworkInterface]:
        return self.normalizer.generate_network_interfaces()

    def network_metrics(self) -> list[NetworkMetric]:
        return self.aggregator.generate_network_metrics()

    def network_metrics_with_utilization(self) -> list[NetworkMetric]:
        return self.aggregator.generate_network_metrics_with_utilization()
