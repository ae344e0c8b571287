"""MetricsAggregator — traffic counters joined with link speed into NetworkMetric models."""

from __future__ import annotations

import concurrent.futures
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from loguru import logger

from nettelemetry._util import as_list, fetch_or_empty
from nettelemetry.exceptions import ProcessingError
from nettelemetry.models import NetworkMetric, RawCounterSample
from nettelemetry.sources.base import NetworkDataSource

BITS_PER_BYTE = 8
BITS_PER_MEGABIT = 1_000_000


def coerce_counter_sample(item: Any) -> RawCounterSample:
    """Accept a RawCounterSample or a mapping with the same keys."""
    if isinstance(item, RawCounterSample):
        return item
    if isinstance(item, Mapping):
        return RawCounterSample.model_validate(dict(item))
    raise ProcessingError(f"Unsupported counter record: {type(item).__name__}")


def interface_speed(item: Any) -> tuple[str, float]:
    """Read only the name and link speed from an interface record.

    Other attributes of the record are not validated here, so one
    malformed field never hides the speed of its interface. A missing or
    non-numeric speed counts as 0.
    """
    if isinstance(item, Mapping):
        name, speed = item.get("iface"), item.get("speed")
    else:
        name, speed = getattr(item, "iface", None), getattr(item, "speed", None)
    if not isinstance(name, str):
        return "", 0
    if isinstance(speed, bool) or not isinstance(speed, (int, float)):
        return name, 0
    return name, speed


def compute_utilization(rx_sec: float | None, tx_sec: float | None, speed_mbps: float | None) -> float:
    """Combined rx+tx throughput as a percentage of link capacity.

    Returns 0.0 when the link speed is unknown, zero or negative.
    """
    capacity_bits_per_sec = (speed_mbps or 0) * BITS_PER_MEGABIT
    if capacity_bits_per_sec <= 0:
        return 0.0
    total_bits_per_sec = ((rx_sec or 0) + (tx_sec or 0)) * BITS_PER_BYTE
    return round(total_bits_per_sec / capacity_bits_per_sec * 100, 2)


def build_metric(stat: RawCounterSample, utilization_percent: float = 0.0) -> NetworkMetric:
    """Map one counter sample to a NetworkMetric stamped with the current time."""
    return NetworkMetric(
        name=stat.iface,
        bytes_received=stat.rx_bytes or 0,
        bytes_sent=stat.tx_bytes or 0,
        packets_received=stat.rx_packets or 0,
        packets_sent=stat.tx_packets or 0,
        receive_errors=stat.rx_errors or 0,
        transmit_errors=stat.tx_errors or 0,
        receive_dropped=stat.rx_dropped or 0,
        transmit_dropped=stat.tx_dropped or 0,
        rx_sec=stat.rx_sec or 0.0,
        tx_sec=stat.tx_sec or 0.0,
        utilization_percent=utilization_percent,
        last_updated=datetime.now(timezone.utc),
    )


class MetricsAggregator:
    """Produce per-interface traffic metrics from a data source."""

    def __init__(self, source: NetworkDataSource) -> None:
        self.source = source

    def generate_network_metrics(self) -> list[NetworkMetric]:
        """Return one metric per counter sample, utilization fixed at 0."""
        stats = fetch_or_empty(self.source.fetch_counters, "fetch_counters")
        raw_list = as_list(stats, "fetch_counters")
        if raw_list is None:
            return []

        try:
            return [build_metric(coerce_counter_sample(item)) for item in raw_list]
        except Exception as e:
            logger.opt(exception=e).error(f"Error generating network metrics: {e}")
            return []

    def generate_network_metrics_with_utilization(self) -> list[NetworkMetric]:
        """Return one metric per counter sample with link utilization.

        Counters and interfaces are fetched concurrently; either fetch
        failing degrades to an empty list for that source only.
        """
        try:
            with concurrent.futures.ThreadPoolExecutor(max_workers=2) as pool:
                stats_future = pool.submit(fetch_or_empty, self.source.fetch_counters, "fetch_counters")
                ifaces_future = pool.submit(fetch_or_empty, self.source.fetch_interfaces, "fetch_interfaces")
                stats = stats_future.result()
                interfaces = ifaces_future.result()

            raw_stats = as_list(stats, "fetch_counters")
            if raw_stats is None:
                return []
            raw_ifaces = as_list(interfaces, "fetch_interfaces", warn=False) or []

            speed_map: dict[str, float] = {}
            for item in raw_ifaces:
                name, speed = interface_speed(item)
                if name:
                    speed_map[name] = speed

            metrics: list[NetworkMetric] = []
            for item in raw_stats:
                stat = coerce_counter_sample(item)
                utilization = compute_utilization(stat.rx_sec, stat.tx_sec, speed_map.get(stat.iface, 0))
                metrics.append(build_metric(stat, utilization))

            logger.debug(f"Computed {len(metrics)} metrics ({len(speed_map)} interfaces with speed data)")
            return metrics
        except Exception as e:
            logger.opt(exception=e).error(f"Error generating network metrics: {e}")
            return []
