"""Terminal table and JSON formatters for interfaces and metrics."""

from __future__ import annotations

import json
from collections.abc import Sequence

from pydantic import BaseModel
from tabulate import tabulate

from nettelemetry.models import NetworkInterface, NetworkMetric

_RATE_UNITS = ("B/s", "KB/s", "MB/s", "GB/s")


def human_rate(bytes_per_sec: float) -> str:
    """Format a byte rate with a decimal unit, e.g. ``12.5 MB/s``."""
    value = float(bytes_per_sec)
    for unit in _RATE_UNITS[:-1]:
        if abs(value) < 1000:
            return f"{value:.1f} {unit}"
        value /= 1000
    return f"{value:.1f} {_RATE_UNITS[-1]}"


def to_json(items: Sequence[BaseModel]) -> str:
    """Serialize models with their camelCase field names."""
    return json.dumps([item.model_dump(mode="json", by_alias=True) for item in items], indent=2)


class InterfaceTableFormatter:
    """Format NetworkInterface models as a terminal table."""

    HEADERS = ["Name", "MAC", "State", "Type", "Speed", "MTU", "VLAN", "IPv4", "IPv6", "Flags"]

    def __init__(self, interfaces: Sequence[NetworkInterface]) -> None:
        self.interfaces = interfaces

    def format(self) -> str:
        rows = []
        for iface in self.interfaces:
            ipv4 = ", ".join(f"{a.address}/{a.netmask}" for a in iface.ipv4_addresses) or "-"
            ipv6 = ", ".join(f"{a.address}/{a.prefix_length}" for a in iface.ipv6_addresses) or "-"
            speed = f"{iface.speed:g} Mb/s" if iface.speed is not None and iface.speed > 0 else "-"
            flags = [f for f, on in (("internal", iface.internal), ("virtual", iface.virtual)) if on]
            rows.append(
                [
                    iface.name,
                    iface.mac_address or "-",
                    iface.operstate or "-",
                    iface.type or "-",
                    speed,
                    iface.mtu if iface.mtu is not None else "-",
                    iface.vlan_id if iface.vlan_id is not None else "-",
                    ipv4,
                    ipv6,
                    ",".join(flags) or "-",
                ]
            )
        if not rows:
            return "(no interfaces)"
        return tabulate(rows, headers=self.HEADERS, tablefmt="simple")


class MetricTableFormatter:
    """Format NetworkMetric models as a terminal table."""

    HEADERS = ["Name", "RX bytes", "TX bytes", "RX pkts", "TX pkts", "Errors", "Dropped", "RX rate", "TX rate", "Util %"]

    def __init__(self, metrics: Sequence[NetworkMetric]) -> None:
        self.metrics = metrics

    def format(self) -> str:
        rows = [
            [
                m.name,
                m.bytes_received,
                m.bytes_sent,
                m.packets_received,
                m.packets_sent,
                f"{m.receive_errors}/{m.transmit_errors}",
                f"{m.receive_dropped}/{m.transmit_dropped}",
                human_rate(m.rx_sec),
                human_rate(m.tx_sec),
                f"{m.utilization_percent:.2f}",
            ]
            for m in self.metrics
        ]
        if not rows:
            return "(no metrics)"
        return tabulate(rows, headers=self.HEADERS, tablefmt="simple", disable_numparse=True)
