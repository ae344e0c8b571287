"""Pydantic models for raw source records and normalized telemetry."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ── raw source records ────────────────────────────────────────────────


class RawInterface(BaseModel):
    """Interface descriptor as reported by the data source.

    Sources may report null for any attribute they cannot determine.
    """

    iface: str = ""
    mac: Optional[str] = ""
    mtu: Optional[int] = None
    speed: Optional[float] = None  # Mbps, -1 when unknown
    duplex: Optional[str] = ""
    internal: Optional[bool] = False
    virtual: Optional[bool] = False
    operstate: Optional[str] = ""
    type: Optional[str] = ""
    ip4: Optional[str] = ""
    ip4subnet: Optional[str] = ""
    ip6: Optional[str] = ""
    ip6subnet: Optional[str] = ""


class RawCounterSample(BaseModel):
    """Cumulative and instantaneous traffic counters for one interface."""

    iface: str = ""
    rx_bytes: Optional[int] = None
    tx_bytes: Optional[int] = None
    rx_packets: Optional[int] = None
    tx_packets: Optional[int] = None
    rx_errors: Optional[int] = None
    tx_errors: Optional[int] = None
    rx_dropped: Optional[int] = None
    tx_dropped: Optional[int] = None
    rx_sec: Optional[float] = None  # bytes/sec
    tx_sec: Optional[float] = None  # bytes/sec
    ms: Optional[int] = None  # sampling window


# ── normalized output ─────────────────────────────────────────────────


class _GraphQLModel(BaseModel):
    """Immutable output model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class IPv4Address(_GraphQLModel):
    address: str
    netmask: str = ""


class IPv6Address(_GraphQLModel):
    address: str
    prefix_length: int = 64


class NetworkInterface(_GraphQLModel):
    """Normalized network interface details."""

    id: str
    name: str
    mac_address: str = ""
    mtu: Optional[int] = None
    speed: Optional[float] = None
    duplex: str = ""
    internal: bool = False
    ipv4_addresses: list[IPv4Address] = Field(default_factory=list)
    ipv6_addresses: list[IPv6Address] = Field(default_factory=list)
    vlan_id: Optional[int] = None
    operstate: str = ""
    type: str = ""
    virtual: bool = False


class NetworkMetric(_GraphQLModel):
    """Point-in-time traffic metrics for one interface."""

    name: str
    bytes_received: int = 0
    bytes_sent: int = 0
    packets_received: int = 0
    packets_sent: int = 0
    receive_errors: int = 0
    transmit_errors: int = 0
    receive_dropped: int = 0
    transmit_dropped: int = 0
    rx_sec: float = 0.0
    tx_sec: float = 0.0
    utilization_percent: float = 0.0
    last_updated: Optional[datetime] = None
