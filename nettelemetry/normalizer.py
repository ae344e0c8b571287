"""InterfaceNormalizer — raw interface descriptors to NetworkInterface models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from nettelemetry._util import as_list, fetch_or_empty, parse_prefix_length, parse_vlan_id
from nettelemetry.exceptions import ProcessingError
from nettelemetry.models import IPv4Address, IPv6Address, NetworkInterface, RawInterface
from nettelemetry.sources.base import NetworkDataSource


def coerce_raw_interface(item: Any) -> RawInterface:
    """Accept a RawInterface or a mapping with the same keys."""
    if isinstance(item, RawInterface):
        return item
    if isinstance(item, Mapping):
        return RawInterface.model_validate(dict(item))
    raise ProcessingError(f"Unsupported interface record: {type(item).__name__}")


def normalize_interface(raw: RawInterface) -> NetworkInterface:
    """Map one raw descriptor to a NetworkInterface."""
    ipv4 = [IPv4Address(address=raw.ip4, netmask=raw.ip4subnet or "")] if raw.ip4 else []
    ipv6 = [IPv6Address(address=raw.ip6, prefix_length=parse_prefix_length(raw.ip6subnet))] if raw.ip6 else []

    return NetworkInterface(
        id=f"network/{raw.iface}",
        name=raw.iface,
        mac_address=raw.mac or "",
        mtu=raw.mtu or None,
        speed=raw.speed,
        duplex=raw.duplex or "",
        internal=bool(raw.internal),
        ipv4_addresses=ipv4,
        ipv6_addresses=ipv6,
        vlan_id=parse_vlan_id(raw.iface),
        operstate=raw.operstate or "",
        type=raw.type or "",
        virtual=bool(raw.virtual),
    )


class InterfaceNormalizer:
    """Produce normalized interface models from a data source."""

    def __init__(self, source: NetworkDataSource) -> None:
        self.source = source

    def generate_network_interfaces(self) -> list[NetworkInterface]:
        """Return one NetworkInterface per raw interface, in source order.

        Never raises: a failed fetch, a non-list result or a mapping error
        is logged and yields an empty list.
        """
        interfaces = fetch_or_empty(self.source.fetch_interfaces, "fetch_interfaces")
        raw_list = as_list(interfaces, "fetch_interfaces")
        if raw_list is None:
            return []

        try:
            return [normalize_interface(coerce_raw_interface(item)) for item in raw_list]
        except Exception as e:
            logger.opt(exception=e).error(f"Error generating network interfaces: {e}")
            return []
