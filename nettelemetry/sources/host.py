"""Host data source — psutil counters plus Linux sysfs interface attributes."""

from __future__ import annotations

import ipaddress
import os
import socket
import threading
import time
from pathlib import Path
from typing import Any

import psutil
from loguru import logger

from nettelemetry.exceptions import SourceCallError
from nettelemetry.models import RawCounterSample, RawInterface
from nettelemetry.sources.base import NetworkDataSource

DEFAULT_SYSFS_ROOT = "/sys/class/net"

_DUPLEX_NAMES = {
    psutil.NIC_DUPLEX_FULL: "full",
    psutil.NIC_DUPLEX_HALF: "half",
}


def _ipv6_prefix_length(netmask: str | None) -> str:
    """Convert an IPv6 netmask (``ffff:ffff::``) or prefix into a prefix-length string."""
    if not netmask:
        return ""
    if netmask.isdigit():
        return netmask
    try:
        return str(bin(int(ipaddress.IPv6Address(netmask))).count("1"))
    except ValueError:
        return ""


class HostNetworkSource(NetworkDataSource):
    """Read network adapters and traffic counters of the local host.

    Byte rates are derived from the difference to the previous counter
    snapshot held by this instance. Without a previous snapshot a baseline
    is taken first and the call waits ``sample_interval`` seconds.
    """

    def __init__(
        self,
        sample_interval: float = 1.0,
        sysfs_root: str | Path = DEFAULT_SYSFS_ROOT,
    ) -> None:
        self.sample_interval = sample_interval
        self.sysfs_root = Path(sysfs_root)
        self._lock = threading.Lock()
        self._last: tuple[float, dict[str, Any]] | None = None

    # ── sysfs helpers ──────────────────────────────────────────────────

    def _read_sysfs(self, iface: str, attr: str) -> str:
        try:
            return (self.sysfs_root / iface / attr).read_text().strip()
        except OSError:
            return ""

    def _is_virtual(self, iface: str) -> bool:
        link = self.sysfs_root / iface
        try:
            target = os.path.realpath(link)
        except OSError:
            return False
        return "/devices/virtual/" in target

    def _iface_type(self, iface: str) -> str:
        if (self.sysfs_root / iface / "wireless").exists() or (self.sysfs_root / iface / "phy80211").exists():
            return "wireless"
        return "wired"

    # ── fetches ────────────────────────────────────────────────────────

    def fetch_interfaces(self) -> list[RawInterface]:
        try:
            addrs = psutil.net_if_addrs()
            stats = psutil.net_if_stats()
        except (OSError, psutil.Error) as e:
            raise SourceCallError("net_if_addrs", e) from e

        names = list(addrs)
        names.extend(n for n in stats if n not in addrs)

        result: list[RawInterface] = []
        for name in names:
            mac = ip4 = ip4subnet = ip6 = ip6subnet = ""
            for addr in addrs.get(name, []):
                if addr.family == psutil.AF_LINK and not mac:
                    mac = addr.address or ""
                elif addr.family == socket.AF_INET and not ip4:
                    ip4 = addr.address
                    ip4subnet = addr.netmask or ""
                elif addr.family == socket.AF_INET6 and not ip6:
                    ip6 = addr.address.split("%")[0]
                    ip6subnet = _ipv6_prefix_length(addr.netmask)

            st = stats.get(name)
            flags = getattr(st, "flags", "") if st else ""
            internal = name == "lo" or "loopback" in flags
            operstate = self._read_sysfs(name, "operstate")
            if not operstate and st is not None:
                operstate = "up" if st.isup else "down"

            result.append(
                RawInterface(
                    iface=name,
                    mac=mac,
                    mtu=st.mtu if st else None,
                    speed=st.speed if st and st.speed > 0 else -1,
                    duplex=_DUPLEX_NAMES.get(st.duplex, "") if st else "",
                    internal=internal,
                    virtual=internal or self._is_virtual(name),
                    operstate=operstate,
                    type=self._iface_type(name),
                    ip4=ip4,
                    ip4subnet=ip4subnet,
                    ip6=ip6,
                    ip6subnet=ip6subnet,
                )
            )

        logger.debug(f"Read {len(result)} interfaces from host")
        return result

    def _snapshot(self) -> tuple[float, dict[str, Any]]:
        try:
            counters = psutil.net_io_counters(pernic=True)
        except (OSError, psutil.Error) as e:
            raise SourceCallError("net_io_counters", e) from e
        return time.monotonic(), counters

    def fetch_counters(self) -> list[RawCounterSample]:
        with self._lock:
            now, counters = self._snapshot()
            if self._last is None and self.sample_interval > 0:
                logger.debug(f"No previous counter snapshot, sampling for {self.sample_interval}s")
                self._last = (now, counters)
                time.sleep(self.sample_interval)
                now, counters = self._snapshot()
            previous = self._last
            self._last = (now, counters)

        elapsed = now - previous[0] if previous else 0.0
        prev_counters = previous[1] if previous else {}

        result: list[RawCounterSample] = []
        for name, cur in counters.items():
            rx_sec: float | None = None
            tx_sec: float | None = None
            prev = prev_counters.get(name)
            if prev is not None and elapsed > 0:
                # counters can reset when a link is recreated
                rx_sec = max(cur.bytes_recv - prev.bytes_recv, 0) / elapsed
                tx_sec = max(cur.bytes_sent - prev.bytes_sent, 0) / elapsed

            result.append(
                RawCounterSample(
                    iface=name,
                    rx_bytes=cur.bytes_recv,
                    tx_bytes=cur.bytes_sent,
                    rx_packets=cur.packets_recv,
                    tx_packets=cur.packets_sent,
                    rx_errors=cur.errin,
                    tx_errors=cur.errout,
                    rx_dropped=cur.dropin,
                    tx_dropped=cur.dropout,
                    rx_sec=rx_sec,
                    tx_sec=tx_sec,
                    ms=int(elapsed * 1000) if elapsed > 0 else None,
                )
            )

        return result
