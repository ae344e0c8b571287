"""Shared fixtures for the nettelemetry test suite."""

from __future__ import annotations

import contextlib

import pytest
from loguru import logger

from nettelemetry.models import RawCounterSample, RawInterface
from nettelemetry.sources.static import StaticNetworkSource

# ── logging capture ───────────────────────────────────────────────────


@pytest.fixture()
def log_records():
    """Collect loguru records emitted by nettelemetry during a test."""
    records: list[dict] = []
    logger.enable("nettelemetry")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    with contextlib.suppress(ValueError):
        logger.remove(handler_id)
    logger.disable("nettelemetry")


# ── raw record factories ──────────────────────────────────────────────


@pytest.fixture()
def raw_interface():
    """Factory fixture returning a RawInterface with customizable fields."""

    def _make(**kwargs):
        defaults = {
            "iface": "eth0",
            "mac": "00:11:22:33:44:55",
            "mtu": 1500,
            "speed": 1000,
            "duplex": "full",
            "internal": False,
            "virtual": False,
            "operstate": "up",
            "type": "wired",
            "ip4": "192.168.1.100",
            "ip4subnet": "255.255.255.0",
            "ip6": "fe80::1",
            "ip6subnet": "64",
        }
        defaults.update(kwargs)
        return RawInterface(**defaults)

    return _make


@pytest.fixture()
def raw_counters():
    """Factory fixture returning a RawCounterSample with customizable fields."""

    def _make(**kwargs):
        defaults = {
            "iface": "eth0",
            "rx_bytes": 1000,
            "tx_bytes": 2000,
            "rx_packets": 10,
            "tx_packets": 20,
            "rx_errors": 1,
            "tx_errors": 2,
            "rx_dropped": 3,
            "tx_dropped": 4,
            "rx_sec": 12_500_000,
            "tx_sec": 12_500_000,
        }
        defaults.update(kwargs)
        return RawCounterSample(**defaults)

    return _make


@pytest.fixture()
def static_source():
    """Factory fixture returning a StaticNetworkSource."""

    def _make(**kwargs):
        return StaticNetworkSource(**kwargs)

    return _make
