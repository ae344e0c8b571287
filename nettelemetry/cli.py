"""CLI entry point for network telemetry — standalone-capable."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

from loguru import logger

from nettelemetry.exceptions import SnapshotError
from nettelemetry.formatters import InterfaceTableFormatter, MetricTableFormatter, to_json
from nettelemetry.models import NetworkInterface, NetworkMetric
from nettelemetry.service import NetworkService
from nettelemetry.sources.base import NetworkDataSource
from nettelemetry.sources.host import DEFAULT_SYSFS_ROOT, HostNetworkSource
from nettelemetry.sources.static import StaticNetworkSource

_T = TypeVar("_T", NetworkInterface, NetworkMetric)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the telemetry commands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    common.add_argument(
        "--snapshot",
        metavar="FILE",
        help='Replay a JSON snapshot {"interfaces": [...], "counters": [...]} instead of reading the host',
    )
    common.add_argument(
        "--sample-interval",
        type=float,
        default=_env_float("NETTELEMETRY_SAMPLE_INTERVAL", 1.0),
        help="Seconds between counter samples used to derive byte rates "
        "(default: $NETTELEMETRY_SAMPLE_INTERVAL or 1.0)",
    )
    common.add_argument(
        "--sysfs-root",
        default=os.getenv("NETTELEMETRY_SYSFS_ROOT", DEFAULT_SYSFS_ROOT),
        help=f"sysfs net class directory (default: $NETTELEMETRY_SYSFS_ROOT or {DEFAULT_SYSFS_ROOT})",
    )
    common.add_argument(
        "-n",
        "--name",
        action="append",
        default=[],
        help="Only show this interface (repeatable)",
    )
    common.add_argument(
        "-o",
        "--output",
        help="Output file (default: stdout)",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help=(
            "Keep the existing log sinks (DEBUG with the formatted sink when started via the "
            "'nettelemetry' command, loguru's default sink when run standalone); "
            "without -v, logging is reset to a plain INFO sink on stderr"
        ),
    )

    parser = argparse.ArgumentParser(
        description="Host network interface inventory and traffic utilization",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("interfaces", parents=[common], help="List normalized network interfaces")
    metrics_parser = subparsers.add_parser("metrics", parents=[common], help="List per-interface traffic metrics")
    metrics_parser.add_argument(
        "--no-utilization",
        action="store_true",
        help="Skip the link-speed join (utilization reported as 0)",
    )
    return parser.parse_args(args)


def _build_source(parsed: argparse.Namespace) -> NetworkDataSource:
    if parsed.snapshot:
        return StaticNetworkSource.from_file(parsed.snapshot)
    return HostNetworkSource(sample_interval=parsed.sample_interval, sysfs_root=parsed.sysfs_root)


def _filter_by_name(items: Sequence[_T], names: list[str]) -> list[_T]:
    """Keep items whose name is in ``names``; an empty filter keeps everything."""
    if not names:
        return list(items)
    wanted = set(names)
    return [item for item in items if item.name in wanted]


def run(parsed: argparse.Namespace, service: NetworkService) -> str:
    """Execute the selected command and return the rendered output."""
    if parsed.command == "interfaces":
        interfaces = _filter_by_name(service.network_interfaces(), parsed.name)
        return to_json(interfaces) if parsed.format == "json" else InterfaceTableFormatter(interfaces).format()

    if parsed.no_utilization:
        metrics = service.network_metrics()
    else:
        metrics = service.network_metrics_with_utilization()
    metrics = _filter_by_name(metrics, parsed.name)
    return to_json(metrics) if parsed.format == "json" else MetricTableFormatter(metrics).format()


def main(args: list[str] | None = None) -> None:
    """Main entry point for the telemetry CLI."""
    parsed = parse_args(args)

    logger.enable("nettelemetry")
    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        source = _build_source(parsed)
    except SnapshotError as e:
        logger.error(str(e))
        sys.exit(1)

    output = run(parsed, NetworkService(source))

    if parsed.output:
        Path(parsed.output).write_text(output + "\n")
        logger.info(f"Output written to {parsed.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
