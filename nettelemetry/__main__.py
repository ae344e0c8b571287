"""Orchestrator CLI — prints the startup banner and runs a telemetry command.

Sub-commands:
  interfaces  Normalized network interfaces (addresses, VLAN, link state)
  metrics     Per-interface traffic counters and link utilization

Examples:
  nettelemetry interfaces --format json

  nettelemetry metrics --sample-interval 2 -n eth0

  nettelemetry metrics --snapshot captured.json --no-utilization
"""

from __future__ import annotations

import os
import sys

from tabulate import tabulate

from nettelemetry import __version__, configure_logging
from nettelemetry import glogger

COMMANDS = {
    "interfaces": "Normalized network interfaces",
    "metrics": "Traffic metrics with link utilization",
}


def _print_usage() -> None:
    print("usage: nettelemetry <command> [options]\n")
    print("Available commands:")
    for cmd, desc in COMMANDS.items():
        print(f"  {cmd:14s}  {desc}")
    print("\nRun 'nettelemetry <command> --help' for command-specific options.")


def _print_startup_banner() -> None:
    startup_rows = [
        ["version", __version__],
        ["LOGURU_LEVEL", os.getenv("LOGURU_LEVEL", "")],
    ]

    for var in ("NETTELEMETRY_SAMPLE_INTERVAL", "NETTELEMETRY_SYSFS_ROOT"):
        val = os.environ.get(var)
        if val:
            startup_rows.append([var, val])

    table_str = tabulate(startup_rows, tablefmt="mixed_grid")
    lines = table_str.split("\n")
    table_width = len(lines[0])
    title = "nettelemetry starting up"
    title_border = "┍" + "━" * (table_width - 2) + "┑"
    title_row = "│ " + title.center(table_width - 4) + " │"
    separator = lines[0].replace("┍", "┝").replace("┑", "┥").replace("┯", "┿")

    glogger.opt(raw=True).info(
        "\n{}\n", title_border + "\n" + title_row + "\n" + separator + "\n" + "\n".join(lines[1:])
    )


def main() -> None:
    """Main entry point — dispatch to the telemetry CLI."""
    configure_logging()
    _print_startup_banner()

    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        _print_usage()
        sys.exit(0 if len(sys.argv) >= 2 else 1)

    command = sys.argv[1]
    if command not in COMMANDS:
        print(f"nettelemetry: unknown command '{command}'\n", file=sys.stderr)
        _print_usage()
        sys.exit(1)

    from nettelemetry.cli import main as cli_main

    cli_main(sys.argv[1:])


if __name__ == "__main__":
    main()
