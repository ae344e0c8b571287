"""Shared helper functions for interface normalization and metrics aggregation."""

from __future__ import annotations

import re
from typing import Any, Callable

from loguru import logger

from nettelemetry.exceptions import SourceCallError, SourceShapeError

# VLAN sub-interfaces carry the tag as a dotted suffix, e.g. "eth0.10"
_VLAN_SUFFIX_RE = re.compile(r"\.(\d+)$", re.ASCII)
_LEADING_INT_RE = re.compile(r"\s*[+-]?\d+", re.ASCII)

DEFAULT_IPV6_PREFIX_LENGTH = 64


def parse_vlan_id(name: str) -> int | None:
    """Return the VLAN id encoded in an interface name, or None."""
    m = _VLAN_SUFFIX_RE.search(name or "")
    return int(m.group(1)) if m else None


def parse_prefix_length(subnet: str | None) -> int:
    """Parse the leading integer of an IPv6 prefix length, falling back to /64.

    Trailing characters are ignored (``"48abc"`` is 48); no leading digits
    or a zero prefix gives 64.
    """
    m = _LEADING_INT_RE.match(subnet or "")
    return (int(m.group(0)) if m else 0) or DEFAULT_IPV6_PREFIX_LENGTH


def fetch_or_empty(fetch: Callable[[], Any], operation: str) -> Any:
    """Call a data source fetch, collapsing any failure into an empty list.

    The failure is logged with its traceback; the caller never sees it.
    """
    try:
        return fetch()
    except Exception as e:
        err = e if isinstance(e, SourceCallError) else SourceCallError(operation, e)
        logger.opt(exception=e).error(str(err))
        return []


def as_list(result: Any, operation: str, warn: bool = True) -> list[Any] | None:
    """Return ``result`` if it is list-shaped, else None (optionally warning)."""
    if isinstance(result, (list, tuple)):
        return list(result)
    if warn:
        logger.warning(str(SourceShapeError(operation, result)))
    return None
