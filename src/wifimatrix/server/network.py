"""LAN address lookup for the startup banner."""

from __future__ import annotations

import ipaddress
import logging
import socket
from typing import Any, Iterable, Mapping

import psutil

logger = logging.getLogger(__name__)

LOOPBACK_ADDRESS = "127.0.0.1"


def resolve_local_ipv4(
    interfaces: Mapping[str, Iterable[Any]] | None = None,
) -> str:
    """Return the first IPv4 address that is not loopback.

    Args:
        interfaces: Interface name to address entries, shaped like
            ``psutil.net_if_addrs()``. Queried from the OS when None.

    Returns:
        The first usable address found, or ``127.0.0.1`` if the host
        has no LAN-facing IPv4 address.
    """
    if interfaces is None:
        interfaces = psutil.net_if_addrs()

    for name, addresses in interfaces.items():
        for entry in addresses:
            if entry.family != socket.AF_INET:
                continue
            if entry.address == LOOPBACK_ADDRESS or _is_internal(entry.address):
                continue
            logger.debug("Using %s from interface %s", entry.address, name)
            return entry.address

    logger.debug("No LAN IPv4 address found, falling back to %s", LOOPBACK_ADDRESS)
    return LOOPBACK_ADDRESS


def _is_internal(address: str) -> bool:
    try:
        return ipaddress.ip_address(address).is_loopback
    except ValueError:
        return True
