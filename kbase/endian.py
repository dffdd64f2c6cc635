"""Conversions between host byte order and network (big-endian) byte order."""

from __future__ import annotations

import sys

_SUPPORTED_BITS = (16, 32, 64)


def _swap_to(n: int, bits: int, signed: bool, source_order: str, target_order: str) -> int:
    if bits not in _SUPPORTED_BITS:
        raise ValueError(f"bits must be one of {_SUPPORTED_BITS}, got {bits}")
    size = bits // 8
    raw = n.to_bytes(size, source_order, signed=signed)
    return int.from_bytes(raw, target_order, signed=signed)


def host_to_network(n: int, bits: int = 32, signed: bool = False) -> int:
    """Return ``n`` with its ``bits``-wide representation in network byte order.

    The result, laid out in host byte order, has the bytes of ``n`` in
    big-endian order. Raises OverflowError if ``n`` does not fit.
    """
    return _swap_to(n, bits, signed, sys.byteorder, "big")


def network_to_host(n: int, bits: int = 32, signed: bool = False) -> int:
    """Return the host-order value of ``n``, which holds a network-order integer."""
    return _swap_to(n, bits, signed, "big", sys.byteorder)