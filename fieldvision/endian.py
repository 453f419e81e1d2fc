"""Byte-order reversal and conversion for fixed-width integers."""

from __future__ import annotations

import operator
import sys
from enum import Enum

_WIDTHS = (1, 2, 4, 8)


class ByteOrder(Enum):
    """Byte orderings; ``NATIVE`` is an alias of the host's own order."""

    BIG = "big"
    LITTLE = "little"
    NATIVE = sys.byteorder


def _check(value: int, width: int) -> tuple[int, int]:
    value = operator.index(value)
    width = operator.index(width)
    if width not in _WIDTHS:
        raise ValueError(f"width must be one of {_WIDTHS}, not {width!r}")
    return value, width


def _to_bytes(value: int, width: int, signed: bool, order: str) -> bytes:
    value, width = _check(value, width)
    return value.to_bytes(width, order, signed=signed)


def endian_reverse(value: int, width: int, signed: bool = False) -> int:
    """Return ``value`` with its ``width`` bytes in reverse order.

    Raises ``OverflowError`` when the value does not fit the width and
    signedness, and ``ValueError`` for a width other than 1, 2, 4 or 8.
    """
    data = _to_bytes(value, width, signed, "little")
    return int.from_bytes(data, "big", signed=signed)


def _native_is(order: ByteOrder) -> bool:
    return ByteOrder.NATIVE is order


def _reverse_unless_native(
    value: int, width: int, signed: bool, order: ByteOrder
) -> int:
    if _native_is(order):
        value, _ = _check(value, width)
        _to_bytes(value, width, signed, "little")
        return value
    return endian_reverse(value, width, signed)


def big_to_native(value: int, width: int, signed: bool = False) -> int:
    """Convert a big-endian value to host order."""
    return _reverse_unless_native(value, width, signed, ByteOrder.BIG)


def native_to_big(value: int, width: int, signed: bool = False) -> int:
    """Convert a host-order value to big-endian."""
    return _reverse_unless_native(value, width, signed, ByteOrder.BIG)


def little_to_native(value: int, width: int, signed: bool = False) -> int:
    """Convert a little-endian value to host order."""
    return _reverse_unless_native(value, width, signed, ByteOrder.LITTLE)


def native_to_little(value: int, width: int, signed: bool = False) -> int:
    """Convert a host-order value to little-endian."""
    return _reverse_unless_native(value, width, signed, ByteOrder.LITTLE)


def conditional_reverse(
    value: int,
    from_order: ByteOrder,
    to_order: ByteOrder,
    width: int,
    signed: bool = False,
) -> int:
    """Reverse the bytes of ``value`` only when the two orders differ."""
    from_order = ByteOrder(from_order)
    to_order = ByteOrder(to_order)
    if from_order is to_order:
        value, _ = _check(value, width)
        _to_bytes(value, width, signed, "little")
        return value
    return endian_reverse(value, width, signed)


def big_reverse_copy(value: int, width: int, signed: bool = False) -> bytes:
    """Serialise ``value`` as ``width`` big-endian bytes."""
    return _to_bytes(value, width, signed, "big")


def little_reverse_copy(value: int, width: int, signed: bool = False) -> bytes:
    """Serialise ``value`` as ``width`` little-endian bytes."""
    return _to_bytes(value, width, signed, "little")


def _from_bytes(data: bytes, signed: bool, order: str) -> int:
    data = bytes(data)
    if len(data) not in _WIDTHS:
        raise ValueError(f"data must be {_WIDTHS} bytes long, not {len(data)}")
    return int.from_bytes(data, order, signed=signed)


def from_big_bytes(data: bytes, signed: bool = False) -> int:
    """Read an integer stored as big-endian bytes."""
    return _from_bytes(data, signed, "big")


def from_little_bytes(data: bytes, signed: bool = False) -> int:
    """Read an integer stored as little-endian bytes."""
    return _from_bytes(data, signed, "little")