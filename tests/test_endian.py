import struct
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fieldvision.endian import (
    ByteOrder,
    big_reverse_copy,
    big_to_native,
    conditional_reverse,
    endian_reverse,
    from_big_bytes,
    from_little_bytes,
    little_reverse_copy,
    little_to_native,
    native_to_big,
    native_to_little,
)

_FORMATS = {1: "B", 2: "H", 4: "I", 8: "Q"}
_SIGNED_FORMATS = {1: "b", 2: "h", 4: "i", 8: "q"}


def _unsigned(width):
    return st.integers(min_value=0, max_value=(1 << (8 * width)) - 1)


def _signed(width):
    half = 1 << (8 * width - 1)
    return st.integers(min_value=-half, max_value=half - 1)


widths = st.sampled_from([1, 2, 4, 8])


def test_reverse_two_bytes():
    assert endian_reverse(0x0102, 2) == 0x0201


def test_reverse_four_bytes():
    assert endian_reverse(0x01020304, 4) == 0x04030201


def test_single_byte_is_unchanged():
    assert endian_reverse(0x7F, 1) == 0x7F
    assert endian_reverse(-5, 1, True) == -5


@given(st.data(), widths)
def test_reverse_is_involution(data, width):
    value = data.draw(_unsigned(width))
    assert endian_reverse(endian_reverse(value, width), width) == value


@given(st.data(), widths)
def test_signed_reverse_is_involution(data, width):
    value = data.draw(_signed(width))
    assert endian_reverse(endian_reverse(value, width, True), width, True) == value


@given(st.data(), widths)
def test_reverse_matches_struct(data, width):
    value = data.draw(_signed(width))
    fmt = _SIGNED_FORMATS[width]
    expected = struct.unpack(">" + fmt, struct.pack("<" + fmt, value))[0]
    assert endian_reverse(value, width, True) == expected


@given(st.data(), widths)
def test_big_copy_round_trip(data, width):
    value = data.draw(_unsigned(width))
    assert from_big_bytes(big_reverse_copy(value, width)) == value


@given(st.data(), widths)
def test_little_copy_round_trip(data, width):
    value = data.draw(_signed(width))
    assert from_little_bytes(little_reverse_copy(value, width, True), True) == value


@given(st.data(), widths)
def test_copies_are_mirror_images(data, width):
    value = data.draw(_unsigned(width))
    assert little_reverse_copy(value, width) == big_reverse_copy(value, width)[::-1]


@given(st.data(), widths)
def test_big_copy_matches_struct(data, width):
    value = data.draw(_unsigned(width))
    assert big_reverse_copy(value, width) == struct.pack(">" + _FORMATS[width], value)


def test_big_copy_pinned_bytes():
    assert big_reverse_copy(0x0102, 2) == b"\x01\x02"
    assert little_reverse_copy(0x0102, 2) == b"\x02\x01"


@given(st.data(), widths)
def test_native_conversions_follow_host(data, width):
    value = data.draw(_unsigned(width))
    host = value.to_bytes(width, sys.byteorder)
    assert native_to_big(value, width) == int.from_bytes(host, "big")
    assert native_to_little(value, width) == int.from_bytes(host, "little")


@given(st.data(), widths)
def test_to_native_and_back(data, width):
    value = data.draw(_unsigned(width))
    assert native_to_big(big_to_native(value, width), width) == value
    assert native_to_little(little_to_native(value, width), width) == value


@given(st.data(), widths)
def test_big_to_native_reads_big_bytes(data, width):
    value = data.draw(_unsigned(width))
    stored = big_reverse_copy(value, width)
    as_native = int.from_bytes(stored, sys.byteorder)
    assert big_to_native(as_native, width) == value


@given(st.data(), widths)
def test_conditional_reverse(data, width):
    value = data.draw(_unsigned(width))
    assert conditional_reverse(value, ByteOrder.BIG, ByteOrder.BIG, width) == value
    assert conditional_reverse(
        value, ByteOrder.LITTLE, ByteOrder.LITTLE, width
    ) == value
    assert conditional_reverse(
        value, ByteOrder.BIG, ByteOrder.LITTLE, width
    ) == endian_reverse(value, width)


def test_native_alias_matches_host():
    assert ByteOrder.NATIVE.value == sys.byteorder
    assert ByteOrder.NATIVE is ByteOrder(sys.byteorder)


def test_conditional_reverse_native_same_order():
    assert conditional_reverse(0x0102, ByteOrder.NATIVE, ByteOrder(sys.byteorder), 2) == 0x0102


@pytest.mark.parametrize("width", [0, 3, 5, 16])
def test_bad_width_raises(width):
    with pytest.raises(ValueError):
        endian_reverse(1, width)


def test_value_too_large_raises():
    with pytest.raises(OverflowError):
        endian_reverse(0x10000, 2)


def test_negative_unsigned_raises():
    with pytest.raises(OverflowError):
        big_reverse_copy(-1, 4)


def test_non_integer_raises():
    with pytest.raises(TypeError):
        endian_reverse(1.5, 4)


def test_bad_byte_length_raises():
    with pytest.raises(ValueError):
        from_big_bytes(b"\x01\x02\x03")


def test_same_order_still_checks_range():
    with pytest.raises(OverflowError):
        conditional_reverse(256, ByteOrder.BIG, ByteOrder.BIG, 1)