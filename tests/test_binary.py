"""Tests for byte helpers."""
import pytest

from lk30codec.core.binary import (
    b64_to_bytes,
    byte_at,
    get_bit,
    hex_to_bytes,
    join_u16,
    require_u16,
    split_u16,
)
from lk30codec.errors import CodecError, OutOfRangeError


def test_get_bit():
    assert get_bit(0x80, 7) is True
    assert get_bit(0x80, 0) is False
    assert get_bit(0x01, 0) is True


def test_get_bit_index_bounds():
    with pytest.raises(ValueError):
        get_bit(0, 8)
    with pytest.raises(ValueError):
        get_bit(0, -1)


def test_split_and_join_u16():
    assert split_u16(300) == (1, 44)
    assert split_u16(0xFFFF) == (255, 255)
    assert join_u16(1, 44) == 300


def test_require_u16():
    assert require_u16("x", 0) == 0
    assert require_u16("x", 65535) == 65535
    with pytest.raises(OutOfRangeError, match="x must be between"):
        require_u16("x", 65536)


def test_byte_at_past_end():
    with pytest.raises(OutOfRangeError, match="byte 4 is required"):
        byte_at([1, 2, 3], 4)


def test_byte_at_rejects_bool():
    with pytest.raises(OutOfRangeError):
        byte_at([True], 0)


def test_hex_to_bytes_ignores_whitespace():
    assert hex_to_bytes(" 01 02\n03 ") == b"\x01\x02\x03"


def test_b64_to_bytes_adds_padding():
    assert b64_to_bytes("AQAAMgA") == bytes([1, 0, 0, 50, 0])


def test_b64_to_bytes_invalid():
    with pytest.raises(CodecError):
        b64_to_bytes("***")
