from __future__ import annotations

import base64
import binascii
from typing import Sequence

from lk30codec.errors import CodecError, OutOfRangeError

U8_MAX = 0xFF
U16_MAX = 0xFFFF


def get_bit(byte_value: int, bit_index: int) -> bool:
    if bit_index < 0 or bit_index > 7:
        raise ValueError("bit_index must be between 0 and 7")
    return bool(byte_value & (1 << bit_index))


def require_u16(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRangeError(f"{name} must be an integer, got {value!r}")
    if value < 0 or value > U16_MAX:
        raise OutOfRangeError(f"{name} must be between 0 and {U16_MAX}, got {value}")
    return value


def split_u16(value: int) -> tuple[int, int]:
    """Split a 16-bit value into its big-endian (high, low) bytes."""
    return value // 256, value % 256


def join_u16(high: int, low: int) -> int:
    return high * 256 + low


def byte_at(data: Sequence[int] | bytes, index: int) -> int:
    """
    Read one byte from ``data``.

    Unlike a plain index this refuses to read past the end and rejects list
    items that do not fit in a byte.
    """
    if index >= len(data):
        raise OutOfRangeError(f"payload has {len(data)} bytes, byte {index} is required")
    value = data[index]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0 or value > U8_MAX:
        raise OutOfRangeError(f"byte {index} is not an unsigned 8-bit value: {value!r}")
    return value


def hex_to_bytes(text: str) -> bytes:
    cleaned = "".join(text.split())
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise CodecError(f"Failed to decode hex payload: {exc}") from exc


def b64_to_bytes(text: str) -> bytes:
    cleaned = "".join(text.split())
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned, validate=True)
    except binascii.Error as exc:
        raise CodecError(f"Failed to decode base64 payload: {exc}") from exc
