"""
Decoder for LK30 uplink reports.

Every report uses the same fixed layout regardless of the function code:
``[func] [measurand hi] [measurand lo] [battery] [alarm bits]``.
Bytes after offset 4 are reserved for future firmware and ignored.
"""
from __future__ import annotations

from typing import Sequence

from lk30codec.core.binary import b64_to_bytes, byte_at, get_bit, hex_to_bytes, join_u16
from lk30codec.parsing.uplink.model import UplinkMessage

UPLINK_LENGTH = 5

# Bits of the alarm byte at offset 4.
ALARM_STATUS_BIT = 7
ALARM_DIRECTION_BIT = 0


def decode_uplink(payload: bytes | Sequence[int]) -> UplinkMessage:
    """
    Decode a raw uplink payload.

    Args:
        payload: The uplink bytes, either ``bytes`` or a list of integers as
            delivered by the network server.

    Returns:
        The decoded ``UplinkMessage``.

    Raises:
        OutOfRangeError: If fewer than five bytes are supplied or one of the
            first five list items is not a byte value.
    """
    # Check the last fixed offset first so a short payload fails before any field is read.
    alarm_byte = byte_at(payload, UPLINK_LENGTH - 1)
    return UplinkMessage(
        function_code=byte_at(payload, 0),
        measurand=join_u16(byte_at(payload, 1), byte_at(payload, 2)),
        battery_voltage=byte_at(payload, 3),
        alarm_status=get_bit(alarm_byte, ALARM_STATUS_BIT),
        alarm_direction=get_bit(alarm_byte, ALARM_DIRECTION_BIT),
    )


def decode_uplink_hex(raw_hex: str) -> UplinkMessage:
    return decode_uplink(hex_to_bytes(raw_hex))


def decode_uplink_b64(raw_b64: str) -> UplinkMessage:
    return decode_uplink(b64_to_bytes(raw_b64))
