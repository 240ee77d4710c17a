"""
Uplink report decoding for the LK30 sensor.

Turns the fixed five-byte sensor report into an ``UplinkMessage``.
"""
from lk30codec.parsing.uplink.decode import (
    decode_uplink,
    decode_uplink_b64,
    decode_uplink_hex,
    ALARM_DIRECTION_BIT,
    ALARM_STATUS_BIT,
    UPLINK_LENGTH,
)
from lk30codec.parsing.uplink.model import UplinkMessage

__all__ = [
    "decode_uplink",
    "decode_uplink_b64",
    "decode_uplink_hex",
    "UplinkMessage",
    "ALARM_DIRECTION_BIT",
    "ALARM_STATUS_BIT",
    "UPLINK_LENGTH",
]
