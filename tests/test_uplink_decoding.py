"""Tests for uplink report decoding."""
import base64

import pytest

from lk30codec.errors import CodecError, OutOfRangeError
from lk30codec.parsing.uplink import (
    decode_uplink,
    decode_uplink_b64,
    decode_uplink_hex,
    UplinkMessage,
)


def test_decode_battery_without_alarm():
    message = decode_uplink([1, 0, 0, 50, 0])
    assert message.function_code == 1
    assert message.measurand == 0
    assert message.battery_voltage == 50
    assert message.alarm_status is False
    assert message.alarm_direction is False


def test_decode_max_measurand_with_alarm():
    message = decode_uplink([1, 255, 255, 0, 0x81])
    assert message.measurand == 65535
    assert message.alarm_status is True
    assert message.alarm_direction is True


def test_decode_accepts_bytes():
    message = decode_uplink(bytes([1, 0x01, 0xF4, 99, 0x80]))
    assert message == UplinkMessage(
        function_code=1,
        measurand=500,
        battery_voltage=99,
        alarm_status=True,
        alarm_direction=False,
    )


def test_alarm_bits_ignore_other_bits():
    message = decode_uplink([1, 0, 0, 0, 0x7E])
    assert message.alarm_status is False
    assert message.alarm_direction is False


def test_alarm_direction_only():
    message = decode_uplink([1, 0, 0, 0, 0x01])
    assert message.alarm_status is False
    assert message.alarm_direction is True


def test_measurand_is_big_endian():
    assert decode_uplink([1, 0x12, 0x34, 0, 0]).measurand == 0x1234
    assert decode_uplink([1, 0x00, 0xFF, 0, 0]).measurand == 255
    assert decode_uplink([1, 0x01, 0x00, 0, 0]).measurand == 256


def test_unknown_function_code_passes_through():
    message = decode_uplink([0xAB, 0, 7, 42, 0])
    assert message.function_code == 0xAB
    assert message.measurand == 7
    assert message.battery_voltage == 42


def test_trailing_bytes_are_ignored():
    message = decode_uplink([2, 0x12, 0x34, 99, 0x01, 9, 9])
    assert message == decode_uplink([2, 0x12, 0x34, 99, 0x01])


@pytest.mark.parametrize("payload", [[], [1], [1, 0, 0, 50], b"\x01\x00\x00\x32"])
def test_decode_short_payload(payload):
    with pytest.raises(OutOfRangeError):
        decode_uplink(payload)


@pytest.mark.parametrize("payload", [[1, 256, 0, 0, 0], [1, 0, 0, -1, 0], [1, 0, 0, 0, "x"]])
def test_decode_rejects_non_byte_items(payload):
    with pytest.raises(OutOfRangeError):
        decode_uplink(payload)


def test_decode_every_alarm_byte():
    for alarm_byte in range(256):
        message = decode_uplink([1, 0, 0, 0, alarm_byte])
        assert message.alarm_status is bool(alarm_byte & 0x80)
        assert message.alarm_direction is bool(alarm_byte & 0x01)


def test_as_dict_uses_device_profile_keys():
    data = decode_uplink([1, 0x01, 0xF4, 50, 0x81]).as_dict()
    assert data == {
        "func": 1,
        "measurand": 500,
        "batteryVoltage": 50,
        "alarm_status": 1,
        "alarm_direction": 1,
    }


def test_decode_hex():
    message = decode_uplink_hex("01 01f4 32 81")
    assert message.measurand == 500
    assert message.battery_voltage == 50
    assert message.alarm_status is True


def test_decode_hex_with_prefix():
    assert decode_uplink_hex("0x0100003200").battery_voltage == 50


def test_decode_hex_invalid():
    with pytest.raises(CodecError):
        decode_uplink_hex("zz")


def test_decode_b64():
    raw_b64 = base64.b64encode(bytes([1, 0, 0, 50, 0])).decode()
    assert decode_uplink_b64(raw_b64).battery_voltage == 50


def test_decode_b64_invalid():
    with pytest.raises(CodecError):
        decode_uplink_b64("not-valid-base64!!!")


def test_decode_b64_short():
    raw_b64 = base64.b64encode(bytes([1, 0, 0])).decode()
    with pytest.raises(OutOfRangeError):
        decode_uplink_b64(raw_b64)


def test_uplink_message_is_frozen():
    message = decode_uplink([1, 0, 0, 50, 0])
    with pytest.raises(AttributeError):
        message.battery_voltage = 99
