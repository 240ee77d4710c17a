"""
Downlink frame builder for LK30 configuration commands.

Frame layouts, all multi-byte values big-endian:

- set schedule: ``[0x01] [wait hi] [wait lo] [count hi] [count lo]``
- alarm config: ``[0x02] [thr+1000 hi] [thr+1000 lo] [deadband hi] [deadband lo] [flags]``
- reset: ``[0x80]``
"""
from __future__ import annotations

from lk30codec.core.binary import require_u16, split_u16
from lk30codec.errors import OutOfRangeError, UnsupportedFunctionError
from lk30codec.parsing.commands.model import (
    DownlinkCommand,
    FunctionCode,
    Reset,
    SetAlarmConfig,
    SetSchedule,
)

# Added to the signed threshold to map it onto an unsigned 16-bit wire value.
THRESHOLD_OFFSET = 1000

# Alarm config flag bits.
FLAG_ALARM_DIRECTION = 0x01
FLAG_ALARM_ON_THRESHOLD = 0x02
FLAG_ALARM_ACTIVE = 0x80


def build_set_schedule(wait_seconds: int, measurement_count: int) -> bytes:
    """
    Build a set-schedule frame.

    Args:
        wait_seconds: Seconds between measurement rounds.
        measurement_count: Measurements per round.

    Returns:
        The five-byte frame.

    Raises:
        OutOfRangeError: If either value does not fit in 16 bits.
    """
    wait_hi, wait_lo = split_u16(require_u16("wait_seconds", wait_seconds))
    count_hi, count_lo = split_u16(require_u16("measurement_count", measurement_count))
    return bytes([FunctionCode.SET_SCHEDULE, wait_hi, wait_lo, count_hi, count_lo])


def alarm_flags(alarm_direction: bool, alarm_on_threshold: bool, alarm_active: bool) -> int:
    flags = 0
    if alarm_direction:
        flags |= FLAG_ALARM_DIRECTION
    if alarm_on_threshold:
        flags |= FLAG_ALARM_ON_THRESHOLD
    if alarm_active:
        flags |= FLAG_ALARM_ACTIVE
    return flags


def build_set_alarm_config(
    threshold: int,
    deadband: int,
    alarm_direction: bool = False,
    alarm_on_threshold: bool = False,
    alarm_active: bool = False,
) -> bytes:
    """
    Build an alarm configuration frame.

    Args:
        threshold: Signed alarm threshold; ``threshold + 1000`` goes on the wire.
        deadband: Re-trigger margin around the threshold.
        alarm_direction: Alarm on rising (``True``) or falling crossings.
        alarm_on_threshold: Raise the alarm when the threshold is crossed.
        alarm_active: Enable the alarm.

    Returns:
        The six-byte frame.

    Raises:
        OutOfRangeError: If the offset threshold or the deadband does not fit in 16 bits.
    """
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise OutOfRangeError(f"threshold must be an integer, got {threshold!r}")
    encoded = threshold + THRESHOLD_OFFSET
    try:
        require_u16("threshold + 1000", encoded)
    except OutOfRangeError:
        raise OutOfRangeError(
            f"threshold must be between {-THRESHOLD_OFFSET} and {0xFFFF - THRESHOLD_OFFSET}, got {threshold}"
        ) from None
    thr_hi, thr_lo = split_u16(encoded)
    db_hi, db_lo = split_u16(require_u16("deadband", deadband))
    flags = alarm_flags(alarm_direction, alarm_on_threshold, alarm_active)
    return bytes([FunctionCode.SET_ALARM_CONFIG, thr_hi, thr_lo, db_hi, db_lo, flags])


def build_reset() -> bytes:
    return bytes([FunctionCode.RESET])


def encode_downlink(command: DownlinkCommand) -> bytes:
    """
    Encode a downlink command into its wire frame.

    Raises:
        UnsupportedFunctionError: If ``command`` is not one of the known variants.
        OutOfRangeError: If a numeric field does not fit its wire width.
    """
    if isinstance(command, SetSchedule):
        return build_set_schedule(command.wait_seconds, command.measurement_count)
    if isinstance(command, SetAlarmConfig):
        return build_set_alarm_config(
            threshold=command.threshold,
            deadband=command.deadband,
            alarm_direction=command.alarm_direction,
            alarm_on_threshold=command.alarm_on_threshold,
            alarm_active=command.alarm_active,
        )
    if isinstance(command, Reset):
        return build_reset()
    raise UnsupportedFunctionError(getattr(command, "function_code", command))
