"""
Downlink command encoding for the LK30 sensor.

This sub-package defines the command variants (set schedule, alarm
configuration, reset) and builds their binary frames.
"""
from lk30codec.parsing.commands.builder import (
    alarm_flags,
    build_reset,
    build_set_alarm_config,
    build_set_schedule,
    encode_downlink,
    FLAG_ALARM_ACTIVE,
    FLAG_ALARM_DIRECTION,
    FLAG_ALARM_ON_THRESHOLD,
    THRESHOLD_OFFSET,
)
from lk30codec.parsing.commands.model import (
    command_from_dict,
    DownlinkCommand,
    FunctionCode,
    Reset,
    SetAlarmConfig,
    SetSchedule,
)

__all__ = [
    "alarm_flags",
    "build_reset",
    "build_set_alarm_config",
    "build_set_schedule",
    "command_from_dict",
    "encode_downlink",
    "DownlinkCommand",
    "FunctionCode",
    "Reset",
    "SetAlarmConfig",
    "SetSchedule",
    "FLAG_ALARM_ACTIVE",
    "FLAG_ALARM_DIRECTION",
    "FLAG_ALARM_ON_THRESHOLD",
    "THRESHOLD_OFFSET",
]
