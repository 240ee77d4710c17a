"""
Downlink command types for the LK30 sensor.

A ``DownlinkCommand`` is one of three frozen dataclasses; the function code of
each variant is fixed by its class.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Mapping, Union

from lk30codec.errors import InvalidCommandError, UnsupportedFunctionError


class FunctionCode(IntEnum):
    """Downlink function codes understood by the encoder."""

    SET_SCHEDULE = 1
    SET_ALARM_CONFIG = 2
    RESET = 128


@dataclass(frozen=True)
class SetSchedule:
    """
    Change how often the device measures.

    Attributes:
        wait_seconds: Seconds between measurement rounds (0-65535).
        measurement_count: Measurements per round (0-65535).
    """
    function_code: ClassVar[FunctionCode] = FunctionCode.SET_SCHEDULE

    wait_seconds: int
    measurement_count: int


@dataclass(frozen=True)
class SetAlarmConfig:
    """
    Configure the threshold alarm.

    Attributes:
        threshold: Alarm threshold, sent with a fixed +1000 offset so the
            usable range is -1000 to 64535.
        deadband: Margin around the threshold that suppresses re-triggering.
        alarm_direction: ``True`` to alarm on a rising crossing.
        alarm_on_threshold: Whether the threshold crossing raises the alarm.
        alarm_active: Whether the alarm is enabled at all.
    """
    function_code: ClassVar[FunctionCode] = FunctionCode.SET_ALARM_CONFIG

    threshold: int
    deadband: int
    alarm_direction: bool = False
    alarm_on_threshold: bool = False
    alarm_active: bool = False


@dataclass(frozen=True)
class Reset:
    """Reboot the device."""
    function_code: ClassVar[FunctionCode] = FunctionCode.RESET


DownlinkCommand = Union[SetSchedule, SetAlarmConfig, Reset]


def _int_field(data: Mapping[str, Any], key: str, func: int) -> int:
    if key not in data or data[key] is None:
        raise InvalidCommandError(f"Downlink function {func} requires field '{key}'")
    value = data[key]
    if isinstance(value, bool):
        raise InvalidCommandError(f"Field '{key}' must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidCommandError(f"Field '{key}' must be an integer, got {value!r}")
        return int(value)
    if not isinstance(value, int):
        raise InvalidCommandError(f"Field '{key}' must be an integer, got {value!r}")
    return value


def _flag_field(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise InvalidCommandError(f"Field '{key}' must be a boolean or 0/1, got {value!r}")


def command_from_dict(data: Mapping[str, Any]) -> DownlinkCommand:
    """
    Build a command from a ChirpStack downlink ``data`` object.

    The object uses the key names of the deployed device profile: ``func``,
    ``wait``, ``measurements``, ``threshold``, ``deadband``, ``alarm_dir``,
    ``alarm_thr`` and ``alarm_active``.

    Integral floats such as ``300.0`` are accepted for ``func`` and the
    numeric fields alike, since JSON from JavaScript integrations may carry them.

    Raises:
        UnsupportedFunctionError: If ``func`` is not a known function code.
        InvalidCommandError: If a required field is missing or not an integer.
    """
    func = data.get("func")
    if isinstance(func, float) and func.is_integer():
        func = int(func)
    if isinstance(func, bool) or not isinstance(func, int):
        raise UnsupportedFunctionError(func)
    try:
        code = FunctionCode(func)
    except ValueError:
        raise UnsupportedFunctionError(func) from None

    if code is FunctionCode.SET_SCHEDULE:
        return SetSchedule(
            wait_seconds=_int_field(data, "wait", func),
            measurement_count=_int_field(data, "measurements", func),
        )
    if code is FunctionCode.SET_ALARM_CONFIG:
        return SetAlarmConfig(
            threshold=_int_field(data, "threshold", func),
            deadband=_int_field(data, "deadband", func),
            alarm_direction=_flag_field(data, "alarm_dir"),
            alarm_on_threshold=_flag_field(data, "alarm_thr"),
            alarm_active=_flag_field(data, "alarm_active"),
        )
    return Reset()
