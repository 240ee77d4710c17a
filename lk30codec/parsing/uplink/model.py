from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UplinkMessage:
    """
    A decoded LK30 sensor report.

    Attributes:
        function_code: The report type byte, passed through uninterpreted.
        measurand: The primary measured value in device-defined units.
        battery_voltage: Battery level indicator, 0-100.
        alarm_status: Whether the alarm condition is currently active.
        alarm_direction: ``True`` when the alarm fired on a rising crossing,
            ``False`` for a falling one.
    """
    function_code: int
    measurand: int
    battery_voltage: int
    alarm_status: bool
    alarm_direction: bool

    def as_dict(self) -> dict[str, Any]:
        """
        Render the ChirpStack ``data`` object.

        Key names and the 0/1 alarm values match the device profile that
        dashboards and integrations already consume.
        """
        return {
            "func": self.function_code,
            "measurand": self.measurand,
            "batteryVoltage": self.battery_voltage,
            "alarm_status": int(self.alarm_status),
            "alarm_direction": int(self.alarm_direction),
        }
