from __future__ import annotations

from measurelab.domain.device import Calibration, MeasurementDevice, TemperatureReading
from measurelab.domain.kinds import DeviceKind


def create_device(kind: DeviceKind) -> MeasurementDevice:
    device = MeasurementDevice(kind=kind)
    if kind in (DeviceKind.TEMPERATURE, DeviceKind.ADVANCED_TEMPERATURE):
        device.temperature = TemperatureReading()
    if kind is DeviceKind.ADVANCED_TEMPERATURE:
        device.calibration = Calibration()
    return device


def create_device_from_code(code: int) -> MeasurementDevice:
    """
    Build an uninitialized record for the menu code of a device kind.

    Raises:
        ValueError: If ``code`` names no known kind.
    """
    return create_device(DeviceKind.from_code(code))
