"""
This package defines the domain model of measurelab: the device record with
its variant parts, the enumerations it is built from, and the operations
that prompt for and mutate it.
"""
from measurelab.domain.device import Calibration, MeasurementDevice, TemperatureReading, require_capability, supports
from measurelab.domain.factory import create_device, create_device_from_code
from measurelab.domain.kinds import Capability, DeviceKind, Material, TemperatureScale

__all__ = [
    "Calibration",
    "Capability",
    "DeviceKind",
    "Material",
    "MeasurementDevice",
    "TemperatureReading",
    "TemperatureScale",
    "create_device",
    "create_device_from_code",
    "require_capability",
    "supports",
]
