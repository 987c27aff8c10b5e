from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from measurelab.domain.kinds import CAPABILITY_OWNERS, Capability, DeviceKind, Material, TemperatureScale
from measurelab.exceptions import UnsupportedCapabilityError


@dataclass
class TemperatureReading:
    current: float = 0.0
    scale: TemperatureScale = TemperatureScale.CELSIUS


@dataclass
class Calibration:
    offset: float = 0.0


@dataclass
class MeasurementDevice:
    """
    A single device record held by the registry.

    The shared fields live on the record itself; variant-specific parts are
    optional and present only for kinds that define them.
    """
    kind: DeviceKind
    name: str = ""
    unit: str = ""
    min_value: float = 0.0
    max_value: float = 0.0
    material: Material = Material.PLASTIC
    active: bool = False
    temperature: Optional[TemperatureReading] = None
    calibration: Optional[Calibration] = None

    @property
    def has_inverted_range(self) -> bool:
        return self.min_value > self.max_value

    def in_range(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value

    def summary(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "name": self.name,
            "unit": self.unit,
            "min_value": self.min_value,
            "max_value": self.max_value,
            "material": self.material.value,
            "active": self.active,
        }
        if self.temperature is not None:
            data["temperature"] = self.temperature.current
            data["scale"] = self.temperature.scale.value
        if self.calibration is not None:
            data["calibration_offset"] = self.calibration.offset
        return data


def supports(device: MeasurementDevice, capability: Capability) -> bool:
    return device.kind.supports(capability)


def require_capability(device: MeasurementDevice, capability: Capability) -> None:
    """
    Check that ``device`` supports ``capability``.

    Raises:
        UnsupportedCapabilityError: If the device kind lacks the capability.
    """
    if not supports(device, capability):
        raise UnsupportedCapabilityError(
            kind=device.kind,
            capability=capability,
            required_label=CAPABILITY_OWNERS[capability].label,
        )


__all__ = [
    "Calibration",
    "MeasurementDevice",
    "TemperatureReading",
    "require_capability",
    "supports",
]
