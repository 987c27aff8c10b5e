"""
Enumerations shared by every measurement device record.

Each enum carries the numeric menu code used at the terminal and a
human-readable label. ``from_code`` resolves a menu code back to a member.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Material(str, Enum):
    """Housing material of a device."""
    PLASTIC = "plastic"
    METAL = "metal"
    GLASS = "glass"

    @property
    def code(self) -> int:
        return _MATERIAL_CODES[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_code(cls, code: int) -> "Material":
        for member, member_code in _MATERIAL_CODES.items():
            if member_code == code:
                return member
        raise ValueError(f"Unknown material code: {code}")


class TemperatureScale(str, Enum):
    """Scale a temperature reading is expressed in."""
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @property
    def code(self) -> int:
        return _SCALE_CODES[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_code(cls, code: int) -> "TemperatureScale":
        for member, member_code in _SCALE_CODES.items():
            if member_code == code:
                return member
        raise ValueError(f"Unknown temperature scale code: {code}")


class Capability(str, Enum):
    """Optional operations that only some device kinds support."""
    TEMPERATURE_SCALE = "temperature_scale"
    CALIBRATION = "calibration"


@dataclass(frozen=True)
class KindInfo:
    """
    Metadata for a single device kind.

    Attributes:
        code: Menu code used by the "add device" prompt.
        menu_name: Name offered by the "add device" prompt.
        label: Type name shown in capability warnings.
        capabilities: Optional operations this kind supports.
    """
    code: int
    menu_name: str
    label: str
    capabilities: frozenset[Capability]


class DeviceKind(str, Enum):
    """Tag naming the concrete variant of a device record."""
    TEMPERATURE = "temperature"
    ADVANCED_TEMPERATURE = "advanced_temperature"

    @property
    def info(self) -> KindInfo:
        return _KIND_INFO[self]

    @property
    def code(self) -> int:
        return self.info.code

    @property
    def menu_name(self) -> str:
        return self.info.menu_name

    @property
    def label(self) -> str:
        return self.info.label

    def supports(self, capability: Capability) -> bool:
        return capability in self.info.capabilities

    @classmethod
    def from_code(cls, code: int) -> "DeviceKind":
        for member, info in _KIND_INFO.items():
            if info.code == code:
                return member
        raise ValueError(f"Unknown device type code: {code}")


_MATERIAL_CODES: dict[Material, int] = {
    Material.PLASTIC: 1,
    Material.METAL: 2,
    Material.GLASS: 3,
}

_SCALE_CODES: dict[TemperatureScale, int] = {
    TemperatureScale.CELSIUS: 1,
    TemperatureScale.FAHRENHEIT: 2,
    TemperatureScale.KELVIN: 3,
}

_KIND_INFO: dict[DeviceKind, KindInfo] = {
    DeviceKind.TEMPERATURE: KindInfo(
        code=1,
        menu_name="Temperature",
        label="TemperatureMeasurementDevice",
        capabilities=frozenset({Capability.TEMPERATURE_SCALE}),
    ),
    DeviceKind.ADVANCED_TEMPERATURE: KindInfo(
        code=2,
        menu_name="Advanced Temperature",
        label="AdvancedTemperatureMeasurementDevice",
        capabilities=frozenset({Capability.TEMPERATURE_SCALE, Capability.CALIBRATION}),
    ),
}

# Kind whose label names the requirement when a capability is missing.
# Every instantiable kind has a temperature scale, so the TEMPERATURE_SCALE
# failure cannot occur today; it is kept to mirror the calibration gate.
CAPABILITY_OWNERS: dict[Capability, DeviceKind] = {
    Capability.TEMPERATURE_SCALE: DeviceKind.TEMPERATURE,
    Capability.CALIBRATION: DeviceKind.ADVANCED_TEMPERATURE,
}


__all__ = [
    "Capability",
    "CAPABILITY_OWNERS",
    "DeviceKind",
    "KindInfo",
    "Material",
    "TemperatureScale",
]
