from measurelab.app import AppSettings, DeviceRegistry, MenuController
from measurelab.console import Terminal
from measurelab.domain import DeviceKind, Material, MeasurementDevice, TemperatureScale, create_device
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "AppSettings",
    "DeviceKind",
    "DeviceRegistry",
    "Material",
    "MeasurementDevice",
    "MenuController",
    "TemperatureScale",
    "Terminal",
    "create_device",
]

try:
    __version__ = version("measurelab")
except PackageNotFoundError:
    __version__ = "0.0.0"
