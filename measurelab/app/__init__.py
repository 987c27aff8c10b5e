"""
Interactive application layer: the device registry, the menu controller and
the ambient settings and logging they run with.
"""
from measurelab.app.config import AppSettings, get_settings
from measurelab.app.controller import DeviceRegistry, MenuController
from measurelab.app.logging import RingBufferHandler, create_logger, get_ring_buffer

__all__ = [
    "AppSettings",
    "DeviceRegistry",
    "MenuController",
    "RingBufferHandler",
    "create_logger",
    "get_ring_buffer",
    "get_settings",
]
