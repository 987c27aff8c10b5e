"""
Operations on measurement device records.

Every operation runs the shared part first and then the parts belonging to
the record's variant, so prompts and report lines accumulate in the order
base -> temperature -> calibration. The terminal is the only I/O channel.
"""
from __future__ import annotations

import logging

from measurelab.console import Terminal, choice_prompt, format_number
from measurelab.domain.device import MeasurementDevice, require_capability
from measurelab.domain.kinds import Capability, Material, TemperatureScale

logger = logging.getLogger(__name__)

REPORT_DELIMITER = "============"
RETRY_CHOICE_MESSAGE = "Invalid choice. Please try again."
MATERIAL_PROMPT = choice_prompt("material", ((m.code, m.label) for m in Material))
SCALE_PROMPT = choice_prompt("temperature scale", ((s.code, s.label) for s in TemperatureScale))
INACTIVE_MESSAGE = "Device is not ACTIVE!!!"


def _ask_material(terminal: Terminal) -> Material:
    code = terminal.ask_choice(MATERIAL_PROMPT, {m.code for m in Material}, RETRY_CHOICE_MESSAGE)
    return Material.from_code(code)


def _ask_scale(terminal: Terminal) -> TemperatureScale:
    code = terminal.ask_choice(SCALE_PROMPT, {s.code for s in TemperatureScale}, RETRY_CHOICE_MESSAGE)
    return TemperatureScale.from_code(code)


def _warn_if_inverted(device: MeasurementDevice) -> None:
    if device.has_inverted_range:
        logger.warning(
            "inverted_range",
            extra={"details": {"name": device.name, "min_value": device.min_value, "max_value": device.max_value}},
        )


def _changed(device: MeasurementDevice, attribute: str, value) -> None:
    logger.info("attribute_changed", extra={"details": {"name": device.name, "attribute": attribute, "value": value}})


# --- lifecycle ---
def initialize(device: MeasurementDevice, terminal: Terminal) -> None:
    device.name = terminal.ask_text("Enter device name: ")
    device.unit = terminal.ask_text("Enter unit: ")
    device.min_value = terminal.ask_number("Enter min value: ")
    device.max_value = terminal.ask_number("Enter max value: ")
    device.material = _ask_material(terminal)
    if device.temperature is not None:
        device.temperature.scale = _ask_scale(terminal)
    if device.calibration is not None:
        device.calibration.offset = terminal.ask_number("Enter calibration offset: ")
    _warn_if_inverted(device)


def start_measuring(device: MeasurementDevice, terminal: Terminal) -> None:
    if not device.active:
        terminal.say()
        terminal.say("Start of measurement")
        device.active = True
        logger.info("measurement_started", extra={"details": {"name": device.name}})
    if device.temperature is not None:
        terminal.say("Temperature measurement started")


def stop_measuring(device: MeasurementDevice, terminal: Terminal) -> None:
    if device.active:
        terminal.say("End of measurement")
        terminal.say()
        device.active = False
        logger.info("measurement_stopped", extra={"details": {"name": device.name}})
    if device.temperature is not None:
        terminal.say("Temperature measurement stopped")


# --- reporting ---
def render_report(device: MeasurementDevice) -> list[str]:
    lines = [
        REPORT_DELIMITER,
        f"Name: {device.name}",
        f"Unit: {device.unit}",
        f"Min Value: {format_number(device.min_value)}",
        f"Max Value: {format_number(device.max_value)}",
        f"Material: {device.material.label}",
        REPORT_DELIMITER,
    ]
    if device.temperature is not None:
        lines.append(
            f"Current Temperature: {format_number(device.temperature.current)} {device.temperature.scale.label}"
        )
    if device.calibration is not None:
        lines.append(f"Calibration Offset: {format_number(device.calibration.offset)}")
    return lines


def print_device(device: MeasurementDevice, terminal: Terminal) -> None:
    for line in render_report(device):
        terminal.say(line)


# --- measurement ---
def _set_current_temperature(device: MeasurementDevice, terminal: Terminal) -> None:
    if not device.active:
        terminal.say(INACTIVE_MESSAGE)
        logger.info("measurement_rejected", extra={"details": {"name": device.name, "reason": "inactive"}})
        return
    low = format_number(device.min_value)
    high = format_number(device.max_value)
    while True:
        value = terminal.ask_number(f"Enter current temperature ({low} - {high}): ")
        if device.in_range(value):
            device.temperature.current = value
            logger.info("measurement_set", extra={"details": {"name": device.name, "value": value}})
            return
        terminal.say(f"Temperature out of range. Please enter a value between {low} and {high}.")
        logger.info("measurement_rejected", extra={"details": {"name": device.name, "reason": "out_of_range", "value": value}})


def set_measurement(device: MeasurementDevice, terminal: Terminal) -> None:
    if device.temperature is not None:
        _set_current_temperature(device, terminal)
        print_device(device, terminal)
    # The offset is reported only; the stored reading stays uncorrected.
    if device.calibration is not None and device.active:
        terminal.say(f"Applying calibration offset: {format_number(device.calibration.offset)}")


# --- attribute setters ---
def set_name(device: MeasurementDevice, terminal: Terminal) -> None:
    device.name = terminal.ask_text("Enter new device name: ")
    _changed(device, "name", device.name)
    print_device(device, terminal)


def set_unit(device: MeasurementDevice, terminal: Terminal) -> None:
    device.unit = terminal.ask_text("Enter new unit: ")
    _changed(device, "unit", device.unit)
    print_device(device, terminal)


def set_min_value(device: MeasurementDevice, terminal: Terminal) -> None:
    device.min_value = terminal.ask_number("Enter new min value: ")
    _changed(device, "min_value", device.min_value)
    _warn_if_inverted(device)
    print_device(device, terminal)


def set_max_value(device: MeasurementDevice, terminal: Terminal) -> None:
    device.max_value = terminal.ask_number("Enter new max value: ")
    _changed(device, "max_value", device.max_value)
    _warn_if_inverted(device)
    print_device(device, terminal)


def set_material(device: MeasurementDevice, terminal: Terminal) -> None:
    device.material = _ask_material(terminal)
    _changed(device, "material", device.material.value)
    print_device(device, terminal)


def set_temperature_scale(device: MeasurementDevice, terminal: Terminal) -> None:
    """
    Prompt for a new temperature scale.

    Raises:
        UnsupportedCapabilityError: If the device has no temperature scale.
    """
    require_capability(device, Capability.TEMPERATURE_SCALE)
    device.temperature.scale = _ask_scale(terminal)
    _changed(device, "scale", device.temperature.scale.value)
    print_device(device, terminal)


def set_calibration_offset(device: MeasurementDevice, terminal: Terminal) -> None:
    """
    Prompt for a new calibration offset.

    Raises:
        UnsupportedCapabilityError: If the device is not calibrated.
    """
    require_capability(device, Capability.CALIBRATION)
    device.calibration.offset = terminal.ask_number("Enter new calibration offset: ")
    _changed(device, "calibration_offset", device.calibration.offset)
    print_device(device, terminal)


__all__ = [
    "initialize",
    "print_device",
    "render_report",
    "set_calibration_offset",
    "set_material",
    "set_max_value",
    "set_measurement",
    "set_min_value",
    "set_name",
    "set_temperature_scale",
    "set_unit",
    "start_measuring",
    "stop_measuring",
]
