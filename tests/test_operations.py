"""Tests for device operations driven through a scripted terminal."""
import io

import pytest

from measurelab.console import Terminal
from measurelab.domain import DeviceKind, Material, TemperatureScale, create_device
from measurelab.domain import operations as ops
from measurelab.exceptions import UnsupportedCapabilityError


def _terminal(text: str = ""):
    out = io.StringIO()
    return Terminal(stdin=io.StringIO(text), stdout=out), out


def _ready_device(kind=DeviceKind.TEMPERATURE, active=False):
    device = create_device(kind)
    device.name = "T1"
    device.unit = "C"
    device.min_value = 0
    device.max_value = 100
    device.material = Material.METAL
    device.active = active
    if device.calibration is not None:
        device.calibration.offset = 1.5
    return device


class TestInitialize:
    def test_temperature_device(self):
        terminal, out = _terminal("T1\nC\n0\n100\n2\n1\n")
        device = create_device(DeviceKind.TEMPERATURE)
        ops.initialize(device, terminal)

        assert device.name == "T1"
        assert device.unit == "C"
        assert device.min_value == 0
        assert device.max_value == 100
        assert device.material is Material.METAL
        assert device.temperature.scale is TemperatureScale.CELSIUS
        assert device.active is False
        output = out.getvalue()
        assert "Enter device name: " in output
        assert "Enter calibration offset: " not in output

    def test_advanced_device_with_retries(self):
        terminal, out = _terminal("Lab Probe\nK\n-50\n50\n5\n3\n0\n3\n1.5\n")
        device = create_device(DeviceKind.ADVANCED_TEMPERATURE)
        ops.initialize(device, terminal)

        assert device.name == "Lab Probe"
        assert device.material is Material.GLASS
        assert device.temperature.scale is TemperatureScale.KELVIN
        assert device.calibration.offset == 1.5
        assert out.getvalue().count("Invalid choice. Please try again.") == 2

    def test_prompts_follow_base_then_variant_order(self):
        terminal, out = _terminal("A\nB\n1\n2\n1\n2\n0.25\n")
        ops.initialize(create_device(DeviceKind.ADVANCED_TEMPERATURE), terminal)
        output = out.getvalue()
        material_at = output.index("Enter material")
        scale_at = output.index("Enter temperature scale")
        offset_at = output.index("Enter calibration offset")
        assert material_at < scale_at < offset_at

    def test_inverted_range_is_accepted(self):
        terminal, _ = _terminal("X\nC\n100\n0\n1\n1\n")
        device = create_device(DeviceKind.TEMPERATURE)
        ops.initialize(device, terminal)
        assert device.min_value == 100
        assert device.max_value == 0


class TestMeasuringState:
    def test_start_is_idempotent(self):
        terminal, out = _terminal()
        device = _ready_device()
        ops.start_measuring(device, terminal)
        ops.start_measuring(device, terminal)

        assert device.active is True
        output = out.getvalue()
        assert output.count("Start of measurement") == 1
        assert output.count("Temperature measurement started") == 2
        assert output.startswith("\nStart of measurement\nTemperature measurement started\n")

    def test_stop_when_inactive_only_reports_variant_line(self):
        terminal, out = _terminal()
        device = _ready_device()
        ops.stop_measuring(device, terminal)
        assert device.active is False
        assert out.getvalue() == "Temperature measurement stopped\n"

    def test_stop_when_active(self):
        terminal, out = _terminal()
        device = _ready_device(active=True)
        ops.stop_measuring(device, terminal)
        assert device.active is False
        assert out.getvalue() == "End of measurement\n\nTemperature measurement stopped\n"


class TestReport:
    def test_temperature_report(self):
        device = _ready_device()
        assert ops.render_report(device) == [
            "============",
            "Name: T1",
            "Unit: C",
            "Min Value: 0",
            "Max Value: 100",
            "Material: Metal",
            "============",
            "Current Temperature: 0 Celsius",
        ]

    def test_advanced_report_appends_offset(self):
        device = _ready_device(DeviceKind.ADVANCED_TEMPERATURE)
        lines = ops.render_report(device)
        assert lines[-2] == "Current Temperature: 0 Celsius"
        assert lines[-1] == "Calibration Offset: 1.5"

    def test_print_device_writes_lines(self):
        terminal, out = _terminal()
        ops.print_device(_ready_device(), terminal)
        assert out.getvalue().splitlines()[1] == "Name: T1"


class TestSetMeasurement:
    def test_inactive_device_is_rejected(self):
        terminal, out = _terminal("50\n")
        device = _ready_device()
        ops.set_measurement(device, terminal)

        assert device.temperature.current == 0
        output = out.getvalue()
        assert "Device is not ACTIVE!!!" in output
        assert "Enter current temperature" not in output
        assert "Current Temperature: 0 Celsius" in output

    def test_inactive_advanced_device_skips_calibration(self):
        terminal, out = _terminal()
        device = _ready_device(DeviceKind.ADVANCED_TEMPERATURE)
        ops.set_measurement(device, terminal)
        output = out.getvalue()
        assert "Device is not ACTIVE!!!" in output
        assert "Applying calibration offset" not in output

    def test_out_of_range_values_retry(self):
        terminal, out = _terminal("150\n-1\n42.5\n")
        device = _ready_device(active=True)
        ops.set_measurement(device, terminal)

        assert device.temperature.current == 42.5
        output = out.getvalue()
        assert output.count("Enter current temperature (0 - 100): ") == 3
        assert output.count("Temperature out of range. Please enter a value between 0 and 100.") == 2
        assert "Current Temperature: 42.5 Celsius" in output

    @pytest.mark.parametrize("value", [0, 100])
    def test_bounds_are_inclusive(self, value):
        terminal, out = _terminal(f"{value}\n")
        device = _ready_device(active=True)
        ops.set_measurement(device, terminal)
        assert device.temperature.current == value
        assert "Temperature out of range" not in out.getvalue()

    def test_calibration_is_reported_not_applied(self):
        terminal, out = _terminal("20\n")
        device = _ready_device(DeviceKind.ADVANCED_TEMPERATURE, active=True)
        ops.set_measurement(device, terminal)

        assert device.temperature.current == 20
        lines = out.getvalue().splitlines()
        assert lines[-1] == "Applying calibration offset: 1.5"
        assert "Calibration Offset: 1.5" in lines


class TestSetters:
    def test_set_name_reprints(self):
        terminal, out = _terminal("  New Name \n")
        device = _ready_device()
        ops.set_name(device, terminal)
        assert device.name == "New Name"
        assert "Name: New Name" in out.getvalue()

    def test_set_unit(self):
        terminal, _ = _terminal("F\n")
        device = _ready_device()
        ops.set_unit(device, terminal)
        assert device.unit == "F"

    def test_set_min_and_max(self):
        terminal, out = _terminal("-10\n250\n")
        device = _ready_device()
        ops.set_min_value(device, terminal)
        ops.set_max_value(device, terminal)
        assert device.min_value == -10
        assert device.max_value == 250
        assert "Max Value: 250" in out.getvalue()

    def test_set_material_retries(self):
        terminal, out = _terminal("9\n1\n")
        device = _ready_device()
        ops.set_material(device, terminal)
        assert device.material is Material.PLASTIC
        assert "Invalid choice. Please try again." in out.getvalue()

    def test_set_temperature_scale(self):
        terminal, out = _terminal("2\n")
        device = _ready_device()
        ops.set_temperature_scale(device, terminal)
        assert device.temperature.scale is TemperatureScale.FAHRENHEIT
        assert "Current Temperature: 0 Fahrenheit" in out.getvalue()

    def test_set_calibration_offset(self):
        terminal, out = _terminal("-0.75\n")
        device = _ready_device(DeviceKind.ADVANCED_TEMPERATURE)
        ops.set_calibration_offset(device, terminal)
        assert device.calibration.offset == -0.75
        assert "Calibration Offset: -0.75" in out.getvalue()

    def test_set_calibration_offset_unsupported(self):
        terminal, out = _terminal("3\n")
        device = _ready_device()
        with pytest.raises(UnsupportedCapabilityError):
            ops.set_calibration_offset(device, terminal)
        assert out.getvalue() == ""
        assert device.calibration is None
