from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Optional

from measurelab.console import Terminal, choice_prompt
from measurelab.domain import DeviceKind, MeasurementDevice, create_device_from_code
from measurelab.domain import operations as ops
from measurelab.exceptions import InputClosedError, UnsupportedCapabilityError

logger = logging.getLogger(__name__)

DeviceAction = Callable[[MeasurementDevice, Terminal], None]

MAIN_MENU = (
    "\nMain Menu:\n"
    "1. Add new device\n"
    "2. Select device\n"
    "3. Start measuring\n"
    "4. Stop measuring\n"
    "5. Print device info\n"
    "6. Set measurement\n"
    "7. Change device attributes\n"
    "0. Exit\n"
    "Enter option: "
)

ATTRIBUTE_MENU = (
    "Change attribute:\n"
    "1. Name\n"
    "2. Unit\n"
    "3. Min Value\n"
    "4. Max Value\n"
    "5. Material\n"
    "6. Temperature Scale (if applicable)\n"
    "7. Calibration Offset (if applicable)\n"
    "Enter option: "
)

DEVICE_TYPE_PROMPT = choice_prompt("device type", ((kind.code, kind.menu_name) for kind in DeviceKind))
NO_DEVICE_SELECTED = "No device selected."
EXIT_OPTION = 0

ATTRIBUTE_ACTIONS: Dict[int, DeviceAction] = {
    1: ops.set_name,
    2: ops.set_unit,
    3: ops.set_min_value,
    4: ops.set_max_value,
    5: ops.set_material,
    6: ops.set_temperature_scale,
    7: ops.set_calibration_offset,
}


class DeviceRegistry:
    """
    Ordered collection of device records plus the current selection.

    Records are never removed; the selection is a zero-based index or ``None``.
    """

    def __init__(self) -> None:
        self._devices: List[MeasurementDevice] = []
        self._current: Optional[int] = None

    def add(self, device: MeasurementDevice) -> int:
        self._devices.append(device)
        self._current = len(self._devices) - 1
        return self._current

    def select(self, position: int) -> bool:
        """Select by 1-based ``position``; an out-of-range position clears the selection."""
        if 1 <= position <= len(self._devices):
            self._current = position - 1
            return True
        self._current = None
        return False

    @property
    def current_index(self) -> Optional[int]:
        return self._current

    @property
    def current(self) -> Optional[MeasurementDevice]:
        if self._current is None:
            return None
        return self._devices[self._current]

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[MeasurementDevice]:
        return iter(self._devices)

    def __getitem__(self, index: int) -> MeasurementDevice:
        return self._devices[index]


class MenuController:
    def __init__(self, terminal: Terminal, registry: Optional[DeviceRegistry] = None) -> None:
        self.terminal = terminal
        self.registry = registry if registry is not None else DeviceRegistry()
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_device,
            2: self.select_device,
            3: lambda: self._on_current(ops.start_measuring),
            4: lambda: self._on_current(ops.stop_measuring),
            5: lambda: self._on_current(ops.print_device),
            6: lambda: self._on_current(ops.set_measurement),
            7: self.change_attribute,
        }

    def run(self) -> int:
        logger.info("session_started")
        reason = "exit"
        try:
            while self.step():
                pass
        except InputClosedError:
            reason = "input_closed"
        except KeyboardInterrupt:
            reason = "interrupted"
            self.terminal.say()
        logger.info("session_ended", extra={"details": {"reason": reason, "devices": len(self.registry)}})
        return 0

    def step(self) -> bool:
        """Handle one main-menu turn. Returns ``False`` once the user exits."""
        option = self.terminal.ask_int(MAIN_MENU)
        if option == EXIT_OPTION:
            return False
        action = self._actions.get(option)
        if action is None:
            self.terminal.say("Invalid option. Please try again.")
        else:
            action()
        return True

    # --- commands ---
    def add_device(self) -> None:
        code = self.terminal.ask_int(DEVICE_TYPE_PROMPT)
        try:
            device = create_device_from_code(code)
        except ValueError:
            self.terminal.say("Invalid device type. No device was added.")
            logger.warning("device_type_rejected", extra={"details": {"code": code}})
            return
        ops.initialize(device, self.terminal)
        index = self.registry.add(device)
        logger.info("device_added", extra={"details": {"index": index + 1, **device.summary()}})

    def select_device(self) -> None:
        if len(self.registry) == 0:
            self.terminal.say("No devices available. Please add a new device first.")
            return
        position = self.terminal.ask_int(f"Select device index (1 to {len(self.registry)}): ")
        if self.registry.select(position):
            logger.info("device_selected", extra={"details": {"index": position}})
        else:
            self.terminal.say("Invalid device index.")
            logger.info("selection_cleared", extra={"details": {"requested": position}})

    def change_attribute(self) -> None:
        device = self.registry.current
        if device is None:
            self.terminal.say(NO_DEVICE_SELECTED)
            return
        option = self.terminal.ask_int(ATTRIBUTE_MENU)
        action = ATTRIBUTE_ACTIONS.get(option)
        if action is None:
            self.terminal.say("Invalid option.")
            return
        try:
            action(device, self.terminal)
        except UnsupportedCapabilityError as exc:
            self.terminal.say(str(exc))
            logger.info(
                "capability_missing",
                extra={"details": {"kind": exc.kind.value, "capability": exc.capability.value}},
            )

    def _on_current(self, action: DeviceAction) -> None:
        device = self.registry.current
        if device is None:
            self.terminal.say(NO_DEVICE_SELECTED)
            return
        action(device, self.terminal)
