from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from measurelab.domain.kinds import Capability, DeviceKind


class MeasureLabError(Exception):
    pass


class InputClosedError(EOFError):
    """Raised when the terminal input stream is exhausted."""


class UnsupportedCapabilityError(MeasureLabError):
    def __init__(self, kind: "DeviceKind", capability: "Capability", required_label: str) -> None:
        self.kind = kind
        self.capability = capability
        self.required_label = required_label
        article = "an" if required_label[:1].upper() in "AEIOU" else "a"
        super().__init__(f"Selected device is not {article} {required_label}.")
