from __future__ import annotations

from typing import Iterable


def format_number(value: float) -> str:
    """Six significant digits, trailing zeros dropped (``50``, ``0.5``, ``1e+06``)."""
    return format(value, "g")


def choice_prompt(subject: str, options: Iterable[tuple[int, str]]) -> str:
    """``choice_prompt("material", [(1, "Plastic")])`` -> ``Enter material (1 for Plastic): ``"""
    listed = ", ".join(f"{code} for {label}" for code, label in options)
    return f"Enter {subject} ({listed}): "
