from __future__ import annotations

import math
import sys
from typing import Callable, Optional, TextIO, TypeVar

from measurelab.exceptions import InputClosedError

T = TypeVar("T")

INVALID_NUMBER_MESSAGE = "Invalid number. Please try again."


class Terminal:
    """
    Line-oriented terminal session over a pair of text streams.

    Numbers are read as whitespace-delimited tokens, so several values may be
    typed on one line. Text fields consume the rest of a line after skipping
    leading whitespace, including blank lines.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending = ""

    # --- output ---
    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def say(self, text: str = "") -> None:
        self.write(text + "\n")

    # --- raw input ---
    def _fill(self) -> None:
        line = self._in.readline()
        if line == "":
            raise InputClosedError("terminal input closed")
        self._pending = line

    def _skip_whitespace(self) -> None:
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                self._pending = stripped
                return
            self._fill()

    def discard_line(self) -> None:
        self._pending = ""

    def read_token(self) -> str:
        self._skip_whitespace()
        token = self._pending.split(maxsplit=1)[0]
        self._pending = self._pending[len(token):]
        return token

    def read_line(self) -> str:
        self._skip_whitespace()
        line, _, rest = self._pending.partition("\n")
        self._pending = rest
        return line.strip()

    # --- prompts ---
    def _ask_parsed(self, prompt: str, parse: Callable[[str], T]) -> T:
        while True:
            self.write(prompt)
            token = self.read_token()
            try:
                return parse(token)
            except ValueError:
                self.discard_line()
                self.say(INVALID_NUMBER_MESSAGE)

    def ask_text(self, prompt: str) -> str:
        self.write(prompt)
        return self.read_line()

    def ask_int(self, prompt: str) -> int:
        return self._ask_parsed(prompt, int)

    def ask_number(self, prompt: str) -> float:
        return self._ask_parsed(prompt, _parse_number)

    def ask_choice(self, prompt: str, choices: range | set[int], retry_message: str) -> int:
        """Repeat ``prompt`` until the user enters one of ``choices``."""
        while True:
            value = self.ask_int(prompt)
            if value in choices:
                return value
            self.say(retry_message)


def _parse_number(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Non-finite number: {token}")
    return value


__all__ = ["Terminal", "INVALID_NUMBER_MESSAGE"]
