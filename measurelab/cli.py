import argparse
import sys
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from measurelab.app import AppSettings, MenuController, create_logger, get_ring_buffer, get_settings
from measurelab.app.config import LOG_LEVELS
from measurelab.console import Terminal

LOGGER_NAME = "measurelab"


class Session:
    def __init__(self, settings: AppSettings, terminal: Optional[Terminal] = None) -> None:
        self.settings = settings
        self.logger = create_logger(
            LOGGER_NAME,
            ring_size=self.settings.log_ring_size,
            level=self.settings.log_level,
            to_stderr=self.settings.log_to_stderr,
        )
        self.terminal = terminal or Terminal()
        self.controller = MenuController(self.terminal)

    def events(self) -> List[Dict[str, Any]]:
        ring = get_ring_buffer(self.logger)
        return ring.get_events() if ring else []

    def start(self) -> int:
        code = self.controller.run()
        # At DEBUG without a live stderr mirror, replay the event log once the menu is done.
        if self.settings.log_level == "DEBUG" and not self.settings.log_to_stderr:
            for event in self.events():
                sys.stderr.write(f"{event['level']} {event['event']} {event['details']}\n")
        return code


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Register and edit measurement devices from a text menu.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level for the session event log.",
    )
    parser.add_argument("--log-stderr", action="store_true", help="Also write session events to stderr.")
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        parser.exit(2, f"{parser.prog}: invalid settings: {exc}\n")

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_stderr:
        overrides["log_to_stderr"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)

    return Session(settings).start()


if __name__ == "__main__":
    sys.exit(main())
