import logging
import sys
import threading
from collections import deque
from typing import Deque, Dict, List


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


class StderrMirrorHandler(logging.StreamHandler):
    pass


class DetailsFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        details = getattr(record, "details", None)
        if not details:
            return base
        rendered = " ".join(f"{key}={value!r}" for key, value in details.items())
        return f"{base} {rendered}"


def create_logger(name: str, ring_size: int, level: str = "INFO", to_stderr: bool = False) -> logging.Logger:
    """
    Return the session logger, backed by an in-memory ``RingBufferHandler``.

    The ring buffer is read back through ``get_ring_buffer`` by embedders,
    by ``Session.events`` and by the DEBUG replay on exit. Calling again for
    the same name reuses the handlers and only adds a missing stderr mirror.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    logger.propagate = False
    formatter = DetailsFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    if get_ring_buffer(logger) is None:
        handler = RingBufferHandler(max_entries=ring_size)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if to_stderr and _get_stderr_handler(logger) is None:
        # stdout belongs to the menu dialogue
        stream_handler = StderrMirrorHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    return logger


def get_ring_buffer(logger: logging.Logger) -> RingBufferHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def _get_stderr_handler(logger: logging.Logger) -> StderrMirrorHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, StderrMirrorHandler):
            return handler
    return None
