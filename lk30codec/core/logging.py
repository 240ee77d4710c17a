import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

# LoRaWAN session and root keys that device variables may carry.
REDACTED_KEYS = {"app_key", "nwk_key", "app_s_key", "nwk_s_key", "dev_addr"}


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
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def resize(self, max_entries: int) -> None:
        # Keeps the newest events when shrinking.
        with self._lock:
            self.max_entries = max_entries
            self._events = deque(self._events, maxlen=max_entries)


def create_logger(name: str, ring_size: int, level: str = "INFO") -> logging.Logger:
    """
    Return the named logger backed by a ring buffer.

    Loggers are process-wide, so a second call for the same name reapplies
    ``level`` and ``ring_size`` to the existing logger instead of adding a
    second handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    existing = ring_buffer(logger)
    if existing is not None:
        if existing.max_entries != ring_size:
            existing.resize(ring_size)
        return logger
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def redact(details: Optional[dict]) -> dict:
    if not details:
        return {}
    cleaned = {}
    for key, value in details.items():
        if key in REDACTED_KEYS:
            cleaned[key] = "***"
        elif isinstance(value, dict):
            cleaned[key] = redact(value)
        else:
            cleaned[key] = value
    return cleaned
