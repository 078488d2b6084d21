"""Append-only log of an import run."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

logger = logging.getLogger(__name__)

LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class LogEntry:
    """One line of the import log."""

    timestamp: datetime
    level: str
    message: str

    def format(self) -> str:
        return f"[{self.timestamp:%H:%M:%S}] {self.message}"


class ImportLog:
    """Ordered, timestamped messages of an import run.

    Listeners are called with every new entry as it is appended, so a caller
    can show progress while rows are still being processed. Entries are also
    sent to the module logger.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or datetime.now
        self._entries: list[LogEntry] = []
        self._listeners: list[Callable[[LogEntry], None]] = []

    @property
    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    def subscribe(self, listener: Callable[[LogEntry], None]) -> None:
        """Call listener with every entry appended from now on."""
        self._listeners.append(listener)

    def append(self, level: str, message: str) -> LogEntry:
        """Append a message at the given level ("info", "warning" or "error")."""
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        entry = LogEntry(timestamp=self._clock(), level=level, message=message)
        self._entries.append(entry)
        logger.log(LEVELS[level], message)
        for listener in self._listeners:
            listener(entry)
        return entry

    def info(self, message: str) -> LogEntry:
        return self.append("info", message)

    def warning(self, message: str) -> LogEntry:
        return self.append("warning", message)

    def error(self, message: str) -> LogEntry:
        return self.append("error", message)

    def lines(self) -> list[str]:
        """Formatted lines, oldest first."""
        return [entry.format() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)
