from __future__ import annotations

from threading import Lock
from typing import List


class ErrorLog:
    """Append-only, lock-guarded record of rejected raw submissions.

    Growth is unbounded; entries are only removed by :meth:`clear`.
    """

    def __init__(self) -> None:
        self._entries: List[str] = []
        self._lock = Lock()

    def push(self, raw: str) -> None:
        with self._lock:
            self._entries.append(raw)

    def snapshot(self) -> list[str]:
        """Return an independent copy of the entries in insertion order."""

        with self._lock:
            return list(self._entries)

    def clear(self) -> int:
        """Empty the log and return how many entries were removed."""

        with self._lock:
            removed = len(self._entries)
            self._entries = []
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
