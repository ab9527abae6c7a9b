"""Shared handle coordinating the feeder (writer) and the display (reader)."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import List, Optional

from collector.line_collector import LineCollector, RankedLine


@dataclass(frozen=True)
class Snapshot:
    """Copy of the collector state taken under the lock."""
    total: int
    unique: int
    rows: List[RankedLine] = field(default_factory=list)


class SharedCollector:
    """Lock-guarded LineCollector plus an explicit completion flag.

    The writer holds the lock for a single insert; the reader holds it only
    while copying a Snapshot out. ``finish()`` never touches the lock.
    """

    def __init__(self, collector: Optional[LineCollector] = None) -> None:
        self._collector = collector if collector is not None else LineCollector()
        self._lock = threading.Lock()
        self._done = threading.Event()

    # ---- writer side ----
    def insert(self, line: str) -> None:
        with self._lock:
            self._collector.insert(line)

    def finish(self) -> None:
        """Signal that no more lines will be inserted."""
        self._done.set()

    # ---- reader side ----
    @property
    def finished(self) -> bool:
        return self._done.is_set()

    def wait_finished(self, timeout: Optional[float] = None) -> bool:
        """Block until finished or ``timeout`` elapses; return finished state."""
        return self._done.wait(timeout)

    def total(self) -> int:
        with self._lock:
            return self._collector.num_total()

    def lookup(self, line: str) -> Optional[int]:
        with self._lock:
            return self._collector.get(line)

    def snapshot(self, limit: Optional[int] = None, since_total: Optional[int] = None) -> Optional[Snapshot]:
        """Copy out totals and the top ``limit`` ranking rows.

        When ``since_total`` is given and equals the current total, nothing
        is materialized and None is returned.
        """
        with self._lock:
            total = self._collector.num_total()
            if since_total is not None and total == since_total:
                return None
            return Snapshot(
                total=total,
                unique=self._collector.num_unique(),
                rows=self._collector.ranking(limit),
            )
