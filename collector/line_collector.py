"""Line frequency counting."""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Tuple


# (count, line) pair as produced by LineCollector.ranking()
RankedLine = Tuple[int, str]


class LineCollector:
    """Counts how often each distinct line was inserted.

    Not thread-safe on its own; see ``collector.shared.SharedCollector``.
    """

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()
        self._total = 0

    def insert(self, line: str) -> None:
        """Record one occurrence of ``line``."""
        self._total += 1
        self._counts[line] += 1

    def num_total(self) -> int:
        return self._total

    def num_unique(self) -> int:
        return len(self._counts)

    def get(self, line: str) -> Optional[int]:
        """Return the count for ``line`` or None if it was never inserted."""
        # Counter.get avoids the implicit zero of Counter.__getitem__
        return self._counts.get(line)

    def ranking(self, limit: Optional[int] = None) -> List[RankedLine]:
        """Build the ranking: count descending, then line ascending.

        The whole map is sorted on every call. ``limit`` only truncates the
        result after sorting.
        """
        ranked = sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))
        if limit is not None:
            ranked = ranked[: max(limit, 0)]
        return [(count, line) for line, count in ranked]

    def __getitem__(self, line: str) -> int:
        if line not in self._counts:
            raise KeyError(line)
        return self._counts[line]

    def __contains__(self, line: object) -> bool:
        return line in self._counts

    def __len__(self) -> int:
        return len(self._counts)
