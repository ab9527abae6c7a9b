"""Background thread that reads sources and feeds the shared collector."""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Optional

from collector.shared import SharedCollector
from feed.filters import LineFilter
from feed.sources import SourceList


class SourceError(Exception):
    """A source could not be opened or read."""

    def __init__(self, source: str, error: OSError) -> None:
        super().__init__(f"{source}: {error.strerror or error}")
        self.source = source
        self.error = error


def decode_line(raw: bytes) -> Optional[str]:
    """Decode one raw line as UTF-8 and drop its terminator.

    Returns None when the bytes are not valid UTF-8.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return None
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


class Feeder(threading.Thread):
    """Reads every source in order and inserts each accepted line.

    Always calls ``shared.finish()`` on exit. An I/O failure stops the
    remaining sources and is kept in ``error`` for the joining thread.
    """

    def __init__(
        self,
        sources: SourceList,
        shared: SharedCollector,
        line_filter: Optional[LineFilter] = None,
        *,
        stdin: Optional[BinaryIO] = None,
        opener: Callable[[Path], BinaryIO] = lambda p: open(p, "rb"),
    ) -> None:
        super().__init__(name="linetop-feeder", daemon=True)
        self.sources = sources
        self.shared = shared
        self.line_filter = line_filter
        self._stdin = stdin
        self._opener = opener
        self.error: Optional[SourceError] = None
        self.accepted = 0
        self.skipped = 0

    def run(self) -> None:
        try:
            for path in self.sources.files:
                try:
                    with self._opener(path) as stream:
                        self.process(stream)
                except OSError as e:
                    self.error = SourceError(str(path), e)
                    return
            if self.sources.has_stdin:
                stream = self._stdin if self._stdin is not None else sys.stdin.buffer
                try:
                    self.process(stream)
                except OSError as e:
                    self.error = SourceError("<stdin>", e)
        finally:
            # no more input: lets the display loop finish
            self.shared.finish()

    def process(self, stream: Iterable[bytes]) -> None:
        """Feed every accepted line of ``stream`` to the collector."""
        for raw in stream:
            line = decode_line(raw)
            if line is None:
                self.skipped += 1
                continue
            if self.line_filter is not None:
                line = self.line_filter.apply(line)
                if line is None:
                    continue
            self.shared.insert(line)
            self.accepted += 1
