"""Optional regex filter applied to each input line."""

from __future__ import annotations

import re
from typing import Optional


class FilterError(ValueError):
    """Raised for a pattern that cannot be used as a line filter."""


def compile_filter(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` and check it has at most one capture group."""
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise FilterError(f"invalid regex {pattern!r}: {e}") from e
    if compiled.groups > 1:
        raise FilterError(
            f"at most one capture group can be specified, {pattern!r} has {compiled.groups}"
        )
    return compiled


class LineFilter:
    """Selects lines matching a pattern and extracts the value to count.

    With no capture group the whole match is counted; with one group its
    text is. Lines that do not match, or whose group did not take part in
    the match, are dropped.
    """

    def __init__(self, pattern: re.Pattern[str]) -> None:
        if pattern.groups > 1:
            raise FilterError("at most one capture group can be specified")
        self.pattern = pattern

    @classmethod
    def from_string(cls, pattern: str) -> "LineFilter":
        return cls(compile_filter(pattern))

    def apply(self, line: str) -> Optional[str]:
        m = self.pattern.search(line)
        if m is None:
            return None
        # last group is group 0 when the pattern has no groups
        return m.group(self.pattern.groups)
