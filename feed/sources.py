"""Interpretation of the FILE arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

STDIN_MARKER = "-"


@dataclass
class SourceList:
    """Named files to read in order, plus whether stdin is read afterwards.

    Every ``-`` token means stdin. Any number of them collapse into a single
    stdin pass after all files; an empty argument list means stdin only.
    A file literally named ``-`` has to be given as ``./-``.
    """
    files: List[Path] = field(default_factory=list)
    has_stdin: bool = False

    @classmethod
    def parse(cls, tokens: Iterable[Union[str, Path]]) -> "SourceList":
        raw = [str(t) for t in tokens]
        files = [Path(t) for t in raw if t != STDIN_MARKER]
        has_stdin = len(files) != len(raw) or not raw
        return cls(files=files, has_stdin=has_stdin)
