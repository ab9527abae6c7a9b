"""Minimal terminal backend on top of a Rich Console."""

from __future__ import annotations

import unicodedata
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from rich.cells import cell_len, set_cell_size
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

# every C0/C1 control (category Cc) is dropped, tabs become a space
_CONTROL_TABLE = {
    cp: None for cp in range(0xA0) if unicodedata.category(chr(cp)) == "Cc"
}
_CONTROL_TABLE[ord("\t")] = " "


def sanitize(text: str) -> str:
    """Remove characters that would move the cursor when printed."""
    return text.translate(_CONTROL_TABLE)


def clip(text: str, width: int) -> str:
    """Truncate ``text`` to at most ``width`` terminal cells."""
    if width <= 0:
        return ""
    if cell_len(text) <= width:
        return text
    return set_cell_size(text, width)


class Terminal:
    """Cursor-addressed writer used by the ranked view.

    Only the operations the view needs: origin, clear screen, clear line,
    clear below the cursor, plain/styled writes and newlines. The cursor row
    and column are tracked so that clearing below can return to where the
    cursor was.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)
        self._row = 0
        self._col = 0

    def is_interactive(self) -> bool:
        return self.console.is_terminal

    def size(self) -> Tuple[int, int]:
        """Return (width, height) as currently reported by the terminal."""
        width, height = self.console.size
        return width, height

    @contextmanager
    def frame(self) -> Iterator["Terminal"]:
        """Buffer everything written inside into a single write."""
        with self.console:
            yield self

    def clear_screen(self) -> None:
        self.console.control(Control.clear(), Control.home())
        self._row = self._col = 0

    def home(self) -> None:
        self.console.control(Control.home())
        self._row = self._col = 0

    def clear_line(self) -> None:
        self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))

    def clear_below(self) -> None:
        """Clear from the cursor to the end of the screen."""
        self.console.control(Control((ControlType.ERASE_IN_LINE, 0)))
        _, height = self.size()
        for row in range(self._row + 1, height):
            self.console.control(Control.move_to(0, row), Control((ControlType.ERASE_IN_LINE, 2)))
        if self._row + 1 < height:
            self.console.control(Control.move_to(self._col, self._row))

    def write(self, text: str, style: Optional[str] = None) -> None:
        if not text:
            return
        self.console.out(text, style=style, highlight=False, end="")
        self._col += cell_len(text)

    def newline(self) -> None:
        self.console.out("", highlight=False, end="\n")
        self._row += 1
        self._col = 0
