from contextlib import contextmanager

import pytest


class DummyTerminal:
    """Records terminal operations and keeps a simple model of the screen."""

    def __init__(self, width: int = 40, height: int = 10):
        self.width = width
        self.height = height
        self.rows = {}
        self.row = 0
        self.ops = []
        self.frames = 0

    def size(self):
        return self.width, self.height

    @contextmanager
    def frame(self):
        self.frames += 1
        yield self

    def clear_screen(self):
        self.ops.append("clear_screen")
        self.rows = {}
        self.row = 0

    def home(self):
        self.ops.append("home")
        self.row = 0

    def clear_line(self):
        self.ops.append("clear_line")
        self.rows[self.row] = ""

    def clear_below(self):
        self.ops.append("clear_below")
        self.rows = {r: t for r, t in self.rows.items() if r <= self.row}

    def write(self, text, style=None):
        self.ops.append(("write", text))
        self.rows[self.row] = self.rows.get(self.row, "") + text

    def newline(self):
        self.ops.append("newline")
        self.row += 1

    def screen(self):
        if not self.rows:
            return []
        return [self.rows.get(r, "") for r in range(max(self.rows) + 1)]


@pytest.fixture
def make_terminal():
    return DummyTerminal
