import io

import pytest
from rich.console import Console

from render.terminal import Terminal, clip, sanitize


@pytest.fixture
def rich_terminal(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    buf = io.StringIO()
    console = Console(
        file=buf,
        force_terminal=True,
        color_system=None,
        width=20,
        height=4,
        legacy_windows=False,
    )
    return Terminal(console), buf


def test_clip():
    assert clip("hello", 10) == "hello"
    assert clip("hello", 3) == "hel"
    assert clip("hello", 0) == ""
    assert clip("hello", -4) == ""
    # wide characters take two cells
    assert clip("日本語", 4) == "日本"


def test_sanitize_removes_cursor_moving_characters():
    assert sanitize("a\rb\x1b[31mc\x07") == "ab[31mc"
    assert sanitize("tab\there") == "tab here"
    assert sanitize("plain") == "plain"


def test_sanitize_removes_all_c0_and_c1_controls():
    assert sanitize("a\x0eb\x9bc\x85d\x00e\x7f") == "abcde"
    assert sanitize("\x0f\x1b[2J\x80\x9fok") == "[2Jok"
    # printable characters just past the C1 range stay
    assert sanitize("caf\xe9 \xa0x") == "caf\xe9 \xa0x"


def test_is_interactive_and_size(rich_terminal):
    term, _ = rich_terminal
    assert term.is_interactive() is True
    assert term.size() == (20, 4)


def test_not_interactive_when_not_a_tty(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    term = Terminal(Console(file=io.StringIO()))
    assert term.is_interactive() is False


def test_control_sequences(rich_terminal):
    term, buf = rich_terminal
    term.clear_screen()
    term.home()
    term.clear_line()
    assert buf.getvalue() == "\x1b[2J\x1b[H" + "\x1b[H" + "\x1b[2K"


def test_write_and_newline(rich_terminal):
    term, buf = rich_terminal
    term.write("abc", style="yellow")
    term.write("")
    term.newline()
    term.write("d")
    assert buf.getvalue() == "abc\nd"


def test_clear_below_erases_remaining_rows_and_returns(rich_terminal):
    term, buf = rich_terminal
    term.home()
    term.write("ab")
    term.newline()
    term.write("cd")
    buf.truncate(0)
    buf.seek(0)

    term.clear_below()

    assert buf.getvalue() == (
        "\x1b[0K"
        "\x1b[3;1H\x1b[2K"
        "\x1b[4;1H\x1b[2K"
        "\x1b[2;3H"
    )


def test_clear_below_on_last_row_only_clears_line(rich_terminal):
    term, buf = rich_terminal
    term.home()
    for _ in range(3):
        term.newline()
    buf.truncate(0)
    buf.seek(0)

    term.clear_below()

    assert buf.getvalue() == "\x1b[0K"


def test_frame_buffers_into_single_write(rich_terminal):
    term, buf = rich_terminal
    with term.frame():
        term.home()
        term.write("x")
        assert buf.getvalue() == ""
    assert buf.getvalue() == "\x1b[Hx"
