import io
import signal

from hshell.interactive import (
    display_prompt,
    handle_signal,
    is_interactive,
    read_line,
)


class _Terminal(io.StringIO):
    def isatty(self):
        return True


def test_is_interactive():
    assert is_interactive(io.StringIO()) is False
    assert is_interactive(_Terminal()) is True


def test_display_prompt():
    out = io.StringIO()
    display_prompt(out)
    assert out.getvalue() == "$ "


def test_read_line_strips_newline_and_hits_eof():
    stream = io.StringIO("abc\n\ndef")
    assert read_line(stream) == "abc"
    assert read_line(stream) == ""
    assert read_line(stream) == "def"
    assert read_line(stream) is None


def test_handle_sigint_writes_prompt(capfd):
    handle_signal(signal.SIGINT, None)
    assert capfd.readouterr().out == "\n$ "


def test_handle_other_signal_is_silent(capfd):
    handle_signal(signal.SIGTERM, None)
    assert capfd.readouterr().out == ""