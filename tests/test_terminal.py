# test_terminal.py

import io
import os
import shutil
import pytest

import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from scrollback.display.terminal import DisplayTerminal, foreground_code
from scrollback.errors import GeometryError, TerminalIOError


class BrokenStream:
    def write(self, data):
        raise OSError("EIO")

    def flush(self):
        pass


class TestDisplayTerminal:

    def setup_method(self):
        self.stream = io.StringIO()
        self.terminal = DisplayTerminal(stream=self.stream)

    def test_nothing_written_before_flush(self):
        self.terminal.goto(3, 5)
        self.terminal.write("x")
        assert self.stream.getvalue() == ""
        assert self.terminal.pending == "\x1b[5;3Hx"

    def test_flush_writes_and_clears_buffer(self):
        self.terminal.clear_line()
        self.terminal.flush()
        self.terminal.flush()
        assert self.stream.getvalue() == "\x1b[2K"
        assert self.terminal.pending == ""

    def test_region_sequences(self):
        self.terminal.set_scroll_region(2, 22)
        self.terminal.disable_origin_mode()
        self.terminal.scroll_region_up(1)
        self.terminal.reset_scroll_region()
        self.terminal.clear_all()
        assert self.terminal.pending == "\x1b[2;22r\x1b[?6l\x1b[1S\x1b[r\x1b[2J"

    def test_foreground(self):
        self.terminal.set_foreground("red")
        self.terminal.reset_foreground()
        assert self.terminal.pending == "\x1b[31m\x1b[39m"

    def test_unknown_color(self):
        with pytest.raises(ValueError):
            foreground_code("not-a-color")

    def test_cursor_toggles_once(self):
        self.terminal.hide_cursor()
        self.terminal.hide_cursor()
        self.terminal.show_cursor()
        assert self.terminal.pending == "\x1b[?25l\x1b[?25h"

    def test_write_failure_is_fatal(self):
        terminal = DisplayTerminal(stream=BrokenStream())
        terminal.write("x")
        with pytest.raises(TerminalIOError):
            terminal.flush()
        assert terminal.pending == ""

    def test_closed_stream_is_fatal(self):
        self.stream.close()
        self.terminal.write("x")
        with pytest.raises(TerminalIOError):
            self.terminal.flush()

    def test_size_from_environment(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "100")
        monkeypatch.setenv("LINES", "30")
        size = self.terminal.get_size()
        assert (size.columns, size.lines) == (100, 30)

    def test_size_unavailable(self, monkeypatch):
        monkeypatch.setattr(shutil, "get_terminal_size",
                            lambda fallback=(80, 24): os.terminal_size((0, 0)))
        with pytest.raises(GeometryError):
            self.terminal.get_size()
