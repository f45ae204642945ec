# test_style.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from scrollback.display.style import LineKind, StyleDefinitions, StyleEngine

YELLOW = "\x1b[93m"
RED = "\x1b[31m"
RESET_FG = "\x1b[39m"


class TestStyleEngine:

    def setup_method(self):
        self.width = 20
        self.engine = StyleEngine(width=lambda: self.width)

    def test_plain_short_line(self):
        assert self.engine.plain("hello") == ["hello"]

    def test_plain_wraps_to_width(self):
        self.width = 9
        assert self.engine.plain("aaaa bbbb cccc") == ["aaaa bbbb", "cccc"]

    def test_wrap_follows_current_width(self):
        text = "alpha beta gamma delta"
        assert len(self.engine.plain(text)) == 2
        self.width = 80
        assert self.engine.plain(text) == [text]

    def test_blank_lines_pass_through(self):
        assert self.engine.plain("") == [""]
        assert self.engine.plain("   ") == ["   "]

    def test_embedded_newlines_become_lines(self):
        assert self.engine.plain("a\nb") == ["a", "b"]

    def test_sent_is_marked_and_colored(self):
        assert self.engine.sent("hi") == [f"{YELLOW}> hi{RESET_FG}"]

    def test_error_is_marked_and_colored(self):
        assert self.engine.error("boom") == [f"{RED}[!!] boom{RESET_FG}"]

    def test_info_is_marked_without_color(self):
        assert self.engine.info("note") == ["[**] note"]

    def test_every_wrapped_line_carries_color(self):
        self.width = 10
        lines = self.engine.sent("one two three")
        assert lines == [f"{YELLOW}> one two{RESET_FG}", f"{YELLOW}three{RESET_FG}"]

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            self.engine.format("shout", "x")

    def test_custom_kinds(self):
        definitions = StyleDefinitions(kinds={'plain': LineKind('plain', marker='| ')})
        engine = StyleEngine(width=lambda: 20, definitions=definitions)
        assert engine.plain("x") == ["| x"]
