# display/style/engine.py

from io import StringIO
from typing import Callable, List, Optional

from rich.console import Console
from rich.text import Text

from ..terminal import RESET_FOREGROUND, foreground_code
from .definitions import StyleDefinitions

class StyleEngine:
    """
    Turns transcript events into display-ready lines.

    Text is wrapped to the current viewport width, then each wrapped line
    gets its kind's color so any single line can be repainted on its own.
    """
    def __init__(self, width: Callable[[], int], definitions: Optional[StyleDefinitions] = None):
        """
        Args:
            width: Callable returning the current viewport width
            definitions: Line kinds; defaults to StyleDefinitions()
        """
        self._width = width
        self.definitions = definitions or StyleDefinitions()
        self._rich_console = Console(
            force_terminal=True,
            color_system="truecolor",
            file=StringIO(),
            highlight=False
        )

    def wrap(self, text: str, width: int) -> List[str]:
        """Wrap text to width columns, splitting on embedded newlines."""
        lines = Text(text).wrap(self._rich_console, width)
        return [line.plain.rstrip() for line in lines]

    def format(self, kind_name: str, text: str) -> List[str]:
        kind = self.definitions.get_kind(kind_name)
        text = kind.marker + text
        # Intentional blank separators stay as they are
        if not text.strip():
            return [text]
        lines = self.wrap(text, self._width())
        if kind.color:
            start = foreground_code(kind.color)
            lines = [f"{start}{line}{RESET_FOREGROUND}" for line in lines]
        return lines

    def plain(self, text: str) -> List[str]:
        return self.format('plain', text)

    def sent(self, text: str) -> List[str]:
        return self.format('sent', text)

    def info(self, text: str) -> List[str]:
        return self.format('info', text)

    def error(self, text: str) -> List[str]:
        return self.format('error', text)
