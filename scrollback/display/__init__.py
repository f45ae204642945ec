# display/__init__.py

from typing import Optional

from .terminal import DisplayTerminal, RenderSink, TerminalSize
from .style import StyleDefinitions, StyleEngine
from .screen import ScrollController
from .screen.history import HISTORY_CAPACITY
from .screen.controller import SCROLL_STEP

class Display:
    """
    Coordinates terminal display components in a hierarchical structure.

    Component Hierarchy:
    DisplayTerminal (sink) → ScrollController → StyleEngine
    """
    def __init__(self, terminal: Optional[DisplayTerminal] = None,
                 capacity: int = HISTORY_CAPACITY, scroll_step: int = SCROLL_STEP,
                 definitions: Optional[StyleDefinitions] = None, logger=None):
        """Initialize components in dependency order."""
        self.logger = logger
        self.terminal = terminal if terminal is not None else DisplayTerminal(logger=logger)
        definitions = definitions or StyleDefinitions()
        self.screen = ScrollController(
            self.terminal,
            capacity=capacity,
            scroll_step=scroll_step,
            separator_color=definitions.separator_color,
            logger=logger
        )
        self.style = StyleEngine(width=lambda: self.width, definitions=definitions)

    @property
    def width(self) -> int:
        """Viewport width; before setup() the terminal is asked directly."""
        if self.screen.is_ready:
            return self.screen.geometry.width
        return self.terminal.get_size().columns

    def setup(self, size: Optional[TerminalSize] = None) -> None:
        """Lay out the screen; queries the terminal when no size is given."""
        size = size or self.terminal.get_size()
        self.screen.setup(size.columns, size.lines)

    def resize(self, size: Optional[TerminalSize] = None) -> None:
        """Re-query the layout and repaint the newest lines."""
        self.setup(size)
        self.screen.reset_to_live()

    def _append_all(self, lines) -> None:
        for line in lines:
            self.screen.append(line)

    def plain(self, text: str) -> None:
        self._append_all(self.style.plain(text))

    def sent(self, text: str) -> None:
        self._append_all(self.style.sent(text))

    def info(self, text: str) -> None:
        self._append_all(self.style.info(text))

    def error(self, text: str) -> None:
        self._append_all(self.style.error(text))

    def prompt(self, text: str) -> None:
        """Add a prompt line to the transcript without wrapping it."""
        self.screen.append(text.rstrip())

    def prompt_input(self, text: str) -> None:
        """Show the input being typed; only its last `width` characters fit."""
        width = self.width
        if len(text) > width:
            text = text[-width:]
        self.terminal.goto(1, self.screen.geometry.prompt_row)
        self.terminal.clear_line()
        self.terminal.write(text)

    def scroll_up(self) -> None:
        self.screen.scroll_up()

    def scroll_down(self) -> None:
        self.screen.scroll_down()

    def reset_to_live(self) -> None:
        self.screen.reset_to_live()

    def reset(self) -> None:
        self.screen.reset()

    def flush(self) -> None:
        self.screen.flush()


__all__ = ['Display', 'DisplayTerminal', 'RenderSink', 'TerminalSize']
