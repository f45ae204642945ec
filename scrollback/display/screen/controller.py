# display/screen/controller.py

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .geometry import ViewportGeometry
from .history import HISTORY_CAPACITY, HistoryLog

SCROLL_STEP = 5
LINE_SEPARATOR = re.compile(r"\r?\n")


@dataclass(frozen=True)
class Live:
    """Output region follows the newest lines."""


@dataclass(frozen=True)
class Scrollback:
    """Output region is frozen on the window starting at `window_start`."""

    window_start: int


ScrollState = Union[Live, Scrollback]
LIVE = Live()


class RedrawStrategy(Enum):
    WINDOW = "window"  # direct addressing from history
    REPLAY = "replay"  # region scroll, one row per history line


def select_redraw(history_len: int, visible_rows: int, target: ScrollState) -> RedrawStrategy:
    """Pick how to repaint the output region for the state being entered."""
    if isinstance(target, Scrollback) or history_len >= visible_rows:
        return RedrawStrategy.WINDOW
    return RedrawStrategy.REPLAY


class ScrollController:
    """
    Owns the transcript history and decides how the output region is painted.

    In Live mode new lines are pushed in with the terminal's region scroll.
    In Scrollback mode the region shows a fixed window of history, repainted
    by addressing each row directly, and new lines only go to history.
    """

    def __init__(self, terminal, capacity: int = HISTORY_CAPACITY,
                 scroll_step: int = SCROLL_STEP, separator_color: str = "green",
                 logger=None):
        """
        Args:
            terminal: RenderSink receiving every drawing primitive
            capacity: Maximum number of lines kept in history
            scroll_step: Rows moved per scroll command
            separator_color: Color of the header and footer rules
            logger: Optional Logger
        """
        self.terminal = terminal
        self.logger = logger
        self.scroll_step = scroll_step
        self.separator_color = separator_color
        self._history = HistoryLog(capacity)
        self._state: ScrollState = LIVE
        self._geometry: Optional[ViewportGeometry] = None

    @property
    def state(self) -> ScrollState:
        return self._state

    @property
    def is_live(self) -> bool:
        return isinstance(self._state, Live)

    @property
    def is_ready(self) -> bool:
        """True once setup() has laid out the screen."""
        return self._geometry is not None

    @property
    def geometry(self) -> ViewportGeometry:
        if self._geometry is None:
            raise RuntimeError("setup() must be called before drawing")
        return self._geometry

    @property
    def visible_rows(self) -> int:
        return self.geometry.visible_rows

    @property
    def history_length(self) -> int:
        return len(self._history)

    def lines(self) -> List[str]:
        return self._history.lines()

    def _max_start(self) -> int:
        return max(0, len(self._history) - self.visible_rows)

    def reset(self) -> None:
        """Clear the screen and release the scroll region."""
        self.terminal.clear_all()
        self.terminal.reset_scroll_region()

    def setup(self, width: int, height: int) -> None:
        """Lay out the screen for a terminal of the given size."""
        self.reset()
        self._geometry = ViewportGeometry.recompute(width, height)
        geo = self._geometry
        self.terminal.set_scroll_region(geo.output_top, geo.output_bottom)
        self.terminal.disable_origin_mode()
        self._draw_separator(1, "=")
        self._draw_separator(geo.footer_row, "_")
        self.terminal.flush()
        if self.logger:
            self.logger.debug(f"Screen setup: {width}x{height}, {geo.visible_rows} output rows")

    def _draw_separator(self, row: int, char: str) -> None:
        self.terminal.goto(1, row)
        self.terminal.clear_line()
        self.terminal.set_foreground(self.separator_color)
        self.terminal.write(char * self.geometry.width)
        self.terminal.reset_foreground()

    def append(self, text: str) -> None:
        """
        Add text to history, rendering it only while Live.

        Before setup() lines are only stored; the first tail redraw shows them.
        """
        for line in LINE_SEPARATOR.split(text):
            evicted = self._history.append(line)
            if isinstance(self._state, Scrollback):
                if evicted:
                    # Keep the window on the same lines as indices shift down
                    self._state = Scrollback(max(0, self._state.window_start - 1))
            elif self.is_ready:
                self._push_line(line)
                self.terminal.goto(1, self.geometry.prompt_row)

    def _push_line(self, line: str) -> None:
        self.terminal.goto(1, self.geometry.output_bottom)
        self.terminal.scroll_region_up(1)
        self.terminal.write(line)

    def scroll_up(self) -> None:
        if len(self._history) <= self.visible_rows:
            return
        if isinstance(self._state, Scrollback):
            start = min(self._state.window_start, self._max_start())
        else:
            start = self._max_start()
        self._enter(Scrollback(max(0, start - self.scroll_step)))

    def scroll_down(self) -> None:
        if not isinstance(self._state, Scrollback):
            return
        candidate = self._state.window_start + self.scroll_step
        if candidate >= len(self._history) - self.visible_rows:
            self.reset_to_live()
        else:
            self._enter(Scrollback(candidate))

    def reset_to_live(self) -> None:
        """Return to Live and repaint the newest lines."""
        self._enter(LIVE)

    def _enter(self, state: ScrollState) -> None:
        if self.logger and state != self._state:
            self.logger.debug(f"Scroll state {self._state} -> {state}")
        self._state = state
        strategy = select_redraw(len(self._history), self.visible_rows, state)
        if strategy is RedrawStrategy.REPLAY:
            self._replay_tail()
        elif isinstance(state, Scrollback):
            self._draw_window(state.window_start)
        else:
            self._draw_window(self._max_start())
        self.terminal.goto(1, self.geometry.prompt_row)

    def _draw_window(self, start: int) -> None:
        geo = self.geometry
        lines = self._history.window(start, geo.visible_rows)
        for i in range(geo.visible_rows):
            self.terminal.goto(1, geo.output_top + i)
            self.terminal.clear_line()
            if i < len(lines):
                self.terminal.write(lines[i])

    def _replay_tail(self) -> None:
        # Region scroll keeps the bottom-anchored order of a partial log
        for line in self._history.lines():
            self._push_line(line)

    def flush(self) -> None:
        self.terminal.flush()
