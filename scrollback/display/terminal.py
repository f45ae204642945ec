# display/terminal.py
import sys
import shutil
from dataclasses import dataclass
from typing import List, Optional, Protocol, TextIO

from rich.color import Color, ColorParseError

from ..errors import GeometryError, TerminalIOError


@dataclass
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


class RenderSink(Protocol):
    """Primitive screen operations the scroll controller drives."""

    def goto(self, col: int, row: int) -> None: ...
    def clear_line(self) -> None: ...
    def clear_all(self) -> None: ...
    def scroll_region_up(self, n: int) -> None: ...
    def set_scroll_region(self, top: int, bottom: int) -> None: ...
    def reset_scroll_region(self) -> None: ...
    def disable_origin_mode(self) -> None: ...
    def set_foreground(self, color: str) -> None: ...
    def reset_foreground(self) -> None: ...
    def write(self, text: str) -> None: ...
    def flush(self) -> None: ...


def foreground_code(color: str) -> str:
    """Return the SGR sequence selecting `color` (a rich color name) as foreground."""
    try:
        codes = Color.parse(color).get_ansi_codes(foreground=True)
    except ColorParseError as e:
        raise ValueError(f"Unknown color '{color}'") from e
    return f"\033[{';'.join(codes)}m"


RESET_FOREGROUND = "\033[39m"


class DisplayTerminal:
    """
    Low-level terminal output.

    Every operation is buffered as an ANSI/VT100 sequence; nothing reaches
    the stream until flush() is called.
    """

    def __init__(self, stream: Optional[TextIO] = None, logger=None):
        self.stream = stream if stream is not None else sys.stdout
        self.logger = logger
        self._buffer: List[str] = []
        self._cursor_visible = True

    def get_size(self) -> TerminalSize:
        """Get terminal dimensions, failing when the host cannot report them."""
        size = shutil.get_terminal_size(fallback=(0, 0))
        if size.columns <= 0 or size.lines <= 0:
            raise GeometryError("Terminal size unavailable")
        return TerminalSize(columns=size.columns, lines=size.lines)

    @property
    def pending(self) -> str:
        """Output buffered since the last flush."""
        return "".join(self._buffer)

    def _emit(self, sequence: str) -> None:
        self._buffer.append(sequence)

    def goto(self, col: int, row: int) -> None:
        """Move the cursor to 1-based (col, row)."""
        self._emit(f"\033[{row};{col}H")

    def clear_line(self) -> None:
        self._emit("\033[2K")

    def clear_all(self) -> None:
        self._emit("\033[2J")

    def scroll_region_up(self, n: int) -> None:
        """Scroll the active scroll region up by n rows."""
        self._emit(f"\033[{n}S")

    def set_scroll_region(self, top: int, bottom: int) -> None:
        self._emit(f"\033[{top};{bottom}r")

    def reset_scroll_region(self) -> None:
        self._emit("\033[r")

    def disable_origin_mode(self) -> None:
        # Absolute addressing even inside the scroll region
        self._emit("\033[?6l")

    def set_foreground(self, color: str) -> None:
        self._emit(foreground_code(color))

    def reset_foreground(self) -> None:
        self._emit(RESET_FOREGROUND)

    def write(self, text: str) -> None:
        self._emit(text)

    def enter_alternate_screen(self) -> None:
        self._emit("\033[?1049h")

    def exit_alternate_screen(self) -> None:
        self._emit("\033[?1049l")

    def show_cursor(self) -> None:
        if not self._cursor_visible:
            self._cursor_visible = True
            self._emit("\033[?25h")

    def hide_cursor(self) -> None:
        if self._cursor_visible:
            self._cursor_visible = False
            self._emit("\033[?25l")

    def flush(self) -> None:
        """
        Write buffered output to the stream.

        Raises:
            TerminalIOError: the stream rejected the write. The buffer is
                dropped since its sequences may have been partially sent.
        """
        data = "".join(self._buffer)
        self._buffer.clear()
        try:
            if data:
                self.stream.write(data)
            self.stream.flush()
        except (OSError, ValueError) as e:
            if self.logger:
                self.logger.error(f"Terminal write failed: {e}")
            raise TerminalIOError(str(e)) from e
