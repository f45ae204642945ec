# display/screen/history.py

from collections import deque
from typing import List

HISTORY_CAPACITY = 1024


class HistoryLog:
    """
    Bounded log of display-ready lines, oldest first.

    Once the log holds `capacity` lines every append evicts the oldest one,
    so it always holds the most recent lines in arrival order.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError("History capacity must be positive")
        self._lines: deque = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._lines.maxlen

    def __len__(self) -> int:
        return len(self._lines)

    def append(self, line: str) -> bool:
        """
        Add a line at the end, evicting the oldest when full.

        Returns:
            True if the oldest line was evicted to make room
        """
        evicted = len(self._lines) == self._lines.maxlen
        self._lines.append(line)
        return evicted

    def window(self, start: int, count: int) -> List[str]:
        """Return up to `count` lines beginning at index `start`."""
        if count <= 0 or start >= len(self._lines):
            return []
        start = max(0, start)
        end = min(start + count, len(self._lines))
        return [self._lines[i] for i in range(start, end)]

    def lines(self) -> List[str]:
        """Snapshot of the whole log."""
        return list(self._lines)
