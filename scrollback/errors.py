# errors.py


class ScrollbackError(Exception):
    """Base class for display failures."""


class TerminalIOError(ScrollbackError):
    """
    Writing to the terminal failed.

    A partially written control sequence leaves the screen in an unknown
    state, so this is never retried.
    """


class GeometryError(ScrollbackError):
    """Terminal size is unavailable or too small for the layout."""
