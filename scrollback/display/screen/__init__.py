# display/screen/__init__.py

from .controller import (
    LIVE,
    Live,
    RedrawStrategy,
    ScrollController,
    Scrollback,
    ScrollState,
    select_redraw,
)
from .geometry import ViewportGeometry
from .history import HistoryLog

__all__ = [
    'HistoryLog',
    'LIVE',
    'Live',
    'RedrawStrategy',
    'ScrollController',
    'ScrollState',
    'Scrollback',
    'ViewportGeometry',
    'select_redraw',
]
