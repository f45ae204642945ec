# __init__.py

from .logger import Logger
from .display import Display
from .interface import Interface
from .errors import ScrollbackError, TerminalIOError, GeometryError

__all__ = ["Interface", "Display", "Logger", "ScrollbackError", "TerminalIOError", "GeometryError"]
