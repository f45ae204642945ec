# display/style/__init__.py

from .definitions import LineKind, StyleDefinitions
from .engine import StyleEngine

__all__ = ['LineKind', 'StyleDefinitions', 'StyleEngine']
