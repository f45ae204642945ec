# display/style/definitions.py

from dataclasses import dataclass
from typing import Dict, Optional

@dataclass(frozen=True)
class LineKind:
    """
    Marker and color applied to one kind of transcript line.
    """
    name: str
    marker: str = ""
    color: Optional[str] = None

class StyleDefinitions:
    """
    Style definitions for transcript lines. Has no external dependencies.

    Colors are rich color names; the terminal layer turns them into SGR codes.
    """

    def __init__(self, kinds: Optional[Dict[str, LineKind]] = None,
                 separator_color: str = 'green'):
        self._default_kinds = {
            'plain': LineKind('plain'),
            'sent': LineKind('sent', marker='> ', color='bright_yellow'),
            'info': LineKind('info', marker='[**] '),
            'error': LineKind('error', marker='[!!] ', color='red'),
        }
        self.kinds = kinds if kinds is not None else dict(self._default_kinds)
        self.separator_color = separator_color

    def get_kind(self, name: str) -> LineKind:
        """Get a line kind by name."""
        if name not in self.kinds:
            raise ValueError(f"Unknown line kind '{name}'")
        return self.kinds[name]
