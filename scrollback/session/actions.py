# session/actions.py

from typing import Iterable, List

from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys

ERROR_PREFIX = "Error: "

class SessionActions:
    """
    Maps key presses onto display operations and runs submitted lines
    through the stream.
    """
    def __init__(self, display, stream, logger=None):
        self.display = display
        self.stream = stream
        self.logger = logger
        self.input_line = ""
        self.running = True
        self._generator = stream.get_generator()

    def handle_keys(self, key_presses: Iterable[KeyPress]) -> List[str]:
        """
        Apply a batch of key presses.

        Returns:
            Lines submitted with Enter during this batch, in order
        """
        submitted = []
        for key_press in key_presses:
            key = key_press.key
            if key in (Keys.ControlC, Keys.ControlD):
                self.running = False
                break
            elif key == Keys.PageUp:
                self.display.scroll_up()
            elif key == Keys.PageDown:
                self.display.scroll_down()
            elif key == Keys.ControlL:
                if self.logger:
                    self.logger.debug("Resize requested")
                self.display.resize()
            elif key in (Keys.ControlM, Keys.ControlJ):
                line, self.input_line = self.input_line, ""
                if line.strip():
                    submitted.append(line)
            elif key == Keys.ControlH:
                self.input_line = self.input_line[:-1]
            elif key == Keys.BracketedPaste:
                self.input_line += "".join(c for c in key_press.data if c.isprintable())
            elif not isinstance(key, Keys) and key_press.data.isprintable():
                self.input_line += key_press.data
        return submitted

    def refresh(self) -> None:
        """Redraw the input row and push everything to the terminal."""
        self.display.prompt_input(self.input_line)
        self.display.flush()

    async def submit(self, line: str) -> None:
        """Echo a submitted line and append whatever the stream answers."""
        if self.logger:
            self.logger.debug(f"Submitting: {line[:50]}")
        self.display.sent(line)
        self.refresh()
        async for response in self._generator(line):
            if response.startswith(ERROR_PREFIX):
                self.display.error(response[len(ERROR_PREFIX):])
            else:
                self.display.plain(response)
            self.refresh()
