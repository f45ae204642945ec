# session/__init__.py

import asyncio
from typing import Optional, Set

from prompt_toolkit.input import Input, create_input

from ..display import Display, TerminalSize
from ..errors import ScrollbackError
from .actions import SessionActions

class Session:
    """
    Runs the interactive loop: raw keyboard input on one side, the
    scrollback display on the other, everything on a single event loop.
    """
    def __init__(self, display: Display, stream, logger=None, input: Optional[Input] = None):
        self.display = display
        self.stream = stream
        self.logger = logger
        self.actions = SessionActions(display, stream, logger=logger)
        self._input = input
        self._tasks: Set[asyncio.Task] = set()
        self._done: Optional[asyncio.Event] = None
        self._failure: Optional[BaseException] = None

    def _fail(self, error: BaseException) -> None:
        if self._failure is None:
            self._failure = error
        self._done.set()

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            self._fail(task.exception())

    def _on_input(self) -> None:
        try:
            submitted = self.actions.handle_keys(self._input.read_keys())
            for line in submitted:
                task = asyncio.get_running_loop().create_task(self.actions.submit(line))
                self._tasks.add(task)
                task.add_done_callback(self._on_task_done)
            if not self.actions.running:
                self._done.set()
                return
            self.actions.refresh()
        except ScrollbackError as e:
            self._fail(e)

    async def run(self, size: Optional[TerminalSize] = None) -> None:
        """
        Take over the terminal until Ctrl-C/Ctrl-D.

        Raises:
            ScrollbackError: the terminal failed; it has been restored first
        """
        terminal = self.display.terminal
        self._input = self._input or create_input()
        self._done = asyncio.Event()
        terminal.enter_alternate_screen()
        try:
            # Lines emitted before the session started are drawn here
            self.display.resize(size)
            self.actions.refresh()
            with self._input.raw_mode():
                with self._input.attach(self._on_input):
                    await self._done.wait()
        finally:
            for task in list(self._tasks):
                task.cancel()
            if self._tasks:
                await asyncio.gather(*self._tasks, return_exceptions=True)
            await self.stream.aclose()
            self.display.reset()
            terminal.exit_alternate_screen()
            terminal.show_cursor()
            terminal.flush()
        if self._failure is not None:
            if self.logger:
                self.logger.error(f"Session aborted: {self._failure}")
            raise self._failure

__all__ = ['Session', 'SessionActions']
