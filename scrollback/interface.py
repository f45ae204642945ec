# interface.py

import asyncio
from typing import Optional

from .logger import Logger
from .display import Display
from .display.screen.history import HISTORY_CAPACITY
from .stream import Stream
from .session import Session

class Interface:
    """
    Main entry point that assembles our Display, Stream, and Session.
    """

    def __init__(self, endpoint: Optional[str] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 capacity: int = HISTORY_CAPACITY):
        """
        Initialize components with an optional endpoint and logging.
        
        Args:
            endpoint: URL endpoint for remote mode. If None, embedded mode is used.
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stderr.
            capacity: Number of transcript lines kept for scrollback.
        """
        self.logger = Logger(__name__, logging_enabled, log_file)
        self.display = Display(capacity=capacity, logger=self.logger)
        self.stream = Stream.create(endpoint, logger=self.logger)
        self.session = Session(self.display, self.stream, logger=self.logger)

        self.is_remote_mode = endpoint is not None
        if self.is_remote_mode:
            self.logger.debug(f"Initialized in remote mode with endpoint: {endpoint}")
        else:
            self.logger.debug("Initialized in embedded mode")

    def start(self) -> None:
        """Run the session until the user quits."""
        try:
            asyncio.run(self.session.run())
        except KeyboardInterrupt:
            self.logger.debug("Interrupted")
