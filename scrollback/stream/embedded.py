# embedded.py

import asyncio
from typing import Optional, AsyncGenerator, Callable

async def echo_session(line: str) -> AsyncGenerator[str, None]:
    """Local stand-in for a remote session: echoes each submitted line."""
    await asyncio.sleep(0)
    yield f"echo: {line}"

class EmbeddedStream:
    """Handler for local embedded line streams."""
    
    def __init__(self, logger=None, generator: Optional[Callable] = None):
        self.logger = logger
        self._last_error: Optional[str] = None
        self.generator = generator or echo_session
        if self.logger:
            self.logger.debug("Initialized embedded stream")

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    async def _wrap_generator(self, line: str) -> AsyncGenerator[str, None]:
        """Wrap the generator with error reporting.
        
        Args:
            line: Text the user submitted
            
        Yields:
            str: Generated lines
        """
        try:
            async for chunk in self.generator(line):
                if self.logger:
                    self.logger.debug(f"Generated line: {chunk[:50]}...")
                yield chunk

        except Exception as e:
            # Generators are user code; report instead of tearing down the screen
            if self.logger:
                self.logger.error(f"Generator error: {str(e)}")
            self._last_error = str(e)
            yield f"Error: {str(e)}"

    def get_generator(self) -> Callable:
        """Returns a wrapped generator function for embedded stream processing."""
        async def generator_wrapper(line: str):
            async for chunk in self._wrap_generator(line):
                yield chunk
        return generator_wrapper

    async def aclose(self) -> None:
        return None
