# remote.py 

import httpx
from typing import Optional, AsyncGenerator, Callable

class RemoteStream:
    """Handler for line streams served by a remote session endpoint."""
    
    def __init__(self, endpoint: str, logger=None, client: Optional[httpx.AsyncClient] = None):
        self.logger = logger
        self._last_error: Optional[str] = None
        self.endpoint = endpoint.rstrip('/')
        self.client = client or httpx.AsyncClient(timeout=30.0)
        if self.logger:
            self.logger.debug(f"Initialized remote stream: {self.endpoint}")

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    async def _stream_from_endpoint(self, line: str) -> AsyncGenerator[str, None]:
        """Send one submitted line and yield the response body line by line.
        
        Args:
            line: Text the user submitted
            
        Yields:
            str: Response lines, or a single "Error: ..." line on failure
        """
        try:
            if self.logger:
                self.logger.debug(f"Sending line to remote: {line[:50]}")

            async with self.client.stream(
                'POST',
                self.endpoint,
                json={'line': line},
                timeout=30.0
            ) as response:
                response.raise_for_status()
                
                async for chunk in response.aiter_lines():
                    if chunk:
                        if self.logger:
                            self.logger.debug(f"Remote response line: {chunk[:50]}...")
                        yield chunk

        except httpx.TimeoutException as e:
            if self.logger:
                self.logger.error(f"Stream timeout: {str(e)}")
            self._last_error = "Timeout"
            yield "Error: Request timed out"

        except httpx.HTTPStatusError as e:
            error_msg = f"HTTP {e.response.status_code}"
            if self.logger:
                self.logger.error(f"{error_msg}: {str(e)}")
            self._last_error = error_msg
            yield f"Error: {error_msg}"

        except httpx.RequestError as e:
            if self.logger:
                self.logger.error(f"Connection error: {str(e)}")
            self._last_error = "Connection error"
            yield "Error: Failed to connect"

    def get_generator(self) -> Callable:
        """Returns a generator function for remote stream processing.
        
        Returns:
            Callable: Async generator function yielding response lines for a submitted line
        """
        async def generator_wrapper(line: str):
            async for chunk in self._stream_from_endpoint(line):
                yield chunk
        return generator_wrapper

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - ensures proper client cleanup."""
        await self.aclose()
