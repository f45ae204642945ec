# stream/__init__.py

from typing import Optional

from .embedded import EmbeddedStream, echo_session
from .remote import RemoteStream

class Stream:
    """Factory for the line source feeding the transcript."""

    @staticmethod
    def create(endpoint: Optional[str] = None, logger=None):
        if endpoint:
            return RemoteStream(endpoint, logger=logger)
        return EmbeddedStream(logger=logger)

__all__ = ['Stream', 'RemoteStream', 'EmbeddedStream', 'echo_session']
