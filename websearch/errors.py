"""Error types raised by the web search client.

Every failure of a search call surfaces to the caller as exactly one of
these exceptions. Nothing is retried or recovered locally.
"""

import time
from typing import Optional


class WebSearchError(Exception):
    """Base exception for web search errors."""

    def __init__(self, message: str, **context):
        """Initialize web search error with context.

        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.context = context
        self.timestamp = time.time()


class ConfigurationError(WebSearchError):
    """Required configuration (the API credential) is missing."""


class NetworkError(WebSearchError):
    """Transport-level failure: DNS, connection, TLS or timeout."""

    def __init__(self, message: str, cause: Optional[BaseException] = None, **context):
        """Initialize network error.

        Args:
            message: Error message
            cause: Underlying transport exception
            **context: Additional context
        """
        super().__init__(message, **context)
        self.cause = cause


class SerializationError(WebSearchError):
    """Request body could not be encoded as JSON."""


class DecodeError(WebSearchError):
    """Response body is not valid search response JSON."""

    def __init__(self, message: str, status_code: Optional[int] = None, **context):
        """Initialize decode error.

        Args:
            message: Error message
            status_code: HTTP status code of the undecodable response
            **context: Additional context
        """
        super().__init__(message, **context)
        self.status_code = status_code

    def __str__(self):
        """String representation with status code if available."""
        base = super().__str__()
        if self.status_code is not None:
            return f"[HTTP {self.status_code}] {base}"
        return base
