"""Web search over the Tavily API."""

import logging

from websearch.errors import (
    ConfigurationError,
    DecodeError,
    NetworkError,
    SerializationError,
    WebSearchError,
)
from websearch.integrations.tavily_client import TavilySearchClient, search_web
from websearch.utils.logging_config import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "NetworkError",
    "SerializationError",
    "TavilySearchClient",
    "WebSearchError",
    "search_web",
    "setup_logging",
]
