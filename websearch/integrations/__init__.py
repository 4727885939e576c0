"""Clients for external search APIs."""

from websearch.integrations.tavily_client import TavilySearchClient, search_web

__all__ = [
    "TavilySearchClient",
    "search_web",
]
