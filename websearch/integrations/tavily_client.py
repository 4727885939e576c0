"""Tavily web search client.

Sends one query to the Tavily search API and returns the ``content`` of
every result, each followed by a newline, as a single string.

Public API:
    TavilySearchClient: Client bound to an API key
    search_web: Search using the API key from process configuration

Example:
    >>> client = TavilySearchClient(api_key="tvly-...")
    >>> context = client.search("latest python release")
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from websearch.errors import ConfigurationError, DecodeError, NetworkError, SerializationError
from websearch.models import SearchRequest, SearchResponse
from websearch.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

TAVILY_SEARCH_URL = "https://api.tavily.com/search"


class TavilySearchClient:
    """Synchronous client for the Tavily search endpoint.

    Each ``search`` call opens and closes its own HTTP client, so one
    instance may be shared between threads.
    """

    def __init__(
        self,
        api_key: Optional[str],
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Create a client.

        Args:
            api_key: Tavily API key
            timeout: Request timeout in seconds; None keeps httpx's default
            transport: HTTP transport to send requests through (tests pass
                ``httpx.MockTransport``)

        Raises:
            ConfigurationError: If api_key is missing or empty
        """
        if not api_key:
            raise ConfigurationError("TAVILY_API_KEY is missing")

        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "TavilySearchClient":
        """Create a client from TAVILY_API_KEY and API_TIMEOUT settings.

        Raises:
            ConfigurationError: If TAVILY_API_KEY is not set or a setting is invalid
        """
        if settings is None:
            try:
                settings = get_settings()
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
        return cls(
            api_key=settings.get_tavily_api_key(),
            timeout=settings.API_TIMEOUT,
            transport=transport,
        )

    def _http_client(self) -> httpx.Client:
        kwargs: dict = {}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.Client(**kwargs)

    def _post(self, body: bytes) -> httpx.Response:
        """Send the search request and read the whole response body.

        Raises:
            NetworkError: If the request fails before a full body is read
            DecodeError: If the body cannot be decompressed
        """
        with self._http_client() as client:
            request = client.build_request(
                "POST",
                TAVILY_SEARCH_URL,
                content=body,
                headers={"Content-Type": "application/json"},
            )
            try:
                response = client.send(request, stream=True)
            except httpx.RequestError as e:
                logger.warning("Tavily search request failed: %s", e)
                raise NetworkError(f"Tavily search request failed: {e}", cause=e) from e

            try:
                response.read()
            except httpx.DecodingError as e:
                logger.warning(
                    "Could not decode Tavily response body (HTTP %d)", response.status_code
                )
                raise DecodeError(
                    f"Could not decode Tavily response body: {e}",
                    status_code=response.status_code,
                ) from e
            except httpx.RequestError as e:
                logger.warning("Tavily search response failed: %s", e)
                raise NetworkError(f"Tavily search response failed: {e}", cause=e) from e
            finally:
                response.close()

        return response

    def search(self, query: str) -> str:
        """Search the web and return the joined result contents.

        The HTTP status code is not checked: whatever body comes back is
        decoded. Error-shaped JSON without ``results`` yields ``""``.

        Args:
            query: Search query string, passed through unvalidated

        Returns:
            Each result's content followed by ``"\\n"``, in response order;
            empty string when there are no results

        Raises:
            SerializationError: If the request body cannot be encoded
            NetworkError: If the request fails at the transport level
            DecodeError: If the response body is not a valid search response
        """
        try:
            body = SearchRequest(api_key=self._api_key, query=query).model_dump_json()
        except ValueError as e:
            # ValidationError and PydanticSerializationError are ValueErrors
            raise SerializationError(f"Could not encode search request: {e}") from e

        logger.debug(
            "Tavily search request",
            extra={"extra_fields": {"query": query}},
        )

        response = self._post(body.encode("utf-8"))

        try:
            parsed = SearchResponse.model_validate_json(response.content)
        except ValueError as e:
            logger.warning(
                "Could not decode Tavily response (HTTP %d)", response.status_code
            )
            raise DecodeError(
                f"Could not decode Tavily response: {e}",
                status_code=response.status_code,
            ) from e

        logger.debug(
            "Tavily search response",
            extra={
                "extra_fields": {
                    "status_code": response.status_code,
                    "results": len(parsed.results),
                }
            },
        )

        return parsed.joined_content()


def search_web(query: str) -> str:
    """Search the web using the TAVILY_API_KEY from configuration.

    Args:
        query: Search query string

    Returns:
        Joined result contents, see ``TavilySearchClient.search``

    Raises:
        ConfigurationError: If TAVILY_API_KEY is unset or empty; no request is sent
        NetworkError: If the request fails at the transport level
        DecodeError: If the response body is not a valid search response
    """
    return TavilySearchClient.from_settings().search(query)
