"""Request and response shapes for the Tavily search API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchRequest(BaseModel):
    """POST body sent to the search endpoint."""

    api_key: str = Field(..., min_length=1)
    query: str


class SearchResult(BaseModel):
    """One result item. Only ``content`` is consumed."""

    model_config = ConfigDict(extra="ignore")

    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def null_content_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class SearchResponse(BaseModel):
    """Decoded response body.

    Error-shaped bodies (e.g. ``{"detail": ...}``) carry no ``results`` key
    and decode to an empty result list, as does ``"results": null``.
    """

    model_config = ConfigDict(extra="ignore")

    results: list[SearchResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def null_results_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def joined_content(self) -> str:
        """Concatenate result contents, each followed by a newline."""
        return "".join(f"{result.content}\n" for result in self.results)
