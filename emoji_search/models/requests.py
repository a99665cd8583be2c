"""Request models for the emoji search service."""

from typing import Any

from pydantic import BaseModel, Field

from ..engine.scoring.constants import DEFAULT_LIMIT
from .enums import SearchMode
from .options import Options


class SearchRequest(BaseModel):
    """Body of ``POST /v1/search``."""

    query: str = Field(..., description="Free-text query, typed so far")
    limit: int = Field(default=DEFAULT_LIMIT, ge=0, description="Maximum emojis to return")
    mode: SearchMode = Field(
        default=SearchMode.STANDARD,
        description="standard: prefix search; best_matching: stemmed, stop-word filtered",
    )
    options: Options | None = Field(default=None, description="Per-request personalization")


class SearchToolParams(BaseModel):
    """Arguments of the ``emoji_search`` MCP tools."""

    query: str = Field(..., description="Free-text query")
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)
    custom_keywords: dict[str, list[str]] = Field(default_factory=dict)
    custom_preferred_entity: dict[str, str] = Field(default_factory=dict)
    recently_searched: list[str] = Field(default_factory=list)

    def to_options(self) -> Options:
        return Options(
            custom_keywords=self.custom_keywords,
            custom_preferred_entity=self.custom_preferred_entity,
            recently_searched=self.recently_searched,
        )


class JSONRPCRequest(BaseModel):
    """Incoming MCP JSON-RPC 2.0 message."""

    jsonrpc: str = Field(default="2.0")
    id: int | str | None = Field(default=None)
    method: str
    params: dict[str, Any] | None = Field(default=None)
