"""Pydantic models for the emoji search service."""

from .enums import SearchMode, ToolName
from .options import Options
from .requests import JSONRPCRequest, SearchRequest, SearchToolParams
from .responses import ErrorResponse, HealthResponse, ReadyResponse, SearchResponse

__all__ = [
    # Enums
    "SearchMode",
    "ToolName",
    # Options
    "Options",
    # Requests
    "JSONRPCRequest",
    "SearchRequest",
    "SearchToolParams",
    # Responses
    "ErrorResponse",
    "HealthResponse",
    "ReadyResponse",
    "SearchResponse",
]
