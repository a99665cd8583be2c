"""Response models for the emoji search service."""

from datetime import datetime

from pydantic import BaseModel, Field

from .enums import SearchMode


class SearchResponse(BaseModel):
    """Ranked emojis for one query."""

    query: str
    mode: SearchMode
    results: list[str] = Field(default_factory=list, description="Emojis, best first")
    count: int = Field(default=0, ge=0)
    latency_ms: float = Field(default=0.0, ge=0)


class HealthResponse(BaseModel):
    """Liveness check."""

    status: str
    version: str
    timestamp: datetime


class ReadyResponse(BaseModel):
    """Readiness check."""

    status: str
    version: str
    entities: int = Field(default=0, ge=0, description="Emojis in the loaded dataset")


class ErrorResponse(BaseModel):
    """Error body returned by the REST endpoints."""

    success: bool = False
    error: str
