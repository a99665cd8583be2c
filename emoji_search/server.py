"""FastAPI server for emoji search."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.deps import get_search_dataset, run_search, sanitize_error_message
from .config import settings
from .data import ensure_dataset, get_dataset
from .engine.core.dataset import EmojiDataset
from .errors import DataLoadError, DatasetNotLoadedError, InvalidInputError
from .logging_config import setup_logging
from .mcp.transport import router as mcp_router
from .middleware import RequestContextMiddleware
from .models import (
    ErrorResponse,
    HealthResponse,
    ReadyResponse,
    SearchRequest,
    SearchResponse,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    setup_logging(settings.log_level)
    logger.info(f"Starting emoji search server v{__version__}")

    if not settings.debug and settings.cors_allowed_origins == "*":
        logger.warning(
            "CORS is configured to allow all origins ('*'). "
            "Set EMOJI_SEARCH_CORS_ALLOWED_ORIGINS to specific domains in production."
        )

    try:
        await run_in_threadpool(ensure_dataset)
    except DataLoadError as e:
        # Searches answer 503 until a dataset is available
        logger.error(f"Emoji dataset could not be loaded: {e}")

    yield
    logger.info("Emoji search server stopped")


app = FastAPI(
    title="Emoji Search",
    description="Search-as-you-type emoji ranking",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-Id"],
)

# Mount MCP Streamable HTTP transport
app.include_router(mcp_router)


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
    )


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=400, content=ErrorResponse(error=str(exc)).model_dump())


@app.exception_handler(DatasetNotLoadedError)
async def dataset_not_loaded_handler(request: Request, exc: DatasetNotLoadedError):
    return JSONResponse(status_code=503, content=ErrorResponse(error=str(exc)).model_dump())


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with sanitized error messages."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=sanitize_error_message(exc)).model_dump(),
    )


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(UTC),
    )


@app.get("/ready", tags=["Health"])
async def readiness_check():
    """Readiness check - verifies the emoji dataset is loaded."""
    try:
        entities = len(get_dataset())
        ready = True
    except DatasetNotLoadedError:
        entities = 0
        ready = False

    response = ReadyResponse(
        status="ready" if ready else "not_ready",
        version=__version__,
        entities=entities,
    )
    return JSONResponse(
        content=response.model_dump(mode="json"),
        status_code=200 if ready else 503,
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Emoji Search",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "mcp": "/mcp",
    }


# ============ SEARCH ENDPOINTS ============


@app.post("/v1/search", response_model=SearchResponse, tags=["Search"])
async def search_endpoint(
    request: SearchRequest,
    dataset: Annotated[EmojiDataset, Depends(get_search_dataset)],
) -> SearchResponse:
    """
    Rank emojis for a query.

    ``mode=standard`` runs the prefix search; ``mode=best_matching`` runs the
    forgiving search with stemming and function-word filtering.
    """
    if request.limit > settings.max_limit:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid parameter: limit must be <= {settings.max_limit}",
        )

    start_time = time.perf_counter()
    results = await run_in_threadpool(
        run_search,
        request.mode,
        request.query,
        request.limit,
        request.options,
        dataset,
    )
    latency_ms = (time.perf_counter() - start_time) * 1000

    return SearchResponse(
        query=request.query,
        mode=request.mode,
        results=results,
        count=len(results),
        latency_ms=round(latency_ms, 3),
    )
