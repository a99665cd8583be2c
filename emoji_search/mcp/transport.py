"""MCP Streamable HTTP transport (JSON-RPC) for emoji search."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .. import __version__
from ..api.deps import run_search, sanitize_error_message
from ..errors import EmojiSearchError, InvalidInputError
from ..models import JSONRPCRequest, SearchToolParams, ToolName
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    jsonrpc_error,
    jsonrpc_response,
    tool_text_result,
)
from .tool_defs import TOOL_DEFINITIONS

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"

router = APIRouter(tags=["MCP Transport"])


@router.post("/mcp")
async def mcp_transport_endpoint(request: Request):
    """
    MCP Streamable HTTP endpoint (JSON-RPC format).

    Supports ``initialize``, ``ping``, ``tools/list`` and ``tools/call``,
    single or batched. Notifications (no ``id``) get no response.
    """
    try:
        body = await request.json()
    except ValueError:  # Malformed JSON or undecodable bytes
        return JSONResponse(jsonrpc_error(None, PARSE_ERROR, "Parse error"), status_code=400)

    if isinstance(body, list):
        if not body:
            return JSONResponse(
                jsonrpc_error(None, INVALID_REQUEST, "Invalid request: empty batch"), status_code=400
            )
        responses = []
        for message in body:
            response = await _handle_request(message)
            if response:  # Skip notifications
                responses.append(response)
        return JSONResponse(responses) if responses else Response(status_code=204)

    response = await _handle_request(body)
    return JSONResponse(response) if response else Response(status_code=204)


async def _handle_request(body: Any) -> dict | None:
    """Handle a single JSON-RPC request."""
    try:
        message = JSONRPCRequest.model_validate(body)
    except ValidationError:
        return jsonrpc_error(None, INVALID_REQUEST, "Invalid request")

    method = message.method
    id = message.id
    params = message.params or {}

    if id is None:  # Notification - no response
        return None

    if method == "initialize":
        return jsonrpc_response(
            id,
            {
                "protocolVersion": PROTOCOL_VERSION,
                "serverInfo": {"name": "emoji-search", "version": __version__},
                "capabilities": {"tools": {}},
            },
        )
    elif method == "tools/list":
        return jsonrpc_response(id, {"tools": TOOL_DEFINITIONS})
    elif method == "tools/call":
        return await _handle_call_tool(id, params)
    elif method == "ping":
        return jsonrpc_response(id, {})
    else:
        return jsonrpc_error(id, METHOD_NOT_FOUND, f"Method not found: {method}")


async def _handle_call_tool(id: Any, params: dict) -> dict:
    """Handle MCP tools/call request."""
    tool_name = params.get("name")
    try:
        tool = ToolName(tool_name)
    except ValueError:
        return jsonrpc_error(id, INVALID_PARAMS, f"Unknown tool: {tool_name}")

    try:
        arguments = SearchToolParams.model_validate(params.get("arguments") or {})
    except ValidationError as e:
        return jsonrpc_error(id, INVALID_PARAMS, f"Invalid parameter: {e.errors()[0]['msg']}")

    try:
        results = await run_in_threadpool(
            run_search,
            tool.mode,
            arguments.query,
            arguments.limit,
            arguments.to_options(),
        )
    except InvalidInputError as e:
        return jsonrpc_error(id, INVALID_PARAMS, str(e))
    except EmojiSearchError as e:
        return jsonrpc_error(id, SERVER_ERROR, str(e))
    except Exception as e:
        return jsonrpc_error(id, INTERNAL_ERROR, sanitize_error_message(e))

    payload = {"query": arguments.query, "results": results, "count": len(results)}
    return jsonrpc_response(id, tool_text_result(json.dumps(payload, ensure_ascii=False)))
