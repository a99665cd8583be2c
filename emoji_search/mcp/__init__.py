"""MCP (Model Context Protocol) transport module.

This module contains components for the MCP Streamable HTTP transport:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- The transport router (import from .transport directly)
"""

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

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "tool_text_result",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
]
