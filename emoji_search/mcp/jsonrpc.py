"""JSON-RPC 2.0 message helpers for the MCP transport.

See: https://www.jsonrpc.org/specification
"""

from typing import Any

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
# Application-specific, e.g. no dataset loaded
SERVER_ERROR = -32000


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Build a success response echoing the request ``id``."""
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Build an error response; ``id`` is None when the request could not be parsed."""
    return {"jsonrpc": "2.0", "id": id, "error": {"code": code, "message": message}}


def tool_text_result(text: str) -> dict:
    """Wrap tool output in an MCP ``tools/call`` result."""
    return {"content": [{"type": "text", "text": text}]}
