"""
JSON-RPC 2.0 envelope helpers for the /mcp endpoint.

Response builders, the fixed error-code table, and RpcError, which handlers
raise and the dispatcher turns into an error envelope.
"""

from __future__ import annotations

from typing import Any

from mcp import types

JSONRPC_VERSION = "2.0"

RpcId = str | int | None


class ErrorCodes:
    """JSON-RPC error codes used by the server."""

    PARSE_ERROR = types.PARSE_ERROR
    INVALID_REQUEST = types.INVALID_REQUEST
    METHOD_NOT_FOUND = types.METHOD_NOT_FOUND
    INVALID_PARAMS = types.INVALID_PARAMS
    INTERNAL_ERROR = types.INTERNAL_ERROR
    # Transport precondition (Accept header)
    NOT_ACCEPTABLE = -32000


class RpcError(Exception):
    """A failure reported to the client inside the envelope."""

    def __init__(self, code: int, message: str, status: int = 200) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status

    @classmethod
    def method_not_supported(cls, method: Any) -> RpcError:
        return cls(ErrorCodes.METHOD_NOT_FOUND, f"Method not supported: {method}")

    @classmethod
    def unknown_tool(cls, name: Any) -> RpcError:
        return cls(ErrorCodes.METHOD_NOT_FOUND, f"Unknown tool: {name}")

    @classmethod
    def invalid_argument(cls, field: str) -> RpcError:
        return cls(ErrorCodes.INVALID_PARAMS, f"Missing or invalid argument: {field}")

    @classmethod
    def unknown_resource(cls, uri: str) -> RpcError:
        return cls(ErrorCodes.INVALID_PARAMS, f"Unknown resource: {uri}")

    @classmethod
    def not_acceptable(cls) -> RpcError:
        return cls(
            ErrorCodes.NOT_ACCEPTABLE,
            "Not Acceptable: Client must accept both application/json and text/event-stream",
            status=406,
        )


def is_valid_id(value: Any) -> bool:
    """Ids are strings, integers or null. bool is an int subclass but not an id."""
    if isinstance(value, bool):
        return False
    return value is None or isinstance(value, (str, int))


def success_response(request_id: RpcId, result: Any) -> dict[str, Any]:
    """Create a JSON-RPC success response."""
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_response(request_id: RpcId, code: int, message: str) -> dict[str, Any]:
    """Create a JSON-RPC error response."""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": {"code": code, "message": message},
    }
