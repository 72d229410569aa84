"""
Protocol errors

Exceptions raised by the dispatcher and the JSON-RPC 2.0 reserved error codes.
"""

from typing import Any, Optional


class ErrorCode:
    """JSON-RPC 2.0 reserved error codes"""
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base class for failures raised while handling a message."""


class ParseError(ProtocolError):
    """Raised when a message is not valid JSON or does not have the required shape.

    Args:
        message: Human-readable description
        code: JSON-RPC error code a transport may report (-32700 or -32600)
        request_id: The raw ``id`` member, if one could be read from the message
    """

    def __init__(self, message: str, code: int = ErrorCode.PARSE_ERROR,
                 request_id: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.request_id = request_id
