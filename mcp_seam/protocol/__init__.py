"""
Protocol Module

JSON-RPC 2.0 message types and the MCP message dispatcher.
"""

from .dispatcher import Server
from .errors import ErrorCode, ParseError, ProtocolError
from .types import (
    JSONRPC_VERSION,
    PROTOCOL_VERSION,
    ErrorResponse,
    Implementation,
    Notification,
    Request,
    Response,
    ServerCapabilities,
)

__all__ = [
    "Server",
    "ErrorCode",
    "ParseError",
    "ProtocolError",
    "JSONRPC_VERSION",
    "PROTOCOL_VERSION",
    "ErrorResponse",
    "Implementation",
    "Notification",
    "Request",
    "Response",
    "ServerCapabilities",
]
