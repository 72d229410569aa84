"""
Protocol message types

JSON-RPC 2.0 envelopes (Request, Notification, Response, ErrorResponse) and the
MCP server descriptors (ServerCapabilities, Implementation) advertised during
initialization.

Incoming messages are parsed strictly with ``from_dict``; outgoing values are
converted to wire dictionaries with ``to_dict``, omitting absent optional members.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from mcp_seam.protocol.errors import ErrorCode, ParseError

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"

# Identifiers are echoed back verbatim; only strings and 64-bit integers are accepted
RequestId = Union[str, int]

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def is_request_id(value: Any) -> bool:
    """Check whether a raw JSON value is a valid request identifier"""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return _INT64_MIN <= value <= _INT64_MAX
    if not isinstance(value, str):
        return False
    # Escaped lone surrogates ("\ud800") decode but cannot be echoed as UTF-8
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


def _require_object(data: Any, kind: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ParseError(f"{kind} must be a JSON object", code=ErrorCode.INVALID_REQUEST)
    return data


def _require_envelope(data: Dict[str, Any], kind: str, request_id: Optional[Any] = None) -> str:
    """Validate the ``jsonrpc`` and ``method`` members shared by requests and notifications

    Returns:
        str: The method name
    """
    if data.get("jsonrpc") != JSONRPC_VERSION:
        raise ParseError(
            f"{kind} has missing or invalid 'jsonrpc' member, expected \"{JSONRPC_VERSION}\"",
            code=ErrorCode.INVALID_REQUEST,
            request_id=request_id,
        )

    method = data.get("method")
    if not isinstance(method, str):
        raise ParseError(
            f"{kind} has missing or non-string 'method' member",
            code=ErrorCode.INVALID_REQUEST,
            request_id=request_id,
        )
    return method


@dataclass(frozen=True)
class Request:
    """A JSON-RPC request: carries an identifier and expects exactly one response"""
    id: RequestId
    method: str
    params: Optional[Any] = None
    jsonrpc: str = JSONRPC_VERSION

    @classmethod
    def from_dict(cls, data: Any) -> "Request":
        """Strictly parse a decoded JSON document into a Request

        Args:
            data: Decoded JSON value

        Returns:
            Request: The parsed request

        Raises:
            ParseError: If ``jsonrpc``, ``id`` or ``method`` is missing or mistyped
        """
        data = _require_object(data, "Request")

        raw_id = data.get("id")
        if not is_request_id(raw_id):
            raise ParseError(
                "Request 'id' must be a string or an integer",
                code=ErrorCode.INVALID_REQUEST,
            )

        method = _require_envelope(data, "Request", request_id=raw_id)
        return cls(id=raw_id, method=method, params=data.get("params"))


@dataclass(frozen=True)
class Notification:
    """A JSON-RPC notification: no identifier, no response"""
    method: str
    params: Optional[Any] = None
    jsonrpc: str = JSONRPC_VERSION

    @classmethod
    def from_dict(cls, data: Any) -> "Notification":
        """Strictly parse a decoded JSON document into a Notification

        Raises:
            ParseError: If ``jsonrpc`` or ``method`` is missing or mistyped
        """
        data = _require_object(data, "Notification")
        method = _require_envelope(data, "Notification")
        return cls(method=method, params=data.get("params"))


@dataclass(frozen=True)
class ErrorResponse:
    """Error object carried by a failed Response"""
    code: int
    message: str
    data: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        error = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


@dataclass(frozen=True)
class Response:
    """A JSON-RPC response holding exactly one of ``result`` or ``error``"""
    id: Optional[RequestId]
    result: Optional[Any] = None
    error: Optional[ErrorResponse] = None
    jsonrpc: str = JSONRPC_VERSION

    def __post_init__(self):
        if (self.result is None) == (self.error is None):
            raise ValueError("Response must carry exactly one of 'result' or 'error'")

    @classmethod
    def success(cls, request_id: RequestId, result: Any) -> "Response":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Optional[RequestId], code: int, message: str,
                data: Optional[Any] = None) -> "Response":
        return cls(id=request_id, error=ErrorResponse(code=code, message=message, data=data))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire form; the absent member of result/error is omitted"""
        message = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            message["error"] = self.error.to_dict()
        else:
            message["result"] = self.result
        return message


_ERROR_MESSAGES = {
    ErrorCode.PARSE_ERROR: "Parse error",
    ErrorCode.INVALID_REQUEST: "Invalid Request",
}


def error_response_for(exc: ParseError) -> Response:
    """Build the error Response a transport sends when it must reply to a rejected message

    The dispatcher never does this itself. The id is echoed only when the
    rejected message carried a valid one, otherwise it is null.
    """
    request_id = exc.request_id if is_request_id(exc.request_id) else None
    message = _ERROR_MESSAGES.get(exc.code, "Parse error")
    return Response.failure(request_id, exc.code, message, data=str(exc))


@dataclass(frozen=True)
class PromptsCapability:
    list_changed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"listChanged": self.list_changed}


@dataclass(frozen=True)
class ResourcesCapability:
    subscribe: bool = False
    list_changed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"subscribe": self.subscribe, "listChanged": self.list_changed}


@dataclass(frozen=True)
class ToolsCapability:
    list_changed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"listChanged": self.list_changed}


@dataclass(frozen=True)
class ServerCapabilities:
    """Optional feature groups advertised in the initialize result

    The sub-flags describe whether the server can notify about changes, not
    runtime state. A group set to None is not advertised.
    """
    logging: Optional[Dict[str, Any]] = field(default_factory=dict)
    prompts: Optional[PromptsCapability] = field(default_factory=PromptsCapability)
    resources: Optional[ResourcesCapability] = field(default_factory=ResourcesCapability)
    tools: Optional[ToolsCapability] = field(default_factory=ToolsCapability)

    def to_dict(self) -> Dict[str, Any]:
        capabilities = {}
        if self.logging is not None:
            capabilities["logging"] = dict(self.logging)
        if self.prompts is not None:
            capabilities["prompts"] = self.prompts.to_dict()
        if self.resources is not None:
            capabilities["resources"] = self.resources.to_dict()
        if self.tools is not None:
            capabilities["tools"] = self.tools.to_dict()
        return capabilities


@dataclass(frozen=True)
class Implementation:
    """Name and version of the server, echoed as ``serverInfo``"""
    name: str
    version: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "version": self.version}
