"""
MCP message dispatcher

Classifies one raw JSON-RPC 2.0 message as a request or a notification and
routes it by method name. Requests always yield exactly one serialized
response; notifications never yield output.
"""

import json
import logging
import time
from typing import Any, Dict, Optional

from mcp_seam.protocol.errors import ErrorCode, ParseError
from mcp_seam.protocol.types import (
    PROTOCOL_VERSION,
    Implementation,
    Notification,
    Request,
    Response,
    ServerCapabilities,
)
from mcp_seam.telemetry.metrics import increment_counter, record_latency
from mcp_seam.telemetry.tracer import create_span, get_current_trace_id, set_span_attribute

logger = logging.getLogger(__name__)

METHOD_INITIALIZE = "initialize"
METHOD_PING = "ping"
NOTIFICATION_INITIALIZED = "notifications/initialized"


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def decode_message(message: str) -> Any:
    """Parse raw text into a generic JSON value

    Raises:
        ParseError: If the text is not valid JSON or is not valid Unicode
    """
    try:
        # Text carrying lone surrogates has no UTF-8 form
        message.encode('utf-8')
        return json.loads(message, parse_constant=_reject_constant)
    except ValueError as e:
        # json.JSONDecodeError and UnicodeEncodeError are ValueError subclasses
        raise ParseError(f"Invalid JSON: {e}", code=ErrorCode.PARSE_ERROR) from e
    except RecursionError as e:
        raise ParseError("Invalid JSON: nesting too deep", code=ErrorCode.PARSE_ERROR) from e


def encode_message(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


class Server:
    """
    MCP server message handler

    Owns the advertised capabilities and implementation identity, both fixed at
    construction. ``handle_message`` keeps no per-call state, so one instance
    can be shared between threads.
    """

    def __init__(self, name: str, version: str,
                 capabilities: Optional[ServerCapabilities] = None):
        """Initialize the server

        Args:
            name: Implementation name reported as ``serverInfo.name``
            version: Implementation version reported as ``serverInfo.version``
            capabilities: Advertised capabilities (default: all groups, no change notifications)
        """
        self.implementation = Implementation(name=name, version=version)
        self.capabilities = capabilities if capabilities is not None else ServerCapabilities()
        self._request_handlers = {
            METHOD_INITIALIZE: self._handle_initialize,
            METHOD_PING: self._handle_ping,
        }
        logger.debug(f"MCP server created: {name} {version}")

    @classmethod
    def from_config(cls, config) -> "Server":
        """Create a server from a ServerConfig"""
        return cls(name=config.name, version=config.version)

    def handle_message(self, message: str) -> Optional[str]:
        """Handle one raw message

        Args:
            message: One complete JSON-RPC message as text

        Returns:
            Optional[str]: The serialized response for a request, None for a notification

        Raises:
            ParseError: If the text is not JSON or the message shape is invalid
        """
        start_time = time.time()
        try:
            parsed = decode_message(message)
        except ParseError:
            increment_counter("mcp.dispatcher.errors", 1, {"type": "parse_error"})
            raise

        # Presence of "id" alone decides; its validity is checked by strict parsing
        is_request = isinstance(parsed, dict) and "id" in parsed
        kind = "request" if is_request else "notification"

        with create_span("mcp.handle_message", {"mcp.message.kind": kind}):
            try:
                if is_request:
                    reply = self._handle_request(parsed)
                else:
                    self._handle_notification(parsed)
                    reply = None
            except ParseError as e:
                increment_counter("mcp.dispatcher.errors", 1, {"type": "invalid_message", "kind": kind})
                logger.debug(f"Rejected {kind}: {e}")
                raise

        latency_ms = (time.time() - start_time) * 1000
        record_latency("mcp.dispatcher.latency", latency_ms, {"kind": kind})
        return reply

    def _handle_request(self, data: Dict[str, Any]) -> str:
        request = Request.from_dict(data)
        set_span_attribute("mcp.method", request.method)
        increment_counter("mcp.dispatcher.requests", 1, {"method": request.method})

        handler = self._request_handlers.get(request.method)
        if handler is None:
            increment_counter("mcp.dispatcher.errors", 1, {"type": "method_not_found"})
            logger.info(f"Method not found: {request.method} (id={request.id!r}, trace={get_current_trace_id()})")
            response = Response.failure(request.id, ErrorCode.METHOD_NOT_FOUND, "Method not found")
        else:
            response = Response.success(request.id, handler(request))

        return encode_message(response.to_dict())

    def _handle_notification(self, data: Any) -> None:
        notification = Notification.from_dict(data)
        set_span_attribute("mcp.method", notification.method)
        increment_counter("mcp.dispatcher.notifications", 1, {"method": notification.method})

        if notification.method == NOTIFICATION_INITIALIZED:
            logger.info("Client reported initialization complete")
        else:
            # Notifications never produce an error response
            logger.debug(f"Ignoring notification: {notification.method}")

    def _handle_initialize(self, request: Request) -> Dict[str, Any]:
        params = request.params if isinstance(request.params, dict) else {}
        client_info = params.get("clientInfo")
        client_name = client_info.get("name", "unknown") if isinstance(client_info, dict) else "unknown"
        client_version = params.get("protocolVersion")

        # No negotiation: the server always answers with its own version
        if client_version is not None and client_version != PROTOCOL_VERSION:
            logger.warning(
                f"Client requested protocol version {client_version}, answering with {PROTOCOL_VERSION}"
            )
        logger.info(f"Initialize from client: {client_name}")

        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": self.capabilities.to_dict(),
            "serverInfo": self.implementation.to_dict(),
        }

    def _handle_ping(self, request: Request) -> Dict[str, Any]:
        return {}
