"""
MCP Seam - Model Context Protocol message endpoint

Server-side handling of JSON-RPC 2.0 messages for the MCP handshake:

1. Protocol: message types, classification and dispatch (initialize, ping)
2. Adapters: transports that frame messages (stdio, ZeroMQ)
3. Telemetry: OpenTelemetry tracing and metrics for dispatched messages

The dispatcher itself is transport-agnostic; any transport calls
``Server.handle_message`` once per inbound message.
"""

__version__ = "0.1.0"
