"""
ZeroMQ Adapter Package

ZeroMQ REP-socket transport for the MCP dispatcher.
"""

from mcp_seam.adapters.zeromq.server import ZeroMQTransport

__all__ = ["ZeroMQTransport"]
