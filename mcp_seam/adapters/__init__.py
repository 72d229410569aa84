"""
Transport Adapters Module

Transports that frame messages for the MCP dispatcher:
- stdio: newline-delimited JSON over stdin/stdout
- zeromq: ZeroMQ REP socket
"""

from .adapter_factory import TransportFactory
from .adapter_interface import TransportAdapterInterface
from .stdio import StdioTransport

__all__ = [
    "TransportFactory",
    "TransportAdapterInterface",
    "StdioTransport"
]
