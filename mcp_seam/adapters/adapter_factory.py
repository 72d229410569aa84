"""
Transport factory

Creates the transport adapter selected by configuration.
"""

from typing import Dict, Any, Union

from mcp_seam.adapters.adapter_interface import TransportAdapterInterface
from mcp_seam.adapters.stdio import StdioTransport
from mcp_seam.config import TransportType
from mcp_seam.protocol.dispatcher import Server

class TransportFactory:
    """Factory for transport adapter instances"""

    @staticmethod
    def create(transport_type: Union[str, TransportType],
               server: Server,
               config: Dict[str, Any] = None) -> TransportAdapterInterface:
        """Create a transport adapter

        Args:
            transport_type: "stdio" or "zeromq"
            server: Dispatcher the transport feeds
            config: Transport options (input_stream/output_stream, bind_address)

        Returns:
            TransportAdapterInterface: Transport instance

        Raises:
            ValueError: Unknown transport type
        """
        if config is None:
            config = {}

        if isinstance(transport_type, TransportType):
            transport_type = transport_type.value

        if transport_type.lower() == TransportType.STDIO.value:
            return StdioTransport(
                server,
                input_stream=config.get("input_stream"),
                output_stream=config.get("output_stream")
            )
        elif transport_type.lower() == TransportType.ZEROMQ.value:
            # Deferred so the stdio path never loads libzmq
            from mcp_seam.adapters.zeromq.server import ZeroMQTransport
            return ZeroMQTransport(
                server,
                bind_address=config.get("bind_address", "tcp://*:5555")
            )
        else:
            raise ValueError(f"Invalid transport type: {transport_type}")
