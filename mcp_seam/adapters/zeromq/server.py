"""
ZeroMQ transport adapter

Serves the MCP dispatcher on a ZeroMQ REP socket: one request frame in, one
reply frame out.
"""

import zmq
import logging
import threading
import time

from mcp_seam.adapters.adapter_interface import TransportAdapterInterface
from mcp_seam.protocol.dispatcher import Server, encode_message
from mcp_seam.protocol.errors import ErrorCode, ParseError
from mcp_seam.protocol.types import Response, error_response_for
from mcp_seam.telemetry.metrics import record_latency, increment_counter

logger = logging.getLogger(__name__)

class ZeroMQTransport(TransportAdapterInterface):
    """
    ZeroMQ transport for the MCP dispatcher

    A REP socket must answer every request, so notifications are acknowledged
    with an empty frame and rejected messages with a JSON-RPC error response.
    """

    def __init__(self, server: Server, bind_address: str = "tcp://*:5555"):
        """Initialize the transport and bind the socket

        Args:
            server: Dispatcher that handles each message
            bind_address: REP socket bind address
        """
        self.server = server
        self.bind_address = bind_address
        self.running = False
        self.server_thread = None
        self.context = zmq.Context()

        self.socket = self.context.socket(zmq.REP)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.bind(bind_address)

        logger.info(f"ZeroMQ transport bound to {bind_address}")

    def __del__(self):
        self.close()

    def close(self):
        """Stop serving and release the socket and context"""
        self.stop()
        if getattr(self, 'socket', None) is not None:
            self.socket.close()
            self.socket = None
        if getattr(self, 'context', None) is not None:
            self.context.term()
            self.context = None

    def start(self, threaded: bool = True):
        """Start serving

        Args:
            threaded: Run in a background thread instead of blocking the caller
        """
        self.running = True

        if threaded:
            self.server_thread = threading.Thread(target=self._run_server)
            self.server_thread.daemon = True
            self.server_thread.start()
            logger.info("ZeroMQ transport started in background thread")
        else:
            logger.info("ZeroMQ transport started in main thread")
            self._run_server()

    def stop(self):
        """Stop the receive loop"""
        self.running = False
        if getattr(self, 'server_thread', None):
            self.server_thread.join(timeout=1.0)
            self.server_thread = None
            logger.info("ZeroMQ transport stopped")

    def _run_server(self):
        logger.info("ZeroMQ transport accepting messages")

        while self.running:
            try:
                request_bytes = self.socket.recv(flags=zmq.NOBLOCK)
            except zmq.error.Again:
                time.sleep(0.001)
                continue

            start_time = time.time()
            increment_counter("mcp.transport.messages.received", 1, {"transport": "zeromq"})

            reply = self.process_frame(request_bytes)
            self.socket.send(reply)

            latency_ms = (time.time() - start_time) * 1000
            record_latency("mcp.transport.reply.latency", latency_ms, {"transport": "zeromq"})

    def process_frame(self, request_bytes: bytes) -> bytes:
        """Handle one inbound frame and build the reply frame"""
        try:
            reply = self.server.handle_message(request_bytes.decode('utf-8'))
            if reply is None:
                return b""
            return reply.encode('utf-8')
        except UnicodeDecodeError as e:
            logger.error(f"Frame is not valid UTF-8: {e}")
            increment_counter("mcp.transport.errors", 1, {"transport": "zeromq", "type": "parse_error"})
            response = Response.failure(None, ErrorCode.PARSE_ERROR, "Parse error", data=str(e))
            return encode_message(response.to_dict()).encode('utf-8')
        except ParseError as e:
            logger.error(f"Rejected message: {e}")
            increment_counter("mcp.transport.errors", 1, {"transport": "zeromq", "type": "parse_error"})
            return encode_message(error_response_for(e).to_dict()).encode('utf-8')
        except Exception as e:
            logger.exception(f"Error while handling message: {e}")
            increment_counter("mcp.transport.errors", 1, {"transport": "zeromq", "type": "internal_error"})
            response = Response.failure(None, ErrorCode.INTERNAL_ERROR, "Internal error")
            return encode_message(response.to_dict()).encode('utf-8')
