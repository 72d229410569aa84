"""
Stdio transport adapter

Newline-delimited JSON-RPC over a pair of streams (stdin/stdout by
default). Each non-blank input line is one message; each reply is written as
one line and flushed. Logs must go to stderr, stdout carries protocol output only.
"""

import sys
import logging
import threading
import time
from typing import IO, Optional, Union

from mcp_seam.adapters.adapter_interface import TransportAdapterInterface
from mcp_seam.protocol.dispatcher import Server
from mcp_seam.protocol.errors import ParseError
from mcp_seam.telemetry.metrics import increment_counter, record_latency

logger = logging.getLogger(__name__)

class StdioTransport(TransportAdapterInterface):
    """Serve a Server over line-delimited streams"""

    def __init__(self,
                 server: Server,
                 input_stream: Optional[IO] = None,
                 output_stream: Optional[IO] = None):
        """Initialize the transport

        Args:
            server: Dispatcher that handles each message
            input_stream: Line source, text or binary (default: binary stdin, decoded per line)
            output_stream: Text sink for replies (default: stdout)
        """
        self.server = server
        self.input_stream = input_stream if input_stream is not None else getattr(sys.stdin, 'buffer', sys.stdin)
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.running = False
        self.server_thread = None

    def start(self, threaded: bool = True):
        """Start reading messages

        Args:
            threaded: Run in a background thread instead of blocking the caller
        """
        self.running = True

        if threaded:
            self.server_thread = threading.Thread(target=self._run_server)
            self.server_thread.daemon = True
            self.server_thread.start()
            logger.info("Stdio transport started in background thread")
        else:
            logger.info("Stdio transport started in main thread")
            self._run_server()

    def stop(self):
        """Stop after the current line; a blocked read returns only at the next line or EOF"""
        self.running = False
        if self.server_thread:
            self.server_thread.join(timeout=1.0)
            logger.info("Stdio transport stopped")

    def _run_server(self):
        for line in self.input_stream:
            self.process_line(line)
            if not self.running:
                break

        self.running = False
        logger.info("Stdio input closed")

    def process_line(self, line: Union[str, bytes]) -> Optional[str]:
        """Handle one input line and write the reply, if any

        A failure on one line is logged and never stops the loop.

        Returns:
            Optional[str]: The reply written, or None
        """
        start_time = time.time()

        try:
            if isinstance(line, bytes):
                line = line.decode('utf-8')
            message = line.strip()
            if not message:
                return None

            increment_counter("mcp.transport.messages.received", 1, {"transport": "stdio"})
            reply = self.server.handle_message(message)

            if reply is not None:
                self.output_stream.write(reply + "\n")
                self.output_stream.flush()
        except (ParseError, UnicodeDecodeError) as e:
            # No reply: without a parsed request there is no id to answer to
            logger.error(f"Dropping invalid message: {e}")
            increment_counter("mcp.transport.errors", 1, {"transport": "stdio", "type": "parse_error"})
            return None
        except Exception as e:
            logger.exception(f"Error while handling message: {e}")
            increment_counter("mcp.transport.errors", 1, {"transport": "stdio", "type": "internal_error"})
            return None

        if reply is not None:
            latency_ms = (time.time() - start_time) * 1000
            record_latency("mcp.transport.reply.latency", latency_ms, {"transport": "stdio"})
            logger.debug(f"Sent reply, took {latency_ms:.2f}ms")

        return reply
