"""
Command line entry point for the MCP server

Usage:
    python -m mcp_seam [--transport stdio|zeromq] [--bind tcp://*:5555] ...
"""

import sys
import argparse
import logging
from typing import List, Optional

from mcp_seam.adapters.adapter_factory import TransportFactory
from mcp_seam.config import ServerConfig, TransportType
from mcp_seam.protocol.dispatcher import Server
from mcp_seam.telemetry.metrics import setup_metrics
from mcp_seam.telemetry.tracer import setup_tracer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MCP JSON-RPC server")
    parser.add_argument("--name", help="Server name reported in serverInfo")
    parser.add_argument("--version-string", help="Server version reported in serverInfo")
    parser.add_argument("--transport", choices=[t.value for t in TransportType],
                        help="Message transport (default: stdio)")
    parser.add_argument("--bind", help="Bind address for the zeromq transport")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--telemetry", action="store_true",
                        help="Export OpenTelemetry traces and metrics over OTLP")
    return parser


def load_config(args: argparse.Namespace) -> ServerConfig:
    """Environment configuration overridden by command line flags"""
    config = ServerConfig.from_env()
    if args.name:
        config.name = args.name
    if args.version_string:
        config.version = args.version_string
    if args.transport:
        config.transport = TransportType(args.transport)
    if args.bind:
        config.bind_address = args.bind
    if args.log_level:
        config.log_level = args.log_level.upper()
    if args.telemetry:
        config.telemetry.enabled = True
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args)

    # stdout carries protocol messages on the stdio transport
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )
    logger.info(f"Starting MCP server with config: {config.to_dict()}")

    if config.telemetry.enabled:
        setup_tracer(config.name, config.telemetry.otlp_endpoint)
        setup_metrics(config.name, config.telemetry.otlp_endpoint,
                      export_interval_ms=config.telemetry.export_interval_ms)

    server = Server.from_config(config)
    transport = TransportFactory.create(
        config.transport, server, {"bind_address": config.bind_address}
    )

    try:
        transport.start(threaded=False)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        transport.stop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
