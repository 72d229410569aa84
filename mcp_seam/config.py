"""
Configuration settings for the MCP server
"""
import os
from typing import Dict, Any
from dataclasses import dataclass, field
from enum import Enum

from mcp_seam import __version__


class TransportType(Enum):
    """Supported message transports"""
    STDIO = "stdio"
    ZEROMQ = "zeromq"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class TelemetryConfig:
    """Configuration for OpenTelemetry export"""
    enabled: bool = False
    otlp_endpoint: str = "localhost:4317"
    export_interval_ms: int = 5000

    @classmethod
    def from_env(cls) -> "TelemetryConfig":
        """Create config from environment variables"""
        return cls(
            enabled=_env_flag("MCP_TELEMETRY_ENABLED"),
            otlp_endpoint=os.getenv("MCP_OTLP_ENDPOINT", "localhost:4317"),
        )


@dataclass
class ServerConfig:
    """Main configuration for the MCP server process"""
    name: str = "mcp-seam"
    version: str = __version__
    transport: TransportType = TransportType.STDIO
    bind_address: str = "tcp://*:5555"
    log_level: str = "INFO"
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create config from environment variables

        Raises:
            ValueError: If MCP_TRANSPORT names an unknown transport
        """
        transport_name = os.getenv("MCP_TRANSPORT", TransportType.STDIO.value)
        try:
            transport = TransportType(transport_name.lower())
        except ValueError:
            raise ValueError(f"Unsupported transport: {transport_name}")

        return cls(
            name=os.getenv("MCP_SERVER_NAME", "mcp-seam"),
            version=os.getenv("MCP_SERVER_VERSION", __version__),
            transport=transport,
            bind_address=os.getenv("MCP_BIND_ADDRESS", "tcp://*:5555"),
            log_level=os.getenv("MCP_LOG_LEVEL", "INFO").upper(),
            telemetry=TelemetryConfig.from_env(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging"""
        return {
            "name": self.name,
            "version": self.version,
            "transport": self.transport.value,
            "bind_address": self.bind_address,
            "log_level": self.log_level,
            "telemetry_enabled": self.telemetry.enabled,
            "otlp_endpoint": self.telemetry.otlp_endpoint,
        }
