"""
Tests for the command line entry point
"""
import os
from unittest.mock import patch, MagicMock

from mcp_seam.cli import build_parser, load_config, main
from mcp_seam.config import TransportType


class TestLoadConfig:
    """Test flag handling on top of environment configuration"""

    def test_flags_override_env(self):
        with patch.dict(os.environ, {"MCP_SERVER_NAME": "from-env", "MCP_LOG_LEVEL": "WARNING"}, clear=True):
            args = build_parser().parse_args([
                "--name", "from-flag",
                "--version-string", "9.9.9",
                "--transport", "zeromq",
                "--bind", "tcp://127.0.0.1:7001",
                "--log-level", "debug",
                "--telemetry"
            ])
            config = load_config(args)

        assert config.name == "from-flag"
        assert config.version == "9.9.9"
        assert config.transport == TransportType.ZEROMQ
        assert config.bind_address == "tcp://127.0.0.1:7001"
        assert config.log_level == "DEBUG"
        assert config.telemetry.enabled is True

    def test_env_used_without_flags(self):
        with patch.dict(os.environ, {"MCP_SERVER_NAME": "from-env"}, clear=True):
            config = load_config(build_parser().parse_args([]))
        assert config.name == "from-env"
        assert config.transport == TransportType.STDIO


class TestMain:
    """Test the main entry point wiring"""

    @patch("mcp_seam.cli.setup_metrics")
    @patch("mcp_seam.cli.setup_tracer")
    @patch("mcp_seam.cli.TransportFactory")
    def test_main_runs_transport_in_foreground(self, mock_factory, mock_tracer, mock_metrics):
        transport = MagicMock()
        mock_factory.create.return_value = transport

        with patch.dict(os.environ, {}, clear=True):
            assert main(["--name", "cli-test"]) == 0

        server = mock_factory.create.call_args[0][1]
        assert server.implementation.name == "cli-test"
        transport.start.assert_called_once_with(threaded=False)
        transport.stop.assert_called_once()
        mock_tracer.assert_not_called()
        mock_metrics.assert_not_called()

    @patch("mcp_seam.cli.setup_metrics")
    @patch("mcp_seam.cli.setup_tracer")
    @patch("mcp_seam.cli.TransportFactory")
    def test_main_with_telemetry_and_interrupt(self, mock_factory, mock_tracer, mock_metrics):
        transport = MagicMock()
        transport.start.side_effect = KeyboardInterrupt
        mock_factory.create.return_value = transport

        with patch.dict(os.environ, {}, clear=True):
            assert main(["--telemetry"]) == 0

        mock_tracer.assert_called_once_with("mcp-seam", "localhost:4317")
        mock_metrics.assert_called_once()
        transport.stop.assert_called_once()
