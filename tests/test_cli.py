"""Tests for the server command line."""

import pytest

from form_assist.cli import build_parser


class TestBuildParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test the HTTP transport is the default."""
        args = build_parser().parse_args([])
        assert args.transport == "http"
        assert args.port is None

    def test_sse_transport(self):
        """Test selecting the SSE transport with a port."""
        args = build_parser().parse_args(["--transport", "sse", "--port", "9000"])
        assert args.transport == "sse"
        assert args.port == 9000

    def test_unknown_transport(self):
        """Test unknown transports are rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "websocket"])
