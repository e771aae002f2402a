"""
Form Assist server entry point.

Run the HTTP API, or the MCP server with stdio or SSE transport.

Usage:
    # HTTP API
    form-assist-server --transport http --port 3001

    # stdio mode (for desktop MCP clients)
    form-assist-server --transport stdio

    # SSE mode (for Docker/remote)
    form-assist-server --transport sse --port 8080
"""

import argparse
import asyncio
import logging
import sys

import uvicorn

from form_assist.api import create_app
from form_assist.config import get_config
from form_assist.mcp_server import run_mcp_server


logger = logging.getLogger("form-assist")


def build_parser() -> argparse.ArgumentParser:
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Form Assist Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # HTTP API
  form-assist-server --transport http --port 3001

  # MCP over stdio
  form-assist-server --transport stdio

  # MCP over SSE
  form-assist-server --transport sse --port 8080

Environment Variables:
  OPENAI_API_KEY               API key enabling AI assistance
  FORM_ASSIST_MAX_COMPLEXITY   Maximum components for AI assistance (default: 50)
  FORM_ASSIST_SAFETY_POLICY    fail-open or fail-closed (default: fail-open)
  FORM_ASSIST_TIMEOUT          Generation timeout in seconds (default: 60)
  MCP_TRANSPORT                Default MCP transport: stdio or sse
  MCP_PORT                     Port for SSE transport (default: 8080)
        """,
    )

    parser.add_argument(
        "--transport",
        choices=["http", "stdio", "sse"],
        default="http",
        help="Transport type (default: http)",
    )

    parser.add_argument(
        "--host",
        default=config.server_host,
        help=f"Host for http and sse transports (default: {config.server_host})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Port to listen on (default: {config.server_port} for http, {config.mcp_port} for sse)",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    config = get_config()
    args = build_parser().parse_args(argv)

    # stdout belongs to the protocol under stdio transport
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info(f"Form Assist server starting (transport: {args.transport})")
    if not config.ai_enabled:
        logger.warning("OPENAI_API_KEY is not set, AI assistance is disabled")

    try:
        if args.transport == "http":
            port = args.port or config.server_port
            uvicorn.run(create_app(), host=args.host, port=port, log_level=config.log_level.lower())
        else:
            asyncio.run(
                run_mcp_server(
                    transport=args.transport,
                    host=args.host,
                    port=args.port or config.mcp_port,
                )
            )
    except KeyboardInterrupt:
        logger.info("Server stopped.")
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
