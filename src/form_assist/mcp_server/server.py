"""
MCP Server implementation for Form Assist.

Provides both stdio and SSE transport support for the Model Context Protocol.
"""

import json
import logging
from typing import Any, Literal

import uvicorn
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from form_assist.mcp_server.tools import get_mcp_tools, handle_tool_call
from form_assist.orchestrator import FormAssistOrchestrator


logger = logging.getLogger("form-assist-mcp")


def create_mcp_server(orchestrator: FormAssistOrchestrator | None = None) -> Server:
    """
    Create and configure the MCP server instance.

    Args:
        orchestrator: Orchestrator serving tool calls. If None, one is built
            from the global configuration.

    Returns:
        Configured MCP Server with form assist tools registered.
    """
    orchestrator = orchestrator or FormAssistOrchestrator()
    server = Server("form-assist-mcp")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name=t["name"],
                description=t["description"],
                inputSchema=t["inputSchema"],
            )
            for t in get_mcp_tools()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls."""
        logger.info(f"Tool call: {name}")
        result = await handle_tool_call(orchestrator, name, arguments or {})
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    return server


async def run_stdio_server(server: Server) -> None:
    """
    Run MCP server with stdio transport.

    Used for desktop clients and local subprocess communication.
    """
    logger.info("Starting MCP server with stdio transport...")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def create_sse_app(server: Server) -> Starlette:
    """
    Create Starlette app for SSE transport.

    Used for remote/Docker deployment.
    """
    # Messages endpoint is relative to the SSE mount point
    sse_transport = SseServerTransport("/messages/")

    async def handle_sse(scope, receive, send):
        """Handle SSE connections - raw ASGI handler."""
        async with sse_transport.connect_sse(scope, receive, send) as streams:
            await server.run(
                streams[0],
                streams[1],
                server.create_initialization_options(),
            )

    async def handle_messages(scope, receive, send):
        """Handle message POST requests - raw ASGI handler."""
        await sse_transport.handle_post_message(scope, receive, send)

    async def health_check(request):
        """Health check endpoint."""
        return JSONResponse({
            "status": "healthy",
            "service": "form-assist-mcp",
            "transport": "sse",
        })

    return Starlette(
        routes=[
            Route("/health", health_check, methods=["GET"]),
            Mount("/sse/messages", app=handle_messages),
            Mount("/sse", app=handle_sse),
        ],
    )


async def run_sse_server(server: Server, host: str = "0.0.0.0", port: int = 8080) -> None:
    """
    Run MCP server with SSE transport.

    Args:
        server: MCP Server instance
        host: Host to bind to
        port: Port to listen on
    """
    logger.info(f"Starting MCP server with SSE transport on {host}:{port}...")

    app = create_sse_app(server)
    config = uvicorn.Config(app, host=host, port=port, log_level="info")
    await uvicorn.Server(config).serve()


async def run_mcp_server(
    transport: Literal["stdio", "sse"] = "stdio",
    host: str = "0.0.0.0",
    port: int = 8080,
    orchestrator: FormAssistOrchestrator | None = None,
) -> None:
    """
    Run MCP server with specified transport.

    Args:
        transport: Transport type - "stdio" or "sse"
        host: Host for SSE transport (default: 0.0.0.0)
        port: Port for SSE transport (default: 8080)
        orchestrator: Orchestrator serving tool calls
    """
    server = create_mcp_server(orchestrator)

    if transport == "stdio":
        await run_stdio_server(server)
    elif transport == "sse":
        await run_sse_server(server, host, port)
    else:
        raise ValueError(f"Unknown transport: {transport}. Use 'stdio' or 'sse'.")
