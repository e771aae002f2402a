"""
MCP Tool definitions for Form Assist.

Exposes the same operations as the HTTP API as MCP tools.
"""

import logging
from typing import Any

from form_assist.errors import FormAssistError
from form_assist.orchestrator import FormAssistOrchestrator


logger = logging.getLogger(__name__)


def get_mcp_tools() -> list[dict[str, Any]]:
    """
    Get MCP tool definitions.

    Returns:
        List of tool definitions for MCP server registration.
    """
    return [
        {
            "name": "form_assist",
            "description": (
                "Modify a form schema from a natural-language request. "
                "Returns a markdown explanation and the updated schema for preview. "
                "Forms above the AI complexity limit are rejected."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "message": {
                        "type": "string",
                        "description": "What to change, e.g. 'add a required email field'",
                        "minLength": 1,
                        "maxLength": 1000,
                    },
                    "currentSchema": {
                        "type": "object",
                        "description": "The current form schema with its components array",
                    },
                },
                "required": ["message", "currentSchema"],
            },
        },
        {
            "name": "validate_schema",
            "description": (
                "Validate a form schema and report its complexity "
                "and whether it exceeds the AI assistance limit."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "schema": {
                        "type": "object",
                        "description": "The form schema to validate",
                    },
                },
                "required": ["schema"],
            },
        },
        {
            "name": "get_ai_limits",
            "description": "Report the maximum form complexity and whether AI assistance is enabled.",
            "inputSchema": {
                "type": "object",
                "properties": {},
            },
        },
    ]


async def handle_tool_call(
    orchestrator: FormAssistOrchestrator,
    name: str,
    arguments: dict[str, Any],
) -> dict[str, Any]:
    """
    Dispatch an MCP tool call to the orchestrator.

    Returns:
        The tool result, or {"error": ...} for failures and unknown tools.
    """
    try:
        if name == "form_assist":
            result = await orchestrator.generate(arguments)
            return result.to_response()
        if name == "validate_schema":
            schema = arguments.get("schema")
            if schema is None:
                return {"error": "Schema is required"}
            return orchestrator.validate_schema(schema)
        if name == "get_ai_limits":
            return orchestrator.limits()
    except FormAssistError as e:
        logger.warning(f"Tool {name} failed: {e.message}")
        return e.to_dict()

    return {"error": f"Unknown tool: {name}"}
