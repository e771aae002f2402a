"""
Agent definitions for Form Assist.

This module contains the form assistant agent and the SchemaGenerator
protocol the orchestrator depends on.
"""

from form_assist.agents.form_assistant import (
    AgentSchemaGenerator,
    SchemaGenerator,
    create_form_assistant_agent,
    parse_assistant_text,
    summarize_tool_outputs,
)

__all__ = [
    "AgentSchemaGenerator",
    "SchemaGenerator",
    "create_form_assistant_agent",
    "parse_assistant_text",
    "summarize_tool_outputs",
]
