"""Tests for the MCP tool layer."""

import pytest

from conftest import FakeGenerator, make_fields

from form_assist.mcp_server.tools import get_mcp_tools, handle_tool_call
from form_assist.orchestrator import FormAssistOrchestrator


@pytest.fixture
def orchestrator(config, contact_schema):
    return FormAssistOrchestrator(
        config=config,
        generator=FakeGenerator(components=contact_schema["components"]),
    )


class TestGetMcpTools:
    """Tests for tool definitions."""

    def test_tool_names(self):
        """Test the three operations are exposed."""
        assert [t["name"] for t in get_mcp_tools()] == ["form_assist", "validate_schema", "get_ai_limits"]

    def test_form_assist_schema(self):
        """Test form_assist requires a message and the current schema."""
        tool = get_mcp_tools()[0]
        assert tool["inputSchema"]["required"] == ["message", "currentSchema"]


class TestHandleToolCall:
    """Tests for handle_tool_call."""

    @pytest.mark.asyncio
    async def test_form_assist(self, orchestrator, contact_schema):
        """Test form_assist returns the preview payload."""
        result = await handle_tool_call(
            orchestrator,
            "form_assist",
            {"message": "tidy up", "currentSchema": contact_schema},
        )
        assert result["complexity"] == 3
        assert result["markdown"].startswith("## AI Form Assistant")

    @pytest.mark.asyncio
    async def test_form_assist_error_payload(self, orchestrator):
        """Test typed failures come back as error payloads."""
        result = await handle_tool_call(
            orchestrator,
            "form_assist",
            {"message": "tidy up", "currentSchema": {"components": make_fields(51)}},
        )
        assert "too complex" in result["error"]
        assert result["maxComplexity"] == 50

    @pytest.mark.asyncio
    async def test_validate_schema(self, orchestrator, contact_schema):
        """Test validate_schema reports complexity."""
        result = await handle_tool_call(orchestrator, "validate_schema", {"schema": contact_schema})
        assert result == {"valid": True, "complexity": 3, "exceedsAILimit": False}

    @pytest.mark.asyncio
    async def test_validate_schema_requires_schema(self, orchestrator):
        """Test validate_schema without a schema is an error."""
        result = await handle_tool_call(orchestrator, "validate_schema", {})
        assert result == {"error": "Schema is required"}

    @pytest.mark.asyncio
    async def test_get_ai_limits(self, orchestrator):
        """Test get_ai_limits reports the limit."""
        result = await handle_tool_call(orchestrator, "get_ai_limits", {})
        assert result == {"maxComplexity": 50, "aiEnabled": True}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, orchestrator):
        """Test unknown tools are reported."""
        result = await handle_tool_call(orchestrator, "delete_form", {})
        assert result == {"error": "Unknown tool: delete_form"}
