"""
Request and response models for AI form assistance.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FormAssistRequest(BaseModel):
    """A natural-language edit request against the current form schema."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="What the user wants changed, e.g. 'add an email field'",
    )
    current_schema: dict[str, Any] = Field(
        ...,
        alias="currentSchema",
        description="The form schema as currently persisted",
    )


class FormAssistOutput(BaseModel):
    """Structured answer expected from the form assistant agent."""

    explanation: str = Field(
        ..., description="A clear explanation of what changes were made and why"
    )
    components: list[dict[str, Any]] = Field(
        ..., description="The complete updated components array"
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Any warnings or considerations for the user",
    )


class GeneratedComponents(BaseModel):
    """What a schema generator hands back to the orchestrator."""

    output: FormAssistOutput
    tool_usage: list[str] = Field(
        default_factory=list,
        description="Summaries of self-check tools the assistant ran",
    )


@dataclass
class FormAssistResult:
    """Final result of an assist request."""

    explanation: str
    markdown: str
    schema: dict[str, Any]
    complexity: int
    warnings: list[str] = field(default_factory=list)

    def to_response(self) -> dict[str, Any]:
        """Export the payload returned by the HTTP and MCP layers."""
        payload: dict[str, Any] = {
            "markdown": self.markdown,
            "schema": self.schema,
            "complexity": self.complexity,
        }
        if self.warnings:
            payload["warnings"] = self.warnings
        return payload
