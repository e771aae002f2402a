"""Shared fixtures for Form Assist tests."""

import asyncio
from typing import Any

import pytest

from form_assist.config import FormAssistConfig
from form_assist.models.assist import FormAssistOutput, GeneratedComponents


class FakeGenerator:
    """Deterministic SchemaGenerator returning canned components."""

    def __init__(
        self,
        components: list[dict[str, Any]] | None = None,
        explanation: str = "Done.",
        warnings: list[str] | None = None,
        tool_usage: list[str] | None = None,
        available: bool = True,
        delay: float = 0.0,
        error: Exception | None = None,
    ):
        self.components = components or []
        self.explanation = explanation
        self.warnings = warnings or []
        self.tool_usage = tool_usage or []
        self.available = available
        self.delay = delay
        self.error = error
        self.calls: list[tuple[str, list[dict[str, Any]], int]] = []

    def is_available(self) -> bool:
        return self.available

    async def generate(
        self,
        message: str,
        components: list[dict[str, Any]],
        complexity: int,
    ) -> GeneratedComponents:
        self.calls.append((message, components, complexity))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return GeneratedComponents(
            output=FormAssistOutput(
                explanation=self.explanation,
                components=self.components,
                warnings=self.warnings,
            ),
            tool_usage=self.tool_usage,
        )


def make_fields(count: int, prefix: str = "field") -> list[dict[str, Any]]:
    """Build `count` flat textfield components with keys prefix_0..prefix_n."""
    return [
        {"type": "textfield", "key": f"{prefix}_{i}", "label": f"Field {i}", "input": True}
        for i in range(count)
    ]


@pytest.fixture
def config() -> FormAssistConfig:
    """Configuration with AI enabled and tracing off."""
    return FormAssistConfig(
        openai_api_key="test-key",
        enable_tracing=False,
        generation_timeout_seconds=5.0,
    )


@pytest.fixture
def contact_schema() -> dict[str, Any]:
    """A small persisted form with root properties."""
    return {
        "title": "Contact",
        "name": "contact",
        "path": "contact",
        "display": "form",
        "components": [
            {"type": "textfield", "key": "name", "label": "Name", "input": True},
            {"type": "textarea", "key": "message", "label": "Message", "input": True},
            {"type": "button", "key": "submit", "label": "Submit"},
        ],
    }


@pytest.fixture
def nested_schema() -> dict[str, Any]:
    """A form using every nesting mechanism."""
    return {
        "display": "form",
        "components": [
            {
                "type": "panel",
                "key": "details",
                "components": [
                    {"type": "textfield", "key": "first"},
                    {"type": "textfield", "key": "last"},
                ],
            },
            {
                "type": "columns",
                "key": "layout",
                "columns": [
                    {"components": [{"type": "email", "key": "email"}]},
                    {"components": [{"type": "phoneNumber", "key": "phone"}]},
                ],
            },
            {
                "type": "table",
                "key": "grid",
                "rows": [
                    [
                        {"components": [{"type": "number", "key": "qty"}]},
                        {"components": []},
                    ],
                ],
            },
        ],
    }
