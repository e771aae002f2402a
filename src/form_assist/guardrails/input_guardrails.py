"""
Input guardrails for Form Assist.

These guardrails check the user's request before the assistant acts on it.
"""

import re
from typing import Any

from agents import (
    Agent,
    GuardrailFunctionOutput,
    RunContextWrapper,
    TResponseInputItem,
    input_guardrail,
)
from pydantic import BaseModel, Field

from form_assist.guardrails.constants import (
    MAX_MESSAGE_LENGTH,
    SUSPICIOUS_PATTERNS,
    USER_REQUEST_PATTERN,
)


class MessageCheckResult(BaseModel):
    """Result of the user request safety check."""

    is_safe: bool = Field(..., description="Whether the request is safe")
    issues: list[str] = Field(default_factory=list, description="Any issues found")


def _input_to_text(input: str | list[TResponseInputItem]) -> str:
    if isinstance(input, list):
        return " ".join(
            str(item.get("content", "")) if isinstance(item, dict) else str(item)
            for item in input
        )
    return str(input)


def _extract_user_request(text: str) -> str:
    """Extract the user request from the prompt, or the whole text if not found."""
    match = re.search(USER_REQUEST_PATTERN, text, re.DOTALL)
    if match:
        return match.group(1)
    return text


def check_user_message(message: str) -> MessageCheckResult:
    """Check a user request for injection patterns and size."""
    issues = []

    if not message.strip():
        issues.append("Request cannot be empty")
    if len(message) > MAX_MESSAGE_LENGTH:
        issues.append(f"Request is longer than {MAX_MESSAGE_LENGTH} characters")

    for pattern in SUSPICIOUS_PATTERNS:
        if re.search(pattern, message, re.IGNORECASE):
            issues.append("Potentially unsafe content detected")
            break

    return MessageCheckResult(is_safe=len(issues) == 0, issues=issues)


@input_guardrail
async def message_safety_guardrail(
    ctx: RunContextWrapper[Any],
    agent: Agent[Any],
    input: str | list[TResponseInputItem],
) -> GuardrailFunctionOutput:
    """
    Safety guardrail for the user's edit request.

    Only the request portion of the prompt is checked; the serialized
    form components are the user's own data and may contain markup.
    """
    message = _extract_user_request(_input_to_text(input))
    result = check_user_message(message)

    return GuardrailFunctionOutput(
        output_info=result.model_dump(),
        tripwire_triggered=not result.is_safe,
    )
