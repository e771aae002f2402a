"""
Guardrails for Form Assist.

Safety checks for user requests, agent output and candidate schemas.
"""

from form_assist.guardrails.input_guardrails import (
    check_user_message,
    message_safety_guardrail,
)
from form_assist.guardrails.output_guardrails import component_structure_guardrail
from form_assist.guardrails.safety import (
    analyze_schema,
    check_safety,
    find_removed_keys,
)

__all__ = [
    "analyze_schema",
    "check_safety",
    "check_user_message",
    "component_structure_guardrail",
    "find_removed_keys",
    "message_safety_guardrail",
]
