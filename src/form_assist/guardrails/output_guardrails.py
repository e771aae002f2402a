"""
Output guardrails for Form Assist.

These guardrails validate the assistant's answer before it leaves the agent run.
"""

from typing import Any

from agents import (
    Agent,
    GuardrailFunctionOutput,
    RunContextWrapper,
    output_guardrail,
)

from form_assist.models.assist import FormAssistOutput
from form_assist.schema.validator import validate_form_schema


@output_guardrail
async def component_structure_guardrail(
    ctx: RunContextWrapper[Any],
    agent: Agent[Any],
    output: FormAssistOutput,
) -> GuardrailFunctionOutput:
    """
    Guardrail ensuring the returned components form a structurally valid schema.

    Duplicate keys and size are left to the safety checker, which sees
    the original schema as well.
    """
    validation = validate_form_schema({"components": output.components})

    return GuardrailFunctionOutput(
        output_info=validation.model_dump(exclude={"data"}),
        tripwire_triggered=not validation.valid,
    )
