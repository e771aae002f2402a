"""
Form Assistant Agent.

This agent turns a natural-language edit request plus the current form
components into an updated components array. It is wrapped behind the
SchemaGenerator protocol so the orchestrator can be driven by any
implementation, including deterministic fakes.
"""

import json
import logging
import re
from typing import Any, Protocol

from agents import (
    Agent,
    AgentOutputSchema,
    InputGuardrailTripwireTriggered,
    Model,
    OpenAIChatCompletionsModel,
    OutputGuardrailTripwireTriggered,
    Runner,
    ToolCallOutputItem,
)
from openai import AsyncOpenAI
from pydantic import ValidationError

from form_assist.agents.instructions import (
    build_form_assistant_instructions,
    build_user_prompt,
)
from form_assist.config import FormAssistConfig, get_config
from form_assist.errors import GenerationFailed, InputMalformed
from form_assist.guardrails.input_guardrails import message_safety_guardrail
from form_assist.guardrails.output_guardrails import component_structure_guardrail
from form_assist.models.assist import FormAssistOutput, GeneratedComponents
from form_assist.tools.schema_tools import reduce_complexity_tool, validate_schema_tool


logger = logging.getLogger(__name__)

JSON_BLOCK_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```")


class SchemaGenerator(Protocol):
    """The external capability that proposes updated form components."""

    def is_available(self) -> bool:
        """Whether the capability is configured and can be called."""
        ...

    async def generate(
        self,
        message: str,
        components: list[dict[str, Any]],
        complexity: int,
    ) -> GeneratedComponents:
        """Propose an updated components array for the user's request."""
        ...


def create_form_assistant_agent(
    current_complexity: int,
    config: FormAssistConfig | None = None,
    model: str | Model | None = None,
    enable_guardrails: bool | None = None,
    structured_output: bool = True,
) -> Agent[FormAssistConfig]:
    """
    Create the Form Assistant agent.

    Args:
        current_complexity: Complexity of the form being edited.
        config: Settings to use. If None, uses the global configuration.
        model: Model name or Model instance. If None, uses config.default_model.
        enable_guardrails: Whether to attach guardrails. If None, uses config.
        structured_output: Whether the agent answers with FormAssistOutput
            structured output, or with a fenced JSON block in plain text.

    Returns:
        Configured Agent instance.
    """
    config = config or get_config()
    model = model or config.default_model
    if enable_guardrails is None:
        enable_guardrails = config.enable_guardrails

    instructions = build_form_assistant_instructions(
        current_complexity=current_complexity,
        max_complexity=config.max_schema_complexity,
        structured_output=structured_output,
    )

    input_guardrails = [message_safety_guardrail] if enable_guardrails else []
    output_guardrails = []
    if enable_guardrails and structured_output:
        output_guardrails.append(component_structure_guardrail)

    return Agent[FormAssistConfig](
        name="Form Assistant",
        instructions=instructions,
        model=model,
        model_settings=config.get_model_settings(),
        tools=[validate_schema_tool, reduce_complexity_tool],
        output_type=(
            AgentOutputSchema(FormAssistOutput, strict_json_schema=False)
            if structured_output
            else None
        ),
        input_guardrails=input_guardrails,
        output_guardrails=output_guardrails,
    )


def parse_assistant_text(text: str) -> FormAssistOutput:
    """
    Parse a plain-text answer carrying a fenced JSON block.

    Raises:
        GenerationFailed: If no JSON block is present or it lacks components.
    """
    match = JSON_BLOCK_PATTERN.search(text)
    if not match:
        raise GenerationFailed("AI response did not contain valid schema updates")

    try:
        data = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise GenerationFailed(f"AI response parsing failed: {e}") from e

    if not isinstance(data, dict):
        raise GenerationFailed("AI response JSON must be an object")

    if not data.get("explanation"):
        data["explanation"] = JSON_BLOCK_PATTERN.sub("", text).strip()

    try:
        return FormAssistOutput.model_validate(data)
    except ValidationError as e:
        raise GenerationFailed(f"AI response did not match the expected format: {e}") from e


def summarize_tool_outputs(outputs: list[Any]) -> list[str]:
    """Turn raw self-check tool outputs into one summary line per call."""
    usage = []
    for output in outputs:
        try:
            data = json.loads(output) if isinstance(output, str) else output
        except json.JSONDecodeError:
            continue
        if not isinstance(data, dict):
            continue

        summary = data.get("summary") or "completed"
        if "current_complexity" in data:
            usage.append(f"Complexity analysis: {summary}")
        else:
            usage.append(f"Schema validation: {summary}")
    return usage


class AgentSchemaGenerator:
    """SchemaGenerator backed by an OpenAI Agents SDK run."""

    def __init__(
        self,
        config: FormAssistConfig | None = None,
        model: str | Model | None = None,
        structured_output: bool | None = None,
    ):
        self.config = config or get_config()
        self.model = model
        if structured_output is None:
            structured_output = self.config.structured_output
        self.structured_output = structured_output

    def is_available(self) -> bool:
        return self.config.ai_enabled

    def _resolve_model(self) -> str | Model:
        if self.model is not None:
            return self.model
        client = AsyncOpenAI(
            api_key=self.config.openai_api_key,
            base_url=self.config.openai_base_url,
        )
        return OpenAIChatCompletionsModel(
            model=self.config.default_model,
            openai_client=client,
        )

    async def generate(
        self,
        message: str,
        components: list[dict[str, Any]],
        complexity: int,
    ) -> GeneratedComponents:
        agent = create_form_assistant_agent(
            current_complexity=complexity,
            config=self.config,
            model=self._resolve_model(),
            structured_output=self.structured_output,
        )
        prompt = build_user_prompt(message, components)

        try:
            result = await Runner.run(agent, prompt, context=self.config)
        except InputGuardrailTripwireTriggered as e:
            info = e.guardrail_result.output.output_info or {}
            issues = info.get("issues", []) if isinstance(info, dict) else []
            raise InputMalformed(
                "Your request was rejected by safety checks. Please rephrase it.",
                errors=issues,
            ) from e
        except OutputGuardrailTripwireTriggered as e:
            info = e.guardrail_result.output.output_info or {}
            errors = info.get("errors", []) if isinstance(info, dict) else []
            logger.warning(f"AI output failed structure guardrail: {errors}")
            raise GenerationFailed(
                "AI response did not contain a valid form schema"
                + (f": {'; '.join(errors)}" if errors else "")
            ) from e

        tool_usage = summarize_tool_outputs(
            [item.output for item in result.new_items if isinstance(item, ToolCallOutputItem)]
        )

        if isinstance(result.final_output, FormAssistOutput):
            output = result.final_output
        elif isinstance(result.final_output, str):
            output = parse_assistant_text(result.final_output)
        else:
            raise GenerationFailed(f"Unexpected output type: {type(result.final_output)}")

        return GeneratedComponents(output=output, tool_usage=tool_usage)
