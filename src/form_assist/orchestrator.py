"""
Form Assist Orchestrator.

This is the main entry point for Form Assist. Give it a user's request
and the current form schema; get back a markdown explanation and a
checked candidate schema, or a typed error.
"""

import asyncio
import copy
import logging
from typing import Any

from pydantic import ValidationError

from form_assist.agents.form_assistant import AgentSchemaGenerator, SchemaGenerator
from form_assist.config import FormAssistConfig, get_config
from form_assist.errors import (
    CapabilityUnavailable,
    ComplexityExceeded,
    FormAssistError,
    GenerationFailed,
    GenerationTimeout,
    InputMalformed,
    SafetyCheckFailed,
)
from form_assist.formatting import format_markdown_response
from form_assist.guardrails.safety import check_safety
from form_assist.models.assist import FormAssistRequest, FormAssistResult
from form_assist.schema.complexity import calculate_schema_complexity
from form_assist.schema.validator import validate_form_schema
from form_assist.tracing import setup_tracing, traced_operation


logger = logging.getLogger(__name__)


class FormAssistOrchestrator:
    """
    Runs AI assisted edits of a form schema.

    Pipeline per request:
        1. reject schemas above the complexity limit, without calling the model
        2. reject when no generation capability is available
        3. reject current schemas that fail structural validation
        4. ask the capability for updated components
        5. build the candidate schema from the current one
        6. safety check the candidate against the current schema
        7. render the markdown explanation

    Usage:
        orchestrator = FormAssistOrchestrator()

        result = await orchestrator.generate(
            FormAssistRequest(message="add an email field", currentSchema=schema)
        )
        print(result.markdown)
    """

    def __init__(
        self,
        config: FormAssistConfig | None = None,
        generator: SchemaGenerator | None = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Limits, safety policy and timeouts. If None, uses the
                global configuration.
            generator: Capability producing updated components. If None, an
                AgentSchemaGenerator built from config is used.
        """
        self.config = config or get_config()
        self.generator = generator or AgentSchemaGenerator(self.config)

        setup_tracing(
            enabled=self.config.enable_tracing,
            console=self.config.trace_to_console,
            file_path=self.config.trace_file,
        )

    def limits(self) -> dict[str, Any]:
        """Report the complexity limit and whether AI assistance is available."""
        return {
            "maxComplexity": self.config.max_schema_complexity,
            "aiEnabled": self.generator.is_available(),
        }

    def validate_schema(self, schema: Any) -> dict[str, Any]:
        """
        Validate a schema and report its complexity against the AI limit.

        Returns:
            Dict with valid, errors (only when invalid), complexity and
            exceedsAILimit.
        """
        validation = validate_form_schema(schema)
        complexity = calculate_schema_complexity(validation.data) if validation.data else 0

        report: dict[str, Any] = {
            "valid": validation.valid,
            "complexity": complexity,
            "exceedsAILimit": complexity > self.config.max_schema_complexity,
        }
        if not validation.valid:
            report["errors"] = validation.errors
        return report

    async def generate(
        self,
        request: FormAssistRequest | dict[str, Any],
        timeout: float | None = None,
    ) -> FormAssistResult:
        """
        Apply a natural-language edit request to the current schema.

        Args:
            request: The assist request, or its JSON body.
            timeout: Seconds to wait for the generation capability. If None,
                uses config.generation_timeout_seconds; zero or less waits
                indefinitely.

        Returns:
            FormAssistResult with the candidate schema and markdown.

        Raises:
            InputMalformed: If the request body or the current schema is invalid.
            ComplexityExceeded: If the current schema is above the limit.
            CapabilityUnavailable: If no generation capability is configured.
            GenerationTimeout: If the capability did not answer in time.
            GenerationFailed: If the capability errored or its output is unusable.
            SafetyCheckFailed: If the candidate failed safety checks under
                the fail-closed policy.
        """
        if not isinstance(request, FormAssistRequest):
            request = parse_request(request)

        current = request.current_schema
        complexity = calculate_schema_complexity(current)
        limit = self.config.max_schema_complexity
        if complexity > limit:
            logger.warning(f"Rejected AI assist request: complexity {complexity} exceeds {limit}")
            raise ComplexityExceeded(complexity, limit)

        if not self.generator.is_available():
            logger.warning("Rejected AI assist request: no generation capability configured")
            raise CapabilityUnavailable()

        current_validation = validate_form_schema(current)
        if not current_validation.valid:
            logger.warning(f"Rejected AI assist request: invalid current schema {current_validation.errors}")
            raise InputMalformed("The current form schema is invalid", errors=current_validation.errors)

        components = current["components"]

        if timeout is None:
            timeout = self.config.generation_timeout_seconds

        try:
            async with traced_operation("form_assist", {"complexity": str(complexity)}):
                generated = await asyncio.wait_for(
                    self.generator.generate(request.message, copy.deepcopy(components), complexity),
                    timeout=timeout if timeout > 0 else None,
                )
        except asyncio.TimeoutError:
            logger.warning(f"AI generation timed out after {timeout} seconds")
            raise GenerationTimeout(timeout) from None
        except FormAssistError:
            raise
        except Exception as e:
            logger.error(f"AI generation error: {e}")
            raise GenerationFailed(
                "Failed to generate AI assistance. Please try again or rephrase your request."
            ) from e

        output = generated.output
        candidate = copy.deepcopy(current)
        candidate["components"] = output.components

        validation = validate_form_schema(candidate)
        if not validation.valid:
            logger.warning(f"AI generated a structurally invalid schema: {validation.errors}")
            raise GenerationFailed(
                "AI response did not contain a valid form schema: "
                + "; ".join(validation.errors)
            )

        warnings = list(output.warnings)
        verdict = check_safety(
            current,
            candidate,
            max_complexity=limit,
            ceiling_multiplier=self.config.safety_ceiling_multiplier,
            removal_tolerance=self.config.key_removal_tolerance,
        )
        if not verdict.valid:
            logger.warning(f"AI generated solution failed safety checks: {verdict.issues}")
            if self.config.safety_policy == "fail-closed":
                raise SafetyCheckFailed(verdict.issues)
            warnings.extend(verdict.issues)

        candidate_complexity = calculate_schema_complexity(candidate)
        markdown = format_markdown_response(
            output.explanation,
            candidate_complexity,
            warnings,
            generated.tool_usage,
        )

        return FormAssistResult(
            explanation=output.explanation,
            markdown=markdown,
            schema=candidate,
            complexity=candidate_complexity,
            warnings=warnings,
        )


def parse_request(body: Any) -> FormAssistRequest:
    """
    Parse an assist request body.

    Raises:
        InputMalformed: If the body is not a valid request.
    """
    try:
        return FormAssistRequest.model_validate(body)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}"
            for error in e.errors()
        ]
        raise InputMalformed("Invalid AI assist request", errors=errors) from e


async def assist_form(
    message: str,
    current_schema: dict[str, Any],
    config: FormAssistConfig | None = None,
    timeout: float | None = None,
) -> FormAssistResult:
    """
    Convenience function to run one assist request.

    Example:
        >>> from form_assist import assist_form
        >>> result = await assist_form(
        ...     "add an email field",
        ...     {"components": [{"type": "textfield", "key": "name"}]},
        ... )
    """
    orchestrator = FormAssistOrchestrator(config=config)
    request = parse_request({"message": message, "currentSchema": current_schema})
    return await orchestrator.generate(request, timeout=timeout)
