"""
Form Assist: AI-assisted form schema editing.

Describe a change to a form in plain language; get back an updated
schema for preview, checked for structure, size and data loss.

Simple Usage:
    from form_assist import assist_form

    result = await assist_form(
        "add a required email field after the name",
        current_schema,
    )

    print(result.markdown)
    updated = result.schema

Advanced Usage:
    from form_assist import FormAssistConfig, FormAssistOrchestrator

    orchestrator = FormAssistOrchestrator(
        config=FormAssistConfig(
            openai_api_key="sk-...",
            max_schema_complexity=30,
            safety_policy="fail-closed",
        ),
    )

    # Check a schema before asking for help
    report = orchestrator.validate_schema(current_schema)

    # Then request a change
    result = await orchestrator.generate(
        {"message": "group the address fields in a panel", "currentSchema": current_schema}
    )

Serving:
    from form_assist.api import create_app

    app = create_app()  # Starlette app with /ai/form-assist, /ai/validate-schema, /ai/limits

Tracing:
    from form_assist.tracing import setup_tracing

    # Report traces through logging
    setup_tracing(console=True, verbose=True)

    # Or write to file
    setup_tracing(file_path="traces.jsonl")
"""

from form_assist.orchestrator import (
    FormAssistOrchestrator,
    assist_form,
)
from form_assist.config import (
    FormAssistConfig,
    get_config,
    update_config,
)
from form_assist.errors import (
    CapabilityUnavailable,
    ComplexityExceeded,
    FormAssistError,
    GenerationFailed,
    GenerationTimeout,
    InputMalformed,
    SafetyCheckFailed,
)
from form_assist.models import (
    FormAssistRequest,
    FormAssistResult,
    FormSchema,
    SafetyVerdict,
    ValidationResult,
)
from form_assist.schema import (
    calculate_schema_complexity,
    extract_component_keys,
    find_duplicate_keys,
    is_schema_too_big_for_ai,
    validate_form_schema,
)
from form_assist.guardrails import check_safety
from form_assist.formatting import format_markdown_response
from form_assist.tracing import setup_tracing

__all__ = [
    # Main interface
    "FormAssistOrchestrator",
    "assist_form",
    # Configuration
    "FormAssistConfig",
    "get_config",
    "update_config",
    # Errors
    "FormAssistError",
    "InputMalformed",
    "ComplexityExceeded",
    "CapabilityUnavailable",
    "GenerationFailed",
    "GenerationTimeout",
    "SafetyCheckFailed",
    # Models
    "FormAssistRequest",
    "FormAssistResult",
    "FormSchema",
    "SafetyVerdict",
    "ValidationResult",
    # Schema utilities
    "validate_form_schema",
    "calculate_schema_complexity",
    "is_schema_too_big_for_ai",
    "extract_component_keys",
    "find_duplicate_keys",
    "check_safety",
    "format_markdown_response",
    # Tracing
    "setup_tracing",
]

__version__ = "0.1.0"
