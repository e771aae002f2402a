"""
Data models for Form Assist.

This module contains Pydantic models for:
- Form schema structure (components, columns, table cells)
- Assist requests and structured agent output
- Validation, safety and complexity reports
"""

from form_assist.models.assist import (
    FormAssistOutput,
    FormAssistRequest,
    FormAssistResult,
    GeneratedComponents,
)
from form_assist.models.form_schema import (
    FORM_TYPES,
    ComponentConditional,
    ComponentValidation,
    FormCell,
    FormColumn,
    FormComponent,
    FormSchema,
)
from form_assist.models.validation_result import (
    ComplexityReduction,
    SafetyVerdict,
    SchemaAnalysis,
    ValidationResult,
)

__all__ = [
    # Form structure
    "FORM_TYPES",
    "ComponentConditional",
    "ComponentValidation",
    "FormCell",
    "FormColumn",
    "FormComponent",
    "FormSchema",
    # Assist request/response
    "FormAssistOutput",
    "FormAssistRequest",
    "FormAssistResult",
    "GeneratedComponents",
    # Reports
    "ComplexityReduction",
    "SafetyVerdict",
    "SchemaAnalysis",
    "ValidationResult",
]
