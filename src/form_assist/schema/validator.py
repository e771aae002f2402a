"""
Structural validation of form schemas.
"""

from typing import Any

from pydantic import ValidationError

from form_assist.models.form_schema import FormSchema
from form_assist.models.validation_result import ValidationResult


def _format_error(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location or 'schema'}: {error.get('msg', 'Invalid value')}"


def validate_form_schema(candidate: Any) -> ValidationResult:
    """
    Validate an untrusted form schema document.

    Checks that the document is an object with a ``components`` array,
    that ``type`` and ``display`` (when present) are recognized form
    tags, and that nested containers have the expected shape. Component
    types themselves are not enumerated.

    Args:
        candidate: Arbitrary JSON-shaped data.

    Returns:
        ValidationResult. On success ``data`` is the input object, unchanged.
    """
    try:
        FormSchema.model_validate(candidate)
    except ValidationError as e:
        errors = [_format_error(error) for error in e.errors()]
        return ValidationResult(valid=False, errors=errors or ["Schema validation failed"])

    return ValidationResult(valid=True, data=candidate)
