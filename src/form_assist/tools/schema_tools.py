"""
Schema self-check tools.

Function tools the form assistant calls while drafting a schema. Each
tool is a thin wrapper over a plain function returning the same JSON.
"""

import json
from typing import Any

from agents import RunContextWrapper, function_tool

from form_assist.config import FormAssistConfig, get_config
from form_assist.guardrails.safety import analyze_schema
from form_assist.schema.complexity import analyze_complexity_reduction


def _load_schema(schema_text: str) -> Any:
    """Parse a schema argument; a bare components array is wrapped into a schema."""
    data = json.loads(schema_text)
    if isinstance(data, list):
        return {"components": data}
    return data


def _context_config(ctx: RunContextWrapper[Any]) -> FormAssistConfig:
    """The configuration the agent run was started with, or the global one."""
    if isinstance(ctx.context, FormAssistConfig):
        return ctx.context
    return get_config()


def validate_schema_json(
    schema_text: str,
    check_complexity: bool = True,
    max_complexity: int | None = None,
) -> str:
    """
    Validate a schema given as JSON text and report on it as JSON text.

    Args:
        schema_text: JSON of the form schema, or of its components array.
        check_complexity: Whether to warn when the complexity limit is exceeded.
        max_complexity: Limit to check against. Defaults to the configured limit.
    """
    if max_complexity is None:
        max_complexity = get_config().max_schema_complexity

    try:
        schema = _load_schema(schema_text)
    except json.JSONDecodeError as e:
        return json.dumps({
            "valid": False,
            "complexity": 0,
            "max_complexity": max_complexity,
            "component_count": 0,
            "duplicate_keys": [],
            "issues": [f"Invalid JSON: {str(e)}"],
            "warnings": [],
            "summary": "Schema validation failed due to invalid JSON",
        })

    analysis = analyze_schema(
        schema,
        max_complexity=max_complexity,
        check_complexity=check_complexity,
    )
    return analysis.model_dump_json(indent=2)


def reduce_complexity_json(schema_text: str, target_complexity: int | None = None) -> str:
    """
    Suggest complexity reductions for a schema given as JSON text.

    Args:
        schema_text: JSON of the form schema, or of its components array.
        target_complexity: Complexity to get down to. Defaults to the configured limit.
    """
    target = target_complexity if target_complexity is not None else get_config().max_schema_complexity

    try:
        schema = _load_schema(schema_text)
    except json.JSONDecodeError as e:
        return json.dumps({
            "current_complexity": 0,
            "target_complexity": target,
            "reduction_needed": 0,
            "suggestions": [f"Analysis error: Invalid JSON: {str(e)}"],
            "can_reduce": False,
            "summary": "Complexity analysis failed",
        })

    report = analyze_complexity_reduction(schema, target)
    return report.model_dump_json(indent=2)


@function_tool
async def validate_schema_tool(
    ctx: RunContextWrapper[Any],
    schema_text: str,
    check_complexity: bool = True,
) -> str:
    """
    Validate a FormIO schema for correctness, complexity and duplicate keys.

    Use this to check the current form and your updated form before
    finalizing changes.

    Args:
        schema_text: JSON string of the form schema, or of its components array.
            Example: {"components": [{"type": "textfield", "key": "name"}]}
        check_complexity: Whether to warn when the complexity limit is exceeded.

    Returns:
        JSON string with valid, complexity, max_complexity, component_count,
        duplicate_keys, issues, warnings and a one-line summary.
    """
    config = _context_config(ctx)
    return validate_schema_json(
        schema_text,
        check_complexity=check_complexity,
        max_complexity=config.max_schema_complexity,
    )


@function_tool
async def reduce_complexity_tool(
    ctx: RunContextWrapper[Any],
    schema_text: str,
    target_complexity: int | None = None,
) -> str:
    """
    Suggest ways to reduce a FormIO schema's complexity while keeping its purpose.

    Use this when a schema exceeds the complexity limit.

    Args:
        schema_text: JSON string of the form schema, or of its components array.
        target_complexity: Complexity to get down to. Defaults to the configured limit.

    Returns:
        JSON string with the current and target complexity, component type counts,
        empty containers, redundant components, ordered suggestions and a summary.
    """
    if target_complexity is None:
        target_complexity = _context_config(ctx).max_schema_complexity
    return reduce_complexity_json(schema_text, target_complexity)
