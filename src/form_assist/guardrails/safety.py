"""
Safety checks for AI generated schemas.

The safety checker compares the schema a user started from with the
candidate the assistant produced. It knows nothing about what the user
asked for; it only flags structural and quantitative risks.
"""

from typing import Any

from form_assist.models.validation_result import SafetyVerdict, SchemaAnalysis
from form_assist.schema.complexity import calculate_schema_complexity
from form_assist.schema.traversal import extract_component_keys, find_duplicate_keys
from form_assist.schema.validator import validate_form_schema


DEFAULT_MAX_COMPLEXITY = 50
DEFAULT_CEILING_MULTIPLIER = 2.0
DEFAULT_REMOVAL_TOLERANCE = 0.5


def find_removed_keys(original: dict[str, Any], candidate: dict[str, Any]) -> list[str]:
    """Keys present in the original but absent from the candidate, in original order."""
    remaining = set(extract_component_keys(candidate))
    removed: list[str] = []
    for key in extract_component_keys(original):
        if key not in remaining and key not in removed:
            removed.append(key)
    return removed


def check_safety(
    original: dict[str, Any],
    candidate: dict[str, Any],
    *,
    max_complexity: int = DEFAULT_MAX_COMPLEXITY,
    ceiling_multiplier: float = DEFAULT_CEILING_MULTIPLIER,
    removal_tolerance: float = DEFAULT_REMOVAL_TOLERANCE,
) -> SafetyVerdict:
    """
    Check whether a candidate schema is a safe replacement for the original.

    Every check runs and every issue is reported:
    1. structural validity of the candidate
    2. candidate complexity against the hard ceiling
       (``max_complexity * ceiling_multiplier``)
    3. removed keys against ``removal_tolerance`` of the original keys
    4. duplicate keys anywhere in the candidate

    Args:
        original: The schema the user started from.
        candidate: The proposed replacement.
        max_complexity: Soft complexity limit for AI assistance.
        ceiling_multiplier: Multiplier giving the hard ceiling.
        removal_tolerance: Fraction of original keys whose removal is flagged.

    Returns:
        SafetyVerdict, valid only when no issue was found.
    """
    issues: list[str] = []

    validation = validate_form_schema(candidate)
    if not validation.valid:
        issues.extend(validation.errors)

    ceiling = int(max_complexity * ceiling_multiplier)
    complexity = calculate_schema_complexity(candidate)
    if complexity > ceiling:
        issues.append(
            f"Solution is too complex ({complexity} components, "
            f"maximum allowed is {ceiling})"
        )

    original_keys = set(extract_component_keys(original))
    removed = find_removed_keys(original, candidate)
    if removed and len(removed) >= len(original_keys) * removal_tolerance:
        issues.append(
            f"Solution removes too many existing form fields: {', '.join(removed)}. "
            "This may cause significant data loss."
        )

    duplicates = find_duplicate_keys(candidate)
    if duplicates:
        issues.append(
            f"Solution contains duplicate component keys: {', '.join(duplicates)}"
        )

    return SafetyVerdict(valid=len(issues) == 0, issues=issues)


def analyze_schema(
    schema: Any,
    max_complexity: int = DEFAULT_MAX_COMPLEXITY,
    check_complexity: bool = True,
) -> SchemaAnalysis:
    """
    Self-check report for a schema draft.

    Combines structural validation, complexity and duplicate keys into
    one report with a one-line summary.
    """
    validation = validate_form_schema(schema)
    complexity = calculate_schema_complexity(schema) if isinstance(schema, dict) else 0
    duplicates = find_duplicate_keys(schema) if isinstance(schema, dict) else []
    keys = extract_component_keys(schema) if isinstance(schema, dict) else []

    issues = list(validation.errors)
    warnings: list[str] = []

    if check_complexity and complexity > max_complexity:
        warnings.append(
            f"Schema complexity ({complexity}) exceeds recommended limit ({max_complexity})"
        )

    if duplicates:
        warnings.append(f"Found duplicate component keys: {', '.join(duplicates)}")
        issues.append("Duplicate component keys detected")

    valid = validation.valid and not duplicates
    if valid:
        summary = f"Schema is valid with {complexity} components"
    else:
        summary = f"Schema has {len(issues)} issues"

    return SchemaAnalysis(
        valid=valid,
        complexity=complexity,
        max_complexity=max_complexity,
        component_count=len(keys),
        duplicate_keys=duplicates,
        issues=issues,
        warnings=warnings,
        summary=summary,
    )
