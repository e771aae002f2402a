"""
Schema complexity accounting.

Complexity is the total number of components in a form, counted through
every nesting mechanism. It gates which forms the assistant accepts and
bounds the size of what it may hand back.
"""

from collections import Counter
from typing import Any

from form_assist.models.validation_result import ComplexityReduction
from form_assist.schema.traversal import iter_components


CONTAINER_TYPES = ("panel", "fieldset", "container")
FLATTENABLE_TYPES = ("panel", "fieldset")
MIN_HTML_CONTENT_LENGTH = 10


def calculate_schema_complexity(schema: dict[str, Any]) -> int:
    """Count every component in the schema at any depth."""
    return sum(1 for _ in iter_components(schema))


def is_schema_too_big_for_ai(schema: dict[str, Any], limit: int) -> bool:
    """Check whether a schema exceeds the assistant's complexity limit."""
    return calculate_schema_complexity(schema) > limit


def analyze_complexity_reduction(
    schema: dict[str, Any],
    target_complexity: int,
) -> ComplexityReduction:
    """
    Look for ways to bring a schema under a complexity target.

    Flags empty containers, near-empty HTML elements and panels or
    fieldsets wrapping a single child, and turns the findings into an
    ordered list of suggestions.

    Args:
        schema: Form schema to analyze.
        target_complexity: Complexity the schema should get down to.

    Returns:
        ComplexityReduction report.
    """
    current = calculate_schema_complexity(schema)
    component_types: Counter[str] = Counter()
    empty_containers: list[str] = []
    redundant: list[str] = []
    nesting: list[str] = []
    suggestions: list[str] = []

    for path, component in iter_components(schema):
        comp_type = component.get("type")
        component_types[str(comp_type)] += 1
        children = component.get("components")

        if comp_type in CONTAINER_TYPES and not children:
            empty_containers.append(path)
            suggestions.append(f"Remove empty {comp_type} container: {path}")

        if comp_type == "htmlelement":
            content = component.get("content")
            if not isinstance(content, str) or len(content.strip()) < MIN_HTML_CONTENT_LENGTH:
                redundant.append(path)
                suggestions.append(f"Remove minimal HTML element: {path}")

        if comp_type in FLATTENABLE_TYPES and isinstance(children, list) and len(children) == 1:
            nesting.append(path)
            suggestions.append(f"Consider removing single-child container: {path}")

    reduction_needed = current - target_complexity
    if reduction_needed > 0:
        suggestions.insert(0, f"Need to reduce complexity by {reduction_needed} components")
        if empty_containers:
            suggestions.append(f"Priority: Remove {len(empty_containers)} empty containers")
        if redundant:
            suggestions.append(f"Priority: Remove {len(redundant)} redundant components")
        if nesting:
            suggestions.append(f"Consider: Flatten {len(nesting)} single-child containers")
        if component_types["panel"] + component_types["fieldset"] > 3:
            suggestions.append("Consider consolidating multiple panels/fieldsets into fewer sections")

    if reduction_needed > 0:
        summary = f"Complexity reduction needed: {reduction_needed} components over limit"
    else:
        summary = "Schema complexity is within limits"

    return ComplexityReduction(
        current_complexity=current,
        target_complexity=target_complexity,
        reduction_needed=reduction_needed,
        component_types=dict(component_types),
        empty_containers=empty_containers,
        unnecessary_nesting=nesting,
        redundant_components=redundant,
        suggestions=suggestions,
        can_reduce=bool(suggestions),
        potential_reduction=len(empty_containers) + len(redundant),
        summary=summary,
    )
