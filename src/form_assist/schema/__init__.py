"""
Form schema utilities: traversal, validation and complexity accounting.
"""

from form_assist.schema.complexity import (
    analyze_complexity_reduction,
    calculate_schema_complexity,
    is_schema_too_big_for_ai,
)
from form_assist.schema.traversal import (
    extract_component_keys,
    find_duplicate_keys,
    iter_components,
)
from form_assist.schema.validator import validate_form_schema

__all__ = [
    "analyze_complexity_reduction",
    "calculate_schema_complexity",
    "extract_component_keys",
    "find_duplicate_keys",
    "is_schema_too_big_for_ai",
    "iter_components",
    "validate_form_schema",
]
