"""
Function tools for Form Assist.

These tools let the form assistant check its own work.
"""

from form_assist.tools.schema_tools import (
    reduce_complexity_json,
    reduce_complexity_tool,
    validate_schema_json,
    validate_schema_tool,
)

__all__ = [
    "reduce_complexity_json",
    "reduce_complexity_tool",
    "validate_schema_json",
    "validate_schema_tool",
]
