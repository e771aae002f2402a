"""
Result models for schema validation and safety checking.
"""

from typing import Any

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """Result of structural schema validation."""

    valid: bool = Field(..., description="Whether the schema is structurally valid")
    errors: list[str] = Field(
        default_factory=list, description="Human-readable validation errors"
    )
    data: dict[str, Any] | None = Field(
        default=None, description="The accepted schema, present only when valid"
    )

    @property
    def error_count(self) -> int:
        """Get the number of validation errors."""
        return len(self.errors)


class SafetyVerdict(BaseModel):
    """Result of comparing an original schema against a candidate."""

    valid: bool = Field(..., description="Whether the candidate passed every check")
    issues: list[str] = Field(default_factory=list, description="Every issue found")


class SchemaAnalysis(BaseModel):
    """Self-check report returned to the assistant while it drafts a schema."""

    valid: bool
    complexity: int
    max_complexity: int
    component_count: int
    duplicate_keys: list[str] = Field(default_factory=list)
    issues: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    summary: str


class ComplexityReduction(BaseModel):
    """Suggestions for bringing a schema under a complexity target."""

    current_complexity: int
    target_complexity: int
    reduction_needed: int
    component_types: dict[str, int] = Field(default_factory=dict)
    empty_containers: list[str] = Field(default_factory=list)
    unnecessary_nesting: list[str] = Field(default_factory=list)
    redundant_components: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    can_reduce: bool = False
    potential_reduction: int = 0
    summary: str
