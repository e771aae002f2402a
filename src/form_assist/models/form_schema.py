"""
Form schema models.

These models describe the structural shape of a FormIO-style form
document. They are permissive on purpose: any property not listed here
passes through untouched, and the component catalog is not enumerated.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


FORM_TYPES = ("form", "wizard")


class ComponentValidation(BaseModel):
    """Validation rules attached to a component."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    required: bool | None = Field(default=None, description="Whether a value is required")
    pattern: str | None = Field(default=None, description="Regex the value must match")
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")
    min: float | None = Field(default=None, description="Minimum numeric value")
    max: float | None = Field(default=None, description="Maximum numeric value")
    custom: str | None = Field(default=None, description="Custom validation expression")


class ComponentConditional(BaseModel):
    """Visibility rule referencing another component key."""

    model_config = ConfigDict(extra="allow")

    show: bool | None = None
    when: str | None = Field(default=None, description="Key of the component to watch")
    eq: Any | None = Field(default=None, description="Value that triggers the rule")


class FormComponent(BaseModel):
    """A single node of the form tree."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str | None = Field(default=None, description="Component type tag, e.g. textfield")
    key: str | None = Field(default=None, description="Identifier, unique across the form")
    label: str | None = Field(default=None, description="Display label")
    input: bool | None = Field(default=None, description="Whether the component collects a value")
    validation: ComponentValidation | None = Field(default=None, alias="validate")
    conditional: ComponentConditional | None = None

    components: list["FormComponent"] | None = None
    columns: list["FormColumn"] | None = None
    rows: list[list["FormCell"]] | None = None


class FormColumn(BaseModel):
    """One column of a columns layout."""

    model_config = ConfigDict(extra="allow")

    components: list[FormComponent] | None = None


class FormCell(BaseModel):
    """One cell of a table layout row."""

    model_config = ConfigDict(extra="allow")

    components: list[FormComponent] | None = None


class FormSchema(BaseModel):
    """Root form document."""

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    name: str | None = None
    path: str | None = None
    type: Literal["form", "wizard"] | None = None
    display: Literal["form", "wizard"] | None = None
    components: list[FormComponent] = Field(..., description="Root-level components")


FormComponent.model_rebuild()
