"""Tests for Form Assist data models."""

import pytest
from pydantic import ValidationError

from form_assist.models.assist import (
    FormAssistOutput,
    FormAssistRequest,
    FormAssistResult,
    GeneratedComponents,
)
from form_assist.models.form_schema import FormComponent, FormSchema
from form_assist.models.validation_result import ValidationResult


class TestFormAssistRequest:
    """Tests for FormAssistRequest model."""

    def test_basic_request(self):
        """Test creating a request from its JSON body."""
        request = FormAssistRequest.model_validate(
            {"message": "add an email field", "currentSchema": {"components": []}}
        )
        assert request.message == "add an email field"
        assert request.current_schema == {"components": []}

    def test_populate_by_name(self):
        """Test the python field name is accepted as well as the alias."""
        request = FormAssistRequest(message="x", current_schema={"components": []})
        assert request.current_schema == {"components": []}

    def test_empty_message_rejected(self):
        """Test an empty message is rejected."""
        with pytest.raises(ValidationError):
            FormAssistRequest(message="", currentSchema={"components": []})

    def test_long_message_rejected(self):
        """Test messages above 1000 characters are rejected."""
        with pytest.raises(ValidationError):
            FormAssistRequest(message="a" * 1001, currentSchema={"components": []})

    def test_message_at_limit_accepted(self):
        """Test a message of exactly 1000 characters is accepted."""
        request = FormAssistRequest(message="a" * 1000, currentSchema={})
        assert len(request.message) == 1000

    def test_missing_schema_rejected(self):
        """Test currentSchema is required."""
        with pytest.raises(ValidationError):
            FormAssistRequest.model_validate({"message": "add a field"})


class TestFormAssistOutput:
    """Tests for the structured agent output."""

    def test_warnings_default_empty(self):
        """Test warnings default to an empty list."""
        output = FormAssistOutput(explanation="Added.", components=[])
        assert output.warnings == []

    def test_generated_components(self):
        """Test wrapping output with tool usage."""
        generated = GeneratedComponents(
            output=FormAssistOutput(explanation="Added.", components=[{"key": "a"}]),
            tool_usage=["Schema validation: ok"],
        )
        assert generated.output.components == [{"key": "a"}]
        assert generated.tool_usage == ["Schema validation: ok"]


class TestFormAssistResult:
    """Tests for FormAssistResult."""

    def test_to_response_without_warnings(self):
        """Test warnings are omitted when empty."""
        result = FormAssistResult(
            explanation="Added.",
            markdown="## AI Form Assistant",
            schema={"components": []},
            complexity=0,
        )
        assert result.to_response() == {
            "markdown": "## AI Form Assistant",
            "schema": {"components": []},
            "complexity": 0,
        }

    def test_to_response_with_warnings(self):
        """Test warnings are included when present."""
        result = FormAssistResult(
            explanation="Added.",
            markdown="md",
            schema={"components": []},
            complexity=0,
            warnings=["check labels"],
        )
        assert result.to_response()["warnings"] == ["check labels"]


class TestFormSchema:
    """Tests for the form structure models."""

    def test_extra_properties_preserved(self):
        """Test unknown properties pass through."""
        schema = FormSchema.model_validate(
            {"components": [{"type": "textfield", "key": "a", "tableView": True}], "settings": {}}
        )
        assert schema.model_extra == {"settings": {}}
        assert schema.components[0].model_extra == {"tableView": True}

    def test_validate_alias(self):
        """Test validation rules are read from the validate property."""
        component = FormComponent.model_validate(
            {"type": "textfield", "key": "a", "validate": {"required": True, "minLength": 2}}
        )
        assert component.validation.required is True
        assert component.validation.min_length == 2

    def test_nested_columns_and_rows(self):
        """Test columns and table rows are parsed recursively."""
        component = FormComponent.model_validate({
            "type": "columns",
            "columns": [{"components": [{"type": "textfield", "key": "a"}]}],
            "rows": [[{"components": [{"type": "number", "key": "b"}]}]],
        })
        assert component.columns[0].components[0].key == "a"
        assert component.rows[0][0].components[0].key == "b"

    def test_unknown_display_rejected(self):
        """Test display must be form or wizard."""
        with pytest.raises(ValidationError):
            FormSchema.model_validate({"display": "pdf", "components": []})


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_valid_result(self):
        """Test a valid result."""
        result = ValidationResult(valid=True, data={"components": []})
        assert result.valid is True
        assert result.error_count == 0

    def test_invalid_result(self):
        """Test an invalid result with errors."""
        result = ValidationResult(valid=False, errors=["components: Field required"])
        assert result.data is None
        assert result.error_count == 1
