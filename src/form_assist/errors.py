"""
Error types for Form Assist.

Every failure surfaced by the assistant pipeline is a FormAssistError
subclass carrying a message suitable for direct display and the HTTP
status the API layer maps it to.
"""


class FormAssistError(Exception):
    """Base class for all Form Assist failures."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class InputMalformed(FormAssistError):
    """The request body is not a valid assist request."""

    status_code = 400

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> dict:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class ComplexityExceeded(FormAssistError):
    """The current schema is larger than the assistant will accept."""

    status_code = 400

    def __init__(self, complexity: int, limit: int):
        super().__init__(
            f"Form is too complex for AI assistance. Current form has {complexity} "
            f"components, but AI assistance is limited to forms with up to {limit} "
            "components. Please simplify your form or request assistance for "
            "specific sections."
        )
        self.complexity = complexity
        self.limit = limit

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["complexity"] = self.complexity
        payload["maxComplexity"] = self.limit
        return payload


class CapabilityUnavailable(FormAssistError):
    """No generation capability is configured."""

    status_code = 503

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "AI assistance is not configured. Please contact your administrator."
        )


class GenerationFailed(FormAssistError):
    """The generation capability errored or returned unusable output."""

    status_code = 500


class GenerationTimeout(GenerationFailed):
    """The generation capability did not answer in time."""

    status_code = 504

    def __init__(self, timeout_seconds: float):
        super().__init__(
            f"AI assistance timed out after {timeout_seconds:g} seconds. "
            "Please try again or rephrase your request."
        )
        self.timeout_seconds = timeout_seconds


class SafetyCheckFailed(FormAssistError):
    """The candidate schema was rejected by the safety checker."""

    status_code = 422

    def __init__(self, issues: list[str]):
        super().__init__(
            "The AI generated solution was rejected by safety checks:\n"
            + "\n".join(f"- {issue}" for issue in issues)
        )
        self.issues = list(issues)

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["issues"] = self.issues
        return payload
