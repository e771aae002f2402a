"""
Configuration module for Form Assist.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from agents import ModelSettings

# Load environment variables
load_dotenv()


SAFETY_POLICIES = ("fail-open", "fail-closed")


@dataclass
class FormAssistConfig:
    """Configuration settings for Form Assist."""

    # OpenAI settings
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    default_model: str = "gpt-4o-mini"
    default_temperature: float = 0.3
    default_max_tokens: int | None = None
    structured_output: bool = True

    # Complexity and safety policy
    max_schema_complexity: int = 50
    safety_ceiling_multiplier: float = 2.0
    key_removal_tolerance: float = 0.5
    safety_policy: str = "fail-open"  # fail-open or fail-closed
    generation_timeout_seconds: float = 60.0

    # HTTP server settings
    server_host: str = "0.0.0.0"
    server_port: int = 3001

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_port: int = 8080

    # Guardrail settings
    enable_guardrails: bool = True

    # Tracing settings
    enable_tracing: bool = True
    trace_to_console: bool = False
    trace_file: str | None = None

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.safety_policy not in SAFETY_POLICIES:
            raise ValueError(
                f"Unknown safety policy: {self.safety_policy}. "
                f"Use one of: {', '.join(SAFETY_POLICIES)}."
            )

    @property
    def ai_enabled(self) -> bool:
        """Whether the generation capability has credentials configured."""
        return bool(self.openai_api_key)

    @property
    def safety_ceiling(self) -> int:
        """Hard complexity ceiling applied to generated candidates."""
        return int(self.max_schema_complexity * self.safety_ceiling_multiplier)

    def get_model_settings(self) -> ModelSettings:
        """Get ModelSettings instance with configured defaults."""
        return ModelSettings(
            temperature=self.default_temperature,
            max_tokens=self.default_max_tokens,
        )

    @classmethod
    def from_env(cls) -> "FormAssistConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", _defaults.openai_api_key),
            openai_base_url=os.getenv("OPENAI_BASE_URL", _defaults.openai_base_url),
            default_model=os.getenv("OPENAI_MODEL", _defaults.default_model),
            default_temperature=float(os.getenv("FORM_ASSIST_TEMPERATURE", str(_defaults.default_temperature))),
            structured_output=os.getenv("FORM_ASSIST_STRUCTURED_OUTPUT", str(_defaults.structured_output).lower()).lower() == "true",
            max_schema_complexity=int(os.getenv("FORM_ASSIST_MAX_COMPLEXITY", str(_defaults.max_schema_complexity))),
            safety_ceiling_multiplier=float(os.getenv("FORM_ASSIST_CEILING_MULTIPLIER", str(_defaults.safety_ceiling_multiplier))),
            key_removal_tolerance=float(os.getenv("FORM_ASSIST_REMOVAL_TOLERANCE", str(_defaults.key_removal_tolerance))),
            safety_policy=os.getenv("FORM_ASSIST_SAFETY_POLICY", _defaults.safety_policy),
            generation_timeout_seconds=float(os.getenv("FORM_ASSIST_TIMEOUT", str(_defaults.generation_timeout_seconds))),
            server_host=os.getenv("FORM_ASSIST_HOST", _defaults.server_host),
            server_port=int(os.getenv("FORM_ASSIST_PORT", str(_defaults.server_port))),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            enable_guardrails=os.getenv("FORM_ASSIST_ENABLE_GUARDRAILS", str(_defaults.enable_guardrails).lower()).lower() == "true",
            enable_tracing=os.getenv("OPENAI_AGENTS_DISABLE_TRACING", "0" if _defaults.enable_tracing else "1") != "1",
            trace_to_console=os.getenv("FORM_ASSIST_TRACE_CONSOLE", str(_defaults.trace_to_console).lower()).lower() == "true",
            trace_file=os.getenv("FORM_ASSIST_TRACE_FILE", _defaults.trace_file),
            log_level=os.getenv("FORM_ASSIST_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = FormAssistConfig.from_env()


def get_config() -> FormAssistConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormAssistConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
