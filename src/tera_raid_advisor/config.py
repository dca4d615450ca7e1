"""
Configuration model for the raid advisor.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

SUPPORTED_PROVIDERS = ("gemini", "anthropic")


class AdvisorConfig(BaseModel):
    """Settings for the advisory request and the autocomplete list.

    The service credential is not part of the configuration; each client
    reads it from its own environment variable.
    """

    # LLM Configuration
    llm_provider: str = Field(
        default="gemini",
        description="LLM backend provider ('gemini' or 'anthropic')"
    )
    llm_model: str | None = Field(
        default=None,
        description="Model identifier for the LLM; the provider's default model when unset"
    )
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature; provider default when unset"
    )
    max_tokens: int | None = Field(
        default=None,
        ge=1,
        description="Maximum tokens in the LLM response; provider default when unset"
    )

    # Autocomplete
    suggestion_limit: int = Field(
        default=5,
        ge=1,
        description="Maximum number of name suggestions shown under the input"
    )
    dataset_path: Path | None = Field(
        default=None,
        description="YAML reference list; the bundled dataset when unset"
    )

    @field_validator("llm_provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        """Ensure the provider is one we have a client for."""
        v = v.lower().strip()
        if v not in SUPPORTED_PROVIDERS:
            raise ValueError(
                f"llm_provider must be one of: {', '.join(SUPPORTED_PROVIDERS)}"
            )
        return v
