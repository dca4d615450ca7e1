"""
LLM clients for the raid advisor.

Provides one async interface over Google's Gemini API and Anthropic's
Claude API, plus a mock client for testing. Every client exposes:

    async def generate(prompt, system_instruction=None, max_tokens=None) -> str
"""

import logging
import os
from typing import Any

from .config import AdvisorConfig

logger = logging.getLogger("tera-raid-advisor")

# Provider SDKs, stored at module level so tests can patch them
try:
    from google import genai as _genai_module
    from google.genai import errors as _genai_errors
    from google.genai import types as _genai_types
    _HAS_GENAI = True
except ImportError:
    _genai_module = None  # type: ignore[assignment]
    _genai_errors = None  # type: ignore[assignment]
    _genai_types = None  # type: ignore[assignment]
    _HAS_GENAI = False

try:
    from anthropic import AsyncAnthropic
    import anthropic as _anthropic_module
    _HAS_ANTHROPIC = True
except ImportError:
    AsyncAnthropic = None  # type: ignore[assignment,misc]
    _anthropic_module = None  # type: ignore[assignment]
    _HAS_ANTHROPIC = False


DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-5-20250929"


# ---------------------------------------------------------------------------
# Custom Exceptions
# ---------------------------------------------------------------------------


class LLMClientError(Exception):
    """Base exception for LLM client errors."""
    pass


class LLMConfigurationError(LLMClientError):
    """Raised when LLM client is misconfigured."""
    pass


class LLMAPIError(LLMClientError):
    """Raised when the LLM API returns an error."""
    pass


class LLMRateLimitError(LLMClientError):
    """Raised when rate limit is exceeded."""
    pass


class LLMDependencyError(LLMClientError):
    """Raised when required dependencies are missing."""
    pass


# ---------------------------------------------------------------------------
# Mock LLM Client (for testing)
# ---------------------------------------------------------------------------


class MockLLMClient:
    """Mock LLM client for testing purposes.

    Returns configurable canned responses instead of making real API calls,
    and records every call so tests can assert how often the network would
    have been hit.

    Args:
        responses: List of responses to return in order. When exhausted,
            cycles back to the first response.
        default_response: Response when the responses list is empty.
        error: Exception to raise from every call instead of answering.

    Example:
        >>> mock = MockLLMClient(responses=["First response", "Second response"])
        >>> await mock.generate("prompt")
        'First response'
        >>> await mock.generate("prompt")
        'Second response'
    """

    def __init__(
        self,
        responses: list[str] | None = None,
        default_response: str = "[]",
        error: Exception | None = None,
    ) -> None:
        self.responses = responses or []
        self.default_response = default_response
        self.error = error
        self.call_count = 0
        self.calls: list[dict[str, Any]] = []

    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Return the next canned response and record the call."""
        self.calls.append({
            "prompt": prompt,
            "system_instruction": system_instruction,
            "max_tokens": max_tokens,
        })
        self.call_count += 1

        if self.error is not None:
            raise self.error

        if not self.responses:
            return self.default_response

        response_index = (self.call_count - 1) % len(self.responses)
        return self.responses[response_index]

    def reset(self) -> None:
        """Reset call history."""
        self.call_count = 0
        self.calls.clear()


# ---------------------------------------------------------------------------
# Gemini LLM Client
# ---------------------------------------------------------------------------


class GeminiLLMClient:
    """Google Gemini client implementing the LLM client interface.

    Args:
        api_key: Gemini API key. If None, reads from GEMINI_API_KEY env var.
        model: Model identifier (e.g., "gemini-2.5-flash").
        temperature: Sampling temperature, or None for the model default.
        default_max_tokens: Output token cap, or None for the model default.

    Raises:
        LLMDependencyError: If the google-genai package is not installed.
        LLMConfigurationError: If the API key is missing.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_GEMINI_MODEL,
        temperature: float | None = None,
        default_max_tokens: int | None = None,
    ) -> None:
        if not _HAS_GENAI:
            raise LLMDependencyError(
                "The 'google-genai' package is required to use GeminiLLMClient. "
                "Install it with: pip install google-genai"
            )

        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise LLMConfigurationError(
                "Gemini API key is required. Provide it via the 'api_key' parameter "
                "or set the GEMINI_API_KEY environment variable."
            )

        self.model = model
        self.temperature = temperature
        self.default_max_tokens = default_max_tokens
        self.client = _genai_module.Client(api_key=self.api_key)

        logger.info(f"Initialized GeminiLLMClient with model={model}")

    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate text from a prompt using the Gemini API.

        Raises:
            LLMAPIError: If the API returns an error.
            LLMRateLimitError: If rate limit is exceeded.
        """
        if max_tokens is None:
            max_tokens = self.default_max_tokens

        config_kwargs: dict[str, Any] = {}
        if system_instruction:
            config_kwargs["system_instruction"] = system_instruction
        if self.temperature is not None:
            config_kwargs["temperature"] = self.temperature
        if max_tokens is not None:
            config_kwargs["max_output_tokens"] = max_tokens

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=_genai_types.GenerateContentConfig(**config_kwargs),
            )
            response_text = response.text or ""

            logger.debug(f"Generated {len(response_text)} chars with model {self.model}")
            return response_text

        except _genai_errors.APIError as e:
            if getattr(e, "code", None) == 429:
                logger.error(f"Rate limit exceeded: {e}")
                raise LLMRateLimitError(f"Rate limit exceeded: {e}") from e
            logger.error(f"Gemini API error: {e}")
            raise LLMAPIError(f"API error: {e}") from e

        except Exception as e:
            logger.error(f"Unexpected error in generate(): {e}")
            raise LLMAPIError(f"Unexpected error: {e}") from e


# ---------------------------------------------------------------------------
# Anthropic LLM Client
# ---------------------------------------------------------------------------


class AnthropicLLMClient:
    """Anthropic API client implementing the LLM client interface.

    Args:
        api_key: Anthropic API key. If None, reads from ANTHROPIC_API_KEY env var.
        model: Model identifier (e.g., "claude-sonnet-4-5-20250929").
        temperature: Sampling temperature, or None for the model default.
        default_max_tokens: Default max tokens if not specified in generate().

    Raises:
        LLMDependencyError: If anthropic package is not installed.
        LLMConfigurationError: If API key is missing.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_ANTHROPIC_MODEL,
        temperature: float | None = None,
        default_max_tokens: int = 4096,
    ) -> None:
        if not _HAS_ANTHROPIC:
            raise LLMDependencyError(
                "The 'anthropic' package is required to use AnthropicLLMClient. "
                "Install it with: pip install anthropic"
            )

        self._anthropic_module = _anthropic_module

        self.api_key = api_key or os.getenv("ANTHROPIC_API_KEY")
        if not self.api_key:
            raise LLMConfigurationError(
                "Anthropic API key is required. Provide it via the 'api_key' parameter "
                "or set the ANTHROPIC_API_KEY environment variable."
            )

        self.model = model
        self.temperature = temperature
        self.default_max_tokens = default_max_tokens
        self.client = AsyncAnthropic(api_key=self.api_key)

        logger.info(
            f"Initialized AnthropicLLMClient with model={model}, "
            f"default_max_tokens={default_max_tokens}"
        )

    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate text from a prompt using the Anthropic API.

        Raises:
            LLMAPIError: If the API returns an error.
            LLMRateLimitError: If rate limit is exceeded.
        """
        if max_tokens is None:
            max_tokens = self.default_max_tokens

        try:
            create_kwargs: dict[str, Any] = {
                "model": self.model,
                "max_tokens": max_tokens,
                "messages": [{"role": "user", "content": prompt}],
            }
            if system_instruction:
                create_kwargs["system"] = system_instruction
            if self.temperature is not None:
                create_kwargs["temperature"] = self.temperature

            message = await self.client.messages.create(**create_kwargs)

            # The response content is a list of content blocks
            text_blocks = [
                block.text
                for block in message.content
                if hasattr(block, "text")
            ]
            response_text = "".join(text_blocks)

            logger.debug(
                f"Generated {len(response_text)} chars with model {self.model} "
                f"(tokens: {message.usage.input_tokens} in, {message.usage.output_tokens} out)"
            )

            return response_text

        except self._anthropic_module.RateLimitError as e:
            logger.error(f"Rate limit exceeded: {e}")
            raise LLMRateLimitError(f"Rate limit exceeded: {e}") from e

        except self._anthropic_module.APIError as e:
            logger.error(f"Anthropic API error: {e}")
            raise LLMAPIError(f"API error: {e}") from e

        except Exception as e:
            logger.error(f"Unexpected error in generate(): {e}")
            raise LLMAPIError(f"Unexpected error: {e}") from e


def create_llm_client(config: AdvisorConfig) -> GeminiLLMClient | AnthropicLLMClient:
    """Build the client for the configured provider.

    Raises:
        LLMDependencyError: If the provider SDK is not installed.
        LLMConfigurationError: If the provider's API key is missing.
    """
    if config.llm_provider == "anthropic":
        kwargs: dict[str, Any] = {"temperature": config.temperature}
        if config.max_tokens is not None:
            kwargs["default_max_tokens"] = config.max_tokens
        return AnthropicLLMClient(
            model=config.llm_model or DEFAULT_ANTHROPIC_MODEL,
            **kwargs,
        )

    return GeminiLLMClient(
        model=config.llm_model or DEFAULT_GEMINI_MODEL,
        temperature=config.temperature,
        default_max_tokens=config.max_tokens,
    )


__all__ = [
    "LLMClientError",
    "LLMConfigurationError",
    "LLMAPIError",
    "LLMRateLimitError",
    "LLMDependencyError",
    "MockLLMClient",
    "GeminiLLMClient",
    "AnthropicLLMClient",
    "create_llm_client",
]
