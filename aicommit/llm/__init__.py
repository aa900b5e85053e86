"""LLM module for ai-commit.

Provides the Gemini provider, the generation prompt, and the retrying
commit message generator.
"""

from aicommit.config import Config
from aicommit.llm.base import BaseLLMProvider
from aicommit.llm.exceptions import EmptyResponseError, GenerationError, LLMError
from aicommit.llm.generator import CommitMessageGenerator, backoff_delays
from aicommit.llm.prompts import build_prompt


def get_provider(config: Config) -> BaseLLMProvider:
    """Get the LLM provider configured for this run.

    Args:
        config: The loaded configuration.

    Returns:
        A provider instance; its client is created on first use.
    """
    from aicommit.llm.google_provider import GoogleProvider

    return GoogleProvider(
        api_key=config.api_key,
        model=config.model,
        temperature=config.temperature,
    )


def create_generator(config: Config) -> CommitMessageGenerator:
    """Create a commit message generator from the configuration."""
    return CommitMessageGenerator(get_provider(config), config.templates)


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "EmptyResponseError",
    "GenerationError",
    "CommitMessageGenerator",
    "backoff_delays",
    "build_prompt",
    "get_provider",
    "create_generator",
]
