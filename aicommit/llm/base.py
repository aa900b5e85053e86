"""Base class for LLM providers."""

from abc import ABC, abstractmethod


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    A provider turns a prompt into text. Retries and prompt construction
    live in CommitMessageGenerator, so providers make exactly one call.
    """

    model: str

    @abstractmethod
    def generate_text(self, prompt: str) -> str:
        """Send the prompt to the model and return its raw text.

        Args:
            prompt: The full prompt.

        Returns:
            The response text, possibly empty.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: If the API call fails.
        """
        pass

    def close(self) -> None:
        """Release any network resources held by the provider."""
        pass
