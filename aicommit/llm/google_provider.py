"""Google Gemini provider implementation."""

import logging
from typing import Optional

from google import genai
from google.genai import types

from aicommit.config import (
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    MISSING_API_KEY_MESSAGE,
    MissingAPIKeyError,
)
from aicommit.llm.base import BaseLLMProvider
from aicommit.llm.exceptions import LLMError

logger = logging.getLogger(__name__)


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        """Initialize the Google provider.

        The underlying client is created on the first call.

        Args:
            api_key: Gemini API key.
            model: The model to use. Defaults to gemini-2.0-flash.
            temperature: Sampling temperature.
        """
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL
        self.temperature = temperature
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(MISSING_API_KEY_MESSAGE)
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def generate_text(self, prompt: str) -> str:
        """Generate text using Google Gemini.

        Args:
            prompt: The full prompt.

        Returns:
            The response text, or an empty string if the model produced none.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: If the API call fails or the response was blocked.
        """
        client = self._get_client()

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(temperature=self.temperature),
            )
        except Exception as e:
            raise LLMError(f"Google Gemini API call failed: {e}")

        if not response.candidates:
            return ""

        # Safety-blocked responses have no usable text
        candidate = response.candidates[0]
        finish_reason = str(getattr(candidate, "finish_reason", "") or "")
        if "SAFETY" in finish_reason:
            raise LLMError(f"Google Gemini blocked response due to safety filters: {finish_reason}")

        usage = getattr(response, "usage_metadata", None)
        if usage is not None:
            logger.debug(
                "Gemini usage: %s prompt tokens, %s output tokens",
                usage.prompt_token_count,
                usage.candidates_token_count,
            )

        return response.text or ""

    def close(self) -> None:
        """Close the HTTP client if one was created."""
        if self._client is not None:
            self._client.close()
            self._client = None
