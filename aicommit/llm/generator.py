"""Commit message generation with retry and exponential backoff."""

import logging
import time
from typing import Callable, Optional

from aicommit.config import Template
from aicommit.llm.base import BaseLLMProvider
from aicommit.llm.exceptions import EmptyResponseError, GenerationError, LLMError
from aicommit.llm.prompts import build_prompt

logger = logging.getLogger(__name__)

MAX_RETRIES = 3


def backoff_delays(max_retries: int = MAX_RETRIES) -> list[int]:
    """Seconds to wait before each retry: 2, 4, 8, ..."""
    return [2 ** attempt for attempt in range(1, max_retries + 1)]


class CommitMessageGenerator:
    """Builds the prompt and asks the provider for a commit message."""

    def __init__(
        self,
        provider: BaseLLMProvider,
        templates: list[Template],
        max_retries: int = MAX_RETRIES,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.provider = provider
        self.templates = templates
        self.max_retries = max_retries
        self.sleep = sleep

    def generate(self, diff: str, history: list[str]) -> str:
        """Generate a commit message for the staged diff.

        Makes up to max_retries + 1 attempts. A transport error or an empty
        response counts as a failed attempt; the first non-empty response
        is returned immediately.

        Args:
            diff: The staged diff.
            history: Recent commit subjects.

        Returns:
            The commit message with surrounding whitespace removed.

        Raises:
            GenerationError: If every attempt failed.
        """
        prompt = build_prompt(diff, history, self.templates)
        logger.debug("Prompt is %d characters", len(prompt))

        delays = backoff_delays(self.max_retries)
        last_error: Optional[Exception] = None

        for attempt in range(self.max_retries + 1):
            if attempt > 0:
                delay = delays[attempt - 1]
                logger.debug("Retrying in %ds (attempt %d)", delay, attempt + 1)
                self.sleep(delay)

            try:
                text = self.provider.generate_text(prompt)
            except LLMError as e:
                logger.debug("Attempt %d failed: %s", attempt + 1, e)
                last_error = e
                continue

            message = text.strip() if text else ""
            if message:
                return message

            logger.debug("Attempt %d returned an empty response", attempt + 1)
            last_error = EmptyResponseError("empty response received")

        raise GenerationError(
            f"failed after {self.max_retries} retries: {last_error}",
            last_error=last_error,
        ) from last_error

    def close(self) -> None:
        self.provider.close()
