"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- EmptyResponseError: Raised when the model returns no text
- GenerationError: Raised when every generation attempt has failed
"""

from typing import Optional


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class EmptyResponseError(LLMError):
    """Raised when the LLM returns an empty response."""

    pass


class GenerationError(LLMError):
    """Raised when all attempts to generate a commit message failed."""

    def __init__(self, message: str, last_error: Optional[Exception] = None):
        super().__init__(message)
        self.last_error = last_error
