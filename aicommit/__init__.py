"""AI-powered commit message generator for staged git changes."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ai-commit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "1.1.0"
