"""Terminal output helpers: colors, the progress spinner, and error reporting."""

import sys
import threading
from typing import Optional

import typer

from aicommit.config import MissingAPIKeyError
from aicommit.git import NoStagedChangesError, NotARepositoryError

SPINNER_FRAMES = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]
SPINNER_INTERVAL = 0.1

# (headline, tip) for errors the user can fix directly
ERROR_TIPS = [
    (
        NotARepositoryError,
        "Not a git repository",
        "Initialize a git repository with 'git init'",
    ),
    (
        NoStagedChangesError,
        "No staged changes found",
        "Stage your changes with 'git add <files>' first",
    ),
    (
        MissingAPIKeyError,
        "API key is missing",
        "Run 'ai-commit init' to set up configuration or set API_KEY environment variable",
    ),
]


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in ANSI color codes when colors are enabled."""
    if not enabled:
        return text
    return typer.style(text, fg=color)


def print_error(error: Exception, color_enabled: bool = True) -> None:
    """Print an error to stdout with a red "Error:" prefix and a tip if one applies."""
    for error_type, headline, tip in ERROR_TIPS:
        if isinstance(error, error_type):
            typer.echo(colorize(f"Error: {headline}", typer.colors.RED, color_enabled))
            typer.echo(f"Tip: {tip}")
            return
    typer.echo(colorize(f"Error: {error}", typer.colors.RED, color_enabled))


class Spinner:
    """Animated spinner shown while a blocking call runs. Use as context manager.

    On a terminal a background thread repaints the frame every 100ms until
    the block exits. Otherwise the message is printed once, followed by
    "Done!" when the block exits.
    """

    def __init__(self, message: str, interactive: Optional[bool] = None):
        self.message = message
        self.interactive = sys.stdout.isatty() if interactive is None else interactive
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _spin(self) -> None:
        idx = 0
        while not self._stop_event.is_set():
            frame = SPINNER_FRAMES[idx % len(SPINNER_FRAMES)]
            typer.echo(f"\r{self.message} {frame}", nl=False)
            idx += 1
            self._stop_event.wait(SPINNER_INTERVAL)

    def __enter__(self) -> "Spinner":
        if not self.interactive:
            typer.echo(self.message, nl=False)
            return self

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()
        return self

    def __exit__(self, *args) -> None:
        if self._thread is None:
            typer.echo(" Done!")
            return

        self._stop_event.set()
        self._thread.join()
        self._thread = None
        typer.echo(f"\r{self.message} Done!")
