"""Interactive accept / edit / cancel prompt for the generated message."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

import typer

from aicommit.cli.output import colorize
from aicommit.cli.utils import edit_message


class PromptState(Enum):
    """States of the commit prompt."""

    PRESENTING = "presenting"
    EDITING = "editing"
    ACCEPTED = "accepted"
    CANCELLED = "cancelled"


@dataclass
class CommitDecision:
    """Outcome of the prompt: the final state and the message to commit.

    message is empty when the commit was cancelled.
    """

    state: PromptState
    message: str

    @property
    def accepted(self) -> bool:
        return self.state == PromptState.ACCEPTED


ACCEPT_CHOICES = ("", "y", "yes")
EDIT_CHOICES = ("e", "edit")
CANCEL_CHOICES = ("n", "no")


def read_choice() -> str:
    """Read the user's choice from the terminal."""
    return typer.prompt("", default="", show_default=False, prompt_suffix="")


class CommitPrompt:
    """Shows the generated message and asks the user what to do with it.

    PRESENTING moves to ACCEPTED, CANCELLED or EDITING depending on the
    choice; EDITING goes back to PRESENTING with the edited text. Invalid
    choices stay in PRESENTING.
    """

    def __init__(
        self,
        color_enabled: bool = True,
        read: Callable[[], str] = read_choice,
        edit: Callable[[str], str] = edit_message,
    ):
        self.color_enabled = color_enabled
        self.read = read
        self.edit = edit

    def _color(self, text: str, color: str) -> str:
        return colorize(text, color, self.color_enabled)

    def present(self, message: str) -> None:
        """Print the message and the list of choices."""
        typer.echo("\n" + self._color("=== Generated Commit Message ===", typer.colors.BLUE))
        typer.echo(self._color(message, typer.colors.GREEN) + "\n")

        typer.echo(self._color("What would you like to do?", typer.colors.CYAN))
        typer.echo(self._color("[Y]es: ", typer.colors.GREEN) + "Commit with this message")
        typer.echo(self._color("[E]dit: ", typer.colors.YELLOW) + "Edit the message")
        typer.echo(self._color("[N]o: ", typer.colors.RED) + "Cancel commit")
        typer.echo(self._color("Choice [Y/e/n]: ", typer.colors.CYAN), nl=False)

    def run(self, message: str) -> CommitDecision:
        """Run the prompt loop until the message is accepted or cancelled.

        Args:
            message: The generated commit message.

        Returns:
            The final decision.

        Raises:
            EditorError: If editing fails or produces an empty message.
        """
        state = PromptState.PRESENTING

        while True:
            if state == PromptState.EDITING:
                message = self.edit(message)
                state = PromptState.PRESENTING

            self.present(message)
            choice = self.read().strip().lower()

            if choice in ACCEPT_CHOICES:
                return CommitDecision(PromptState.ACCEPTED, message)
            if choice in CANCEL_CHOICES:
                return CommitDecision(PromptState.CANCELLED, "")
            if choice in EDIT_CHOICES:
                state = PromptState.EDITING
                continue

            typer.echo(self._color("Invalid choice. Please try again.", typer.colors.RED))
