"""Main CLI command: generate a commit message and commit the staged changes."""

import functools
import logging
from dataclasses import dataclass
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from aicommit import __version__
from aicommit.cli.interactive import CommitPrompt
from aicommit.cli.output import Spinner, colorize, print_error
from aicommit.cli.utils import EditorError, edit_message
from aicommit.config import Config, ConfigError
from aicommit.git import GitError, GitOperations
from aicommit.global_config import ConfigStore
from aicommit.llm import CommitMessageGenerator, LLMError, create_generator

logger = logging.getLogger(__name__)

HELP_TEXT = """Usage: ai-commit [command] [options]

Generate AI-powered commit messages for your staged changes.

Commands:
  init        Initialize or update configuration
  help        Show this help message
  version     Show version information

Options:
  -h, --help     Show this help message
  -v, --version  Show version information
  --verbose      Show debug logging

Configuration:
  Config file location: ~/.ai-commit/config.yaml
  Environment variables:
    API_KEY    API key for AI service
    VISUAL     Editor used to edit messages (preferred)
    EDITOR     Editor used to edit messages

Examples:
  1. Initialize configuration:
     ai-commit init

  2. Stage your changes:
     git add .

  3. Generate commit message:
     ai-commit

Tips:
  - Make atomic commits (one logical change per commit)
  - Stage only related changes together
  - Review the generated message before confirming
  - Use the config file to customize templates and settings"""


@dataclass
class CommitSession:
    """Everything one generate-and-commit run needs."""

    config: Config
    git: GitOperations
    generator: CommitMessageGenerator
    prompt: CommitPrompt

    def close(self) -> None:
        self.generator.close()


def build_session(config: Config) -> CommitSession:
    """Wire up the git, generator and prompt collaborators for a run."""
    git = GitOperations()
    prompt = CommitPrompt(
        color_enabled=config.color_enabled,
        edit=functools.partial(edit_message, git=git),
    )
    return CommitSession(
        config=config,
        git=git,
        generator=create_generator(config),
        prompt=prompt,
    )


def run_commit_flow(session: CommitSession) -> bool:
    """Run the generate, confirm and commit steps.

    Args:
        session: The collaborators for this run.

    Returns:
        True if a commit was made, False if the user cancelled.

    Raises:
        GitError: If the diff cannot be read or the commit fails.
        LLMError: If generation fails after all retries.
        ConfigError: If the API key is missing.
        EditorError: If editing the message fails.
    """
    config = session.config

    diff = session.git.get_diff(config.max_diff_size)

    try:
        history = session.git.get_recent_commits(config.history_depth)
    except GitError as e:
        logger.warning("Could not read commit history, continuing without it: %s", e)
        history = []

    with Spinner("Generating commit message..."):
        message = session.generator.generate(diff, history)

    decision = session.prompt.run(message)
    if not decision.accepted:
        typer.echo(colorize("Commit cancelled", typer.colors.YELLOW, config.color_enabled))
        return False

    with Spinner("Committing changes..."):
        session.git.commit(decision.message)

    typer.echo(colorize("Successfully committed changes!", typer.colors.GREEN, config.color_enabled))
    return True


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_time=verbose, show_path=verbose)],
        force=True,
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ai-commit version {__version__}")
        raise typer.Exit()


def help_callback(value: bool) -> None:
    if value:
        typer.echo(HELP_TEXT)
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    show_help: Optional[bool] = typer.Option(
        None,
        "--help",
        "-h",
        callback=help_callback,
        is_eager=True,
        help="Show this help message",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show debug logging",
    ),
) -> None:
    """Generate an AI-powered git commit message from staged changes."""
    setup_logging(verbose)

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    load_dotenv()
    store = ConfigStore()
    color_enabled = True

    try:
        config = store.load()
        if store.created:
            typer.echo(f"Created default config at {store.path}")
        color_enabled = config.color_enabled

        session = build_session(config)
        try:
            run_commit_flow(session)
        finally:
            session.close()

    except (ConfigError, GitError, LLMError, EditorError) as e:
        print_error(e, color_enabled)
        raise typer.Exit(1)
