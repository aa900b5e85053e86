"""CLI entry point for ai-commit.

This module provides the main CLI application that combines all commands
into a single unified interface.
"""

import typer

from aicommit import __version__
from aicommit.cli.init import init_config
from aicommit.cli.main import HELP_TEXT, main_command

# Main application
app = typer.Typer(
    name="ai-commit",
    help="ai-commit: AI-powered commit message generator",
    add_completion=False,
)


def help_command() -> None:
    """Show this help message."""
    typer.echo(HELP_TEXT)


def version_command() -> None:
    """Show version information."""
    typer.echo(f"ai-commit version {__version__}")


# Add individual commands
app.command("init")(init_config)
app.command("help")(help_command)
app.command("version")(version_command)

# Set the main callback for default behavior (includes --version and --help flags)
app.callback(invoke_without_command=True, add_help_option=False)(main_command)


def main() -> None:
    """Console script entry point."""
    app()


__all__ = [
    "app",
    "main",
    "init_config",
    "main_command",
    "help_command",
    "version_command",
]
