"""CLI command for initializing ai-commit configuration."""

import typer
from dotenv import load_dotenv

from aicommit.cli.output import colorize, print_error
from aicommit.config import API_KEY_ENV_VAR, ConfigError
from aicommit.global_config import ConfigStore


def init_config() -> None:
    """Initialize or update configuration."""
    load_dotenv()
    store = ConfigStore()

    # Keep customizations from an existing file
    try:
        store.load_unvalidated()
    except ConfigError as e:
        typer.echo(colorize(f"Warning: existing config ignored: {e}", typer.colors.YELLOW))

    api_key = typer.prompt(
        f"Enter your API key (or press Enter to use {API_KEY_ENV_VAR} environment variable)",
        default="",
        show_default=False,
        hide_input=True,
    )

    api_key = api_key.strip()
    if api_key:
        store.update_api_key(api_key)

    try:
        store.save_default()
    except ConfigError as e:
        print_error(e)
        raise typer.Exit(1)

    color_enabled = store.config.color_enabled
    typer.echo(colorize("Configuration initialized successfully!", typer.colors.GREEN, color_enabled))
    typer.echo(f"Edit {store.path} to customize settings")
