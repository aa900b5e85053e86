"""Configuration models and defaults for ai-commit.

Configuration is loaded from ~/.ai-commit/config.yaml.
Use 'ai-commit init' to create or update it.
"""

import re

from pydantic import BaseModel, ConfigDict, Field


class ConfigError(Exception):
    """Raised when the configuration is missing, malformed, or invalid."""

    pass


class MissingAPIKeyError(ConfigError):
    """Raised when no API key is configured."""

    pass


# ============================================================
# DEFAULT VALUES
# ============================================================
# Written to ~/.ai-commit/config.yaml on first run

API_KEY_ENV_VAR = "API_KEY"

DEFAULT_MAX_DIFF_SIZE = 10000
DEFAULT_HISTORY_DEPTH = 5
DEFAULT_COLOR_ENABLED = True
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_TEMPERATURE = 0.7

MAX_PREFIX_LENGTH = 10
MAX_DESCRIPTION_LENGTH = 50
PREFIX_PATTERN = re.compile(r"[a-z]+")

MISSING_API_KEY_MESSAGE = (
    f"API key is required. Set it in config file or {API_KEY_ENV_VAR} environment variable"
)


class Template(BaseModel):
    """A commit type prefix and its human-readable description.

    Attributes:
        prefix: Lowercase type keyword used in the commit header (e.g. "feat").
        description: Short explanation shown to the model (e.g. "Add new feature").
    """

    model_config = ConfigDict(frozen=True)

    prefix: str
    description: str


DEFAULT_TEMPLATES = [
    Template(prefix="feat", description="Add new feature"),
    Template(prefix="fix", description="Fix a bug"),
    Template(prefix="chore", description="Maintenance tasks"),
    Template(prefix="docs", description="Documentation changes"),
    Template(prefix="style", description="Code style changes"),
    Template(prefix="refactor", description="Code refactoring"),
    Template(prefix="perf", description="Performance improvements"),
    Template(prefix="test", description="Add or modify tests"),
    Template(prefix="build", description="Build system changes"),
    Template(prefix="ci", description="CI configuration changes"),
]


class Config(BaseModel):
    """User settings persisted in config.yaml.

    Field types are enforced when the model is built. Range and format
    rules are checked by validate_config().
    """

    api_key: str = ""
    max_diff_size: int = DEFAULT_MAX_DIFF_SIZE
    history_depth: int = DEFAULT_HISTORY_DEPTH
    templates: list[Template] = Field(default_factory=lambda: list(DEFAULT_TEMPLATES))
    color_enabled: bool = DEFAULT_COLOR_ENABLED
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE


def validate_template(template: Template) -> None:
    """Check a single template against the prefix and description rules.

    Raises:
        ConfigError: If the prefix or description is out of bounds.
    """
    prefix = template.prefix
    if not prefix or len(prefix) > MAX_PREFIX_LENGTH or not PREFIX_PATTERN.fullmatch(prefix):
        raise ConfigError(f"invalid template prefix: {prefix}")
    if not template.description or len(template.description) > MAX_DESCRIPTION_LENGTH:
        raise ConfigError(f"invalid template description for prefix {prefix}")


def validate_config(config: Config) -> None:
    """Validate a loaded configuration.

    Args:
        config: The configuration to check.

    Raises:
        MissingAPIKeyError: If the API key is empty.
        ConfigError: If a limit is not positive or a template is invalid.
    """
    if not config.api_key:
        raise MissingAPIKeyError(MISSING_API_KEY_MESSAGE)
    if config.max_diff_size <= 0:
        raise ConfigError("max_diff_size must be positive")
    if config.history_depth <= 0:
        raise ConfigError("history_depth must be positive")

    for template in config.templates:
        validate_template(template)
