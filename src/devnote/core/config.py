"""Configuration management for devnote.

Environment variables (optionally from a .env file) decide where data lives;
config.toml inside the data directory holds display and editor preferences.
"""

import logging
import os
from pathlib import Path

import tomli
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from devnote.core.errors import ConfigError

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.toml"
SELECTED_FILENAME = "selected.txt"
DATABASE_FILENAME = "note.db"

DEFAULT_DATA_DIR = Path.home() / ".devnote"

DEFAULT_CONFIG_TOML = """\
# devnote configuration

# External editor command, e.g. "vim" or "code --wait".
# Leave unset (or set to "internal") to use the built-in editor.
# edit_app = "vim"

# Name given to notes added without one.
# default_name = ""

# Show the time of day next to note dates.
include_time = false

# Group `ls` output under shared name/date headers.
group_by_date = false

# Do not store notes whose text is empty after editing.
no_empty_adds_or_updates = false
"""


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_data_dir() -> Path:
    """Get the data directory (DEVNOTE_DATA_DIR or ~/.devnote)."""
    env_dir = get_env("DEVNOTE_DATA_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return DEFAULT_DATA_DIR


def ensure_data_dir(data_dir: Path | None = None) -> Path:
    """Create the data directory if needed and return it."""
    path = data_dir or get_data_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_config_path(data_dir: Path | None = None) -> Path:
    """Get the path to config.toml."""
    return (data_dir or get_data_dir()) / CONFIG_FILENAME


def get_selected_path(data_dir: Path | None = None) -> Path:
    """Get the path to the selected project marker."""
    return (data_dir or get_data_dir()) / SELECTED_FILENAME


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the path to note.db."""
    return (data_dir or get_data_dir()) / DATABASE_FILENAME


class AppConfig(BaseModel, frozen=True):
    """User preferences read from config.toml."""

    edit_app: str | None = None
    default_name: str | None = None
    include_time: bool = False
    group_by_date: bool = False
    no_empty_adds_or_updates: bool = False


def load_config(config_path: Path) -> AppConfig:
    """
    Load and validate config.toml.

    Raises:
        ConfigError: If the file is not valid TOML or has invalid values.
    """
    try:
        with open(config_path, "rb") as f:
            raw = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def get_or_create_config(data_dir: Path | None = None) -> AppConfig:
    """
    Get the configuration, writing a default config.toml if none exists.

    Args:
        data_dir: Directory holding config.toml (defaults to the data dir)

    Returns:
        Parsed configuration, or defaults when the file was just generated.
    """
    config_path = get_config_path(data_dir)
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
        logger.warning("Config didn't exist, default generated at %s", config_path)
        return AppConfig()

    logger.debug("Loading config from %s", config_path)
    return load_config(config_path)


# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "WARNING")


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure and return logger."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=getattr(logging, (LOG_LEVEL or "WARNING").upper(), logging.WARNING),
        )
    return logging.getLogger("devnote")
