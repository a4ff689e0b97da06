"""Repository configuration for commitctx.

Handles reading and writing the .commitctx/config.yaml file in a repository.
Only the outer surfaces (CLI) read it; the prompt builder takes its
ceiling as a plain argument.
"""

from pathlib import Path

import yaml

from commitctx.exceptions import ConfigError
from commitctx.logging import get_logger
from commitctx.prompt.budget import DEFAULT_MAX_CHARS
from commitctx.prompt.builder import BuildMode

logger = get_logger("config")

CONFIG_DIR_NAME = ".commitctx"

# Default configuration values
DEFAULT_CONFIG = {
    # Ceiling for verbatim diff characters per prompt
    "max_chars": DEFAULT_MAX_CHARS,
    # Prompt build mode: structured | simple
    "mode": BuildMode.STRUCTURED.value,
}


def get_config_dir(repo_root: Path) -> Path:
    """Return path to the .commitctx directory of a repository."""
    return repo_root / CONFIG_DIR_NAME


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the repository.

    Returns:
        Path to .commitctx/config.yaml.
    """
    return get_config_dir(repo_root) / "config.yaml"


def load_config(repo_root: Path) -> dict:
    """Load the commitctx configuration from config.yaml.

    A missing file yields the defaults. A corrupted file is reported and
    also yields the defaults.

    Args:
        repo_root: The root directory of the repository.

    Returns:
        Configuration dictionary.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return DEFAULT_CONFIG.copy()

    if not isinstance(config, dict):
        logger.warning("Ignoring config %s: expected a mapping", config_file)
        return DEFAULT_CONFIG.copy()

    # Merge with defaults for any missing keys
    for key, value in DEFAULT_CONFIG.items():
        if key not in config:
            config[key] = value
    return config


def save_config(repo_root: Path, config: dict) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the repository.
        config: Configuration dictionary to save.
    """
    config_file = get_config_file(repo_root)

    # Ensure directory exists
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w") as f:
        yaml.dump(
            config,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def get_max_chars(repo_root: Path) -> int:
    """Get the diff character ceiling from config.

    Args:
        repo_root: The root directory of the repository.

    Returns:
        The configured ceiling.

    Raises:
        ConfigError: If the configured value is not a non-negative integer.
    """
    value = load_config(repo_root)["max_chars"]
    # bool is an int subclass; "max_chars: yes" is a typo, not a ceiling
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(
            f"Invalid max_chars in {get_config_file(repo_root)}: {value!r}. "
            f"Expected a non-negative integer."
        )
    return value


def get_build_mode(repo_root: Path) -> BuildMode:
    """Get the prompt build mode from config.

    Args:
        repo_root: The root directory of the repository.

    Returns:
        The configured BuildMode.

    Raises:
        ConfigError: If the configured mode is unknown.
    """
    value = load_config(repo_root)["mode"]
    try:
        return BuildMode(str(value).lower())
    except ValueError:
        valid = ", ".join(mode.value for mode in BuildMode)
        raise ConfigError(
            f"Invalid mode in {get_config_file(repo_root)}: {value!r}. Valid modes: {valid}"
        )
