"""
Configuration loading and management for the retail fixture generator.

This module provides utilities for loading, validating, and managing
configuration settings.
"""

import logging
import os
from pathlib import Path

from .models import FixtureConfig

logger = logging.getLogger(__name__)


def load_config(
    config_path: str | Path | None = None, config_name: str = "config.json"
) -> FixtureConfig:
    """
    Load configuration from file with path resolution.

    Args:
        config_path: Explicit path to config file or directory containing config
        config_name: Name of config file (default: "config.json")

    Returns:
        FixtureConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If no configuration file is found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        search_paths = [
            Path.cwd() / config_name,
            Path.cwd() / "config" / config_name,
        ]

        for path in search_paths:
            if path.exists():
                config_path = path
                break
        else:
            raise FileNotFoundError(
                f"Configuration file '{config_name}' not found in any of: "
                f"{[str(p) for p in search_paths]}"
            )

    config_path = Path(config_path)

    # If path is a directory, look for config file inside it
    if config_path.is_dir():
        config_path = config_path / config_name

    return FixtureConfig.from_file(config_path)


def create_default_config(output_path: str | Path) -> FixtureConfig:
    """
    Create a default configuration file with standard values.

    Args:
        output_path: Where to save the default config file

    Returns:
        FixtureConfig: The default configuration
    """
    default_config = FixtureConfig()
    default_config.to_file(output_path)
    return default_config


def _parse_seed_pair(raw: str) -> list[int]:
    """Parse 'A,B' or 'A B' into a seed pair."""
    parts = raw.replace(",", " ").split()
    return [int(part) for part in parts]


def get_config_from_env() -> FixtureConfig | None:
    """
    Try to load configuration from environment variables.

    Returns:
        FixtureConfig if environment variables are set, None otherwise
    """
    config_file_env = os.getenv("FIXTURE_CONFIG_FILE")
    if config_file_env:
        return load_config(config_file_env)

    env_vars = [
        "FIXTURE_SEED",
        "FIXTURE_SEED_DIR",
        "FIXTURE_OUTPUT",
        "FIXTURE_PROFILE",
    ]
    env_values = {key: os.getenv(key) for key in env_vars}
    if not any(env_values.values()):
        return None

    try:
        config_data: dict = {"paths": {}}
        if env_values["FIXTURE_SEED"]:
            config_data["seed"] = _parse_seed_pair(env_values["FIXTURE_SEED"])
        if env_values["FIXTURE_SEED_DIR"]:
            config_data["paths"]["seeds"] = env_values["FIXTURE_SEED_DIR"]
        if env_values["FIXTURE_OUTPUT"]:
            config_data["paths"]["output"] = env_values["FIXTURE_OUTPUT"]
        if env_values["FIXTURE_PROFILE"]:
            config_data["profile"] = env_values["FIXTURE_PROFILE"]

        return FixtureConfig(**config_data)

    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid environment variable configuration: {e}")


def load_config_with_fallback(config_path: str | Path | None = None) -> FixtureConfig:
    """
    Load configuration with fallback to environment variables and defaults.

    Priority order:
    1. Explicit config file path
    2. Environment variable FIXTURE_CONFIG_FILE
    3. Individual environment variables
    4. Default locations (config.json, config/config.json)
    5. Built-in defaults

    An explicit path that does not exist is an error rather than a fallback.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        FixtureConfig: Loaded configuration
    """
    if config_path:
        return load_config(config_path)

    env_config = get_config_from_env()
    if env_config:
        return env_config

    try:
        return load_config()
    except FileNotFoundError:
        pass  # Fall through to defaults

    logger.info("No configuration found, using built-in defaults")
    return FixtureConfig()
