"""Configuration loader for Storefront.

Loads configuration from TOML files.
Environment variables can override any configuration value.
"""

import logging
import os
from pathlib import Path
from typing import Any

from storefront.config.schema import StorefrontConfig

logger = logging.getLogger(__name__)

# Try to import tomllib (Python 3.11+) or fall back to tomli
try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found]


# Env var -> (section, key)
ENV_MAPPINGS: dict[str, tuple[str, str]] = {
    # Server
    "SERVER_HOST": ("server", "host"),
    "SERVER_PORT": ("server", "port"),
    "SERVER_DEBUG": ("server", "debug"),
    "DEBUG": ("server", "debug"),  # Shorthand
    "HOST": ("server", "host"),  # Shorthand
    "PORT": ("server", "port"),  # Shorthand
    # Database
    "DATABASE_MONGODB_URL": ("database", "mongodb_url"),
    "DATABASE_MONGODB_DATABASE": ("database", "mongodb_database"),
    "MONGODB_URL": ("database", "mongodb_url"),  # Shorthand
    "MONGODB_DATABASE": ("database", "mongodb_database"),  # Shorthand
    # Import
    "IMPORT_MAX_UPLOAD_MB": ("import", "max_upload_mb"),
    "IMPORT_ERROR_PREVIEW": ("import", "error_preview"),
}

_INT_KEYS = {"port", "max_upload_mb", "error_preview", "min_pool_size", "max_pool_size"}
_BOOL_KEYS = {"debug"}


def get_config_search_paths() -> list[Path]:
    """Get the list of paths to search for configuration files.

    Returns paths in priority order (first found wins):
    1. ./config.toml (project root - for development)
    2. ~/.config/storefront/config.toml (user config)
    3. /opt/storefront/config.toml (production install)
    4. /etc/storefront/config.toml (system config)
    """
    return [
        Path.cwd() / "config.toml",
        Path.home() / ".config" / "storefront" / "config.toml",
        Path("/opt/storefront/config.toml"),
        Path("/etc/storefront/config.toml"),
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file from search paths."""
    for path in get_config_search_paths():
        if path.exists() and path.is_file():
            logger.debug("Found config file: %s", path)
            return path
    return None


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def apply_env_overrides(config_dict: dict[str, Any], prefix: str = "STOREFRONT") -> None:
    """Apply environment variable overrides to configuration dictionary.

    Environment variables are mapped as follows:
    - STOREFRONT_SERVER_HOST -> config_dict["server"]["host"]
    - STOREFRONT_MONGODB_URL -> config_dict["database"]["mongodb_url"]
    - STOREFRONT_IMPORT_MAX_UPLOAD_MB -> config_dict["import"]["max_upload_mb"]

    Note: This modifies config_dict in place.
    """
    for suffix, (section, key) in ENV_MAPPINGS.items():
        value = os.environ.get(f"{prefix}_{suffix}")
        if value is None:
            continue

        section_dict = config_dict.setdefault(section, {})

        if key in _INT_KEYS:
            section_dict[key] = int(value)
        elif key in _BOOL_KEYS:
            section_dict[key] = value.lower() in ("true", "1", "yes")
        else:
            section_dict[key] = value


def load_config(config_file: Path | None = None) -> StorefrontConfig:
    """Load configuration from TOML file with environment variable overrides.

    Args:
        config_file: Optional path to config file. If not provided,
                     searches default locations.

    Returns:
        StorefrontConfig instance with all settings loaded.
    """
    config_dict: dict[str, Any] = {}

    if config_file is None:
        config_file = find_config_file()

    if config_file and config_file.exists():
        logger.info("Loading config from: %s", config_file)
        config_dict = load_toml_file(config_file)
    else:
        logger.info("No config file found, using defaults with env overrides")

    apply_env_overrides(config_dict)

    return StorefrontConfig(**config_dict)
