"""Storefront configuration module.

This module provides TOML-based configuration with environment variable overrides.

Configuration is loaded from the following locations (in order of priority):
1. Environment variables (highest priority)
2. ./config.toml (project root - for development)
3. ~/.config/storefront/config.toml (user config)
4. /opt/storefront/config.toml (production install)
5. /etc/storefront/config.toml (system config)
"""

from storefront.config.schema import (
    DatabaseConfig,
    ImportConfig,
    ServerConfig,
    StorefrontConfig,
)
from storefront.config.settings import get_settings, reset_settings, settings

__all__ = [
    "DatabaseConfig",
    "ImportConfig",
    "ServerConfig",
    "StorefrontConfig",
    "get_settings",
    "reset_settings",
    "settings",
]
