"""Global settings instance for Storefront.

The settings object provides a flat interface over the structured
StorefrontConfig loaded from config.toml and environment overrides.
"""

from storefront.config.loader import load_config
from storefront.config.schema import StorefrontConfig


class Settings:
    """Flat accessor over StorefrontConfig."""

    def __init__(self, config: StorefrontConfig | None = None):
        """Initialize settings.

        Args:
            config: Optional StorefrontConfig instance. If not provided, loads from file.
        """
        self._config = config or load_config()

    @property
    def config(self) -> StorefrontConfig:
        """Get the full configuration object."""
        return self._config

    # Application
    @property
    def app_name(self) -> str:
        return self._config.app_name

    @property
    def debug(self) -> bool:
        return self._config.server.debug

    # Server
    @property
    def host(self) -> str:
        return self._config.server.host

    @property
    def port(self) -> int:
        return self._config.server.port

    @property
    def cors_origins(self) -> list[str]:
        return self._config.server.cors_origins

    # Database
    @property
    def mongodb_url(self) -> str:
        return self._config.database.mongodb_url

    @property
    def mongodb_database(self) -> str:
        return self._config.database.mongodb_database

    @property
    def min_pool_size(self) -> int:
        return self._config.database.min_pool_size

    @property
    def max_pool_size(self) -> int:
        return self._config.database.max_pool_size

    # Import
    @property
    def max_upload_size_mb(self) -> int:
        return self._config.import_.max_upload_mb

    @property
    def max_upload_size_bytes(self) -> int:
        return self._config.import_.max_upload_bytes

    @property
    def import_error_preview(self) -> int:
        return self._config.import_.error_preview


# Global settings instance - lazily initialized
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    The settings are loaded once and cached for subsequent calls.

    Returns:
        The global Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance.

    This is primarily useful for testing to reload configuration.
    """
    global _settings
    _settings = None


class _SettingsProxy:
    """Proxy object that lazily loads settings on first access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return repr(get_settings())


settings = _SettingsProxy()
