"""Pydantic models for Storefront configuration.

These models define the structure of the config.toml file.
"""

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    # CORS configuration - empty list means same-origin only
    cors_origins: list[str] = []


class DatabaseConfig(BaseModel):
    """MongoDB database configuration."""

    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "storefront"
    # Connection pool settings
    min_pool_size: int = 10
    max_pool_size: int = 100


class ImportConfig(BaseModel):
    """Bulk product import configuration."""

    max_upload_mb: int = 10
    # Number of row errors echoed by the CLI after a run
    error_preview: int = 10

    @property
    def max_upload_bytes(self) -> int:
        """Get max upload size in bytes."""
        return self.max_upload_mb * 1024 * 1024


class StorefrontConfig(BaseModel):
    """Main Storefront configuration loaded from config.toml."""

    app_name: str = "Storefront"
    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    # "import" is a keyword, so the section is exposed as import_
    import_: ImportConfig = Field(default_factory=ImportConfig, alias="import")

    model_config = {"populate_by_name": True}
