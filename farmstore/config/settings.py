"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the store core using Pydantic Settings.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Cached accessor so the application shares one Settings instance

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

The catalog and sales engine never read settings directly; the application
and service layers pass plain values into them.

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        data_directory: Directory holding the catalog data file
        data_file_name: Catalog data file name inside data_directory
        default_tax_rate: Tax rate for a fresh catalog (0.07 = 7%)
        currency_symbol: Symbol used when rendering money
        low_stock_threshold: Stock level at or below which a product is low

    Example:
        >>> settings = Settings()
        >>> print(settings.data_path)
        data/farm.json
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Farm Store",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # STORAGE SETTINGS
    # =========================================================================
    data_directory: str = Field(
        default="data",
        description="Directory holding the catalog data file"
    )

    data_file_name: str = Field(
        default="farm.json",
        min_length=1,
        description="Catalog data file name"
    )

    # =========================================================================
    # SALES SETTINGS
    # =========================================================================
    default_tax_rate: Decimal = Field(
        default=Decimal("0.07"),
        ge=0,
        le=1,
        description="Tax rate applied to taxable items in a fresh catalog"
    )

    currency_symbol: str = Field(
        default="$",
        description="Currency symbol used in receipts and listings"
    )

    low_stock_threshold: int = Field(
        default=5,
        ge=0,
        description="Stock level at or below which a product counts as low"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development' with a warning.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def data_path(self) -> Path:
        """
        Get the catalog data file as a Path object.

        The directory is not created here; the repository creates it on
        the first save.
        """
        return Path(self.data_directory) / self.data_file_name

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"data_path={str(self.data_path)!r}, "
            f"default_tax_rate={self.default_tax_rate})"
        )


# =============================================================================
# CACHED INSTANCE
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the shared Settings instance.

    Uses lru_cache so environment parsing happens once per process.
    Call ``get_settings.cache_clear()`` to force a reload.

    Returns:
        Shared Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings!r}")

    return settings
