"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Printify Integration
    printify_api_key: str = Field(
        default="",
        description="Printify personal access token",
    )
    printify_shop_id: str = Field(
        default="",
        description="Printify shop whose products are listed",
    )
    printify_base_url: str = Field(
        default="https://api.printify.com/v1",
        description="Printify REST API base URL",
    )

    # Printful Integration
    printful_api_key: str = Field(
        default="",
        description="Printful private token",
    )
    printful_base_url: str = Field(
        default="https://api.printful.com/v2",
        description="Printful v2 API base URL",
    )
    printful_v1_base_url: str = Field(
        default="https://api.printful.com",
        description="Printful v1 API base URL (sync products)",
    )
    printful_name_keywords: list[str] = Field(
        default_factory=lambda: ["swing", "swinghigh", "custom", "personalized"],
        description="Product name keywords that select Printful products for the storefront",
    )
    printful_tag_keywords: list[str] = Field(
        default_factory=lambda: ["swing", "swinghigh"],
        description="Product tag keywords that select Printful products for the storefront",
    )

    # Vendor HTTP
    vendor_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for vendor API calls in seconds",
    )

    # Cart
    cart_storage_dir: str = Field(
        default=".carts",
        description="Directory holding persisted cart documents",
    )
    cart_storage_key: str = Field(
        default="storefront-cart",
        description="Storage key prefix for persisted carts",
    )
    max_cart_sessions: int = Field(
        default=1000,
        ge=1,
        description="Session carts kept in memory; older ones are reloaded from storage on use",
    )
    checkout_base_path: str = Field(
        default="/checkout",
        description="Base path of the per-platform checkout hand-off URLs",
    )

    # API Settings
    api_title: str = Field(
        default="Print-on-Demand Storefront",
        description="API title",
    )
    api_version: str = Field(
        default="0.1.0",
        description="API version",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Enable JSON structured logging",
    )

    @property
    def printify_configured(self) -> bool:
        return bool(self.printify_api_key and self.printify_shop_id)

    @property
    def printful_configured(self) -> bool:
        return bool(self.printful_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
