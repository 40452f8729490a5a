from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront_state.core.application.ports.common.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Storefront client settings, read from STOREFRONT_* environment variables.
    """

    # App Config
    app_name: str = "Storefront State"
    log_level: str = "INFO"
    log_format: str | None = Field(default=None, description="json or console")

    # Persistence
    storage_dir: Path = Field(default=Path("runtime_data/storage"))
    persistence_write_through: bool = True

    # Catalog (Supabase / PostgREST)
    catalog_base_url: str | None = Field(default=None, description="Supabase project URL")
    catalog_api_key: SecretStr | None = Field(default=None, description="Supabase anon key")
    catalog_table: str = "products"
    coupon_table: str = "coupons"
    catalog_timeout_seconds: float = 10.0
    catalog_max_attempts: int = Field(default=1, ge=1)

    # Alerts
    alert_poll_interval_seconds: float = Field(default=60.0, gt=0)
    low_stock_threshold: int = Field(default=5, ge=1)

    # Collections
    compare_capacity: int = Field(default=3, ge=1)
    recently_viewed_capacity: int = Field(default=12, ge=1)

    # Pricing
    currency_symbol: str = "₹"
    free_shipping_threshold: float = 499
    delivery_charge: float = 49

    def validate_catalog_credentials(self) -> None:
        """
        Validates that the catalog backend can be reached with the configured credentials.
        Does NOT log values. Raises ConfigurationError if missing.
        """
        if not self.catalog_base_url:
            raise ConfigurationError("Catalog access requires 'catalog_base_url'.")
        if not self.catalog_api_key:
            raise ConfigurationError("Catalog access requires 'catalog_api_key'.")

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        case_sensitive=False,
        extra="ignore",
    )
