from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    base_url: str = Field(default="http://localhost:5000", description="Catalog service root")
    timeout_seconds: float = Field(default=10.0, gt=0)
    retry_attempts: int = Field(default=1, ge=1, description="1 means no retry")
    price_minor_unit_factor: int = Field(
        default=1, ge=1, description="Multiplier from descriptor prices to integer minor units"
    )
    asset_root: str = Field(default="/shirt-style-customization")
    seed_file: str | None = Field(
        default=None, description="Serve descriptors from this YAML file instead of HTTP"
    )

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CATALOG_", extra="ignore")
