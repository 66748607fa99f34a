from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tailor_configurator.infrastructure.configuration.catalog_settings import CatalogSettings
from tailor_configurator.infrastructure.configuration.persistence_settings import (
    LocalStoreSettings,
    PersistenceSettings,
    RestoreSettings,
)
from tailor_configurator.infrastructure.configuration.storefront_api_settings import (
    CustomerApiSettings,
    OrderApiSettings,
)


class AppConfig(BaseSettings):
    """Master config combining every sub-settings group."""

    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    customer_api: CustomerApiSettings = Field(default_factory=CustomerApiSettings)
    order_api: OrderApiSettings = Field(default_factory=OrderApiSettings)
    local_store: LocalStoreSettings = Field(default_factory=LocalStoreSettings)
    persistence: PersistenceSettings = Field(default_factory=PersistenceSettings)
    restore: RestoreSettings = Field(default_factory=RestoreSettings)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
