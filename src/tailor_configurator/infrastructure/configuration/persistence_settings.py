from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LocalStoreSettings(BaseSettings):
    data_dir: Path = Field(default=Path("./runtime_data"), description="Device-local storage")
    capacity: int = Field(default=20, ge=1)
    key: str = Field(default="saved_designs")
    cart_key: str = Field(default="tailor_fit_cart")

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LOCAL_STORE_", extra="ignore")


class PersistenceSettings(BaseSettings):
    purge_local_on_remote_save: bool = Field(
        default=False,
        description="Remove local drafts of a product once a design of it is saved to the account",
    )

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PERSISTENCE_", extra="ignore")


class RestoreSettings(BaseSettings):
    hydration_timeout_seconds: float = Field(default=10.0, gt=0)

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RESTORE_", extra="ignore")
