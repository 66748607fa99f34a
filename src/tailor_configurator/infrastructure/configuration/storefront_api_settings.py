from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CustomerApiSettings(BaseSettings):
    base_url: str = Field(default="http://localhost:5000")
    timeout_seconds: float = Field(default=10.0, gt=0)

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CUSTOMER_API_", extra="ignore")


class OrderApiSettings(BaseSettings):
    base_url: str = Field(default="http://localhost:5000")
    timeout_seconds: float = Field(default=15.0, gt=0)

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ORDER_API_", extra="ignore")
