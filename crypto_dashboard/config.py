from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from crypto_dashboard.synth import DEFAULT_TRANSACTION_COUNT


class Settings(BaseSettings):
    seed: int | None = Field(default=None, ge=0)
    transaction_count: int = Field(default=DEFAULT_TRANSACTION_COUNT, ge=0)
    currency_symbol: str = "$"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CRYPTO_DASHBOARD_",
        extra="ignore",
    )


settings = Settings()
