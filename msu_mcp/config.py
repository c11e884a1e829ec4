from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MSU_API_BASE_URL = "https://merchantsafeunipay.com/msu/api/v2"


class Settings(BaseSettings):
    # App
    APP_NAME: str = "msu-mcp"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # MSU gateway
    MSU_API_BASE_URL: str = DEFAULT_MSU_API_BASE_URL
    MSU_MERCHANT: SecretStr = SecretStr("")
    MSU_MERCHANT_USER: SecretStr = SecretStr("")
    MSU_MERCHANT_PASSWORD: SecretStr = SecretStr("")
    # None leaves outbound calls without a timeout
    MSU_REQUEST_TIMEOUT_SECONDS: float | None = None

    # MCP
    MCP_LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def credentials_configured(self) -> bool:
        """Whether all three merchant credentials are non-empty."""
        return all(
            secret.get_secret_value()
            for secret in (self.MSU_MERCHANT, self.MSU_MERCHANT_USER, self.MSU_MERCHANT_PASSWORD)
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
