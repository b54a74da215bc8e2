import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from .configuration.lending_limits import DEFAULT_ANNUAL_RATE_PERCENT


if Path(".env.dev").exists():
    load_dotenv(".env.dev", override=False)

load_dotenv(".env", override=False)

ENVIRONMENT = os.getenv("ENVIRONMENT", "dev").lower()
ENV_FILE = ".env.dev" if ENVIRONMENT == "dev" else ".env"


class Settings(BaseSettings):
    """Application settings with environment variable loading."""

    # API Configuration
    app_name: str = "mortgage-quotes"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = ENVIRONMENT

    # CORS Configuration
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Remote quote source (AEM persisted query)
    quote_source_url: str = (
        "https://publish-p147324-e1509924.adobeaemcloud.com"
        "/graphql/execute.json/global/mortgageFixed"
    )
    quote_list_field: str = "mortgageFixedList"
    quote_request_timeout_seconds: float = 5.0

    # Calculator Configuration
    default_annual_rate_percent: float = DEFAULT_ANNUAL_RATE_PERCENT
    currency_symbol: str = "£"

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
