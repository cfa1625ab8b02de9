from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .services import DEFAULT_PRODUCT_API_URL, DEFAULT_USER_API_URL


class Settings(BaseSettings):
    """Settings read from ``APITASK_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(env_prefix="APITASK_", env_file=".env")

    user_api_url: str = DEFAULT_USER_API_URL
    product_api_url: str = DEFAULT_PRODUCT_API_URL

    log_level: str = "INFO"
    log_format: str = "console"


@lru_cache
def get_settings() -> Settings:
    return Settings()
