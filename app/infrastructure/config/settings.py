"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    database_url: str = ""  # Required when any repository is set to postgres
    listing_repository: str = "in_memory"  # in_memory or postgres
    catalog_repository: str = "in_memory"  # in_memory or postgres
    profile_repository: str = "in_memory"  # in_memory or postgres
    session_store: str = "in_memory"  # in_memory or redis
    redis_url: str = "redis://localhost:6379/0"
    session_ttl_seconds: int = 604800  # 7 days
    max_listing_images: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
