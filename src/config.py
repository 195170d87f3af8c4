from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "WardrobeImport"
    debug: bool = False

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False

    default_currency: str = "INR"
    transport_version: str = "1.0"
    scraper_version: str = "1.2.0"

    image_max_bytes: int = 1024 * 1024
    image_max_dimension: int = 800
    image_qualities: List[int] = [80, 60, 40, 20]
    image_fetch_timeout: float = 10.0
    image_fetch_retries: int = 3
    proxy_max_bytes: int = 10 * 1024 * 1024

    # Image proxy used when a merchant CDN refuses direct downloads
    sync_api_url: Optional[str] = None

    duplicate_length_ratio: float = 0.8

    numeric_size_min: int = 24
    numeric_size_max: int = 60
    shoe_size_min: int = 4
    shoe_size_max: int = 20


settings = Settings()
