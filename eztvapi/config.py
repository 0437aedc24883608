from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for the eztv API clients."""

    model_config = SettingsConfigDict(env_prefix="EZTV_", case_sensitive=False)

    # Show metadata service
    show_api_url: str = Field(
        default="http://eztvapi.ml", description="Base URL of the show metadata API"
    )

    # Torrent index service
    torrent_api_url: str = Field(
        default="https://eztvx.to", description="Base URL of the torrent index API"
    )
    page_size: int = Field(
        default=100, gt=0, description="Number of torrents requested per page"
    )
    max_pages: int = Field(
        default=20, gt=0, description="Maximum number of pages fetched for one show"
    )

    # HTTP
    timeout_seconds: float = Field(
        default=30.0, description="Timeout for a single HTTP request in seconds"
    )
    user_agent: str = Field(
        default="eztvapi/1.0", description="User-Agent header sent with requests"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
