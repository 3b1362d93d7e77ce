"""Application settings with environment variable support."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


# Compute base_dir at module level
_BASE_DIR = Path(__file__).parent.parent.parent.resolve()


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LAKE_",  # LAKE_FEEDS_DIR, LAKE_PORT, etc.
        extra="ignore",
    )

    # Paths - computed from base_dir
    base_dir: Path = _BASE_DIR
    feeds_dir: Path = _BASE_DIR / "data" / "feeds"

    # Storage
    feed_file_suffix: str = ".json"

    # Export
    opml_title: str = "RSS Feeds"
    opml_filename: str = "feeds.opml"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()
