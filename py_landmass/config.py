"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LANDMASS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Map Generation Configuration
    default_map_width: int = Field(default=50, description="Default map width in cells")
    default_map_height: int = Field(default=50, description="Default map height in cells")
    max_map_width: int = Field(default=256, description="Max allowed map width")
    max_map_height: int = Field(default=256, description="Max allowed map height")
    noise_scale: float = Field(default=0.1, description="Noise sampling scale")
    threshold: float = Field(default=0.5, description="Land threshold")
    seed: int = Field(default=0, description="Map seed (0 picks a random seed)")
    land_tile: str = Field(default="grass_cliff", description="Tile painted for land cells")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")


settings = Settings()
