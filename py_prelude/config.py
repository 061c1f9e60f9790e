"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Prelude settings pulled from PRELUDE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PRELUDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Sampling
    poisson_disc_attempts: int = Field(
        default=30, gt=0, description="Default candidate attempts per active point"
    )
    max_grid_cells: int = Field(
        default=10_000_000, gt=0, description="Largest spatial grid the disc sampler will allocate"
    )


settings = Settings()
