from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Snapshot settings loaded from ``TREE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Traversal
    max_depth: int = Field(default=64, ge=0)
    max_concurrent_reads: int = Field(default=8, ge=1)

    # File bodies
    encoding: str = "utf-8"
    decode_errors: str = "replace"

    # Logging
    log_level: str = "INFO"


settings = Settings()
