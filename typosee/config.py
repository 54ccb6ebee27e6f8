"""
Settings for typosee, loaded from the environment or a `.env` file.

Every field can be overridden with a `TYPOSEE_`-prefixed variable:

    TYPOSEE_SKIP_HEADER=false
    TYPOSEE_LOG_LEVEL=debug
"""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scan and logging settings."""

    # Threshold bounds accepted on the command line
    MIN_THRESHOLD: int = 1
    MAX_THRESHOLD: int = 100

    # Input
    SKIP_HEADER: bool = True  # first line of the subdomain file is a header row
    FILE_ENCODING: str = "utf-8"
    FILE_ERRORS: str = "surrogateescape"  # codec error handler for input and stdout

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="TYPOSEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v!r}")
        return level

    def threshold_in_range(self, threshold: int) -> bool:
        """Check a threshold against the configured bounds."""
        return self.MIN_THRESHOLD <= threshold <= self.MAX_THRESHOLD


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Cached so the environment is parsed once per process.
    """
    return Settings()
