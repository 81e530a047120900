"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - catalog_data_dir defaults to the bundled data set

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with `uvicorn catalog.main:app`
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Static collections
    catalog_data_dir: Path = DEFAULT_DATA_DIR

    @field_validator("catalog_data_dir", mode="before")
    @classmethod
    def expand_data_dir(cls, v):
        """Allow ~ in CATALOG_DATA_DIR."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
