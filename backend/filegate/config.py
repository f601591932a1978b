"""FileGate configuration, Pydantic BaseSettings loaded from env / .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings. CLI flags override the env-provided values."""

    app_name: str = "FileGate"
    debug: bool = False
    log_level: str = "INFO"

    # Network
    host: str = "localhost"
    port: int = 8080
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    # Served tree
    root_dir: str | None = None
    frontend_dir: str = "./frontend"

    # Bytes read from each file while listing; 0 disables the read
    probe_bytes: int = 512

    # Uvicorn keep-alive idle timeout
    idle_timeout_seconds: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FILEGATE_",
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str) and not value.startswith("["):
            return [o.strip() for o in value.split(",") if o.strip()]
        if isinstance(value, list):
            return value
        return ["*"]

    @field_validator("probe_bytes")
    @classmethod
    def _non_negative_probe(cls, value: int) -> int:
        if value < 0:
            raise ValueError("probe_bytes must be >= 0")
        return value

    @property
    def root_path(self) -> Path:
        """Absolute root directory. Raises if no root was configured."""
        if not self.root_dir:
            raise ValueError("root_dir is not configured (use -s or FILEGATE_ROOT_DIR)")
        return Path(self.root_dir).expanduser().resolve()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
