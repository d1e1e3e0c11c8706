"""Runtime settings, read from ``CHESSRULES_*`` environment variables.

An optional ``.env.chessrules`` file in the working directory is read too.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHESSRULES_",
        env_file=".env.chessrules",
        env_file_encoding="utf-8",
    )

    log_level: str = "INFO"

    # HTTP service
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Perft grows roughly 20-30x per ply; keep requests bounded.
    max_perft_depth: int = Field(default=3, ge=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
