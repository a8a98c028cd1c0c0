# gabinete/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    uploads_dir: str
    host: str
    port: int
    cors_origins: tuple[str, ...]
    rate_limit_per_minute: int
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("CORS_ORIGINS", "*")
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", "gabinete.duckdb"),
        uploads_dir=os.environ.get("UPLOADS_DIR", "uploads"),
        host=os.environ.get("HOST", "0.0.0.0"),  # noqa: S104
        port=int(os.environ.get("PORT", "3001")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "120")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
