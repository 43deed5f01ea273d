from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel
from dotenv import load_dotenv
import os


class Settings(BaseModel):
    cors_origins: list[str]
    max_text_chars: int
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    load_dotenv()

    cors = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    cors_origins = [o.strip() for o in cors.split(",") if o.strip()]

    max_text_chars = int(os.getenv("MAX_TEXT_CHARS", "100000"))
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(
        cors_origins=cors_origins,
        max_text_chars=max_text_chars,
        log_level=log_level,
    )
