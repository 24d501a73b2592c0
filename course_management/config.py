"""Application configuration settings."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Final

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent
DATA_DIR: Final[Path] = BASE_DIR / "data"

DEFAULT_DATABASE_URL: Final[str] = f"sqlite:///{(DATA_DIR / 'courses.db').as_posix()}"
DATABASE_URL: Final[str] = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
SQLALCHEMY_ECHO: Final[bool] = os.getenv("SQLALCHEMY_ECHO") == "1"

LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

API_PREFIX: Final[str] = os.getenv("API_PREFIX", "/api/v1")
CORS_ALLOW_ORIGINS: Final[list[str]] = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

# Populate demo instructors, courses and students on startup.
SEED_DEV_DATA: Final[bool] = os.getenv("SEED_DEV_DATA") == "1"

# The default SQLite file lives under DATA_DIR.
if DATABASE_URL == DEFAULT_DATABASE_URL:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
