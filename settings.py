"""
settings.py
-----------
Environment-driven configuration shared by the CLI and the API.
Values come from the process environment, optionally seeded by a .env file.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()


class Settings(BaseModel):
    # Path of the commented SQL guide; None means the copy shipped in catalog/data
    source_path: Optional[str] = None

    # Format used when --format / ?format= is omitted
    default_format: str = "text"

    # structlog filtering level
    log_level: str = "WARNING"

    # CORS origin allowed by the API
    front_origin: str = "http://localhost:3000"

    @field_validator("source_path", mode="before")
    @classmethod
    def _blank_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


def load_settings() -> Settings:
    """Build Settings from SQLREF_* environment variables."""
    env = {
        "source_path": os.getenv("SQLREF_SOURCE"),
        "default_format": os.getenv("SQLREF_DEFAULT_FORMAT"),
        "log_level": os.getenv("SQLREF_LOG_LEVEL"),
        "front_origin": os.getenv("SQLREF_FRONT_ORIGIN"),
    }
    return Settings(**{k: v for k, v in env.items() if v is not None})


settings = load_settings()
