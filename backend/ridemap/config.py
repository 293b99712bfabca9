"""
Process configuration read from the environment.

Example .env:
    RIDEMAP_API_BASE=http://localhost:8080
    RIDEMAP_API_TIMEOUT=5
    RIDEMAP_LOG_LEVEL=DEBUG
"""
from typing import Optional
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, validator

load_dotenv()


class Settings(BaseModel):
    api_base: str = "http://localhost:8080"
    api_timeout: float = Field(5.0, gt=0)
    default_width: int = Field(1280, gt=0)
    default_height: int = Field(800, gt=0)
    dpi: int = Field(100, gt=0)
    log_level: str = "INFO"

    @validator('api_base')
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/')

    @validator('log_level')
    def normalize_log_level(cls, v: str) -> str:
        v = v.upper().strip()
        allowed = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        return v if v in allowed else "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        values = {
            "api_base": os.getenv("RIDEMAP_API_BASE"),
            "api_timeout": os.getenv("RIDEMAP_API_TIMEOUT"),
            "default_width": os.getenv("RIDEMAP_DEFAULT_WIDTH"),
            "default_height": os.getenv("RIDEMAP_DEFAULT_HEIGHT"),
            "dpi": os.getenv("RIDEMAP_DPI"),
            "log_level": os.getenv("RIDEMAP_LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
