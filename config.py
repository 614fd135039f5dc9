"""
Configuration — loads from .env, provides defaults.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _timeout(value: str) -> Optional[float]:
    # 0 or empty disables the timeout entirely
    if not value or float(value) <= 0:
        return None
    return float(value)


@dataclass
class Settings:
    weather_api_key: str = ""
    weather_base_url: str = "https://api.openweathermap.org"
    request_timeout: Optional[float] = 10.0
    favorites_path: str = "favorites.json"
    default_language: str = "en"
    app_url: str = "http://localhost:8501"
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        return cls(
            weather_api_key=os.getenv("OPENWEATHER_API_KEY", ""),
            weather_base_url=os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org"),
            request_timeout=_timeout(os.getenv("REQUEST_TIMEOUT", "10")),
            favorites_path=os.getenv("FAVORITES_PATH", "favorites.json"),
            default_language=os.getenv("DEFAULT_LANGUAGE", "en"),
            app_url=os.getenv("APP_URL", "http://localhost:8501"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
