"""
config.py
---------
Runtime settings, read from the environment (and `.env` via python-dotenv).
Settings are rebuilt on every request: a process started without its keys
answers every request with a configuration error instead of crashing.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from itinerary_planner.core.errors import ConfigurationError

load_dotenv()

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_CURRENCY = "INR"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}.")


@dataclass(frozen=True)
class Settings:
    gemini_api_key: Optional[str]
    rapidapi_key: Optional[str]
    gemini_model: str = DEFAULT_MODEL
    flight_currency: str = DEFAULT_CURRENCY
    gemini_timeout: float = 30.0
    flight_timeout: float = 10.0

    def require_credentials(self) -> None:
        missing = []
        if not self.gemini_api_key:
            missing.append("GEMINI_API_KEY")
        if not self.rapidapi_key:
            missing.append("RAPIDAPI_KEY")
        if missing:
            raise ConfigurationError(
                "Missing API configuration: " + ", ".join(missing)
            )


def get_settings() -> Settings:
    return Settings(
        gemini_api_key=(
            os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_GENERATIVE_AI_API_KEY")
        ),
        rapidapi_key=os.getenv("RAPIDAPI_KEY"),
        gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        flight_currency=(os.getenv("FLIGHT_CURRENCY") or DEFAULT_CURRENCY).upper(),
        gemini_timeout=_float_env("GEMINI_TIMEOUT", 30.0),
        flight_timeout=_float_env("FLIGHT_TIMEOUT", 10.0),
    )
