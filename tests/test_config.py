# tests/test_config.py

import pytest

from itinerary_planner.config import get_settings
from itinerary_planner.core.errors import ConfigurationError


def test_defaults(api_env):
    s = get_settings()
    assert s.gemini_model == "gemini-1.5-flash"
    assert s.flight_currency == "INR"
    assert s.flight_timeout == 10.0
    s.require_credentials()


def test_fallback_key_name(api_env, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY")
    monkeypatch.setenv("GOOGLE_GENERATIVE_AI_API_KEY", "legacy")
    assert get_settings().gemini_api_key == "legacy"


def test_overrides(api_env, monkeypatch):
    monkeypatch.setenv("FLIGHT_CURRENCY", "usd")
    monkeypatch.setenv("GEMINI_TIMEOUT", "12.5")
    s = get_settings()
    assert s.flight_currency == "USD"
    assert s.gemini_timeout == 12.5


def test_missing_keys_named(api_env, monkeypatch):
    monkeypatch.delenv("RAPIDAPI_KEY")
    with pytest.raises(ConfigurationError, match="RAPIDAPI_KEY"):
        get_settings().require_credentials()


def test_bad_timeout(api_env, monkeypatch):
    monkeypatch.setenv("FLIGHT_TIMEOUT", "fast")
    with pytest.raises(ConfigurationError):
        get_settings()
