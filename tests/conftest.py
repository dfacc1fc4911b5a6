# tests/conftest.py

import datetime

import pytest

from itinerary_planner.config import Settings
from itinerary_planner.core.models import Entry


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-gemini", rapidapi_key="test-rapid")


@pytest.fixture
def api_env(monkeypatch):
    """Environment with both keys set and nothing inherited from the shell."""
    for name in ("GOOGLE_GENERATIVE_AI_API_KEY", "GEMINI_MODEL", "FLIGHT_CURRENCY",
                 "GEMINI_TIMEOUT", "FLIGHT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini")
    monkeypatch.setenv("RAPIDAPI_KEY", "test-rapid")


def make_entry(city, start, end):
    return Entry(
        location=city,
        start=datetime.date.fromisoformat(start),
        end=datetime.date.fromisoformat(end),
    )


def airline_payload(*airlines):
    """Minimal searchFlights body carrying an airline aggregation block."""
    return {"status": True, "data": {"aggregation": {"airlines": list(airlines)}}}


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=""):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload
