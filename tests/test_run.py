# tests/test_run.py

import argparse
import datetime
from unittest.mock import MagicMock

import pytest

from itinerary_planner import run
from itinerary_planner.core.models import AirlineOption, FlightLeg, ItineraryResponse, MinPrice


def test_parse_stop():
    entry = run.parse_stop("Mumbai:2025-06-01:2025-06-03")
    assert entry.location == "Mumbai"
    assert entry.start == datetime.date(2025, 6, 1)
    assert entry.end == datetime.date(2025, 6, 3)


@pytest.mark.parametrize("value", [
    "Mumbai", "Mumbai:2025-06-01", ":2025-06-01:2025-06-02",
    "Mumbai:yesterday:2025-06-02", "Mumbai:2025-06-05:2025-06-02",
])
def test_parse_stop_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError):
        run.parse_stop(value)


def test_list_cities(capsys):
    assert run.main(["--list-cities"]) == 0
    assert "Mumbai" in capsys.readouterr().out


def test_prints_itinerary_and_legs(monkeypatch, api_env, capsys):
    result = ItineraryResponse(
        itinerary=["**Day 1 (June 1):** Beach"],
        flight_data=[
            FlightLeg("Mumbai", "Goa", airlines=[
                AirlineOption("IndiGo", None, "6E", 3, MinPrice("INR", 3999, 0)),
            ]),
            FlightLeg("Goa", "Paris", error="Missing IATA code for origin or destination"),
        ],
    )
    plan = MagicMock(return_value=result)
    monkeypatch.setattr(run.planner, "plan_trip", plan)

    code = run.main([
        "--stop", "Mumbai:2025-06-01:2025-06-03",
        "--stop", "Goa:2025-06-03:2025-06-05",
        "--stop", "Paris:2025-06-05:2025-06-07",
    ])

    assert code == 0
    out = capsys.readouterr().out
    assert "Beach" in out
    assert "IndiGo" in out and "INR 3,999.00" in out
    assert "Missing IATA code" in out
    assert len(plan.call_args.args[0].entries) == 3


def test_missing_keys_exit_code(monkeypatch, capsys):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_GENERATIVE_AI_API_KEY", raising=False)
    monkeypatch.delenv("RAPIDAPI_KEY", raising=False)
    assert run.main(["--stop", "Goa:2025-06-03:2025-06-05"]) == 1
