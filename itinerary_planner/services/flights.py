"""
services/flights.py
-------------------
Flight search through the Booking.com API on RapidAPI (booking-com15).
- City → IATA through the static airport table
- Non-stop economy search for one adult, first page, "BEST" sort
- Every failure stays inside its own leg: the caller always gets a FlightLeg
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import List, Optional

import requests

from itinerary_planner.config import Settings
from itinerary_planner.core.errors import FlightSearchError
from itinerary_planner.core.models import AirlineOption, FlightLeg, MinPrice
from itinerary_planner.services.airports import get_iata_code

logger = logging.getLogger(__name__)

_HOST = "booking-com15.p.rapidapi.com"
_SEARCH_URL = f"https://{_HOST}/api/v1/flights/searchFlights"

MISSING_IATA = "Missing IATA code for origin or destination"
MISSING_AGGREGATION = "Missing aggregation.airlines in API response"

_NANOS_PER_UNIT = 1_000_000_000


# ──────────────────────────────────────────────────────────────────────────────
# Internal helpers
# ──────────────────────────────────────────────────────────────────────────────
def _search(params: dict, settings: Settings) -> dict:
    """
    Raw call to searchFlights.
    Raises FlightSearchError carrying the API's own message on 4xx/5xx.
    """
    headers = {
        "x-rapidapi-host": _HOST,
        "x-rapidapi-key": settings.rapidapi_key,
    }
    r = requests.get(
        _SEARCH_URL, params=params, headers=headers, timeout=settings.flight_timeout
    )

    if r.status_code >= 400:
        try:
            msg = r.json().get("message", r.text)
        except ValueError:
            msg = r.text
        raise FlightSearchError(f"flight search {r.status_code}: {msg}")

    payload = r.json()
    logger.debug("Flight API raw response: %s", payload)
    return payload


def _int(value) -> int:
    return int(value) if value is not None else 0


def _min_price(raw: Optional[dict]) -> Optional[MinPrice]:
    if not raw:
        return None
    units = _int(raw.get("units"))
    nanos = _int(raw.get("nanos"))
    # nanos: at most 999,999,999 in magnitude, never opposite in sign to units
    if abs(nanos) >= _NANOS_PER_UNIT or units * nanos < 0:
        raise FlightSearchError(
            f"Malformed airline entry in API response: price {units}/{nanos}"
        )
    return MinPrice(currency_code=raw.get("currencyCode"), units=units, nanos=nanos)


def parse_airlines(payload: dict) -> List[AirlineOption]:
    """Turn the `data.aggregation.airlines` block into AirlineOption objects."""
    if not isinstance(payload, dict):
        raise FlightSearchError(MISSING_AGGREGATION)
    if payload.get("status") is False and not payload.get("data"):
        raise FlightSearchError(payload.get("message") or "Flight search failed")

    data = payload.get("data")
    if not isinstance(data, dict):
        raise FlightSearchError(MISSING_AGGREGATION)
    aggregation = data.get("aggregation")
    if not isinstance(aggregation, dict):
        raise FlightSearchError(MISSING_AGGREGATION)
    airlines = aggregation.get("airlines")
    if airlines is None:
        raise FlightSearchError(MISSING_AGGREGATION)

    try:
        return [
            AirlineOption(
                name=a.get("name"),
                logo_url=a.get("logoUrl"),
                iata_code=a.get("iataCode"),
                flight_count=_int(a.get("count")),
                min_price=_min_price(a.get("minPrice")),
            )
            for a in airlines
        ]
    except (AttributeError, TypeError, ValueError) as exc:
        raise FlightSearchError(f"Malformed airline entry in API response: {exc}")


def build_search_params(
    origin_iata: str, destination_iata: str, depart_date: dt.date, currency: str
) -> dict:
    return {
        "fromId": f"{origin_iata}.AIRPORT",
        "toId": f"{destination_iata}.AIRPORT",
        "departDate": depart_date.isoformat(),
        "stops": "none",
        "pageNo": 1,
        "adults": 1,
        "sort": "BEST",
        "cabinClass": "ECONOMY",
        "currency_code": currency,
    }


# ──────────────────────────────────────────────────────────────────────────────
# Public function
# ──────────────────────────────────────────────────────────────────────────────
def fetch_flight_leg(
    origin: str, destination: str, depart_date: dt.date, settings: Settings
) -> FlightLeg:
    """
    Airlines flying non-stop from `origin` to `destination` on `depart_date`.
    Never raises: failures come back as a leg with no airlines and `error` set.
    """
    origin_iata = get_iata_code(origin)
    destination_iata = get_iata_code(destination)
    if not origin_iata or not destination_iata:
        logger.info("No IATA code for %s → %s, skipping search", origin, destination)
        return FlightLeg(origin=origin, destination=destination, error=MISSING_IATA)

    params = build_search_params(
        origin_iata, destination_iata, depart_date, settings.flight_currency
    )
    logger.info(
        "Searching flights %s → %s on %s", origin_iata, destination_iata, params["departDate"]
    )
    try:
        airlines = parse_airlines(_search(params, settings))
    except (requests.RequestException, ValueError, FlightSearchError) as exc:
        logger.warning("Flight fetch error %s → %s: %s", origin, destination, exc)
        return FlightLeg(
            origin=origin,
            destination=destination,
            error=str(exc) or "Failed to fetch flights",
        )

    return FlightLeg(origin=origin, destination=destination, airlines=airlines)
