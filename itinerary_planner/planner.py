"""
planner.py
----------
Turns an ordered list of stops into one combined answer:
- one Gemini call → day-by-day itinerary blocks
- one flight search per consecutive pair of stops, in stop order
A failed flight search only marks its own leg; the request still succeeds.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Iterator, List, Sequence, Tuple

from itinerary_planner.ai import gemini
from itinerary_planner.ai.segmenter import parse_itinerary
from itinerary_planner.config import Settings
from itinerary_planner.core.errors import InvalidRequestError
from itinerary_planner.core.models import (
    Entry,
    FlightLeg,
    ItineraryRequest,
    ItineraryResponse,
)
from itinerary_planner.services import flights

logger = logging.getLogger(__name__)


def parse_date(value) -> dt.date:
    """
    Calendar date from `YYYY-MM-DD` or a full ISO timestamp.
    Timestamps carrying an offset are truncated to their UTC date.
    """
    if isinstance(value, dt.datetime):
        parsed = value
    elif isinstance(value, dt.date):
        return value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            parsed = dt.datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            raise InvalidRequestError(f"Invalid date: {value!r}")
    else:
        raise InvalidRequestError(f"Invalid date: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(dt.timezone.utc)
    return parsed.date()


def consecutive_pairs(entries: Sequence[Entry]) -> Iterator[Tuple[Entry, Entry]]:
    return zip(entries, entries[1:])


def departure_date(origin: Entry) -> dt.date:
    # Flights leave on the last day of the stop being left.
    return origin.end


def fetch_all_legs(entries: Sequence[Entry], settings: Settings) -> List[FlightLeg]:
    """One leg per consecutive pair, fetched one after the other, in order."""
    return [
        flights.fetch_flight_leg(
            origin.location, destination.location, departure_date(origin), settings
        )
        for origin, destination in consecutive_pairs(entries)
    ]


def plan_trip(request: ItineraryRequest, settings: Settings) -> ItineraryResponse:
    """
    Full pass for one request. Raises ConfigurationError / InvalidRequestError
    before any outbound call; everything after that is contained.
    """
    settings.require_credentials()
    entries = list(request.entries or [])
    if not entries:
        raise InvalidRequestError("Invalid or missing entries.")

    logger.info(
        "Planning trip: %s", " → ".join(e.location for e in entries)
    )
    text = gemini.generate_itinerary(gemini.build_prompt(entries), settings)
    itinerary = parse_itinerary(text)

    legs = fetch_all_legs(entries, settings)
    failed = sum(1 for leg in legs if leg.error)
    if failed:
        logger.info("%d of %d flight legs failed", failed, len(legs))

    return ItineraryResponse(itinerary=itinerary, flight_data=legs)
