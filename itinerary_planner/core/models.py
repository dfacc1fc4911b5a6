# core/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

_NANOS_PER_UNIT = 1_000_000_000


@dataclass(frozen=True)
class Entry:
    location: str
    start: date
    end: date


@dataclass(frozen=True)
class ItineraryRequest:
    entries: List[Entry]


@dataclass(frozen=True)
class MinPrice:
    currency_code: Optional[str]
    units: int = 0
    nanos: int = 0

    @property
    def amount(self) -> Decimal:
        return Decimal(self.units) + Decimal(self.nanos) / _NANOS_PER_UNIT

    def display(self) -> str:
        return f"{self.currency_code or ''} {self.amount:,.2f}".strip()

    def to_dict(self) -> dict:
        return {
            "currencyCode": self.currency_code,
            "units": self.units,
            "nanos": self.nanos,
        }


@dataclass(frozen=True)
class AirlineOption:
    name: str
    logo_url: Optional[str]
    iata_code: Optional[str]
    flight_count: int
    min_price: Optional[MinPrice] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "logoUrl": self.logo_url,
            "iataCode": self.iata_code,
            "flightCount": self.flight_count,
            "minPrice": self.min_price.to_dict() if self.min_price else None,
        }


@dataclass
class FlightLeg:
    origin: str
    destination: str
    airlines: List[AirlineOption] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict:
        out = {
            "from": self.origin,
            "to": self.destination,
            "airlines": [a.to_dict() for a in self.airlines],
        }
        if self.error is not None:
            out["error"] = self.error
        return out


@dataclass
class ItineraryResponse:
    itinerary: List[str] = field(default_factory=list)
    flight_data: List[FlightLeg] = field(default_factory=list)
    success: bool = True

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "itinerary": list(self.itinerary),
            "flightData": [leg.to_dict() for leg in self.flight_data],
        }
