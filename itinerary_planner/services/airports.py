# services/airports.py

from __future__ import annotations

from types import MappingProxyType
from typing import List, Optional

# Lower-case city name → IATA code. Regional coverage only.
_CITY_TO_IATA = MappingProxyType({
    "mumbai": "BOM",
    "delhi": "DEL",
    "bangalore": "BLR",
    "chennai": "MAA",
    "kolkata": "CCU",
    "hyderabad": "HYD",
    "ahmedabad": "AMD",
    "pune": "PNQ",
    "goa": "GOI",
    "jaipur": "JAI",
    "lucknow": "LKO",
    "cochin": "COK",
    "trivandrum": "TRV",
    "varanasi": "VNS",
    "guwahati": "GAU",
    "surat": "STV",
    "ranchi": "IXR",
    "bhopal": "BHO",
    "chandigarh": "IXC",
    "indore": "IDR",
    "nagpur": "NAG",
    "vadodara": "BDQ",
    "bhubaneshwar": "BBI",
})


def get_iata_code(city: str) -> Optional[str]:
    """IATA code for `city`, or None when the city is not in the table."""
    if not city:
        return None
    return _CITY_TO_IATA.get(city.strip().lower())


def known_cities() -> List[str]:
    return sorted(name.title() for name in _CITY_TO_IATA)
