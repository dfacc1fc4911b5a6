# run.py

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from rich import print
from rich.logging import RichHandler
from rich.markup import escape

from itinerary_planner import planner
from itinerary_planner.config import get_settings
from itinerary_planner.core.errors import ConfigurationError, InvalidRequestError
from itinerary_planner.core.models import Entry, ItineraryRequest
from itinerary_planner.services.airports import known_cities


def parse_stop(value: str) -> Entry:
    """`City:YYYY-MM-DD:YYYY-MM-DD` → Entry (the city itself may not contain ':')."""
    parts = value.split(":")
    if len(parts) != 3 or not parts[0].strip():
        raise argparse.ArgumentTypeError(
            f"expected CITY:FROM:TO, got {value!r}"
        )
    try:
        start = planner.parse_date(parts[1])
        end = planner.parse_date(parts[2])
    except InvalidRequestError as e:
        raise argparse.ArgumentTypeError(str(e))
    if end < start:
        raise argparse.ArgumentTypeError(f"{value!r}: end date before start date")
    return Entry(location=parts[0].strip(), start=start, end=end)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="itinerary-planner",
        description="Day-by-day itinerary and flights for a multi-stop trip.",
    )
    p.add_argument(
        "--stop", dest="stops", action="append", type=parse_stop, default=[],
        metavar="CITY:FROM:TO", help="one stop, in visiting order (repeatable)",
    )
    p.add_argument("--list-cities", action="store_true",
                   help="print the cities with a known airport and exit")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )

    if args.list_cities:
        for city in known_cities():
            print(f"- {city}")
        return 0

    if not args.stops:
        print("[red]At least one --stop is required.[/]")
        return 2

    try:
        settings = get_settings()
        print("[cyan]→ Itinerary and flights…[/]")
        result = planner.plan_trip(ItineraryRequest(entries=args.stops), settings)
    except ConfigurationError as e:
        print(f"[red]{e}[/]")
        return 1

    print("[bold green]Itinerary:[/]")
    for block in result.itinerary:
        print(escape(block))
        print()

    for leg in result.flight_data:
        print(f"[yellow]{leg.origin} → {leg.destination}[/]")
        if leg.error:
            print(f"  [red]{escape(leg.error)}[/]")
            continue
        if not leg.airlines:
            print("  No non-stop flights found.")
        for a in leg.airlines:
            price = a.min_price.display() if a.min_price else "n/a"
            print(f"  {escape(a.name or '?')} ({a.iata_code}) – {a.flight_count} flights from {price}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
