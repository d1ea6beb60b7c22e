# connects input (city names) to the service and prints 5 day forecast cards

from __future__ import annotations
import argparse
import logging
from dataclasses import replace
from typing import List, Optional
from zoneinfo import ZoneInfoNotFoundError

from .config import Settings
from .display import card_lines, chart_series
from .errors import NotConfigured, user_message
from .service import forecast_all
from .units import TemperatureUnit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weathercards", description="5-day weather forecast cards")
    parser.add_argument("cities", nargs="+", metavar="CITY", help="city name, e.g. Lisbon or 'Porto,PT'")
    parser.add_argument("--unit", choices=[u.value for u in TemperatureUnit], help="temperature unit")
    parser.add_argument("--locale", help="date locale tag, e.g. pt-PT or en-US")
    parser.add_argument("--timezone", help="utc, city, or an IANA key like Europe/Lisbon")
    parser.add_argument("--with-time", action="store_true", help="show the sample time next to the date")
    parser.add_argument("--chart", action="store_true", help="also print the temperature series")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
        overrides = {}
        if args.unit:
            overrides["unit"] = TemperatureUnit(args.unit)
        if args.locale:
            overrides["locale"] = args.locale
        if args.timezone:
            overrides["timezone"] = args.timezone
        settings = replace(settings, **overrides)
        settings.timezone_policy()  # fail early on an unknown IANA key
    except (ValueError, ZoneInfoNotFoundError) as exc:
        print(f"Configuration error: {exc}")
        return 2

    # blank entries are ignored, same as submitting an empty search box
    cities = [c.strip() for c in args.cities if c.strip()]
    if not cities:
        print("No city given.")
        return 1

    try:
        results = forecast_all(cities, settings, with_time=args.with_time)
    except NotConfigured as exc:
        print(user_message(exc))
        return 2

    failed = False
    for result in results:
        if not result.ok:
            failed = True
            print(f"Error for {result.city}: {user_message(result.error)}")
            print()
            continue
        print(f"5-Day Forecast for {result.city}")
        for line in card_lines(result.forecast, settings.unit):
            print(f"  {line}")
        if args.chart:
            labels, values = chart_series(result.forecast, settings.unit)
            print("  " + " | ".join(f"{label}: {value}{settings.unit.symbol}" for label, value in zip(labels, values)))
        print()
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
