"""Print the subsolar point and zenith line for a UTC date and time."""

import argparse
import logging

from solar_zenith.controls import combine, format_date_value, format_time_value, now
from solar_zenith.geometry import day_of_year, get_solar_info
from solar_zenith.summary import describe


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--date", help="UTC date as YYYY-MM-DD (default: today)")
    parser.add_argument("--time", help="UTC time as HH:MM (default: now)")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    current = now()
    try:
        instant = combine(
            args.date or format_date_value(current),
            args.time or format_time_value(current),
        )
    except ValueError as exc:
        parser.error(str(exc))

    info = get_solar_info(instant)

    print("=== Solar Zenith Snapshot ===")
    print(f"Day of year: {day_of_year(instant)}")
    for line in describe(info, instant):
        print(line)
    print()
    print("--- Zenith Line ---")
    first, last = info.zenith_line[0], info.zenith_line[-1]
    print(f"Points: {len(info.zenith_line)}")
    print(f"Latitude: {first.lat:.4f}°")
    print(f"Longitude span: {first.lng:.0f}° to {last.lng:.0f}°")


if __name__ == "__main__":
    main()
