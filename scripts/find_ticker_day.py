#!/usr/bin/env python3
"""
find the next date a given ticker is the secret.
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

# add parent dir to path so we can import investle
sys.path.insert(0, str(Path(__file__).parent.parent))

from investle.catalog import InvalidCatalog, load_catalog
from investle.config import Config
from investle.daily import next_date_for_ticker, parse_date


def main():
    parser = argparse.ArgumentParser(description="find the next day a ticker is the secret")
    parser.add_argument("--ticker", type=str, required=True, help="ticker to look for")
    parser.add_argument("--from-date", type=str, default=None, help="start date YYYY-MM-DD (default: today)")
    parser.add_argument("--catalog", type=Path, default=None, help="path to stocks.json")

    args = parser.parse_args()
    config = Config()

    if args.from_date:
        try:
            start = parse_date(args.from_date)
        except ValueError as e:
            print(f"error: {e}")
            sys.exit(1)
    else:
        start = datetime.now(ZoneInfo(config.day_boundary_tz)).date()

    try:
        catalog = load_catalog(config, path=args.catalog)
    except (OSError, InvalidCatalog) as e:
        print(f"error: {e}")
        sys.exit(1)

    try:
        when = next_date_for_ticker(catalog, args.ticker, start, config)
    except KeyError:
        print(f"'{args.ticker}' not found in catalog")
        sys.exit(1)

    wait = (when - start).days
    print(f"ticker: {args.ticker.upper()}")
    print(f"catalog size: {len(catalog):,} (each ticker comes up once every {len(catalog)} days)")
    if wait == 0:
        print(f"'{args.ticker.upper()}' is the secret on {when.isoformat()}!")
    else:
        print(f"next secret day: {when.isoformat()} (in {wait} days)")


if __name__ == "__main__":
    main()
