#!/usr/bin/env python3
"""
show which stock is the secret for a given day.

usage:
    python scripts/show_day.py
    python scripts/show_day.py --date 2025-03-09 --reveal
    python scripts/show_day.py --upcoming 7 --reveal

the secret itself stays hidden unless --reveal is passed.
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

# add parent dir to path so we can import investle
sys.path.insert(0, str(Path(__file__).parent.parent))

from investle.catalog import InvalidCatalog, build_ticker_to_id, load_catalog
from investle.config import Config
from investle.daily import (
    day_index_for_date,
    daily_permutation,
    parse_date,
    slot_for_day,
    upcoming_secrets,
)


def main():
    parser = argparse.ArgumentParser(description="show the daily investle secret")
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="target date YYYY-MM-DD (default: today in the day-boundary timezone)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="path to stocks.json (default: data/stocks.json)",
    )
    parser.add_argument(
        "--upcoming",
        type=int,
        default=0,
        help="also list the next N days",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="print the secret ticker and name",
    )

    args = parser.parse_args()
    config = Config()

    # resolve date
    if args.date:
        try:
            target = parse_date(args.date)
        except ValueError as e:
            print(f"error: {e}")
            sys.exit(1)
    else:
        target = datetime.now(ZoneInfo(config.day_boundary_tz)).date()

    catalog_path = args.catalog or config.catalog_path
    if not catalog_path.exists():
        print(f"error: catalog not found at {catalog_path}")
        sys.exit(1)

    print(f"loading catalog from {catalog_path}...")
    try:
        catalog = load_catalog(config, path=catalog_path, verbose=True)
    except InvalidCatalog as e:
        print(f"error: {e}")
        sys.exit(1)

    n = len(catalog)
    index = day_index_for_date(target, config)
    slot = slot_for_day(index, n)
    perm = daily_permutation(n, config.shuffle_seed)
    secret = catalog[int(perm[slot])]

    print(f"date: {target.isoformat()} ({config.day_boundary_tz})")
    print(f"day index: {index}")
    print(f"slot: {slot} / {n}")
    if args.reveal:
        print(f"secret: {secret.ticker} – {secret.name}")
    else:
        ticker_to_id = build_ticker_to_id(catalog)
        print(f"secret selected (catalog id={ticker_to_id[secret.ticker.upper()]})")

    if args.upcoming > 0:
        print(f"\nnext {args.upcoming} days:")
        for day, entity in upcoming_secrets(catalog, target, args.upcoming, config):
            label = entity.ticker if args.reveal else "??"
            print(f"  {day.isoformat()}  {label}")


if __name__ == "__main__":
    main()
