#!/usr/bin/env python3
"""
play today's investle in the terminal.

usage:
    python scripts/play.py
    python scripts/play.py --date 2025-03-09

type a ticker or part of a company name; ctrl-d quits.
"""

import argparse
import sys
from datetime import datetime, time
from pathlib import Path
from zoneinfo import ZoneInfo

# add parent dir to path so we can import investle
sys.path.insert(0, str(Path(__file__).parent.parent))

from investle.catalog import InvalidCatalog, load_catalog
from investle.config import Config
from investle.daily import parse_date
from investle.display import (
    HEADERS,
    format_row,
    guesses_counter,
    reveal_text,
    status_message,
)
from investle.session import GameSession


def print_table(session: GameSession) -> None:
    rows = [list(HEADERS)] + [format_row(g, c) for g, c in session.comparisons()]
    widths = [max(len(row[i]) for row in rows) for i in range(len(HEADERS))]
    for row in rows:
        print("  " + "  ".join(cell.ljust(w) for cell, w in zip(row, widths)))


def main():
    parser = argparse.ArgumentParser(description="play investle in the terminal")
    parser.add_argument("--date", type=str, default=None, help="play a specific day YYYY-MM-DD")
    parser.add_argument("--catalog", type=Path, default=None, help="path to stocks.json")

    args = parser.parse_args()
    config = Config()
    tz = ZoneInfo(config.day_boundary_tz)

    if args.date:
        now = datetime.combine(parse_date(args.date), time(12, 0), tzinfo=tz)
    else:
        now = datetime.now(tz)

    print("Loading stock universe…")
    try:
        catalog = load_catalog(config, path=args.catalog)
    except (OSError, InvalidCatalog) as e:
        print(f"Error loading stock data: {e}")
        sys.exit(1)

    session = GameSession.for_day(catalog, now, config)
    print(f"Guess the mystery stock in {session.max_guesses} tries.")
    print("Type a ticker or company name to start guessing.")

    while not session.is_over:
        try:
            raw = input(f"\n[{guesses_counter(session)}] guess> ")
        except EOFError:
            print()
            return

        outcome = session.submit(raw)
        if outcome.accepted:
            print_table(session)
        print(status_message(outcome, session))

    print()
    print(reveal_text(session.revealed_secret))


if __name__ == "__main__":
    main()
