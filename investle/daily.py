"""
deterministic secret selection based on date.

the catalog is shuffled once with a fixed seed (mulberry32 + fisher-yates)
and each calendar day walks one slot further through that permutation.
same date + same catalog → same secret, no matter where/when you run it.
"""

import re
from datetime import date, datetime, timedelta
from typing import Sequence
from zoneinfo import ZoneInfo

import numpy as np
from numpy.typing import NDArray

from .catalog import Entity, require_catalog
from .config import Config, DEFAULT_CONFIG
from .prng import Mulberry32

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def civil_date(now: datetime, config: Config = DEFAULT_CONFIG) -> date:
    """
    the calendar date of `now` in the day-boundary timezone.

    raises ValueError for naive datetimes: without an offset we can't
    tell which day the caller is in.
    """
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("now must be timezone-aware")
    return now.astimezone(ZoneInfo(config.day_boundary_tz)).date()


def parse_date(value: str | date) -> date:
    """accept a date or a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        raise TypeError("pass a civil date, not a datetime (use day_index for instants)")
    if isinstance(value, date):
        return value
    if not DATE_RE.match(value):
        raise ValueError(f"date must be YYYY-MM-DD, got: {value}")
    return date.fromisoformat(value)


def day_index_for_date(value: str | date, config: Config = DEFAULT_CONFIG) -> int:
    """whole calendar days from config.game_start to `value` (may be negative)."""
    # date subtraction counts calendar days, so DST never shifts it
    return (parse_date(value) - config.game_start).days


def day_index(now: datetime, config: Config = DEFAULT_CONFIG) -> int:
    """day index of an instant, using the civil date in the reference zone."""
    return day_index_for_date(civil_date(now, config), config)


def daily_permutation(n: int, seed: int) -> NDArray[np.int64]:
    """
    fisher-yates shuffle of positions 0..n-1 driven by mulberry32.

    walks i = n-1 down to 1 and swaps with j = floor(rng() * (i + 1)).

    args:
        n: catalog size
        seed: shuffle seed

    returns:
        permutation array, shape (n,); slot s → catalog position perm[s]
    """
    if n < 1:
        raise ValueError(f"permutation size must be >= 1, got {n}")

    rng = Mulberry32(seed)
    perm = np.arange(n, dtype=np.int64)

    for i in range(n - 1, 0, -1):
        j = int(rng() * (i + 1))
        perm[i], perm[j] = perm[j], perm[i]

    return perm


def inverse_permutation(perm: NDArray[np.int64]) -> NDArray[np.int64]:
    """slot_of[pos] = slot at which catalog position pos comes up."""
    slot_of = np.empty(len(perm), dtype=np.int64)
    slot_of[perm] = np.arange(len(perm), dtype=np.int64)
    return slot_of


def slot_for_day(index: int, n: int) -> int:
    """true modulo, so days before game_start still land in 0..n-1."""
    return ((index % n) + n) % n


def _secret_for_index(
    catalog: Sequence[Entity],
    index: int,
    config: Config,
) -> Entity:
    require_catalog(catalog)
    n = len(catalog)
    perm = daily_permutation(n, config.shuffle_seed)
    return catalog[int(perm[slot_for_day(index, n)])]


def select_secret(
    catalog: Sequence[Entity],
    now: datetime,
    config: Config = DEFAULT_CONFIG,
) -> Entity:
    """
    pick the secret for the day containing `now`.

    raises InvalidCatalog if the catalog is empty.
    """
    return _secret_for_index(catalog, day_index(now, config), config)


def secret_for_date(
    catalog: Sequence[Entity],
    value: str | date,
    config: Config = DEFAULT_CONFIG,
) -> Entity:
    """pick the secret for a civil date (YYYY-MM-DD or date)."""
    return _secret_for_index(catalog, day_index_for_date(value, config), config)


def upcoming_secrets(
    catalog: Sequence[Entity],
    start: str | date,
    days: int,
    config: Config = DEFAULT_CONFIG,
) -> list[tuple[date, Entity]]:
    """the schedule for `days` consecutive dates starting at `start`."""
    require_catalog(catalog)
    n = len(catalog)
    perm = daily_permutation(n, config.shuffle_seed)
    first = parse_date(start)
    base = day_index_for_date(first, config)

    schedule = []
    for offset in range(days):
        slot = slot_for_day(base + offset, n)
        schedule.append((first + timedelta(days=offset), catalog[int(perm[slot])]))
    return schedule


def next_date_for_ticker(
    catalog: Sequence[Entity],
    ticker: str,
    start: str | date,
    config: Config = DEFAULT_CONFIG,
) -> date:
    """
    first date on or after `start` whose secret is `ticker`.

    every position comes up once per len(catalog) days, so the answer is
    always within that window. raises KeyError for unknown tickers.
    """
    require_catalog(catalog)
    n = len(catalog)

    wanted = ticker.strip().upper()
    position = next(
        (i for i, e in enumerate(catalog) if e.ticker.upper() == wanted),
        None,
    )
    if position is None:
        raise KeyError(f"{ticker!r} is not in the catalog")

    slot_of = inverse_permutation(daily_permutation(n, config.shuffle_seed))
    first = parse_date(start)
    current_slot = slot_for_day(day_index_for_date(first, config), n)
    wait = (int(slot_of[position]) - current_slot) % n
    return first + timedelta(days=wait)
