"""
catalog loader: turns stocks.json into immutable entities.

the catalog is loaded once per session and never mutated. its order
matters: the daily shuffle is defined over catalog positions, so
reordering the file reshuffles every future day.
"""

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence

from .config import Config, DEFAULT_CONFIG

# yields at or below this count as "does not pay"
NO_DIVIDEND_EPSILON = 0.01


class InvalidCatalog(ValueError):
    """catalog is empty or malformed; a session can't start without a new one."""


@dataclass(frozen=True)
class Entity:
    """one guessable instrument."""

    ticker: str
    name: str
    sector: str
    country: str

    # currency billions
    market_cap: float
    price: float
    ipo_year: int
    one_year_return_pct: float
    dividend_yield_pct: float

    @property
    def pays_dividend(self) -> bool:
        return self.dividend_yield_pct > NO_DIVIDEND_EPSILON

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Entity":
        """
        build an entity from one stocks.json record (camelCase keys).

        raises InvalidCatalog if a field is missing or has the wrong type.
        """
        if not isinstance(record, dict):
            raise InvalidCatalog(f"catalog record must be an object, got {type(record).__name__}")

        return cls(
            ticker=_str_field(record, "ticker").strip(),
            name=_str_field(record, "name"),
            sector=_str_field(record, "sector"),
            country=_str_field(record, "country"),
            market_cap=_float_field(record, "marketCap"),
            price=_float_field(record, "price"),
            ipo_year=_int_field(record, "ipoYear"),
            one_year_return_pct=_float_field(record, "oneYearReturnPct"),
            dividend_yield_pct=_float_field(record, "dividendYieldPct"),
        )

    def to_record(self) -> dict[str, Any]:
        """inverse of from_record."""
        return {
            "ticker": self.ticker,
            "name": self.name,
            "sector": self.sector,
            "country": self.country,
            "marketCap": self.market_cap,
            "price": self.price,
            "ipoYear": self.ipo_year,
            "oneYearReturnPct": self.one_year_return_pct,
            "dividendYieldPct": self.dividend_yield_pct,
        }


def _field(record: dict[str, Any], key: str) -> Any:
    if key not in record:
        label = record.get("ticker", "?")
        raise InvalidCatalog(f"record {label!r} is missing {key!r}")
    return record[key]


def _str_field(record: dict[str, Any], key: str) -> str:
    value = _field(record, key)
    if not isinstance(value, str):
        raise InvalidCatalog(f"{key!r} must be a string, got {value!r}")
    return value


def _float_field(record: dict[str, Any], key: str) -> float:
    value = _field(record, key)
    # bool is an int subclass, don't let true/false sneak through
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidCatalog(f"{key!r} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidCatalog(f"{key!r} must be finite, got {value!r}")
    return float(value)


def _int_field(record: dict[str, Any], key: str) -> int:
    value = _field(record, key)
    if isinstance(value, bool):
        raise InvalidCatalog(f"{key!r} must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise InvalidCatalog(f"{key!r} must be an integer, got {value!r}")
    return value


def parse_catalog(records: Any, verbose: bool = False) -> tuple[Entity, ...]:
    """
    validate raw JSON data and build the catalog.

    args:
        records: decoded stocks.json (must be a non-empty list)
        verbose: print a short summary

    returns:
        tuple of entities in file order

    raises:
        InvalidCatalog on an empty/non-list payload, a malformed record,
        or a constraint violation (duplicate ticker, negative market cap, ...)
    """
    if not isinstance(records, list):
        raise InvalidCatalog(f"catalog must be a list, got {type(records).__name__}")
    if not records:
        raise InvalidCatalog("catalog is empty")

    entities: list[Entity] = []
    seen: dict[str, int] = {}

    for i, record in enumerate(records):
        entity = Entity.from_record(record)

        key = entity.ticker.upper()
        if not key:
            raise InvalidCatalog(f"record {i} has a blank ticker")
        if key in seen:
            raise InvalidCatalog(
                f"duplicate ticker {entity.ticker!r} (records {seen[key]} and {i})"
            )
        if entity.market_cap < 0:
            raise InvalidCatalog(f"{entity.ticker}: marketCap must be >= 0")
        if entity.price <= 0:
            raise InvalidCatalog(f"{entity.ticker}: price must be > 0")
        if entity.dividend_yield_pct < 0:
            raise InvalidCatalog(f"{entity.ticker}: dividendYieldPct must be >= 0")

        seen[key] = i
        entities.append(entity)

    if verbose:
        sectors = {e.sector for e in entities}
        countries = {e.country for e in entities}
        payers = sum(1 for e in entities if e.pays_dividend)
        print(f"  catalog size:     {len(entities):,}")
        print(f"  sectors:          {len(sectors):,}")
        print(f"  countries:        {len(countries):,}")
        print(f"  dividend payers:  {payers:,}")

    return tuple(entities)


def load_catalog(
    config: Config = DEFAULT_CONFIG,
    path: Path | None = None,
    verbose: bool = False,
) -> tuple[Entity, ...]:
    """
    load and validate stocks.json.

    args:
        config: game config with paths
        path: override catalog path (default: config.catalog_path)
        verbose: print a short summary

    returns:
        tuple where index i → entity at catalog position i
    """
    catalog_path = Path(path) if path is not None else config.catalog_path
    with open(catalog_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidCatalog(f"{catalog_path} is not valid JSON: {e}") from e
    return parse_catalog(data, verbose=verbose)


def require_catalog(catalog: Sequence[Entity]) -> None:
    """refuse to run against an empty catalog."""
    if len(catalog) == 0:
        raise InvalidCatalog("catalog is empty")


def build_ticker_to_id(catalog: Iterable[Entity]) -> dict[str, int]:
    """
    create reverse lookup: upper-cased ticker → catalog index.
    """
    return {e.ticker.upper(): i for i, e in enumerate(catalog)}


def resolve_input(catalog: Sequence[Entity], raw: str) -> Entity | None:
    """
    resolve free text to a catalog entity.

    exact ticker match (case-insensitive) wins; otherwise the first entity,
    in catalog order, whose name contains the text (case-insensitive).
    returns None for blank input or no match.
    """
    value = raw.strip()
    if not value:
        return None

    upper = value.upper()
    for entity in catalog:
        if entity.ticker.upper() == upper:
            return entity

    lower = value.lower()
    for entity in catalog:
        if lower in entity.name.lower():
            return entity

    return None
