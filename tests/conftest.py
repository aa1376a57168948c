"""Shared fixtures for investle tests."""

import json
from datetime import date

import pytest

from investle.catalog import Entity
from investle.config import Config


def _entity(**overrides) -> Entity:
    fields = dict(
        ticker="XYZ",
        name="Xyz Holdings",
        sector="Tech",
        country="US",
        market_cap=5.0,
        price=50.0,
        ipo_year=2010,
        one_year_return_pct=12.0,
        dividend_yield_pct=0.0,
    )
    fields.update(overrides)
    return Entity(**fields)


@pytest.fixture
def make_entity():
    """Factory for entities; keyword arguments override the defaults."""
    return _entity


@pytest.fixture
def config():
    """Config pinned to a known epoch, seed and zone."""
    return Config(
        day_boundary_tz="America/New_York",
        game_start=date(2025, 1, 1),
        shuffle_seed=20250101,
    )


@pytest.fixture
def catalog():
    """Ten distinct entities with spread-out attributes."""
    return tuple(
        _entity(
            ticker=f"T{i:02d}",
            name=f"Company {i:02d}",
            sector="Tech" if i % 2 else "Energy",
            market_cap=1.0 + 30 * i,
            price=10.0 + 7 * i,
            ipo_year=1990 + 3 * i,
            one_year_return_pct=-20.0 + 6 * i,
            dividend_yield_pct=0.4 * i,
        )
        for i in range(10)
    )


@pytest.fixture
def catalog_records(catalog):
    """The catalog fixture as stocks.json records."""
    return [e.to_record() for e in catalog]


@pytest.fixture
def catalog_file(tmp_path, catalog_records):
    """A stocks.json on disk."""
    path = tmp_path / "stocks.json"
    path.write_text(json.dumps(catalog_records), encoding="utf-8")
    return path
