"""Tests for catalog loading and input resolution."""

import json
from pathlib import Path

import pytest

from investle.catalog import (
    Entity,
    InvalidCatalog,
    build_ticker_to_id,
    load_catalog,
    parse_catalog,
    require_catalog,
    resolve_input,
)
from investle.config import Config


class TestLoadCatalog:
    """Reading stocks.json."""

    def test_load_from_path(self, catalog_file, catalog):
        assert load_catalog(path=catalog_file) == catalog

    def test_load_from_config(self, catalog_file, catalog):
        config = Config(data_dir=catalog_file.parent)
        assert load_catalog(config) == catalog

    def test_preserves_order(self, catalog_file):
        loaded = load_catalog(path=catalog_file)
        assert [e.ticker for e in loaded] == [f"T{i:02d}" for i in range(10)]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "stocks.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(InvalidCatalog, match="not valid JSON"):
            load_catalog(path=path)

    def test_bundled_catalog_is_valid(self):
        catalog = load_catalog(Config(data_dir=Path(__file__).parent.parent / "data"))
        assert len(catalog) > 1

    def test_verbose_summary(self, catalog_records, capsys):
        parse_catalog(catalog_records, verbose=True)
        out = capsys.readouterr().out
        assert "catalog size" in out
        assert "10" in out


class TestParseCatalog:
    """Schema and constraint checks."""

    def test_camel_case_keys(self):
        record = {
            "ticker": "XYZ", "name": "Xyz", "sector": "Tech", "country": "US",
            "marketCap": 5, "price": 50, "ipoYear": 2010,
            "oneYearReturnPct": 12.0, "dividendYieldPct": 0,
        }
        (entity,) = parse_catalog([record])
        assert entity.market_cap == 5.0
        assert isinstance(entity.market_cap, float)
        assert entity.ipo_year == 2010
        assert entity.to_record() == {**record, "marketCap": 5.0, "price": 50.0, "dividendYieldPct": 0.0}

    def test_empty_list(self):
        with pytest.raises(InvalidCatalog, match="empty"):
            parse_catalog([])

    def test_not_a_list(self):
        with pytest.raises(InvalidCatalog, match="must be a list"):
            parse_catalog({"ticker": "X"})

    def test_record_not_object(self):
        with pytest.raises(InvalidCatalog, match="must be an object"):
            parse_catalog(["AAPL"])

    def test_missing_field(self, catalog_records):
        del catalog_records[3]["price"]
        with pytest.raises(InvalidCatalog, match="missing 'price'"):
            parse_catalog(catalog_records)

    def test_wrong_type(self, catalog_records):
        catalog_records[0]["marketCap"] = "big"
        with pytest.raises(InvalidCatalog, match="must be a number"):
            parse_catalog(catalog_records)

    def test_bool_is_not_a_number(self, catalog_records):
        catalog_records[0]["dividendYieldPct"] = True
        with pytest.raises(InvalidCatalog, match="must be a number"):
            parse_catalog(catalog_records)

    def test_fractional_ipo_year(self, catalog_records):
        catalog_records[0]["ipoYear"] = 1999.5
        with pytest.raises(InvalidCatalog, match="must be an integer"):
            parse_catalog(catalog_records)

    def test_duplicate_ticker_case_insensitive(self, catalog_records):
        catalog_records[5]["ticker"] = "t01"
        with pytest.raises(InvalidCatalog, match="duplicate ticker"):
            parse_catalog(catalog_records)

    def test_blank_ticker(self, catalog_records):
        catalog_records[2]["ticker"] = "   "
        with pytest.raises(InvalidCatalog, match="blank ticker"):
            parse_catalog(catalog_records)

    @pytest.mark.parametrize(
        "key,value",
        [("marketCap", -1), ("price", 0), ("price", -3.5), ("dividendYieldPct", -0.1)],
    )
    def test_out_of_range(self, catalog_records, key, value):
        catalog_records[1][key] = value
        with pytest.raises(InvalidCatalog):
            parse_catalog(catalog_records)

    @pytest.mark.parametrize("key", ["marketCap", "price", "oneYearReturnPct", "dividendYieldPct"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers(self, catalog_records, key, value):
        catalog_records[4][key] = value
        with pytest.raises(InvalidCatalog, match="must be finite"):
            parse_catalog(catalog_records)

    def test_non_finite_from_json_text(self, tmp_path, catalog_records):
        text = json.dumps(catalog_records).replace("\"price\": 10.0", "\"price\": NaN", 1)
        assert "NaN" in text
        path = tmp_path / "stocks.json"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(InvalidCatalog, match="must be finite"):
            load_catalog(path=path)

    def test_ticker_whitespace_stripped(self, catalog_records):
        catalog_records[0]["ticker"] = "  AAA "
        catalog = parse_catalog(catalog_records)
        assert catalog[0].ticker == "AAA"
        assert resolve_input(catalog, "aaa") is catalog[0]

    def test_padded_duplicate_ticker(self, catalog_records):
        catalog_records[5]["ticker"] = " t01 "
        with pytest.raises(InvalidCatalog, match="duplicate ticker"):
            parse_catalog(catalog_records)

    def test_invalid_catalog_is_value_error(self):
        with pytest.raises(ValueError):
            parse_catalog([])

    def test_require_catalog(self, catalog):
        require_catalog(catalog)
        with pytest.raises(InvalidCatalog):
            require_catalog(())


class TestEntity:
    """Entity helpers."""

    def test_frozen(self, make_entity):
        entity = make_entity()
        with pytest.raises(AttributeError):
            entity.price = 1.0

    def test_pays_dividend(self, make_entity):
        assert not make_entity(dividend_yield_pct=0.0).pays_dividend
        assert not make_entity(dividend_yield_pct=0.01).pays_dividend
        assert make_entity(dividend_yield_pct=0.02).pays_dividend

    def test_ticker_to_id(self, make_entity):
        catalog = (make_entity(ticker="aapl"), make_entity(ticker="MSFT"))
        assert build_ticker_to_id(catalog) == {"AAPL": 0, "MSFT": 1}


class TestResolveInput:
    """Free text → catalog entity."""

    @pytest.fixture
    def small_catalog(self, make_entity):
        return (
            make_entity(ticker="AAA", name="ZCorp"),
            make_entity(ticker="BBB", name="Zeta"),
            make_entity(ticker="Z", name="Omega Z Industries"),
            make_entity(ticker="CCC", name="Apple Inc."),
        )

    def test_exact_ticker(self, small_catalog):
        assert resolve_input(small_catalog, "bbb").ticker == "BBB"

    def test_exact_ticker_beats_name(self, small_catalog):
        # "z" is a ticker even though earlier names contain it
        assert resolve_input(small_catalog, "z").ticker == "Z"

    def test_name_substring_first_in_catalog_order(self, make_entity):
        catalog = (make_entity(ticker="AAA", name="ZCorp"), make_entity(ticker="BBB", name="Zeta"))
        assert resolve_input(catalog, "Z").ticker == "AAA"

    def test_name_case_insensitive(self, small_catalog):
        assert resolve_input(small_catalog, "  APPLE ").ticker == "CCC"

    def test_ticker_trimmed(self, small_catalog):
        assert resolve_input(small_catalog, "  aaa\n").ticker == "AAA"

    def test_no_match(self, small_catalog):
        assert resolve_input(small_catalog, "nothing like it") is None

    def test_blank(self, small_catalog):
        assert resolve_input(small_catalog, "   ") is None


def test_entity_round_trip_through_json(tmp_path, make_entity):
    entity = make_entity(ticker="RT", one_year_return_pct=-3.25)
    path = tmp_path / "stocks.json"
    path.write_text(json.dumps([entity.to_record()]), encoding="utf-8")
    assert load_catalog(path=path) == (entity,)
    assert isinstance(load_catalog(path=path)[0], Entity)
