"""Tests for the HSN/SAC catalog."""

import pytest

from hsn_lookup import COMMON_HSN_SAC, GST_RATES, HSNLookup


class TestCatalog:

    def test_rates(self):
        assert GST_RATES == (0, 5, 12, 18, 28)

    def test_default_rates_are_standard(self):
        assert len(COMMON_HSN_SAC) == 22
        assert all(e.default_rate in GST_RATES for e in COMMON_HSN_SAC)
        assert {e.type for e in COMMON_HSN_SAC} == {"goods", "service"}


class TestHSNLookup:

    def test_search_description(self, hsn_lookup):
        codes = [e.code for e in hsn_lookup.search("Consult")]
        assert codes == ["998311", "998312", "998313"]

    def test_search_code(self, hsn_lookup):
        hits = hsn_lookup.search("8471")
        assert [e.description for e in hits] == ["Computers"]

    def test_search_empty(self, hsn_lookup):
        assert hsn_lookup.search("") == []
        assert hsn_lookup.search("no such thing") == []

    def test_suggest(self, hsn_lookup):
        best = hsn_lookup.suggest("Computers", limit=3)
        assert len(best) == 3
        assert best[0]["entry"].code == "8471"
        assert best[0]["score"] == 100

    def test_default_rate(self, hsn_lookup):
        assert hsn_lookup.default_rate("8517") == 12
        assert hsn_lookup.default_rate("0000") is None

    def test_load_csv(self, tmp_path):
        path = tmp_path / "hsn.csv"
        path.write_text("HSN,Description,Rate\n0401,Milk and cream,0\n2201,Mineral water,18\n")
        lookup = HSNLookup(str(path))
        assert lookup.default_rate("0401") == 0
        assert lookup.search("water")[0].code == "2201"
        assert lookup.search("water")[0].type == ""

    def test_csv_without_rate(self, tmp_path):
        path = tmp_path / "hsn.csv"
        path.write_text("hsn_code,description\n0401,Milk\n")
        with pytest.raises(ValueError, match="Rate"):
            HSNLookup(str(path))
