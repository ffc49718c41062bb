"""
Tests for key normalization, filtering and shareholding formatting
"""
from dataclasses import replace
from types import MappingProxyType

import pytest

from screener_scraper.config.schema import RawField, RatioConfig, ShareholdingConfig
from screener_scraper.core.normalizer import KeyNormalizer, format_shareholding

@pytest.fixture
def normalizer(config):
    return KeyNormalizer(config.ratios)

class TestCanonicalKey:

    @pytest.mark.parametrize("label,expected", [
        ("Market Cap", "MktCap"),
        ("Current Price", "CP"),
        ("High / Low", "HL"),
        ("Stock P/E", "P/E"),
        ("Book Value", "BV"),
        ("Dividend Yield", "DY"),
        ("ROCE", "ROCE"),
        ("ROE", "ROE"),
        ("Face Value", "FV"),
    ])
    def test_mapped_labels(self, normalizer, label, expected):
        assert normalizer.canonical_key(label) == expected

    def test_mapping_ignores_surrounding_whitespace(self, normalizer):
        assert normalizer.canonical_key("  Market Cap \n") == "MktCap"

    def test_unknown_label_passes_through_trimmed(self, normalizer):
        assert normalizer.canonical_key("  Debt to equity  ") == "Debt to equity"

    def test_mapping_is_case_sensitive(self, normalizer):
        assert normalizer.canonical_key("market cap") == "market cap"

class TestNormalize:

    def test_denylisted_keys_are_dropped(self, normalizer):
        fields = [
            RawField("Current Price", ["2580"]),
            RawField("High / Low", ["3218", "2221"]),
            RawField("Dividend Yield", ["0.39"]),
            RawField("ROE", ["8.51"]),
        ]
        assert normalizer.normalize(fields) == {"ROE": "8.51"}

    def test_first_occurrence_wins(self, normalizer):
        fields = [RawField("ROE", ["8.51"]), RawField("ROE", ["9.99"])]
        assert normalizer.normalize(fields) == {"ROE": "8.51"}

    def test_empty_label_is_skipped(self, normalizer):
        fields = [RawField("   ", ["1"]), RawField("ROE", ["8.51"])]
        assert normalizer.normalize(fields) == {"ROE": "8.51"}

    def test_multiple_values_are_joined(self, normalizer):
        record = normalizer.normalize([RawField("52w Range", ["3218", "2221"])])
        assert record == {"52w Range": "3218 / 2221"}

    def test_order_is_preserved(self, normalizer):
        fields = [RawField("ROE", ["1"]), RawField("Market Cap", ["2"]), RawField("Book Value", ["3"])]
        assert list(normalizer.normalize(fields)) == ["ROE", "MktCap", "BV"]

class TestSerialize:

    def test_separators_per_key(self, normalizer):
        ratios = normalizer.serialize({"MktCap": "100", "BV": "50", "ROE": "8"})
        assert ratios == "MktCap:100, BV:50; ROE:8"

    def test_trailing_separator_is_trimmed(self, normalizer):
        assert normalizer.serialize({"MktCap": "100"}) == "MktCap:100"
        assert normalizer.serialize({"BV": "50"}) == "BV:50"

    def test_empty_record(self, normalizer):
        assert normalizer.serialize({}) == ""

    def test_separator_override_comes_from_config(self):
        config = RatioConfig(separators=MappingProxyType({"BV": " | "}))
        normalizer = KeyNormalizer(config)
        assert normalizer.serialize({"BV": "50", "ROE": "8"}) == "BV:50 | ROE:8"

    def test_denied_keys_never_reach_output(self, normalizer):
        fields = [RawField(label, ["1"]) for label in
                  ("Current Price", "Market Cap", "High / Low", "Dividend Yield", "ROCE")]
        ratios = normalizer.transform(fields)
        for key in ("CP:", "HL:", "DY:"):
            assert key not in ratios
        assert ratios == "MktCap:1, ROCE:1"

    def test_custom_denylist(self, config):
        normalizer = KeyNormalizer(replace(config.ratios, denylist=frozenset({"ROE"})))
        ratios = normalizer.transform([RawField("ROE", ["8"]), RawField("Current Price", ["10"])])
        assert ratios == "CP:10"

class TestFormatShareholding:

    def test_labels_in_order(self):
        details = format_shareholding(["50.1%", "20.2%", "15.3%", "14.4%"], ShareholdingConfig())
        assert details == "P:50.1%; FIIs:20.2%; DIIs:15.3%; O:14.4%"

    def test_values_are_trimmed(self):
        details = format_shareholding([" 50.1% ", "20.2%\n", "15.3%", " 14.4%"], ShareholdingConfig())
        assert details == "P:50.1%; FIIs:20.2%; DIIs:15.3%; O:14.4%"

    def test_comma_in_others_becomes_default(self):
        details = format_shareholding(["50.1%", "20.2%", "15.3%", "33,58,451"], ShareholdingConfig())
        assert details.endswith("O:0.0%")

    def test_comma_in_other_fields_is_kept(self):
        details = format_shareholding(["1,2", "20.2%", "15.3%", "14.4%"], ShareholdingConfig())
        assert details.startswith("P:1,2;")

    def test_short_list_is_padded(self):
        details = format_shareholding(["50.1%"], ShareholdingConfig())
        assert details == "P:50.1%; FIIs:0.0%; DIIs:0.0%; O:0.0%"
