"""Tests for manufacturer-scoped replacement checks."""

import pytest

from mpnmatch_mcp.equivalence import is_official_replacement
from mpnmatch_mcp.manufacturers import get_manufacturer


class TestIsOfficialReplacement:
    @pytest.mark.parametrize("manufacturer", [None, "AMS", "ams-OSRAM", "ams"])
    def test_documented_variants(self, manufacturer):
        assert is_official_replacement(manufacturer, "AS7261", "AS7263")

    @pytest.mark.parametrize("mpn_a,mpn_b", [
        ("TCS34725FN", "TCS34727FN"),
        ("APDS-9960", "APDS-9930"),
    ])
    def test_sensor_families_reach_their_rule_set(self, mpn_a, mpn_b):
        assert is_official_replacement("AMS", mpn_a, mpn_b)
        assert is_official_replacement(None, mpn_a, mpn_b)

    def test_manufacturer_object(self):
        assert is_official_replacement(get_manufacturer("AMS"), "AS7261", "AS7263")

    def test_voltage_grade_is_directional(self):
        assert is_official_replacement(None, "1N4001", "1N4007")
        assert not is_official_replacement(None, "1N4007", "1N4001")

    def test_small_signal_equivalents(self):
        assert is_official_replacement("Vishay", "1N4148", "1N914")

    def test_same_series_same_package(self):
        assert is_official_replacement("TI", "LM358DR", "LM358D")

    def test_cross_manufacturer_rejected(self):
        assert not is_official_replacement(None, "LM358DR", "AS7262")

    def test_expected_manufacturer_mismatch(self):
        assert not is_official_replacement("TI", "AS7261", "AS7263")

    def test_unknown_parts_rejected(self):
        assert not is_official_replacement(None, "QQQQ", "QQQQ")

    @pytest.mark.parametrize("mpn_a,mpn_b", [("", "AS7263"), ("AS7261", None), (None, None)])
    def test_empty_input(self, mpn_a, mpn_b):
        assert not is_official_replacement(None, mpn_a, mpn_b)

    def test_unresolvable_manufacturer_name_raises(self):
        with pytest.raises(ValueError):
            is_official_replacement("Acme Widgets", "AS7261", "AS7263")
