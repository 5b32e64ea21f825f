"""Tests for the category hierarchy."""

import pytest

from mpnmatch_mcp import categories as cat


class TestBaseCategory:
    @pytest.mark.parametrize("category,expected", [
        (cat.SENSOR_COLOR, cat.SENSOR),
        (cat.MEMORY_FLASH, cat.MEMORY),
        (cat.MCU_ARM, cat.MICROCONTROLLER),
        (cat.DIODE_ZENER, cat.DIODE),
        (cat.REGULATOR_LINEAR, cat.VOLTAGE_REGULATOR),
        (cat.WIFI_MODULE, cat.RF_MODULE),
    ])
    def test_specialization_maps_to_base(self, category, expected):
        assert cat.base_category(category) == expected

    @pytest.mark.parametrize("category", sorted(cat.BASE_TAGS))
    def test_base_maps_to_itself(self, category):
        assert cat.base_category(category) == category

    def test_unknown_raises(self):
        with pytest.raises(ValueError):
            cat.base_category("flux_capacitor")


class TestHierarchy:
    def test_depth_at_most_two(self):
        """Every specialization's base is a base tag, never another specialization."""
        for specialization, base in cat.BASE_CATEGORIES.items():
            assert base in cat.BASE_TAGS
            assert specialization not in cat.BASE_TAGS

    def test_is_specialization(self):
        assert cat.is_specialization(cat.SENSOR_COLOR)
        assert not cat.is_specialization(cat.SENSOR)

    def test_tags_are_lowercase(self):
        assert all(tag == tag.lower() for tag in cat.CATEGORIES)


class TestValidateCategory:
    def test_known_category(self):
        assert cat.validate_category(cat.LED) == cat.LED

    def test_none_raises(self):
        with pytest.raises(ValueError):
            cat.validate_category(None)

    def test_unknown_raises(self):
        with pytest.raises(ValueError):
            cat.validate_category("LED")  # Tags are case-sensitive
