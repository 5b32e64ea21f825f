"""Tests for MPN normalization, category detection and text extraction."""

import pytest

from mpnmatch_mcp import categories as cat
from mpnmatch_mcp.mpn import detect_category, find_mpn_in_text, is_from_manufacturer, normalize_mpn


class TestNormalizeMpn:
    @pytest.mark.parametrize("mpn,expected", [
        ("lm-358 dr", "LM358DR"),
        ("  AS7262-BLGT ", "AS7262BLGT"),
        ("1-480424-0", "14804240"),
        ("", ""),
        (None, ""),
        ("   ", ""),
    ])
    def test_normalize(self, mpn, expected):
        assert normalize_mpn(mpn) == expected


class TestIsFromManufacturer:
    def test_matching(self):
        assert is_from_manufacturer("GD25Q128CSIG", "GigaDevice")
        assert is_from_manufacturer("as7262", "AMS")

    def test_not_matching(self):
        assert not is_from_manufacturer("GD25Q128CSIG", "Winbond")

    def test_empty_mpn(self):
        assert not is_from_manufacturer("", "TI")

    def test_unknown_manufacturer_raises(self):
        with pytest.raises(ValueError):
            is_from_manufacturer("LM358DR", "Acme Widgets")


class TestDetectCategory:
    @pytest.mark.parametrize("mpn,expected", [
        # Recognized regardless of manufacturer
        ("LM7805", cat.REGULATOR_LINEAR),
        ("MC7805", cat.REGULATOR_LINEAR),
        ("7805", cat.REGULATOR_LINEAR),
        ("LM317T", cat.REGULATOR_LINEAR),
        ("74HC595", cat.LOGIC_IC),
        # From the manufacturer's rule set
        ("AS7262-BLGT", cat.SENSOR_COLOR),
        ("GD25Q128CSIG", cat.MEMORY_FLASH),
        ("STM32F103C8T6", cat.MCU_ARM),
        ("LM358DR", cat.OPAMP),
        ("TPS54331DR", cat.REGULATOR_SWITCHING),
    ])
    def test_detect(self, mpn, expected):
        assert detect_category(mpn) == expected

    def test_generic_designator(self):
        assert detect_category("R1") == cat.RESISTOR

    @pytest.mark.parametrize("mpn", ["QQQQ", "", None])
    def test_unrecognized(self, mpn):
        assert detect_category(mpn) is None


class TestFindMpnInText:
    @pytest.mark.parametrize("text,expected", [
        ("U3; MPN=GD25Q128CSIG; 128Mbit flash", "GD25Q128CSIG"),
        ("Replace IC-LM358DR with something", "LM358DR"),
        ("part-no=ATMEGA328P-AU", "ATMEGA328P-AU"),
        ("opamp, lm358dr-rohs, 2 pcs", "LM358DR"),
        ("designator R1", "R1"),
    ])
    def test_found(self, text, expected):
        assert find_mpn_in_text(text) == expected

    @pytest.mark.parametrize("text", ["no part numbers here", "", None, "   "])
    def test_not_found(self, text):
        assert find_mpn_in_text(text) is None
