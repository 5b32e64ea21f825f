"""Tests for MPN -> manufacturer resolution and confidence ranking."""

import pytest

from mpnmatch_mcp.manufacturers import UNKNOWN, get_manufacturer
from mpnmatch_mcp.resolver import HIGH, LOW, MEDIUM, TIERS, classify, classify_all, classify_ranked


def _ids(manufacturers):
    return [m.id for m in manufacturers]


class TestSpecialCases:
    @pytest.mark.parametrize("mpn,expected", [
        # MCU families claimed by several priority patterns
        ("STM32F103C8T6", "ST"),
        ("PIC16F877A", "MICROCHIP"),
        ("dsPIC33FJ128", "MICROCHIP"),
        ("ATMEGA328P-AU", "ATMEL"),
        ("MSP430G2553", "TI"),
        ("ESP32-WROOM-32", "ESPRESSIF"),
        # Fixed-format passives and connectors
        ("CRCW06031K00FKEA", "VISHAY"),
        ("RC0603FR-0710KL", "YAGEO"),
        ("ERJ-3EKF1001V", "PANASONIC"),
        ("GRM188R71H104KA93D", "MURATA"),
        ("61300211121", "WURTH"),
        ("430451", "MOLEX"),
        ("1-480424-0", "TE"),
        # Sensors shadowed by earlier TC/AP priority patterns
        ("TCS34725FN", "AMS"),
        ("APDS-9960", "AMS"),
        ("APDS9930", "AMS"),
        # Analog and discretes
        ("LM358DR", "TI"),
        ("TPS54331DR", "TI"),
        ("LM358-ST", "ST"),
        ("IRF540N", "INFINEON"),
        ("LM358ST", "TI"),  # Only a "-ST" token switches to ST
        # LED and memory families
        ("LWT67C", "OSRAM"),
        ("XPE2BWT", "CREE"),
        ("MT25QL256ABA", "MICRON"),
        ("N25Q128A13ESE40", "MICRON"),
        ("W25Q128JVSIQ", "WINBOND"),
        ("W29N01HVSINA", "WINBOND"),
    ])
    def test_classify(self, mpn, expected):
        assert classify(mpn).id == expected

    def test_st_indicator_keeps_ti_as_second_source(self):
        ranked = classify_ranked("LM358-ST")
        assert ranked[0] == (get_manufacturer("ST"), HIGH)
        assert (get_manufacturer("TI"), MEDIUM) in ranked
        assert (get_manufacturer("ON_SEMI"), MEDIUM) in ranked

    def test_analog_second_sources(self):
        ranked = classify_ranked("LM358")
        assert ranked[0] == (get_manufacturer("TI"), HIGH)
        assert ranked[1] == (get_manufacturer("ST"), MEDIUM)
        assert ranked[2] == (get_manufacturer("ON_SEMI"), MEDIUM)

    @pytest.mark.parametrize("mpn,expected", [
        ("LWT67C", "OSRAM"),
        ("MT25QL256ABA", "MICRON"),
        ("W25Q128JVSIQ", "WINBOND"),
        ("TCS34725FN", "AMS"),
    ])
    def test_family_rules_rank_high(self, mpn, expected):
        assert classify_ranked(mpn)[0] == (get_manufacturer(expected), HIGH)


class TestDiodeFamilies:
    @pytest.mark.parametrize("mpn,expected", [
        ("1N4148", "VISHAY"),
        ("1N4007", "VISHAY"),
        ("1N4733A", "ON_SEMI"),
        ("1N5819", "VISHAY"),
        ("BAT54", "VISHAY"),
        ("BAT54-ON", "ON_SEMI"),
        ("BAS16-NXP", "NXP"),
        ("BAV99-VISHAY", "VISHAY"),
    ])
    def test_classify(self, mpn, expected):
        assert classify(mpn).id == expected

    def test_second_sources_ranked_medium(self):
        ranked = classify_ranked("1N4148")
        assert ranked[0] == (get_manufacturer("VISHAY"), HIGH)
        assert ranked[1] == (get_manufacturer("ON_SEMI"), MEDIUM)
        assert ranked[2] == (get_manufacturer("DIODES_INC"), MEDIUM)

    def test_zener_second_sources(self):
        ids = _ids(classify_all("1N4733A"))
        assert ids[0] == "ON_SEMI"
        assert "VISHAY" in ids
        assert "DIODES_INC" in ids

    def test_small_signal_second_sources(self):
        ranked = dict((m.id, tier) for m, tier in classify_ranked("BAT54"))
        assert ranked["VISHAY"] == HIGH
        assert ranked["ON_SEMI"] == MEDIUM
        assert ranked["NXP"] == MEDIUM


class TestPriorityScan:
    @pytest.mark.parametrize("mpn,expected", [
        ("AS7262-BLGT", "AMS"),
        ("TSL2561", "AMS"),
        ("GD25Q128CSIG", "GIGADEVICE"),
        ("GD32F103C8T6", "GIGADEVICE"),
        ("SN74HC595PW", "TI"),
        ("74HC595", "LOGIC_IC"),
        ("NRF52832-QFAA", "NORDIC"),
    ])
    def test_classify(self, mpn, expected):
        assert classify(mpn).id == expected

    def test_directory_order_breaks_ties(self):
        # "AT" + two letters is claimed by both; the earlier entry wins
        ranked = classify_ranked("ATSAMD21G18A")
        assert ranked[0] == (get_manufacturer("MICROCHIP"), MEDIUM)
        assert (get_manufacturer("ATMEL"), MEDIUM) in ranked


class TestHeuristics:
    def test_supply_pin_prefix(self):
        assert classify("VCC-LM358").id == "TI"
        assert classify_ranked("VCC-LM358")[0] == (get_manufacturer("TI"), LOW)

    def test_rule_set_fallback(self):
        assert classify("OPA2134PA").id == "TI"
        assert classify_ranked("OPA2134PA")[0] == (get_manufacturer("TI"), LOW)

    def test_rule_set_fallback_regulator(self):
        assert classify("L7805CV").id == "ST"

    def test_indicator_token(self):
        assert classify("QQ123-TI").id == "TI"
        assert classify_ranked("QQ123-TI") == [(get_manufacturer("TI"), LOW)]

    def test_indicator_needs_token_boundary(self):
        # "-TIN" is not a TI marker
        assert classify("QQ123-TIN") is UNKNOWN


class TestUnknown:
    @pytest.mark.parametrize("mpn", ["QQQQ", "", None, "   ", "A" * 65])
    def test_unresolvable(self, mpn):
        assert classify(mpn) is UNKNOWN
        assert classify_all(mpn) == [UNKNOWN]
        assert classify_ranked(mpn) == [(UNKNOWN, LOW)]

    def test_case_and_whitespace_insensitive(self):
        assert classify("  gd25q128csig ") is classify("GD25Q128CSIG")
        assert classify_all("as7262-blgt") == classify_all("AS7262-BLGT")


class TestRanking:
    @pytest.mark.parametrize("mpn", [
        "1N4148", "LM358-ST", "ATSAMD21G18A", "IRF540N", "VCC-LM358", "BAT54", "GRM188R71H104KA93D",
        "LM358", "TCS34725FN", "W25Q128JVSIQ", "XPE2BWT",
    ])
    def test_tiers_monotonic_without_duplicates(self, mpn):
        ranked = classify_ranked(mpn)
        ids = [m.id for m, _ in ranked]
        assert len(ids) == len(set(ids))
        positions = [TIERS.index(tier) for _, tier in ranked]
        assert positions == sorted(positions)

    @pytest.mark.parametrize("mpn", ["1N4148", "ATSAMD21G18A", "AS7262-BLGT", "QQQQ", "LM358", "APDS-9960", "MT25QL256ABA"])
    def test_classify_agrees_with_first_candidate(self, mpn):
        assert classify_all(mpn)[0] is classify(mpn)

    def test_unknown_never_listed_with_real_candidates(self):
        assert UNKNOWN not in classify_all("IRF540N")

    def test_deterministic(self):
        assert classify_ranked("1N4148") == classify_ranked("1N4148")

    def test_primary_beats_second_source_of_other_rule(self):
        # Vishay is a priority hit (IRF) but Infineon's special case wins
        ranked = dict((m.id, tier) for m, tier in classify_ranked("IRF540N"))
        assert ranked["INFINEON"] == HIGH
        assert ranked["VISHAY"] == MEDIUM
        assert ranked["ST"] == MEDIUM
