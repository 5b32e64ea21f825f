"""Tests for manufacturer rule sets (extraction, matching, replacement rules)."""

import pytest

from mpnmatch_mcp import categories as cat
from mpnmatch_mcp.patterns import PatternConfigError, PatternRegistry
from mpnmatch_mcp.rules import AMSRuleSet, GigaDeviceRuleSet, RectifierRuleSet, RuleSet, RULE_TABLES
from mpnmatch_mcp.rules.gigadevice import flash_density, mcu_pin_count


def _ready(rule_set: RuleSet, owner: str) -> tuple[RuleSet, PatternRegistry]:
    registry = PatternRegistry(owner=owner)
    rule_set.initialize_patterns(registry)
    return rule_set, registry


class TestRuleSetBase:
    @pytest.fixture
    def ti(self):
        return _ready(RuleSet(**RULE_TABLES["TI"]), "TI")

    def test_specialization_registered_under_base(self, ti):
        rule_set, registry = ti
        assert rule_set.matches("LM358DR", cat.OPAMP, registry)
        assert rule_set.matches("TPS54331DR", cat.REGULATOR_SWITCHING, registry)
        assert rule_set.matches("TPS54331DR", cat.VOLTAGE_REGULATOR, registry)

    def test_supported_categories_include_bases(self, ti):
        rule_set, _ = ti
        assert cat.REGULATOR_LINEAR in rule_set.supported_categories()
        assert cat.VOLTAGE_REGULATOR in rule_set.supported_categories()
        assert cat.CAPACITOR not in rule_set.supported_categories()

    def test_unsupported_category_never_matches(self, ti):
        rule_set, registry = ti
        assert not rule_set.matches("LM358DR", cat.CAPACITOR, registry)

    def test_initialize_patterns_idempotent(self, ti):
        rule_set, registry = ti
        count = registry.pattern_count()
        rule_set.initialize_patterns(registry)
        assert registry.pattern_count() == count

    def test_default_series(self):
        rule_set = RuleSet()
        assert rule_set.extract_series("LM358DR") == "LM358"
        assert rule_set.extract_series("1n4148tr") == "1N4148"

    def test_series_prefixes_longest_first(self):
        rule_set = RuleSet(series_prefixes=("GD25", "GD25LQ"))
        assert rule_set.extract_series("GD25LQ128") == "GD25LQ"
        assert rule_set.extract_series("W25Q128") == ""

    def test_manufacturer_package_codes_checked_first(self):
        rule_set = RuleSet(**RULE_TABLES["ST"])
        assert rule_set.extract_package_code("L7805CV") == "TO-220"
        assert rule_set.extract_package_code("L7805CD2T") == "D2PAK"

    @pytest.mark.parametrize("mpn", ["", None, "   ", "---", "!!"])
    def test_extraction_never_raises(self, mpn):
        rule_set = RuleSet(**RULE_TABLES["TI"])
        assert rule_set.extract_package_code(mpn) == ""
        assert rule_set.extract_series(mpn) == ""

    def test_malformed_table_pattern_raises_on_init(self):
        rule_set = RuleSet(patterns={cat.IC: (r"^BAD[0-9",)})
        with pytest.raises(PatternConfigError):
            rule_set.initialize_patterns(PatternRegistry(owner="BROKEN"))


class TestBaselineReplacement:
    @pytest.fixture
    def rule_set(self):
        return RuleSet(**RULE_TABLES["TI"])

    def test_same_series_same_package(self, rule_set):
        assert rule_set.is_official_replacement("LM358DR", "LM358D")
        assert rule_set.is_official_replacement("LM358D", "LM358DR")

    def test_same_series_compatible_footprint(self, rule_set):
        assert rule_set.is_official_replacement("LM358DR", "LM358N")

    def test_same_series_incompatible_package(self, rule_set):
        assert not rule_set.is_official_replacement("LM358DR", "LM358DBVR")

    def test_one_package_unknown(self, rule_set):
        assert not rule_set.is_official_replacement("LM358DR", "LM358")

    def test_different_series(self, rule_set):
        assert not rule_set.is_official_replacement("LM358DR", "LM324DR")

    def test_empty_input(self, rule_set):
        assert not rule_set.is_official_replacement("", "LM358DR")
        assert not rule_set.is_official_replacement(None, None)


class TestAMSRuleSet:
    @pytest.fixture
    def ams(self):
        return _ready(AMSRuleSet(), "AMS")

    @pytest.mark.parametrize("mpn,category", [
        ("AS7262-BLGT", cat.SENSOR_COLOR),
        ("AS7341", cat.SENSOR_COLOR),
        ("TCS34725FN", cat.SENSOR_COLOR),
        ("TSL2561", cat.SENSOR),
        ("APDS-9960", cat.SENSOR_PROXIMITY),
        ("AS5600-ASOM", cat.SENSOR_MAGNETIC),
        ("ENS160", cat.SENSOR_GAS),
        ("ENS210", cat.SENSOR_HUMIDITY),
    ])
    def test_matches(self, ams, mpn, category):
        rule_set, registry = ams
        assert rule_set.matches(mpn, category, registry)
        assert rule_set.matches(mpn, cat.base_category(category), registry)

    @pytest.mark.parametrize("mpn,expected", [
        ("AS7262-BLGT", "BGA"),
        ("AS7341-DLGT", ""),  # Unknown suffix
        ("TCS34725FN", "QFN"),
        ("TSL25911FN", "QFN"),
        ("AS5600-ASOM", "MODULE"),
        ("AS7262-BLGT-TR", "BGA"),
        ("APDS-9960", ""),  # Numeric part of the model, not a package
        ("ENS160", ""),
    ])
    def test_package(self, mpn, expected):
        assert AMSRuleSet().extract_package_code(mpn) == expected

    @pytest.mark.parametrize("mpn,expected", [
        ("AS7262-BLGT", "AS72"),
        ("AS7341", "AS73"),
        ("AS5600", "AS56"),
        ("TSL2591", "TSL"),
        ("TCS34725FN", "TCS"),
        ("APDS-9960", "APDS"),
        ("APDS9960", "APDS"),
        ("ENS160", "ENS"),
        ("XYZ123", ""),
    ])
    def test_series(self, mpn, expected):
        assert AMSRuleSet().extract_series(mpn) == expected

    def test_spectral_channel_variants_interchangeable(self):
        assert AMSRuleSet().is_official_replacement("AS7261", "AS7263")

    def test_same_model_different_suffix(self):
        assert AMSRuleSet().is_official_replacement("AS7262-BLGT", "AS7262")

    def test_interface_conflict(self):
        assert not AMSRuleSet().is_official_replacement("AS5600-I2C", "AS5600-SPI")

    def test_different_series(self):
        assert not AMSRuleSet().is_official_replacement("AS7262", "AS7341")

    def test_same_series_undocumented_model(self):
        assert not AMSRuleSet().is_official_replacement("AS7341", "AS7343")

    def test_light_sensor_family(self):
        assert AMSRuleSet().is_official_replacement("TSL2561", "TSL2591")


class TestGigaDeviceRuleSet:
    @pytest.mark.parametrize("mpn,expected", [
        ("GD25Q128CSIG", "GD25Q"),
        ("GD25LQ64CWIG", "GD25LQ"),
        ("GD5F1GQ4UBYIG", "GD5F"),
        ("GD32F103C8T6", "GD32F1"),
        ("GD32VF103CBT6", "GD32VF1"),
        ("W25Q128JVSIQ", ""),
    ])
    def test_series(self, mpn, expected):
        assert GigaDeviceRuleSet().extract_series(mpn) == expected

    @pytest.mark.parametrize("mpn,expected", [
        ("GD25Q128CSIG", "SOP-8"),
        ("GD25Q128ESIGR", "SOP-8"),  # Reel suffix stripped
        ("GD25Q64CWIG", "WSON-8"),
        ("GD25Q128EWIGR", "WSON-8"),
        ("GD32F103C8T6", "LQFP48"),
        ("GD32F303RCT6", "LQFP64"),
        ("GD32F103CBU6", "VFQFPN48"),
        ("GD32", ""),
    ])
    def test_package(self, mpn, expected):
        assert GigaDeviceRuleSet().extract_package_code(mpn) == expected

    def test_matches(self):
        rule_set, registry = _ready(GigaDeviceRuleSet(), "GIGADEVICE")
        assert rule_set.matches("GD25Q128CSIG", cat.MEMORY_FLASH, registry)
        assert rule_set.matches("GD32F103C8T6", cat.MCU_ARM, registry)
        assert rule_set.matches("GD32VF103CBT6", cat.MICROCONTROLLER, registry)
        assert not rule_set.matches("GD32VF103CBT6", cat.MCU_ARM, registry)

    def test_helpers(self):
        assert flash_density("GD25Q128CSIG") == "128"
        assert flash_density("GD5F1GQ4UBYIG") == "1G"
        assert mcu_pin_count("GD32F103RCT6") == 64
        assert mcu_pin_count("GD25Q128CSIG") is None

    def test_same_package(self):
        assert GigaDeviceRuleSet().is_official_replacement("GD25Q128CSIG", "GD25Q128ESIGR")

    def test_different_package(self):
        assert not GigaDeviceRuleSet().is_official_replacement("GD25Q128CSIG", "GD25Q128EWIG")

    def test_mcu_same_package_different_flash_size(self):
        assert GigaDeviceRuleSet().is_official_replacement("GD32F103C8T6", "GD32F103CBT6")

    def test_mcu_different_pin_count(self):
        assert not GigaDeviceRuleSet().is_official_replacement("GD32F103C8T6", "GD32F103RCT6")

    def test_flash_same_density_unknown_package(self):
        assert GigaDeviceRuleSet().is_official_replacement("GD25Q128C", "GD25Q128E")

    def test_different_series(self):
        assert not GigaDeviceRuleSet().is_official_replacement("GD25Q128CSIG", "GD25LQ128CSIG")


class TestRectifierRuleSet:
    @pytest.fixture
    def rule_set(self):
        return RectifierRuleSet(**RULE_TABLES["VISHAY"])

    def test_higher_voltage_grade_replaces_lower(self, rule_set):
        assert rule_set.is_official_replacement("1N4001", "1N4007")

    def test_lower_grade_does_not_replace_higher(self, rule_set):
        assert not rule_set.is_official_replacement("1N4007", "1N4001")

    def test_same_part_is_symmetric(self, rule_set):
        assert rule_set.is_official_replacement("1N4004", "1N4004")

    def test_upgrade_stays_within_family(self, rule_set):
        assert not rule_set.is_official_replacement("1N4001", "1N5408")

    def test_small_signal_equivalents(self, rule_set):
        assert rule_set.is_official_replacement("1N4148", "1N914")
        assert rule_set.is_official_replacement("1N914", "1N4148")
