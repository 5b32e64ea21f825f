"""Tests for the manufacturer directory and lazy rule set construction."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from mpnmatch_mcp import categories as cat
from mpnmatch_mcp.manufacturers import (
    KNOWN_MANUFACTURERS,
    MANUFACTURERS,
    UNKNOWN,
    Manufacturer,
    extract_package_code,
    extract_series,
    get_manufacturer,
    supported_categories,
)
from mpnmatch_mcp.patterns import PatternRegistry
from mpnmatch_mcp.rules import AMSRuleSet, GigaDeviceRuleSet, RectifierRuleSet, RuleSet, RULE_TABLES


class TestDirectory:
    def test_ids_unique(self):
        ids = [m.id for m in MANUFACTURERS]
        assert len(ids) == len(set(ids))

    def test_unknown_is_last_and_excluded_from_known(self):
        assert MANUFACTURERS[-1] is UNKNOWN
        assert UNKNOWN.is_unknown
        assert UNKNOWN not in KNOWN_MANUFACTURERS
        assert len(KNOWN_MANUFACTURERS) == len(MANUFACTURERS) - 1

    def test_every_table_has_directory_entry(self):
        ids = {m.id for m in MANUFACTURERS}
        assert set(RULE_TABLES) <= ids

    def test_unknown_has_no_priority_pattern(self):
        assert not UNKNOWN.matches_priority("R1")

    def test_priority_pattern_is_prefix_match(self):
        ams = get_manufacturer("AMS")
        assert ams.matches_priority("AS7262-BLGT")
        assert ams.matches_priority("as7262")
        assert not ams.matches_priority("XAS7262")

    @pytest.mark.parametrize("manufacturer_id,rule_set_class", [
        ("AMS", AMSRuleSet),
        ("GIGADEVICE", GigaDeviceRuleSet),
        ("VISHAY", RectifierRuleSet),
        ("ON_SEMI", RectifierRuleSet),
        ("DIODES_INC", RectifierRuleSet),
        ("TI", RuleSet),
    ])
    def test_rule_set_classes(self, manufacturer_id, rule_set_class):
        assert type(get_manufacturer(manufacturer_id).rule_set) is rule_set_class


class TestEveryRuleSet:
    """Build each rule set from scratch so a malformed pattern fails here, not at runtime."""

    @pytest.mark.parametrize("manufacturer", MANUFACTURERS, ids=lambda m: m.id)
    def test_initializes_and_is_idempotent(self, manufacturer):
        rule_set = manufacturer.factory()
        registry = PatternRegistry(owner=manufacturer.id)
        rule_set.initialize_patterns(registry)
        count = registry.pattern_count()
        rule_set.initialize_patterns(registry)
        assert registry.pattern_count() == count

    @pytest.mark.parametrize("manufacturer", MANUFACTURERS, ids=lambda m: m.id)
    def test_supported_categories_are_known_tags(self, manufacturer):
        assert manufacturer.supported_categories() <= cat.CATEGORIES

    @pytest.mark.parametrize("manufacturer", MANUFACTURERS, ids=lambda m: m.id)
    def test_extraction_total_on_junk(self, manufacturer):
        for junk in ("", None, "   ", "-", "///", "ÄÖÜ"):
            assert manufacturer.extract_package_code(junk) == ""
            assert manufacturer.extract_series(junk) == ""


class TestGetManufacturer:
    @pytest.mark.parametrize("name,expected", [
        ("AMS", "AMS"),
        ("ams", "AMS"),
        ("ams-OSRAM", "AMS"),
        ("Texas Instruments", "TI"),
        ("ti", "TI"),
        ("onsemi", "ON_SEMI"),
        ("  GigaDevice  ", "GIGADEVICE"),
        ("Linear Technology", "ANALOG_DEVICES"),
    ])
    def test_resolves_ids_names_and_aliases(self, name, expected):
        assert get_manufacturer(name).id == expected

    def test_manufacturer_passthrough(self):
        assert get_manufacturer(UNKNOWN) is UNKNOWN

    @pytest.mark.parametrize("name", ["", "   ", "Acme Widgets"])
    def test_unknown_name_raises(self, name):
        with pytest.raises(ValueError):
            get_manufacturer(name)


class TestDispatch:
    def test_supported_categories(self):
        assert cat.MEMORY_FLASH in supported_categories("GigaDevice")

    def test_extract_package_code(self):
        assert extract_package_code("AMS", "AS7262-BLGT") == "BGA"

    def test_extract_series(self):
        assert extract_series("GIGADEVICE", "GD25Q128CSIG") == "GD25Q"

    def test_unknown_manufacturer_raises(self):
        with pytest.raises(ValueError):
            extract_series("Acme Widgets", "GD25Q128CSIG")


class TestLazyConstruction:
    def _entry(self, factory):
        return Manufacturer(id="TEST", name="Test Manufacturer", priority_pattern="TST", factory=factory)

    def test_not_built_until_first_use(self):
        calls = []

        def factory():
            calls.append(1)
            return RuleSet(patterns={cat.IC: (r"^TST[0-9]+.*",)})

        entry = self._entry(factory)
        assert not entry.is_ready
        assert calls == []

        assert entry.matches("TST100")
        assert entry.is_ready
        assert entry.registry.current_owner == "TEST"
        entry.rule_set
        assert len(calls) == 1

    def test_concurrent_first_access_builds_once(self):
        calls = []
        lock = threading.Lock()

        def slow_factory():
            with lock:
                calls.append(1)
            time.sleep(0.05)  # Widen the race window
            return RuleSet(patterns={cat.IC: (r"^TST[0-9]+.*",)})

        entry = self._entry(slow_factory)
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: (entry.rule_set, entry.registry), range(32)))

        assert len(calls) == 1
        rule_sets = {id(rule_set) for rule_set, _ in results}
        registries = {id(registry) for _, registry in results}
        assert len(rule_sets) == 1
        assert len(registries) == 1
        # Every caller saw a fully registered rule set
        assert all(registry.pattern_count() == 1 for _, registry in results)

    def test_failed_construction_can_retry(self):
        attempts = []

        def flaky_factory():
            attempts.append(1)
            if len(attempts) == 1:
                return RuleSet(patterns={cat.IC: (r"^BAD[0-9",)})
            return RuleSet(patterns={cat.IC: (r"^TST[0-9]+.*",)})

        entry = self._entry(flaky_factory)
        with pytest.raises(ValueError):
            entry.rule_set
        assert not entry.is_ready
        assert entry.matches("TST1")
