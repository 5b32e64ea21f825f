"""MPN -> manufacturer resolution.

classify() runs an ordered pipeline and stops at the first hit:

    1. Special cases (unambiguous MCU families, 1N/BAT/BAS/BAV diode
       families, fixed-format passives, connectors and sensors, analog and
       MOSFET prefixes, LED and memory families)
    2. Priority regex scan in directory order
    3. Supply-pin heuristic (VCC/VDD/... tokens)
    4. Rule set fallback scan in directory order
    5. Vendor indicator tokens ("-TI", "-ON", ...)
    6. UNKNOWN

classify_all() runs every step and ranks the hits into confidence tiers.
"""

import logging
import re

from .aliases import INDICATOR_TOKENS
from .config import MAX_MPN_LENGTH
from .manufacturers import KNOWN_MANUFACTURERS, UNKNOWN, Manufacturer, get_manufacturer

logger = logging.getLogger(__name__)

HIGH = "high"
MEDIUM = "medium"
LOW = "low"
TIERS = (HIGH, MEDIUM, LOW)


# =============================================================================
# Special cases
# =============================================================================

# Prefixes used by several priority patterns at once; these settle the tie
_MCU_FAMILIES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"DSPIC|PIC"), "MICROCHIP"),
    (re.compile(r"STM32|STM8"), "ST"),
    (re.compile(r"ATMEGA|ATTINY"), "ATMEL"),
    (re.compile(r"MSP430"), "TI"),
    (re.compile(r"ESP32|ESP8266"), "ESPRESSIF"),
]

# Fixed-format ordering codes that identify one vendor
_FIXED_FORMATS: list[tuple[re.Pattern[str], str]] = [
    # Passives
    (re.compile(r"CRCW"), "VISHAY"),
    (re.compile(r"R[CTL][0-9]{4}"), "YAGEO"),
    (re.compile(r"ERJ"), "PANASONIC"),
    (re.compile(r"GRM|LQG|LQW"), "MURATA"),
    # Connectors
    (re.compile(r"6[12][0-9]{8,9}$"), "WURTH"),
    (re.compile(r"(?:43|53|55)[0-9]{4}$"), "MOLEX"),
    (re.compile(r"[12]-[0-9]{6}(?:-[0-9]+)?$"), "TE"),
    (re.compile(r"(?:PH|EH|XH|ZH)[0-9]"), "JST"),
    # Sensors whose prefixes collide with earlier TC/AP priority patterns
    (re.compile(r"TCS3[0-9]{3}|APDS-?9[0-9]{3}"), "AMS"),
]

# LED and memory families, checked after the analog and MOSFET rules
_COMPONENT_FAMILIES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"OSRAM|(?:LS|LA|LW|LY)[A-Z][0-9]"), "OSRAM"),
    (re.compile(r"CREE|(?:XP|XR|XT)[A-Z][0-9]"), "CREE"),
    (re.compile(r"MT|N25Q"), "MICRON"),
    (re.compile(r"W25|W29"), "WINBOND"),
]

_TI_ANALOG_RE = re.compile(r"(?:LM|TL|TPS)[0-9]")
_IR_MOSFET_RE = re.compile(r"IRF|IRL")

# 1N diodes: numeric sub-ranges are attributed by convention
_ONE_N_RE = re.compile(r"1N[0-9]")
_ONE_N_VISHAY_RE = re.compile(r"1N400[1-7]|1N4148")
_ONE_N_ZENER_RE = re.compile(r"1N47[0-9]{2}")
_SMALL_SIGNAL_RE = re.compile(r"(?:BAT|BAS|BAV)[0-9]")

# Second sources that ship the same part families
_DIODE_SECOND_SOURCES = ("ON_SEMI", "DIODES_INC")
_SMALL_SIGNAL_SECOND_SOURCES = ("ON_SEMI", "NXP")
_ANALOG_SECOND_SOURCE = "ON_SEMI"
_MOSFET_SECOND_SOURCES = ("VISHAY", "ST")

_SUPPLY_PIN_RE = re.compile(r"V(?:CC|DD|EE|SS|IO)[-_/]?")
_INDICATOR_RE = re.compile(r"-(VISHAY|NXP|INF|ST|TI|ON)(?![A-Z])")


def _indicators(mpn: str) -> list[str]:
    """Manufacturer ids named by vendor tokens in the MPN, in order of appearance."""
    return [INDICATOR_TOKENS[token] for token in _INDICATOR_RE.findall(mpn)]


def _diode_family(mpn: str) -> tuple[str, tuple[str, ...]] | None:
    """Resolve 1N and BAT/BAS/BAV diodes to (primary id, second-source ids)."""
    if _ONE_N_RE.match(mpn):
        if _ONE_N_VISHAY_RE.match(mpn):
            return "VISHAY", _DIODE_SECOND_SOURCES
        if _ONE_N_ZENER_RE.match(mpn):
            return "ON_SEMI", ("VISHAY", "DIODES_INC")
        return "VISHAY", _DIODE_SECOND_SOURCES

    if _SMALL_SIGNAL_RE.match(mpn):
        for manufacturer_id in _indicators(mpn):
            if manufacturer_id in ("VISHAY", "ON_SEMI", "NXP"):
                return manufacturer_id, ()
        return "VISHAY", _SMALL_SIGNAL_SECOND_SOURCES

    return None


def _special_cases(mpn: str) -> list[tuple[str, tuple[str, ...]]]:
    """Every special case that fires for a cleaned MPN, in precedence order."""
    hits: list[tuple[str, tuple[str, ...]]] = []

    for pattern, manufacturer_id in _MCU_FAMILIES:
        if pattern.match(mpn):
            hits.append((manufacturer_id, ()))

    diode = _diode_family(mpn)
    if diode:
        hits.append(diode)

    for pattern, manufacturer_id in _FIXED_FORMATS:
        if pattern.match(mpn):
            hits.append((manufacturer_id, ()))

    if _TI_ANALOG_RE.match(mpn):
        if "ST" in _indicators(mpn):
            hits.append(("ST", ("TI", _ANALOG_SECOND_SOURCE)))
        else:
            hits.append(("TI", ("ST", _ANALOG_SECOND_SOURCE)))

    if _IR_MOSFET_RE.match(mpn):
        hits.append(("INFINEON", _MOSFET_SECOND_SOURCES))

    for pattern, manufacturer_id in _COMPONENT_FAMILIES:
        if pattern.match(mpn):
            hits.append((manufacturer_id, ()))

    return hits


# =============================================================================
# Scans
# =============================================================================

def _priority_matches(mpn: str) -> list[Manufacturer]:
    return [m for m in KNOWN_MANUFACTURERS if m.matches_priority(mpn)]


def _supply_pin_matches(mpn: str) -> list[Manufacturer]:
    """Strip supply-pin tokens and scan the remainder with the priority patterns."""
    if not _SUPPLY_PIN_RE.search(mpn):
        return []
    remainder = _SUPPLY_PIN_RE.sub("", mpn).strip("-_/ ")
    if not remainder or remainder == mpn:
        return []
    return _priority_matches(remainder)


def _rule_set_matches(mpn: str) -> list[Manufacturer]:
    return [m for m in KNOWN_MANUFACTURERS if m.matches(mpn)]


def _clean(mpn: str | None) -> str:
    """Trim and uppercase; "" means unresolvable."""
    if not mpn:
        return ""
    mpn = mpn.strip().upper()
    if len(mpn) > MAX_MPN_LENGTH:
        logger.debug(f"MPN longer than {MAX_MPN_LENGTH} characters treated as unresolvable")
        return ""
    return mpn


# =============================================================================
# Public API
# =============================================================================

def classify(mpn: str | None) -> Manufacturer:
    """Return the single best manufacturer for an MPN, or UNKNOWN.

    Never raises for unmatched input.
    """
    mpn = _clean(mpn)
    if not mpn:
        return UNKNOWN

    special = _special_cases(mpn)
    if special:
        return get_manufacturer(special[0][0])

    for manufacturer in KNOWN_MANUFACTURERS:
        if manufacturer.matches_priority(mpn):
            return manufacturer

    supply = _supply_pin_matches(mpn)
    if supply:
        return supply[0]

    for manufacturer in KNOWN_MANUFACTURERS:
        if manufacturer.matches(mpn):
            return manufacturer

    indicators = _indicators(mpn)
    if indicators:
        return get_manufacturer(indicators[0])

    logger.debug(f"No manufacturer matched {mpn!r}")
    return UNKNOWN


def classify_ranked(mpn: str | None) -> list[tuple[Manufacturer, str]]:
    """Every plausible manufacturer with its confidence tier, best tier first.

    Special cases are HIGH (their second sources MEDIUM), priority pattern
    hits are MEDIUM, and heuristics, rule set matches and indicator tokens
    are LOW. Each manufacturer appears once, at its best tier; within a tier,
    order is first-insertion order. Returns [(UNKNOWN, LOW)] when nothing matched.
    """
    mpn = _clean(mpn)
    if not mpn:
        return [(UNKNOWN, LOW)]

    buckets: dict[str, list[Manufacturer]] = {tier: [] for tier in TIERS}
    seen: dict[str, str] = {}

    def add(manufacturer: Manufacturer, tier: str) -> None:
        if manufacturer.id in seen:
            return
        seen[manufacturer.id] = tier
        buckets[tier].append(manufacturer)

    special = _special_cases(mpn)
    # Primaries first so a second source never shadows another rule's primary
    for primary, _ in special:
        add(get_manufacturer(primary), HIGH)
    for _, second_sources in special:
        for manufacturer_id in second_sources:
            add(get_manufacturer(manufacturer_id), MEDIUM)

    for manufacturer in _priority_matches(mpn):
        add(manufacturer, MEDIUM)

    for manufacturer in _supply_pin_matches(mpn):
        add(manufacturer, LOW)
    for manufacturer in _rule_set_matches(mpn):
        add(manufacturer, LOW)
    for manufacturer_id in _indicators(mpn):
        add(get_manufacturer(manufacturer_id), LOW)

    ranked = [(m, tier) for tier in TIERS for m in buckets[tier]]
    if not ranked:
        logger.debug(f"No manufacturer matched {mpn!r}")
        return [(UNKNOWN, LOW)]
    return ranked


def classify_all(mpn: str | None) -> list[Manufacturer]:
    """Every plausible manufacturer, deduplicated and ordered HIGH -> MEDIUM -> LOW."""
    return [manufacturer for manufacturer, _ in classify_ranked(mpn)]
