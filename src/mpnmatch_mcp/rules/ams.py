"""ams-OSRAM sensor rules (spectral, color, light, proximity, position, environmental)."""

import re

from .. import categories as cat
from .base import RuleSet, clean_mpn

PATTERNS = {
    cat.SENSOR_COLOR: (
        r"^AS72[0-9]{2}.*",  # Spectral sensors (AS7261/2/3, AS7265x)
        r"^AS73[0-9]{2}.*",  # Spectral color sensors (AS7341, AS7343)
        r"^TCS3[0-9]{3,4}.*",  # RGB color sensors (TCS34725)
    ),
    cat.SENSOR: (
        r"^TSL2[0-9]{3}.*",  # Light-to-digital (TSL2561, TSL2591)
    ),
    cat.SENSOR_PROXIMITY: (
        r"^TMD2[0-9]{3,4}.*",  # Proximity/ALS modules
        r"^APDS-?9[0-9]{3}.*",  # Proximity/gesture (APDS-9960)
    ),
    cat.LED_DRIVER: (
        r"^AS3[0-9]{3}.*",
    ),
    cat.SENSOR_MAGNETIC: (
        r"^AS5[0-9]{3}.*",  # Magnetic rotary position (AS5600, AS5048)
    ),
    cat.SENSOR_TEMPERATURE: (
        r"^AS6[0-9]{3}.*",  # Digital temperature (AS6212)
    ),
    cat.SENSOR_GAS: (
        r"^ENS1[0-9]{2}.*",  # Air quality (ENS160)
    ),
    cat.SENSOR_HUMIDITY: (
        r"^ENS2[0-9]{2}.*",  # Humidity/temperature (ENS210)
    ),
}

# Hyphenated ordering suffixes -> package
PACKAGE_SUFFIXES = {
    "BLGT": "BGA",
    "BGA": "BGA",
    "FN": "QFN",
    "QFN": "QFN",
    "LGA": "LGA",
    "TSL": "DFN",
    "ASIL": "QFN",  # Automotive variant keeps the base QFN package
    "ASOM": "MODULE",
}

_APDS_RE = re.compile(r'^APDS-?9[0-9]{3}')
_AS_SERIES_RE = re.compile(r'^AS[0-9]{2}')
_NUMERIC_RE = re.compile(r'^[0-9]+$')
_BASE_MODEL_RE = re.compile(r'^([A-Z]+[0-9]+)')
_INTERFACE_RE = re.compile(r'-(I2C|SPI|ANA)(?:-|$)')

# Documented drop-in families, matched against base models
_COMPATIBLE_MODELS = (
    re.compile(r'^AS726[123]$'),  # Visible / NIR spectral channel variants
    re.compile(r'^AS7265[A-Z]?$'),  # Triad chipset
    re.compile(r'^AS50[0-9]{2}$'),
    re.compile(r'^AS56[0-9]{2}$'),
    re.compile(r'^TSL25[0-9]+$'),
    re.compile(r'^TCS34[0-9]+$'),
    re.compile(r'^APDS-?99[0-9]{2}$'),
)


class AMSRuleSet(RuleSet):
    def __init__(self):
        super().__init__(PATTERNS)

    def package_from_mpn(self, mpn: str) -> str:
        if mpn.endswith("-TR"):
            mpn = mpn[:-3]  # Tape and reel is packaging, not package

        if "-" in mpn:
            suffix = mpn.rsplit("-", 1)[1]
            # Numeric suffixes are model numbers (APDS-9960)
            if suffix and not _NUMERIC_RE.match(suffix):
                if suffix in PACKAGE_SUFFIXES:
                    return PACKAGE_SUFFIXES[suffix]
                for code in ("FN", "LGA", "BGA"):
                    if suffix.endswith(code):
                        return PACKAGE_SUFFIXES[code]
                return ""

        # Suffix directly on the part (TCS34725FN)
        if mpn.endswith("FN"):
            return "QFN"
        if mpn.endswith("LGA"):
            return "LGA"
        return ""

    def series_from_mpn(self, mpn: str) -> str:
        if _APDS_RE.match(mpn):
            return "APDS"
        for family in ("TSL", "TMD", "TCS", "ENS"):
            if mpn.startswith(family):
                return family
        match = _AS_SERIES_RE.match(mpn)
        if match:
            return match.group(0)  # AS72, AS73, AS56 ...
        return ""

    def is_official_replacement(self, mpn_a: str | None, mpn_b: str | None) -> bool:
        series_a = self.extract_series(mpn_a)
        series_b = self.extract_series(mpn_b)
        if not series_a or series_a != series_b:
            return False

        package_a = self.extract_package_code(mpn_a)
        package_b = self.extract_package_code(mpn_b)
        if package_a and package_a == package_b:
            return True

        mpn_a, mpn_b = clean_mpn(mpn_a), clean_mpn(mpn_b)
        base_a, base_b = _base_model(mpn_a), _base_model(mpn_b)
        if base_a == base_b:
            # Same die, different suffix: only a conflicting interface rules it out
            iface_a, iface_b = _interface(mpn_a), _interface(mpn_b)
            return not (iface_a and iface_b and iface_a != iface_b)

        return any(p.match(base_a) and p.match(base_b) for p in _COMPATIBLE_MODELS)


def _base_model(mpn: str) -> str:
    """Model number without ordering suffixes ("AS7262-BLGT" -> "AS7262")."""
    if mpn.startswith("APDS"):
        match = _APDS_RE.match(mpn)
        return match.group(0) if match else mpn
    match = _BASE_MODEL_RE.match(mpn)
    return match.group(1) if match else mpn


def _interface(mpn: str) -> str:
    match = _INTERFACE_RE.search(mpn)
    return match.group(1) if match else ""
