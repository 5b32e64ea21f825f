"""GigaDevice rules: GD25/GD5F serial flash and GD32 microcontrollers.

Flash ordering codes end in a package/temperature/packing suffix
(GD25Q128CSIG -> SIG -> SOP-8). GD32 MCUs follow the STM32-style scheme
GD32 F 103 C 8 T 6: line, pin code, flash code, package code, temperature.
"""

import re

from .. import categories as cat
from .base import RuleSet

PATTERNS = {
    cat.MEMORY_FLASH: (
        r"^GD25Q\d+.*",
        r"^GD25B\d+.*",
        r"^GD25LQ\d+.*",
        r"^GD25WQ\d+.*",
        r"^GD25T\d+.*",
        r"^GD5F\d+.*",  # SPI NAND
    ),
    cat.MCU_ARM: (
        r"^GD32F[134]\d{2}.*",
        r"^GD32E[125]\d{2}.*",
        r"^GD32W5\d{2}.*",
        r"^GD32L2\d{2}.*",
    ),
    cat.MICROCONTROLLER: (
        r"^GD32VF1\d{2}.*",  # RISC-V
    ),
}

SERIES = (
    "GD25Q", "GD25B", "GD25LQ", "GD25WQ", "GD25T", "GD5F",
    "GD32VF1", "GD32F1", "GD32F3", "GD32F4", "GD32E1", "GD32E2", "GD32E5",
    "GD32W5", "GD32L2",
)

FLASH_PACKAGE_CODES = {
    "SIG": "SOP-8",
    "SIQ": "SOP-8",
    "SIP": "SOP-8",
    "CSIG": "SOP-8",
    "ESIG": "SOP-8",
    "EIG": "SOP-8",
    "WIG": "WSON-8",
    "EWIG": "WSON-8",
    "EWIQ": "WSON-8",
    "ZIG": "USON-8",
    "EZIQ": "USON-8",
    "FIG": "WLCSP",
    "LIG": "SOIC-16",
    "NIG": "DFN-8",
    "TIG": "TFBGA",
    "UIG": "VSOP-8",
    "BIG": "BGA",
}

# Longest suffixes first so "CSIG" wins over "SIG"
_FLASH_SUFFIXES = sorted(FLASH_PACKAGE_CODES, key=len, reverse=True)

MCU_PACKAGE_CODES = {
    "T": "LQFP",
    "C": "LQFP",
    "R": "LQFP",
    "K": "UFBGA",
    "U": "VFQFPN",
    "V": "VFQFPN",
    "H": "BGA",
    "Y": "WLCSP",
    "G": "WLCSP",
}

MCU_PIN_COUNTS = {
    "K": 32,
    "T": 36,
    "C": 48,
    "R": 64,
    "V": 100,
    "Z": 144,
    "I": 176,
}

_NOR_DENSITY_RE = re.compile(r'GD25(?:LQ|WQ|[QBT])(\d+)')
_NAND_DENSITY_RE = re.compile(r'GD5F(\d+)G')
# GD32 F 103 C 8 T 6
_MCU_RE = re.compile(r'^GD32(VF|[VEFLW])(\d{3})([A-Z])([0-9A-Z])([A-Z])(\d)')


class GigaDeviceRuleSet(RuleSet):
    def __init__(self):
        super().__init__(PATTERNS, series_prefixes=SERIES)

    def package_from_mpn(self, mpn: str) -> str:
        if mpn.startswith(("GD25", "GD5F")):
            return _flash_package(mpn)
        if mpn.startswith("GD32"):
            return _mcu_package(mpn)
        return ""

    def is_official_replacement(self, mpn_a: str | None, mpn_b: str | None) -> bool:
        """Same series plus same package, or same density / same MCU line and pin count."""
        series_a = self.extract_series(mpn_a)
        series_b = self.extract_series(mpn_b)
        if not series_a or series_a != series_b:
            return False

        package_a = self.extract_package_code(mpn_a)
        package_b = self.extract_package_code(mpn_b)
        if package_a and package_a == package_b:
            return True
        if package_a and package_b:
            return False

        mpn_a, mpn_b = mpn_a.strip().upper(), mpn_b.strip().upper()
        if series_a.startswith(("GD25", "GD5F")):
            density = flash_density(mpn_a)
            return bool(density) and density == flash_density(mpn_b)

        line_a, line_b = _mcu_line(mpn_a), _mcu_line(mpn_b)
        pins_a = mcu_pin_count(mpn_a)
        return bool(line_a) and line_a == line_b and pins_a is not None and pins_a == mcu_pin_count(mpn_b)


def flash_density(mpn: str) -> str:
    """Density in Mbit ("128") for NOR flash, or Gbit ("1G") for NAND. "" if absent."""
    match = _NOR_DENSITY_RE.search(mpn)
    if match:
        return match.group(1)
    match = _NAND_DENSITY_RE.search(mpn)
    if match:
        return f"{match.group(1)}G"
    return ""


def mcu_pin_count(mpn: str) -> int | None:
    match = _MCU_RE.match(mpn)
    if not match:
        return None
    return MCU_PIN_COUNTS.get(match.group(3))


def _mcu_line(mpn: str) -> str:
    match = _MCU_RE.match(mpn)
    if not match:
        return ""
    return f"GD32{match.group(1)}{match.group(2)}"  # GD32F103, GD32VF103


def _flash_package(mpn: str) -> str:
    # Packing suffix: tape and reel
    if mpn.endswith("TR"):
        mpn = mpn[:-2]
    elif mpn.endswith("R"):
        mpn = mpn[:-1]
    for suffix in _FLASH_SUFFIXES:
        if mpn.endswith(suffix):
            return FLASH_PACKAGE_CODES[suffix]
    return ""


def _mcu_package(mpn: str) -> str:
    match = _MCU_RE.match(mpn)
    if not match:
        return ""
    package = MCU_PACKAGE_CODES.get(match.group(5))
    if not package:
        return ""
    pins = MCU_PIN_COUNTS.get(match.group(3))
    return f"{package}{pins}" if pins else package
