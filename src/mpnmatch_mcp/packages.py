"""Package code normalization shared by rule sets.

Maps manufacturer ordering-code suffixes (e.g. "N", "PW", "DBV", "AU") to
normalized package names, and groups package names for compatibility checks.
"""

import re

# Common suffix codes (TI/ST/ON/Atmel ordering conventions) -> normalized package
STANDARD_CODES: dict[str, str] = {
    # Through-hole DIP
    "N": "DIP",
    "P": "DIP",
    "PU": "PDIP",
    # Atmel-style two letter codes
    "AU": "TQFP",
    "MU": "QFN",
    "SU": "SOIC",
    "XU": "TSSOP",
    "CU": "WLCSP",
    # Small outline
    "D": "SOIC",
    "M": "SOIC",
    "R": "SOIC",
    "DW": "SOIC-Wide",
    "PW": "TSSOP",
    "DT": "TSSOP",
    "PT": "TSSOP",
    "DGK": "MSOP",
    # SOT
    "DBV": "SOT-23",
    "MP": "SOT-223",
    "U": "SOT-223",
    "DRL": "SOT-553",
    "DRV": "SON",
    # TO / power
    "T": "TO-220",
    "T3": "TO-220",
    "CT": "TO-220",
    "TA": "TO-220F",
    "FP": "TO-220F",
    "K": "TO-3",
    "H": "TO-39",
    "KC": "TO-252",
    "KV": "TO-252",
    "TU": "TO-251",
    "F": "TO-251",
    "S": "D2PAK",
    "L": "DPAK",
    # Diode outline
    "RL": "DO-41",
    "G": "DO-35",
    # Generic
    "SMD": "SMD",
    "THT": "THT",
}

POWER_PACKAGES = frozenset({
    "TO-220", "TO-220F", "TO-252", "TO-247", "TO-263",
    "D2PAK", "DPAK", "SOT-223",
})

THROUGH_HOLE_PACKAGES = frozenset({
    "DIP", "PDIP", "TO-220", "TO-220F", "TO-3", "TO-39", "TO-92", "TO-247",
    "DO-41", "DO-35", "THT",
})

SMD_PACKAGES = frozenset({
    "SOIC", "SOIC-WIDE", "TSSOP", "MSOP", "QFP", "TQFP", "LQFP", "QFN", "BGA",
    "WLCSP", "SOT-23", "SOT-223", "SOT-553", "SON", "D2PAK", "DPAK",
    "TO-252", "TO-263", "SMD",
})

# Pin-compatible small outline family (op-amps, comparators, logic)
_SMALL_OUTLINE_FAMILY = frozenset({"DIP", "SOIC", "TSSOP", "MSOP"})

_TRAILING_LETTERS_RE = re.compile(r'[0-9]([A-Z]+)$')


def _clean(value: str | None) -> str:
    return value.strip().upper() if value else ""


def resolve(code: str | None) -> str:
    """Normalize a suffix code to a package name. Unknown codes are returned uppercased."""
    code = _clean(code)
    if not code:
        return ""
    return STANDARD_CODES.get(code, code)


def is_known_code(code: str | None) -> bool:
    return _clean(code) in STANDARD_CODES


def is_power_package(package: str | None) -> bool:
    return _clean(package) in POWER_PACKAGES


def is_through_hole(package: str | None) -> bool:
    return _clean(package) in THROUGH_HOLE_PACKAGES


def is_surface_mount(package: str | None) -> bool:
    return _clean(package) in SMD_PACKAGES


def are_compatible(package_a: str | None, package_b: str | None) -> bool:
    """Check whether two normalized packages can stand in for each other.

    Same package always matches. Power packages are treated as interchangeable,
    and so are members of the DIP/SOIC/TSSOP/MSOP small outline family.
    """
    a, b = _clean(package_a), _clean(package_b)
    if not a or not b:
        return False
    if a == b:
        return True
    if a in POWER_PACKAGES and b in POWER_PACKAGES:
        return True
    return a in _SMALL_OUTLINE_FAMILY and b in _SMALL_OUTLINE_FAMILY


def standard_package_code(mpn: str | None) -> str:
    """Extract a package from a generic MPN using STANDARD_CODES.

    Tries the text after the last hyphen first ("LM358-N"), then the trailing
    letters after the last digit ("LM358DR" -> "DR" -> "D"). Returns "" when
    no known code is found.
    """
    mpn = _clean(mpn)
    if not mpn:
        return ""

    if "-" in mpn:
        suffix = mpn.rsplit("-", 1)[1]
        if is_known_code(suffix):
            return resolve(suffix)

    match = _TRAILING_LETTERS_RE.search(mpn)
    if not match:
        return ""
    letters = match.group(1)
    # Longest known prefix of the trailing letters wins ("DBVR" -> "DBV", "DR" -> "D")
    for end in range(len(letters), 0, -1):
        if is_known_code(letters[:end]):
            return resolve(letters[:end])
    return ""
