"""Mounting type detection for normalized package names."""

from .packages import is_surface_mount, is_through_hole

# Substring hints for package names outside the normalized sets
SMD_PATTERNS = frozenset({
    "0201", "0402", "0603", "0805", "1206", "1210", "1812", "2512",  # Imperial chip sizes
    "SOT", "SOD", "SOP", "SOIC", "SSOP", "TSSOP", "MSOP", "SO-",  # Small outline
    "QFP", "QFN", "DFN", "SON", "WSON", "USON", "MLF",  # Quad flat / no-lead
    "BGA", "CSP", "LGA", "PLCC",  # Array / chip carrier
    "DPAK", "D2PAK", "TO-252", "TO-263",  # Power SMD
    "DO-214", "SMA", "SMB", "SMC", "MELF",  # Diode SMD
})

THROUGH_HOLE_PATTERNS = frozenset({
    "DIP", "SIP",  # In-line
    "TO-92", "TO-126", "TO-220", "TO-247", "TO-3", "TO-39",  # Power through-hole
    "DO-41", "DO-35", "DO-201", "DO-15",  # Axial diodes
    "THT", "AXIAL", "RADIAL", "HC-49",
})


def detect_mounting_type(package: str | None) -> str:
    """Determine mounting type from a package name.

    Args:
        package: Normalized package (e.g., "SOIC", "TO-220", "WSON-8")

    Returns:
        "smd", "through_hole", or "not_sure" when the package is empty or unrecognized.
    """
    if not package:
        return "not_sure"

    # Exact normalized names first
    if is_through_hole(package):
        return "through_hole"
    if is_surface_mount(package):
        return "smd"

    pkg_upper = package.upper()

    for pattern in THROUGH_HOLE_PATTERNS:
        if pattern in pkg_upper:
            return "through_hole"

    for pattern in SMD_PATTERNS:
        if pattern in pkg_upper:
            return "smd"

    return "not_sure"
