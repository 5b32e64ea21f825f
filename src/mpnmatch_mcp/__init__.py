"""MPN classification: manufacturer, category, package and series from a part number."""

__version__ = "0.1.0"

from .manufacturers import (
    MANUFACTURERS,
    UNKNOWN,
    Manufacturer,
    extract_package_code,
    extract_series,
    get_manufacturer,
    initialize_all,
    supported_categories,
)
from .resolver import HIGH, MEDIUM, LOW, classify, classify_all, classify_ranked
from .equivalence import is_official_replacement
from .patterns import PatternConfigError, PatternRegistry
from .mpn import detect_category, find_mpn_in_text, is_from_manufacturer, normalize_mpn

__all__ = [
    "__version__",
    "MANUFACTURERS",
    "UNKNOWN",
    "Manufacturer",
    "extract_package_code",
    "extract_series",
    "get_manufacturer",
    "initialize_all",
    "supported_categories",
    "HIGH",
    "MEDIUM",
    "LOW",
    "classify",
    "classify_all",
    "classify_ranked",
    "is_official_replacement",
    "PatternConfigError",
    "PatternRegistry",
    "detect_category",
    "find_mpn_in_text",
    "is_from_manufacturer",
    "normalize_mpn",
]
