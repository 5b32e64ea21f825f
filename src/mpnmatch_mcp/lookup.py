"""Tool payloads: plain functions returning JSON-ready dicts for the MCP server."""

import logging
from typing import Any

from .categories import base_category, validate_category
from .config import MAX_CANDIDATES, MAX_MPN_LENGTH
from .equivalence import is_official_replacement
from .manufacturers import KNOWN_MANUFACTURERS, Manufacturer, get_manufacturer
from .mounting import detect_mounting_type
from .mpn import detect_category, find_mpn_in_text, normalize_mpn
from .resolver import classify, classify_ranked

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 2000


def _manufacturer_dict(manufacturer: Manufacturer) -> dict[str, str]:
    return {"id": manufacturer.id, "name": manufacturer.name}


def _check_mpn(mpn: str | None) -> str | None:
    """Return an error message for unusable MPN input, else None."""
    if not mpn or not mpn.strip():
        return "MPN must not be empty"
    if len(mpn.strip()) > MAX_MPN_LENGTH:
        return f"MPN too long (max {MAX_MPN_LENGTH} characters)"
    return None


def identify_part(mpn: str | None) -> dict[str, Any]:
    """Manufacturer, ranked candidates, category, series, package and mounting for an MPN."""
    error = _check_mpn(mpn)
    if error:
        return {"error": error}

    mpn = mpn.strip()
    manufacturer = classify(mpn)
    ranked = classify_ranked(mpn)
    category = detect_category(mpn)
    package = manufacturer.extract_package_code(mpn)

    result = {
        "mpn": mpn,
        "normalized": normalize_mpn(mpn),
        "manufacturer": _manufacturer_dict(manufacturer),
        "candidates": [
            {**_manufacturer_dict(m), "confidence": tier}
            for m, tier in ranked[:MAX_CANDIDATES]
        ],
        "category": category,
        "base_category": base_category(category) if category else None,
        "series": manufacturer.extract_series(mpn) or None,
        "package": package or None,
        "mounting_type": detect_mounting_type(package),
    }
    logger.debug(f"identify_part {mpn!r}: {manufacturer.id}, {len(ranked)} candidates")
    return result


def check_replacement(mpn_a: str | None, mpn_b: str | None, manufacturer: str | None = None) -> dict[str, Any]:
    """Can mpn_b replace mpn_a? Both must belong to the same manufacturer."""
    for label, value in (("mpn_a", mpn_a), ("mpn_b", mpn_b)):
        error = _check_mpn(value)
        if error:
            return {"error": f"{label}: {error}"}

    expected = None
    if manufacturer:
        try:
            expected = get_manufacturer(manufacturer)
        except ValueError as e:
            return {"error": str(e)}

    owner_a, owner_b = classify(mpn_a), classify(mpn_b)
    result = {
        "mpn_a": mpn_a.strip(),
        "mpn_b": mpn_b.strip(),
        "replacement": is_official_replacement(expected, mpn_a, mpn_b),
        "manufacturer_a": _manufacturer_dict(owner_a),
        "manufacturer_b": _manufacturer_dict(owner_b),
    }
    if owner_a is not owner_b:
        result["reason"] = "Parts resolve to different manufacturers"
    elif owner_a.is_unknown:
        result["reason"] = "Manufacturer could not be determined"
    elif expected is not None and expected is not owner_a:
        result["reason"] = f"Parts do not belong to {expected.name}"
    else:
        result["series_a"] = owner_a.extract_series(mpn_a) or None
        result["series_b"] = owner_a.extract_series(mpn_b) or None
        result["package_a"] = owner_a.extract_package_code(mpn_a) or None
        result["package_b"] = owner_a.extract_package_code(mpn_b) or None
    return result


def list_manufacturers(category: str | None = None) -> dict[str, Any]:
    """Known manufacturers in priority order, optionally only those covering a category."""
    if category:
        try:
            category = validate_category(category.strip().lower())
        except ValueError as e:
            return {"error": str(e)}

    manufacturers = [
        {**_manufacturer_dict(m), "categories": sorted(m.supported_categories())}
        for m in KNOWN_MANUFACTURERS
        if not category or category in m.supported_categories()
    ]
    return {"category": category, "count": len(manufacturers), "manufacturers": manufacturers}


def find_part_number(text: str | None) -> dict[str, Any]:
    """Pick the first recognizable MPN out of free text and identify it."""
    if not text or not text.strip():
        return {"error": "Text must not be empty"}
    if len(text) > MAX_TEXT_LENGTH:
        return {"error": f"Text too long (max {MAX_TEXT_LENGTH} characters)"}

    mpn = find_mpn_in_text(text)
    if mpn is None:
        return {"mpn": None}
    return identify_part(mpn)
